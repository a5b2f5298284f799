"""Модель декодированного исходного изображения.

Экземпляр живёт от загрузки файла до копирования в холст; пиксели
после склейки берутся только из холста.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PIL import Image


@dataclass(frozen=True)
class LoadedImage:
    """Исходный файл и его растр, приведённый к RGBA.

    Fields:
        path: Путь к файлу в исходной папке.
        pil_image: Растр в режиме RGBA.
        width, height: Размеры, px.
        mode: Режим файла до приведения, например "RGB" или "L".
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height
