"""Загрузка изображений из папки.

Принципы:
- SRP: класс отвечает только за перечисление, загрузку и приведение к RGBA.
- OCP: новые источники (архив, URL) можно добавить отдельными методами.
- LSP/ISP: возвращает `LoadedImage` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List

import numpy as np
from PIL import Image

from imgtile.models.errors import FolderReadError, ImageDecodeError
from imgtile.models.loaded_image import LoadedImage

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png"})
# Кодек определяется по содержимому, но только среди этих декодеров
DECODERS = ("PNG", "JPEG")
# 16-битные оттенки серого из PNG
WIDE_GRAY_MODES = frozenset({"I", "I;16", "I;16B", "I;16L", "I;16N"})


class ImageService:
    def iter_candidates(self, folder: str | Path) -> List[Path]:
        """Возвращает файлы папки с поддерживаемым расширением, отсортированные по имени.

        Обходятся только непосредственные потомки папки; каталоги и файлы
        с другими расширениями молча пропускаются. Символические ссылки
        не разыменовываются: ссылка на каталог остаётся кандидатом.

        Raises:
            OSError: если папку не удалось прочитать.
        """
        root = Path(folder)
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
        return [
            root / entry.name
            for entry in entries
            if not entry.is_dir(follow_symlinks=False)
            and os.path.splitext(entry.name)[1].lower() in SUPPORTED_EXTENSIONS
        ]

    def to_rgba(self, image: Image.Image) -> Image.Image:
        """
        Приведение к RGBA, 8 бит на канал.
        16-битный серый сначала ужимается до 8 бит старшим байтом, иначе
        `convert` обрезал бы всё, что выше 255.
        """
        if image.mode in WIDE_GRAY_MODES:
            arr = np.clip(np.asarray(image, dtype=np.int64), 0, 0xFFFF)
            image = Image.fromarray((arr >> 8).astype(np.uint8))
        return image.convert("RGBA")

    def load_image(self, file_path: str | Path) -> LoadedImage:
        """Загружает изображение с диска.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `LoadedImage` c `PIL.Image.Image` в режиме RGBA, размерами и исходным режимом.

        Raises:
            OSError: если файл не удалось открыть.
            ImageDecodeError: если содержимое не декодируется как PNG или JPEG.
        """
        path = Path(file_path)
        with path.open("rb") as fp:
            try:
                with Image.open(fp, formats=DECODERS) as source:
                    # декодируем полностью, пока дескриптор открыт
                    source.load()
                    mode = source.mode
                    pil_image = self.to_rgba(source)
            except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
                raise ImageDecodeError(str(exc)) from exc

        width, height = pil_image.size
        return LoadedImage(path=path, pil_image=pil_image, width=width, height=height, mode=mode)

    def collect(self, folder: str | Path) -> Iterator[LoadedImage]:
        """Последовательно загружает изображения папки в порядке перечисления.

        Файлы, которые не открываются или не декодируются, логируются и
        пропускаются.

        Raises:
            FolderReadError: если папку не удалось прочитать.
        """
        try:
            candidates = self.iter_candidates(folder)
        except OSError as exc:
            raise FolderReadError(f"Failed to read folder: {exc}") from exc

        for path in candidates:
            try:
                image = self.load_image(path)
            except ImageDecodeError as exc:
                logger.warning("Skipping %s: decode error %s", path, exc)
                continue
            except OSError as exc:
                logger.warning("Skipping %s: %s", path, exc)
                continue
            logger.debug("Loaded %s (%dx%d, %s)", path, image.width, image.height, image.mode)
            yield image
