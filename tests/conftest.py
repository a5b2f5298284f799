from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

import pytest
from PIL import Image

from helpers import RED, GREEN, BLUE


@pytest.fixture
def make_image() -> Callable[..., Path]:
    """Фабрика: пишет однотонное изображение на диск и возвращает путь."""

    def _make(path: Path, size: Tuple[int, int] = (2, 2), color=RED, fmt: str = "PNG", mode: str = "RGBA") -> Path:
        image = Image.new(mode, size, color if mode == "RGBA" else color[:3])
        image.save(path, format=fmt)
        return path

    return _make


@pytest.fixture
def rgb_folder(tmp_path: Path, make_image) -> Path:
    """Папка с тремя PNG 2x2: красным, синим и зелёным."""
    folder = tmp_path / "images"
    folder.mkdir()
    make_image(folder / "a.png", color=RED)
    make_image(folder / "b.png", color=BLUE)
    make_image(folder / "c.png", color=GREEN)
    return folder
