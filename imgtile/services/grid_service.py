from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from PIL import Image

from imgtile.models.errors import NoImagesError
from imgtile.models.loaded_image import LoadedImage


@dataclass(frozen=True)
class GridLayout:
    """Геометрия сетки: число колонок и строк и размер ячейки, px."""
    columns: int
    rows: int
    cell_width: int
    cell_height: int

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self.columns * self.cell_width, self.rows * self.cell_height

    def offset(self, index: int) -> Tuple[int, int]:
        """Левый верхний угол ячейки `index` (0-based, построчно слева направо)."""
        col, row = index % self.columns, index // self.columns
        return col * self.cell_width, row * self.cell_height


class GridService:
    def layout(self, count: int, columns: int, cell_size: Tuple[int, int]) -> GridLayout:
        """
        Строк столько, чтобы вместить `count` ячеек: ceil(count / columns).
        """
        if count <= 0:
            raise NoImagesError("No images loaded")
        if columns <= 0:
            raise ValueError(f"columns must be positive, got {columns}")
        rows = (count + columns - 1) // columns
        cell_width, cell_height = cell_size
        return GridLayout(columns=columns, rows=rows, cell_width=cell_width, cell_height=cell_height)

    def compose(self, images: Sequence[LoadedImage], columns: int) -> Image.Image:
        """
        Склейка изображений в сетку RGBA.
        Пиксели копируются как есть, без масштабирования и смешивания по альфе;
        незаполненные ячейки последней строки остаются (0, 0, 0, 0).
        """
        if not images:
            raise NoImagesError("No images loaded")
        grid = self.layout(len(images), columns, images[0].size)
        width, height = grid.canvas_size
        canvas = np.zeros((height, width, 4), dtype=np.uint8)

        for i, image in enumerate(images):
            x, y = grid.offset(i)
            block = np.asarray(image.pil_image.convert("RGBA"), dtype=np.uint8)
            canvas[y:y + grid.cell_height, x:x + grid.cell_width] = block

        return Image.fromarray(canvas)
