"""Кодирование и запись итогового изображения."""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from imgtile.models.errors import OutputError

logger = logging.getLogger(__name__)

JPEG_QUALITY = 90


class OutputService:
    def format_for(self, output_file: str | Path) -> str:
        """PNG для путей, оканчивающихся на `.png` (без учёта регистра), иначе JPEG."""
        if str(output_file).lower().endswith(".png"):
            return "PNG"
        return "JPEG"

    def flatten(self, canvas: Image.Image) -> Image.Image:
        """RGB для JPEG: холст накладывается на чёрный фон по альфе.

        Полупрозрачные пиксели темнеют пропорционально альфе, прозрачные
        становятся чёрными независимо от скрытого цвета.
        """
        rgba = canvas.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
        return Image.alpha_composite(background, rgba).convert("RGB")

    def save(self, canvas: Image.Image, output_file: str | Path) -> Path:
        """Создаёт (или обрезает) выходной файл и кодирует в него холст.

        Файл создаётся до кодирования; при ошибке кодирования он остаётся
        на диске пустым или недописанным.

        Raises:
            OutputError: если файл не создаётся или кодирование не удалось.
        """
        path = Path(output_file)
        fmt = self.format_for(path)
        try:
            fp = path.open("wb")
        except OSError as exc:
            raise OutputError(f"Failed to create output file: {exc}") from exc

        with fp:
            try:
                if fmt == "PNG":
                    canvas.save(fp, format="PNG")
                else:
                    self.flatten(canvas).save(fp, format="JPEG", quality=JPEG_QUALITY)
            except (OSError, ValueError) as exc:
                raise OutputError(f"Failed to save image: {exc}") from exc

        logger.debug("Encoded %dx%d canvas as %s", canvas.width, canvas.height, fmt)
        return path
