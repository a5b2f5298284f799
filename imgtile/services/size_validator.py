from __future__ import annotations

from typing import Optional, Tuple

from imgtile.models.errors import DimensionMismatchError
from imgtile.models.loaded_image import LoadedImage


class SizeValidator:
    """Следит, чтобы все изображения совпадали по размеру с первым.

    Первое проверенное изображение задаёт канонические ширину и высоту.
    """

    def __init__(self) -> None:
        self._canonical: Optional[Tuple[int, int]] = None

    def check(self, image: LoadedImage) -> None:
        """
        Raises:
            DimensionMismatchError: если размер отличается от канонического.
        """
        if self._canonical is None:
            self._canonical = image.size
            return
        if image.size != self._canonical:
            raise DimensionMismatchError(f"Image {image.name} size does not match the others")
