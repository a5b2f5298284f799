"""Контроллер склейки: оркестрация сервисов.

SOLID:
- SRP: класс управляет порядком этапов (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются полями.
Clean Code:
- Этапы компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from imgtile.models.loaded_image import LoadedImage
from imgtile.models.tile_config import TileConfig
from imgtile.services.grid_service import GridService
from imgtile.services.image_service import ImageService
from imgtile.services.output_service import OutputService
from imgtile.services.size_validator import SizeValidator

logger = logging.getLogger(__name__)


@dataclass
class TileController:
    """Проводит один запуск: сбор -> проверка размеров -> склейка -> запись.

    Любая фатальная ошибка этапа пробрасывается наверх и прерывает запуск.
    """
    config: TileConfig

    _image_service: ImageService = field(default_factory=ImageService)
    _grid_service: GridService = field(default_factory=GridService)
    _output_service: OutputService = field(default_factory=OutputService)

    def run(self) -> Path:
        """Выполняет весь конвейер и возвращает путь записанного файла.

        Raises:
            ImgTileError: при ошибке чтения папки, несовпадении размеров, пустой папке или ошибке записи.
        """
        images = self._load_images()
        canvas = self._grid_service.compose(images, self.config.columns)
        logger.info("Composed %d image(s) into %dx%d canvas", len(images), canvas.width, canvas.height)
        return self._output_service.save(canvas, self.config.output_file)

    # ---- Helpers ----
    def _load_images(self) -> List[LoadedImage]:
        # размер проверяется сразу после декодирования каждого файла
        validator = SizeValidator()
        images: List[LoadedImage] = []
        for image in self._image_service.collect(self.config.input_folder):
            validator.check(image)
            images.append(image)
        return images
