from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from imgtile.controllers.tile_controller import TileController
from imgtile.models.errors import ImgTileError
from imgtile.models.tile_config import DEFAULT_COLUMNS, DEFAULT_OUTPUT, TileConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


class ImgTileApp:
    def __init__(self) -> None:
        self._parser = argparse.ArgumentParser(
            prog="imgtile",
            description="Merge images from a folder into one image",
        )
        self._parser.add_argument("-i", "--input", default="", help="Input folder with images")
        self._parser.add_argument("-c", "--columns", type=int, default=DEFAULT_COLUMNS,
                                  help="Number of images per row")
        self._parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="Output image file path")
        self._parser.add_argument("--log-level", default="INFO",
                                  choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                                  help="Logging verbosity (default: INFO)")

    def parse_config(self, argv: Optional[Sequence[str]] = None) -> TileConfig:
        """Разбирает аргументы и настраивает логирование.

        Невалидные параметры завершают процесс с ошибкой использования (код 2)
        до любого обращения к файловой системе.
        """
        args = self._parser.parse_args(argv)
        logging.basicConfig(
            level=getattr(logging, args.log_level),
            format=LOG_FORMAT,
            datefmt=LOG_DATEFMT,
            handlers=[logging.StreamHandler(sys.stderr)],
        )
        config = TileConfig(input_folder=args.input, columns=args.columns, output_file=args.output)
        try:
            config.validate()
        except ValueError as exc:
            self._parser.error(str(exc))
        return config

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        config = self.parse_config(argv)
        controller = TileController(config=config)
        try:
            output_path = controller.run()
        except ImgTileError as exc:
            logger.error("%s", exc)
            return 1

        logger.debug("Wrote %s", output_path)
        print(f"Image saved to {config.output_file}")
        return 0
