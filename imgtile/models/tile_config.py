"""Параметры запуска склейки."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COLUMNS = 6
DEFAULT_OUTPUT = "./output.png"

USAGE_MESSAGE = "Please provide -i (input folder), -c (columns), and -o (output file)"


@dataclass(frozen=True)
class TileConfig:
    """Неизменяемая конфигурация одного запуска.

    Fields:
        input_folder: Папка с исходными изображениями (без рекурсии).
        columns: Число изображений в строке сетки.
        output_file: Путь выходного файла; суффикс выбирает кодек.
    """
    input_folder: str
    columns: int = DEFAULT_COLUMNS
    output_file: str = DEFAULT_OUTPUT

    def validate(self) -> None:
        """Проверяет параметры до любого обращения к файловой системе.

        Raises:
            ValueError: если папка или выходной путь пусты, либо `columns <= 0`.
        """
        if not self.input_folder or self.columns <= 0 or not self.output_file:
            raise ValueError(USAGE_MESSAGE)
