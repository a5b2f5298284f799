"""Исключения склейки.

Ошибки уровня файла (`ImageDecodeError`) перехватываются сборщиком и приводят
к пропуску файла; остальные прерывают запуск целиком.
"""
from __future__ import annotations


class ImgTileError(Exception):
    """Базовая ошибка imgtile."""


class ImageDecodeError(ImgTileError):
    """Файл открылся, но не декодируется как PNG/JPEG."""


class DimensionMismatchError(ImgTileError, ValueError):
    """Размер изображения отличается от канонического."""


class NoImagesError(ImgTileError, ValueError):
    """В папке не нашлось ни одного пригодного изображения."""


class OutputError(ImgTileError):
    """Не удалось создать или закодировать выходной файл."""


class FolderReadError(ImgTileError):
    """Не удалось прочитать входную папку."""
