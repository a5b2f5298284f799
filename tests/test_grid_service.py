from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from imgtile.models.errors import DimensionMismatchError, NoImagesError
from imgtile.models.loaded_image import LoadedImage
from imgtile.services.grid_service import GridService
from imgtile.services.size_validator import SizeValidator

from helpers import BLUE, GREEN, RED, TRANSPARENT


def _image(name: str, color, size=(2, 2)) -> LoadedImage:
    pil_image = Image.new("RGBA", size, color)
    return LoadedImage(
        path=Path(name), pil_image=pil_image, width=size[0], height=size[1], mode="RGBA"
    )


@pytest.mark.parametrize(
    "count, columns, rows",
    [(1, 6, 1), (6, 6, 1), (7, 6, 2), (3, 2, 2), (4, 1, 4)],
)
def test_layout_rows(count, columns, rows):
    grid = GridService().layout(count, columns, (5, 3))

    assert grid.rows == rows
    assert grid.canvas_size == (columns * 5, rows * 3)


def test_layout_offsets_row_major():
    grid = GridService().layout(5, 2, (10, 4))

    assert [grid.offset(i) for i in range(5)] == [(0, 0), (10, 0), (0, 4), (10, 4), (0, 8)]


def test_layout_without_images():
    with pytest.raises(NoImagesError, match="No images loaded"):
        GridService().layout(0, 3, (2, 2))


def test_compose_places_cells_and_leaves_background():
    images = [_image("a.png", RED), _image("b.png", BLUE), _image("c.png", GREEN)]

    canvas = GridService().compose(images, columns=2)

    assert canvas.mode == "RGBA"
    assert canvas.size == (4, 4)
    for x in range(4):
        for y in range(4):
            expected = {(0, 0): RED, (1, 0): BLUE, (0, 1): GREEN, (1, 1): TRANSPARENT}[(x // 2, y // 2)]
            assert canvas.getpixel((x, y)) == expected


def test_compose_copies_alpha_without_blending():
    translucent = (10, 20, 30, 128)
    canvas = GridService().compose([_image("a.png", translucent)], columns=3)

    assert canvas.size == (6, 2)
    assert canvas.getpixel((1, 1)) == translucent
    assert canvas.getpixel((2, 0)) == TRANSPARENT


def test_compose_keeps_source_pixels():
    source = Image.new("RGBA", (3, 2))
    source.putdata([(i, 2 * i, 3 * i, 255) for i in range(6)])
    first = _image("a.png", RED, size=(3, 2))
    second = LoadedImage(path=Path("b.png"), pil_image=source, width=3, height=2, mode="RGBA")

    canvas = GridService().compose([first, second], columns=1)

    assert canvas.crop((0, 2, 3, 4)).tobytes() == source.tobytes()


def test_compose_without_images():
    with pytest.raises(NoImagesError):
        GridService().compose([], columns=2)


def test_size_validator_accepts_matching_sizes():
    validator = SizeValidator()
    validator.check(_image("a.png", RED))
    validator.check(_image("b.png", BLUE))


def test_size_validator_names_offending_file():
    validator = SizeValidator()
    validator.check(_image("a.png", RED))

    with pytest.raises(DimensionMismatchError, match="Image b.png size does not match the others"):
        validator.check(_image("b.png", BLUE, size=(2, 3)))
