from pathlib import Path

import pytest
from PIL import Image

from watermarker.models.errors import (
    DimensionMismatchError,
    InvalidChoiceError,
    MalformedInputError,
    OutOfRangeError,
    UnsupportedOutputExtensionError,
)
from watermarker.models.image_model import Color, ImageData, Point, TransparencyMode
from watermarker.models.params import OutputFormat, PositionMethod, YesNo
from watermarker.services import validation_service as validate


def _image_data(width: int, height: int) -> ImageData:
    return ImageData(
        path=Path("mem.png"),
        pil_image=Image.new("RGB", (width, height)),
        width=width,
        height=height,
        mode="RGB",
        color_components=3,
        bit_depth=24,
        transparency=TransparencyMode.OPAQUE,
    )


def test_position_accepts_range_bounds() -> None:
    assert validate.parse_position("0 0", 2, 2) == Point(0, 0)
    assert validate.parse_position("2 2", 2, 2) == Point(2, 2)
    assert validate.parse_position("  1\t2 ", 2, 2) == Point(1, 2)


@pytest.mark.parametrize("raw", ["5 5", "3 0", "0 3", "-1 0"])
def test_position_out_of_range(raw: str) -> None:
    with pytest.raises(OutOfRangeError, match="out of range"):
        validate.parse_position(raw, 2, 2)


@pytest.mark.parametrize("raw", ["", "1", "1 2 3", "a b", "1.5 2", "1_0 2"])
def test_position_malformed(raw: str) -> None:
    with pytest.raises(MalformedInputError):
        validate.parse_position(raw, 20, 20)


def test_transparency_color() -> None:
    assert validate.parse_transparency_color("255 0 12") == Color(255, 0, 12)
    with pytest.raises(OutOfRangeError):
        validate.parse_transparency_color("256 0 0")
    with pytest.raises(OutOfRangeError):
        validate.parse_transparency_color("0 -1 0")
    with pytest.raises(MalformedInputError):
        validate.parse_transparency_color("1 2")
    with pytest.raises(MalformedInputError):
        validate.parse_transparency_color("red green blue")


def test_weight() -> None:
    assert validate.parse_weight("0") == 0
    assert validate.parse_weight(" 100 ") == 100
    with pytest.raises(OutOfRangeError):
        validate.parse_weight("101")
    with pytest.raises(OutOfRangeError):
        validate.parse_weight("-1")
    with pytest.raises(MalformedInputError, match="isn't an integer"):
        validate.parse_weight("fifty")


def test_choices_are_case_insensitive() -> None:
    assert validate.parse_yes_no("YeS") is YesNo.YES
    assert validate.parse_yes_no("no") is YesNo.NO
    assert validate.parse_position_method("GRID") is PositionMethod.GRID
    assert validate.parse_position_method("Single") is PositionMethod.SINGLE


@pytest.mark.parametrize("raw", ["y", "", "yes please"])
def test_yes_no_invalid(raw: str) -> None:
    with pytest.raises(InvalidChoiceError):
        validate.parse_yes_no(raw)


def test_position_method_invalid() -> None:
    with pytest.raises(InvalidChoiceError, match="position method"):
        validate.parse_position_method("tiled")


def test_output_filename() -> None:
    assert validate.parse_output_filename("out.png") is OutputFormat.PNG
    assert validate.parse_output_filename("dir/out.jpg") is OutputFormat.JPG
    for bad in ("out.PNG", "out.jpeg", "out", "out.png.bak"):
        with pytest.raises(UnsupportedOutputExtensionError):
            validate.parse_output_filename(bad)


def test_dimensions() -> None:
    validate.check_dimensions(_image_data(4, 4), _image_data(4, 4))
    with pytest.raises(DimensionMismatchError):
        validate.check_dimensions(_image_data(4, 4), _image_data(5, 1))
    with pytest.raises(DimensionMismatchError):
        validate.check_dimensions(_image_data(4, 4), _image_data(1, 5))
