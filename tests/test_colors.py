import numpy as np
import pytest

from quadrachrome.colors import (
    hex_to_unit_rgb,
    hex_string_to_unit_rgb,
    unit_rgb_to_hex,
    unit_rgb_to_hex_string,
    normalize_color_input,
    normalize_position_input,
)


def test_hex_to_unit_rgb_primaries():
    """Packed 24-bit colors unpack to unit channels."""
    assert hex_to_unit_rgb(0xFFFF00) == (1.0, 1.0, 0.0)
    assert hex_to_unit_rgb(0x00FF00) == (0.0, 1.0, 0.0)
    assert hex_to_unit_rgb(0x0000FF) == (0.0, 0.0, 1.0)
    assert hex_to_unit_rgb(0x000000) == (0.0, 0.0, 0.0)


def test_hex_to_unit_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        hex_to_unit_rgb(0x1000000)
    with pytest.raises(ValueError):
        hex_to_unit_rgb(-1)


@pytest.mark.parametrize("text", ["#ff00ff", "ff00ff", "#F0F", "0xFF00FF", "  #ff00ff "])
def test_hex_string_forms(text):
    """Supported hex spellings all parse to the same color."""
    assert hex_string_to_unit_rgb(text) == (1.0, 0.0, 1.0)


@pytest.mark.parametrize("text", ["#ff00f", "#gg0000", "", "ff_fff", "+fffff", "#-12345", "0x+fffff"])
def test_hex_string_invalid(text):
    """Malformed hex strings, including signs and underscores, are rejected."""
    with pytest.raises(ValueError):
        hex_string_to_unit_rgb(text)


def test_unit_rgb_to_hex():
    assert unit_rgb_to_hex((1.0, 0.5, 0.0)) == 0xFF8000
    assert unit_rgb_to_hex_string((0.0, 0.0, 1.0)) == "#0000ff"
    # 0x4A0E4E survives the trip through unit floats
    assert unit_rgb_to_hex(hex_to_unit_rgb(0x4A0E4E)) == 0x4A0E4E


def test_normalize_color_input_variants():
    """Every accepted color representation normalizes to the same tuple."""
    expected = (1.0, 1.0, 0.0)
    assert normalize_color_input(0xFFFF00) == expected
    assert normalize_color_input("#ffff00") == expected
    assert normalize_color_input((1, 1, 0)) == expected
    assert normalize_color_input([1.0, 1.0, 0.0]) == expected
    assert normalize_color_input(np.array([1.0, 1.0, 0.0])) == expected
    assert all(isinstance(c, float) for c in normalize_color_input((1, 1, 0)))


def test_normalize_color_input_rejects_bad_values():
    with pytest.raises(ValueError):
        normalize_color_input((1.2, 0.0, 0.0))
    with pytest.raises(ValueError):
        normalize_color_input((0.0, -0.1, 0.0))
    with pytest.raises(ValueError):
        normalize_color_input((0.0, 0.0))
    with pytest.raises(ValueError):
        normalize_color_input(np.zeros((2, 3)))
    with pytest.raises(TypeError):
        normalize_color_input(True)
    with pytest.raises(TypeError):
        normalize_color_input(None)


def test_normalize_position_input():
    assert normalize_position_input((0.25, 0.75)) == (0.25, 0.75)
    assert normalize_position_input(np.array([0, 1])) == (0.0, 1.0)
    with pytest.raises(ValueError):
        normalize_position_input((0.1, 0.2, 0.3))
    with pytest.raises(ValueError):
        normalize_position_input((float("nan"), 0.5))
    with pytest.raises(TypeError):
        normalize_position_input("0.1,0.2")


def test_position_outside_unit_square_warns():
    """Out-of-square positions are kept but warned about."""
    with pytest.warns(UserWarning, match="outside the unit square"):
        assert normalize_position_input((1.5, -0.25)) == (1.5, -0.25)
