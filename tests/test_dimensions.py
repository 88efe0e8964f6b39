"""
Dimension resolver tests.

Tests:
1-3. Free-text size parsing (accepted forms, rejected forms, failure payload)
4.   Explicit fields vs free text
5-7. Derived metrics — united inches, frame perimeter, glazing area
"""

import pytest

from framecraft.calculators.dimensions import (
    INVALID_DIMENSION_MESSAGE,
    Dimensions,
    ParseFailure,
    frame_perimeter_feet,
    frame_perimeter_inches,
    glazing_area_sqft,
    glazing_united_inches,
    glazing_dimensions,
    parse_dimensions,
    resolve_dimensions,
    united_inches,
)


# ============================================================
# 1-3. Parsing
# ============================================================

@pytest.mark.parametrize("text, width, height", [
    ("16x20", 16.0, 20.0),
    ("16 x 20", 16.0, 20.0),
    ('16"x20"', 16.0, 20.0),
    ('16" X 20"', 16.0, 20.0),
    ("16×20", 16.0, 20.0),
    ("16X20", 16.0, 20.0),
    ("11.5 x 14.25", 11.5, 14.25),
    ("16in x 20in", 16.0, 20.0),
    ("16 inches x 20 inches", 16.0, 20.0),
    ("Canvas 24x36, gallery wrap", 24.0, 36.0),
])
def test_parse_accepts_common_size_forms(text, width, height):
    """Order-form sizes parse to width/height in inches."""
    assert parse_dimensions(text) == Dimensions(width=width, height=height)


@pytest.mark.parametrize("text", [
    "",
    None,
    "abc",
    "16 by 20",
    "x20",
    "0x20",
    "16x0",
    "-16x20",
    "16x-20",
    "16 x -20",
    "-.5x20",
])
def test_parse_rejects_unreadable_sizes(text):
    """Unreadable, zero or negative sizes come back as ParseFailure — never an exception."""
    result = parse_dimensions(text)
    assert isinstance(result, ParseFailure)


def test_parse_failure_carries_message_and_raw_text():
    result = parse_dimensions("sixteen by twenty")
    assert result.message == INVALID_DIMENSION_MESSAGE
    assert result.raw == "sixteen by twenty"


# ============================================================
# 4. Explicit fields vs free text
# ============================================================

def test_explicit_fields_win_over_spec():
    assert resolve_dimensions(16, 20, "8x10") == Dimensions(16.0, 20.0)


def test_spec_used_when_a_field_is_missing():
    assert resolve_dimensions(16, None, "8x10") == Dimensions(8.0, 10.0)
    assert isinstance(resolve_dimensions(spec="junk"), ParseFailure)


def test_explicit_zero_is_degenerate_not_failure():
    """Explicit zero passes through; the engine turns it into an empty breakdown."""
    dims = resolve_dimensions(0, 20)
    assert isinstance(dims, Dimensions)
    assert dims.is_degenerate
    assert not Dimensions(16, 20).is_degenerate


# ============================================================
# 5-7. Derived metrics
# ============================================================

@pytest.mark.parametrize("width, height, mat_width", [
    (16, 20, 2),
    (8, 10, 1.5),
    (24.5, 36.25, 3),
    (5, 7, 0.25),
    (40, 60, 4),
])
def test_united_inches_adds_mat_on_four_sides(width, height, mat_width):
    assert united_inches(width, height, mat_width) == width + height + 4 * mat_width


def test_frame_perimeter_measures_matted_outside():
    # 16x20 with 2" mat is 20x24 outside: 88" = 7.33 ft
    assert glazing_dimensions(16, 20, 2) == (20, 24)
    assert frame_perimeter_inches(16, 20, 2) == 88
    assert frame_perimeter_feet(16, 20, 2) == pytest.approx(88 / 12)


def test_glazing_area_and_united_inches():
    assert glazing_area_sqft(16, 20, 2) == pytest.approx(480 / 144)
    assert glazing_united_inches(16, 20, 2) == 44
