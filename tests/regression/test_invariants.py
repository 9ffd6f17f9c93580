"""
Regression: behavioural invariants of the helpers.
"""

import pytest

from stylekit.components.breakpoints import DEFAULT_TABLE, resolve
from stylekit.components.flexgrid import flex_columns
from stylekit.components.images import DENSITY_HIGH, background_image, image_replacement
from stylekit.components.responsive import between_widths, max_width, min_width, width_range
from stylekit.domain import ConfigurationError, Declaration, Media, Rule, Size, decls, render


@pytest.mark.parametrize("name", DEFAULT_TABLE.names())
def test_adjacent_ranges_never_overlap(name):
    """A width matches max_width(B) or min_width(B), never both."""
    size = DEFAULT_TABLE[name]
    above = width_range(minimum=name)
    below = width_range(maximum=name)
    for width in range(int(size.value) - 5, int(size.value) + 5):
        assert above.contains(width) != below.contains(width)


@pytest.mark.parametrize("lower,upper", [("mobile", "tablet"), ("tablet", "wide")])
def test_between_is_min_and_max(lower, upper):
    nested = min_width(lower, [max_width(upper, decls(color="red"))])
    between = between_widths(lower, upper, decls(color="red"))
    assert render([Rule("p", (nested,))]) == render([Rule("p", (between,))])


@pytest.mark.parametrize("value", [Size(400, "px"), Size(30, "em"), Size(0, "")])
def test_sizes_resolve_unchanged(value):
    assert resolve(value) == value


def test_unknown_breakpoint_is_fatal():
    with pytest.raises(ConfigurationError):
        resolve("unknown")


def test_none_background_repeated_for_high_density():
    nodes = background_image("none", retina=True)
    none = Declaration("background-image", "none")
    assert none in nodes
    assert Media(DENSITY_HIGH, (none,)) in nodes


@pytest.mark.parametrize("retina", [True, False])
def test_svg_has_no_density_blocks(retina):
    nodes = background_image("logo", type="svg", retina=retina)
    assert not any(isinstance(n, Media) for n in nodes)


def test_replacement_box_matches_background():
    nodes = image_replacement("logo", "64px", "32px")
    assert Declaration("width", "64px") in nodes
    assert Declaration("height", "32px") in nodes


@pytest.mark.parametrize("columns", range(1, 7))
def test_top_margin_reset_per_column(columns):
    resets = [
        n
        for n in flex_columns(".col", columns)
        if isinstance(n, Rule) and n.nodes == (Declaration("margin-top", "0"),)
    ]
    assert len(resets) == columns
