"""Source-over compositing."""
import numpy as np
import pytest

from pixeldraw import (
    TRANSPARENT,
    OutOfBounds,
    composite_color,
    get_pixel,
    put_pixel,
    put_pixel_with_composition,
    rgb,
    rgba,
)


@pytest.mark.parametrize("c", [rgb(0, 0, 0), rgb(255, 255, 255), rgb(12, 200, 99)])
def test_opaque_over_itself_is_identity(c):
    assert composite_color(c, c) == c


@pytest.mark.parametrize("c", [rgb(0, 0, 0), rgb(12, 200, 99)])
def test_transparent_over_opaque_keeps_destination(c):
    assert composite_color(TRANSPARENT, c) == c


def test_opaque_source_replaces_destination():
    assert composite_color(rgb(1, 2, 3), rgba(200, 100, 50, 77)) == rgb(1, 2, 3)


def test_both_transparent_yields_transparent():
    assert composite_color(TRANSPARENT, TRANSPARENT) == TRANSPARENT
    assert composite_color(rgba(255, 10, 10, 0), rgba(5, 5, 5, 0)) == TRANSPARENT


def test_half_alpha_over_opaque():
    # alpha is blended with the same formula as the colour channels
    assert composite_color(rgba(255, 0, 0, 128), rgb(0, 0, 255)) == (128, 0, 127, 191)


def test_translucent_over_transparent_keeps_source():
    assert composite_color(rgba(10, 20, 30, 100), TRANSPARENT) == (10, 20, 30, 100)


def test_put_pixel_with_composition_blends_in_place(bitmap):
    put_pixel(bitmap, (2, 3), rgb(0, 0, 255))
    put_pixel_with_composition(bitmap, (2, 3), rgba(255, 0, 0, 128))
    assert get_pixel(bitmap, (2, 3)) == (128, 0, 127, 191)


def test_put_pixel_with_composition_on_empty_pixel(bitmap):
    put_pixel_with_composition(bitmap, (0, 0), rgba(40, 50, 60, 70))
    assert get_pixel(bitmap, (0, 0)) == (40, 50, 60, 70)


@pytest.mark.parametrize("p", [(-1, 0), (8, 0), (0, 6)])
def test_put_pixel_with_composition_outside_raises(bitmap, p):
    before = bitmap.to_bytes()
    with pytest.raises(OutOfBounds):
        put_pixel_with_composition(bitmap, p, rgb(1, 1, 1))
    assert bitmap.to_bytes() == before


def test_exact_half_rounds_up_in_formula_order():
    # (255 * a2) * (1 - a1) lands on an exact .5 only in this evaluation order
    assert composite_color(rgba(1, 1, 1, 2), rgba(255, 255, 255, 2)) == (128, 128, 128, 2)


@pytest.mark.parametrize("na,oa", [(2, 2), (1, 3), (128, 64), (254, 1)])
def test_matches_formula_across_alphas(na, oa):
    a1, a2 = na / 255, oa / 255
    denom = a1 + a2 * (1 - a1)
    for n, o in [(1, 255), (0, 128), (77, 3), (255, 0)]:
        expected = int(np.floor((n * a1 + o * a2 * (1 - a1)) / denom + 0.5))
        assert composite_color(rgba(n, n, n, na), rgba(o, o, o, oa)).r == expected
