import pytest

from core.color import BLACK, WHITE, Color
from core.matrix import IDENTITY, SingularMatrixError
from core.transformations import scaling, translation
from core.vector import Point
from geometry.sphere import Sphere
from materials.patterns import CheckerPattern, GradientPattern, RingPattern, StripePattern
from materials.presets import PatternPresets


def test_stripe_pattern_holds_its_colors():
    pattern = StripePattern(WHITE, BLACK)
    assert pattern.a == WHITE
    assert pattern.b == BLACK
    assert pattern.transform == IDENTITY


@pytest.mark.parametrize("point", [Point(0, 0, 0), Point(0, 1, 0), Point(0, 2, 0),
                                   Point(0, 0, 1), Point(0, 0, 2)])
def test_stripe_is_constant_in_y_and_z(point):
    assert StripePattern(WHITE, BLACK).pattern_at(point) == WHITE


@pytest.mark.parametrize("x,expected", [
    (0, WHITE), (0.9, WHITE), (1, BLACK), (-0.1, BLACK), (-1, BLACK), (-1.1, WHITE),
])
def test_stripe_alternates_in_x(x, expected):
    assert StripePattern(WHITE, BLACK).pattern_at(Point(x, 0, 0)) == expected


def test_pattern_follows_object_transform():
    shape = Sphere(transform=scaling(2, 2, 2))
    assert StripePattern(WHITE, BLACK).pattern_at_shape(shape, Point(1.5, 0, 0)) == WHITE


def test_pattern_follows_its_own_transform():
    pattern = StripePattern(WHITE, BLACK, scaling(2, 2, 2))
    assert pattern.pattern_at_shape(Sphere(), Point(1.5, 0, 0)) == WHITE


def test_pattern_follows_both_transforms():
    shape = Sphere(transform=scaling(2, 2, 2))
    pattern = StripePattern(WHITE, BLACK, translation(0.5, 0, 0))
    assert pattern.pattern_at_shape(shape, Point(2.5, 0, 0)) == WHITE


def test_singular_pattern_transform_rejected():
    with pytest.raises(SingularMatrixError):
        StripePattern(WHITE, BLACK, scaling(1, 0, 1))


def test_gradient_interpolates_in_x():
    pattern = GradientPattern(WHITE, BLACK)
    assert pattern.pattern_at(Point(0, 0, 0)) == WHITE
    assert pattern.pattern_at(Point(0.25, 0, 0)) == Color(0.75, 0.75, 0.75)
    assert pattern.pattern_at(Point(0.5, 0, 0)) == Color(0.5, 0.5, 0.5)
    assert pattern.pattern_at(Point(0.75, 0, 0)) == Color(0.25, 0.25, 0.25)


def test_ring_extends_in_x_and_z():
    pattern = RingPattern(WHITE, BLACK)
    assert pattern.pattern_at(Point(0, 0, 0)) == WHITE
    assert pattern.pattern_at(Point(1, 0, 0)) == BLACK
    assert pattern.pattern_at(Point(0, 0, 1)) == BLACK
    assert pattern.pattern_at(Point(0.708, 0, 0.708)) == BLACK


@pytest.mark.parametrize("point,expected", [
    (Point(0, 0, 0), WHITE),
    (Point(0.99, 0, 0), WHITE),
    (Point(1.01, 0, 0), BLACK),
    (Point(0, 0.99, 0), WHITE),
    (Point(0, 1.01, 0), BLACK),
    (Point(0, 0, 0.99), WHITE),
    (Point(0, 0, 1.01), BLACK),
])
def test_checkers_repeat_in_all_dimensions(point, expected):
    assert CheckerPattern(WHITE, BLACK).pattern_at(point) == expected


def test_checkerboard_preset_scales_squares():
    board = PatternPresets.checkerboard(WHITE, BLACK, scale=2.0)
    shape = Sphere()
    assert board.pattern_at_shape(shape, Point(1.5, 0, 0)) == WHITE
    assert board.pattern_at_shape(shape, Point(2.5, 0, 0)) == BLACK
