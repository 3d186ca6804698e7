import math

import pytest

from honeycomb.hexes import Direction, Hex, HexFactory, opposite

SQRT3 = math.sqrt(3.0)

SAMPLE_HEXES = [Hex(0, 0, 0), Hex(3, -5, 2), Hex(-4, 1, 3), Hex(2, 2, -4)]


def test_orientation_queries():
    pointy = HexFactory.configure(orientation="pointy")()
    flat = HexFactory.configure(orientation="flat")()
    assert pointy.is_pointy() and not pointy.is_flat()
    assert flat.is_flat() and not flat.is_pointy()


@pytest.mark.parametrize(
    ("orientation", "width", "height"),
    [
        ("pointy", 20 * SQRT3, 40.0),
        ("flat", 40.0, 20 * SQRT3),
    ],
)
def test_width_and_height(orientation, width, height):
    hex_ = HexFactory.configure(size=20, orientation=orientation)()
    assert hex_.width() == pytest.approx(width)
    assert hex_.height() == pytest.approx(height)


@pytest.mark.parametrize(
    ("orientation", "coordinates", "expected"),
    [
        ("pointy", (0, 0), (0.0, 0.0)),
        ("pointy", (1, 0), (SQRT3, 0.0)),
        ("pointy", (0, 1), (SQRT3 / 2, 1.5)),
        ("flat", (1, 0), (1.5, SQRT3 / 2)),
        ("flat", (0, 1), (0.0, SQRT3)),
    ],
)
def test_to_point(orientation, coordinates, expected):
    point = HexFactory.configure(orientation=orientation)(*coordinates).to_point()
    assert (point.x, point.y) == pytest.approx(expected)


def test_to_point_scales_and_shifts():
    factory = HexFactory.configure(size=2, origin=(10, 20))
    point = factory(1, 0).to_point()
    assert point.x == pytest.approx(10 + 2 * SQRT3)
    assert point.y == pytest.approx(20)


@pytest.mark.parametrize(
    ("orientation", "first_corner"),
    [
        ("pointy", (SQRT3 / 2, 0.5)),
        ("flat", (1.0, 0.0)),
    ],
)
def test_corners(orientation, first_corner):
    hex_ = HexFactory.configure(orientation=orientation)()
    corners = hex_.corners()
    assert len(corners) == 6
    assert (corners[0].x, corners[0].y) == pytest.approx(first_corner)
    for corner in corners:
        assert math.hypot(corner.x, corner.y) == pytest.approx(1.0)


def test_corners_surround_the_center():
    hex_ = HexFactory.configure(size=10, origin=(5, 5))(2, -1)
    center = hex_.to_point()
    for corner in hex_.corners():
        assert math.hypot(corner.x - center.x, corner.y - center.y) == pytest.approx(10)


def test_neighbors_in_direction_order():
    assert Hex().neighbors() == [
        Hex(1, 0, -1),
        Hex(0, 1, -1),
        Hex(-1, 1, 0),
        Hex(-1, 0, 1),
        Hex(0, -1, 1),
        Hex(1, -1, 0),
    ]


def test_neighbor_accepts_labels_and_indices():
    assert Hex().neighbor() == Hex(1, 0, -1)
    assert Hex().neighbor("nw") == Hex(0, -1, 1)
    assert Hex().neighbor(Direction.SE) == Hex().neighbor(1)


@pytest.mark.parametrize("direction", [6, -1, "north", 1.5])
def test_neighbor_rejects_unknown_directions(direction):
    with pytest.raises(ValueError):
        Hex().neighbor(direction)


@pytest.mark.parametrize("hex_", SAMPLE_HEXES)
@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_neighbor_returns_home(hex_, direction):
    assert hex_.neighbor(direction).neighbor(opposite(direction)) == hex_
    assert hex_.distance(hex_.neighbor(direction)) == 1


def test_neighbor_keeps_settings():
    factory = HexFactory.configure(size=30)
    assert factory(1, 1).neighbor(Direction.W).settings is factory.settings


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (Hex(0, 0, 0), Hex(3, -5, 2), 5),
        (Hex(0, 0, 0), Hex(0, 0, 0), 0),
        (Hex(0, 0, 0), Hex(-4, 1, 3), 4),
        (Hex(1, -1, 0), Hex(-2, 3, -1), 4),
    ],
)
def test_distance(a, b, expected):
    assert a.distance(b) == expected
    assert b.distance(a) == expected


@pytest.mark.parametrize("hex_", SAMPLE_HEXES)
def test_distance_is_half_the_component_sum(hex_):
    origin = Hex()
    half_sum = (abs(hex_.x) + abs(hex_.y) + abs(hex_.z)) / 2
    assert origin.distance(hex_) == half_sum


def test_add_subtract_and_scale():
    assert Hex(1, -1, 0) + Hex(2, 0, -2) == Hex(3, -1, -2)
    assert Hex(1, -1, 0).add((2, 0, -2)) == Hex(3, -1, -2)
    assert Hex(3, -1, -2) - Hex(2, 0, -2) == Hex(1, -1, 0)
    assert Hex(1, -2, 1).scale(3) == Hex(3, -6, 3)


def test_arithmetic_keeps_the_callers_settings():
    factory = HexFactory.configure(size=30)
    assert factory(1, 0).add(Hex(1, 0)).settings is factory.settings


@pytest.mark.parametrize("hex_", SAMPLE_HEXES)
def test_round_is_idempotent_on_whole_hexes(hex_):
    assert hex_.round() == hex_
    assert hex_.round().round() == hex_.round()


@pytest.mark.parametrize(
    ("target", "t", "expected"),
    [
        # (0.4, 0.4, -0.8): y moved furthest once x is kept
        (Hex(1, 1, -2), 0.4, Hex(0, 1, -1)),
        # (0.6, -0.3, -0.3): x moved furthest
        (Hex(2, -1, -1), 0.3, Hex(0, 0, 0)),
    ],
)
def test_round_recomputes_the_coordinate_that_moved_most(target, t, expected):
    rounded = Hex().lerp(target, t).round()
    assert rounded == expected
    assert sum(rounded.coordinates()) == 0


def test_round_breaks_exact_ties_to_even():
    # (0.5, -0.5, 0) sits on the edge between the origin and its NE neighbor
    halfway = Hex().lerp(Hex(1, -1, 0), 0.5)
    assert halfway.round() == Hex(0, 0, 0)
    assert Hex().lerp(Hex(3, -3, 0), 0.5).round() == Hex(2, -2, 0)


def test_lerp():
    assert Hex().lerp(Hex(2, -2, 0), 0.5) == Hex(1, -1, 0)
    assert Hex(1, 2).lerp(Hex(-3, 0), 0) == Hex(1, 2)
    assert Hex(1, 2).lerp(Hex(-3, 0), 1) == Hex(-3, 0)


def test_nudge():
    nudged = Hex(1, -1, 0).nudge()
    assert nudged.coordinates() == pytest.approx((1 + 1e-6, -1 + 1e-6, -2e-6))


def test_hexes_between_a_straight_line():
    assert list(Hex().hexes_between(Hex(3, -3, 0))) == [
        Hex(0, 0, 0),
        Hex(1, -1, 0),
        Hex(2, -2, 0),
        Hex(3, -3, 0),
    ]


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (Hex(0, 0, 0), Hex(2, -1, -1)),
        (Hex(-3, 1, 2), Hex(4, -2, -2)),
        (Hex(1, 1, -2), Hex(-5, 2, 3)),
    ],
)
def test_hexes_between_steps_through_neighbors(start, end):
    line = list(start.hexes_between(end))
    assert len(line) == start.distance(end) + 1
    assert line[0] == start
    assert line[-1] == end
    for current, following in zip(line, line[1:]):
        assert current.distance(following) == 1


def test_hexes_between_the_same_hex():
    hex_ = Hex(2, -1, -1)
    assert list(hex_.hexes_between(hex_)) == [hex_]


def test_hexes_between_can_be_restarted():
    start, end = Hex(0, 0), Hex(4, -1)
    assert list(start.hexes_between(end)) == list(start.hexes_between(end))
