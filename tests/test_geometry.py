"""Tests for the point-in-polygon, centroid and distance helpers."""

import math

import pytest

from campus_nav.config import settings
from campus_nav.core.geometry import (
    BoundingBox,
    Coordinate,
    bounding_box_of,
    distance_km,
    find_enclosing_building,
    find_enclosing_polygon,
    haversine_distance_km,
    point_in_polygon,
    polygon_center,
)

from .conftest import make_building


def ray_cast_only(point, boundaries):
    """Crossing-number test without the bounding box pre-check."""
    inside = False
    j = len(boundaries) - 1
    for i in range(len(boundaries)):
        xi, yi = boundaries[i].latitude, boundaries[i].longitude
        xj, yj = boundaries[j].latitude, boundaries[j].longitude
        if (yi > point.longitude) != (yj > point.longitude):
            if point.latitude < (xj - xi) * (point.longitude - yi) / (yj - yi) + xi:
                inside = not inside
        j = i
    return inside


class TestBoundingBox:
    """Tests for bounding box computation."""

    def test_bounding_box_of_triangle(self, triangle):
        box = bounding_box_of(triangle)
        assert box == BoundingBox(min_lat=0, max_lat=3, min_lng=0, max_lng=4)

    def test_single_point_is_degenerate(self):
        box = bounding_box_of([Coordinate(1.5, -2.5)])
        assert box.min_lat == box.max_lat == 1.5
        assert box.min_lng == box.max_lng == -2.5

    def test_empty_box_contains_nothing(self):
        box = bounding_box_of([])
        assert not box.contains(Coordinate(0, 0))


class TestPointInPolygon:
    """Tests for ray casting containment."""

    def test_point_inside_triangle(self, triangle):
        assert point_in_polygon(Coordinate(1, 1), triangle) is True

    def test_point_outside_triangle(self, triangle):
        assert point_in_polygon(Coordinate(10, 10), triangle) is False

    def test_point_in_box_but_beyond_hypotenuse(self, triangle):
        # Inside the bounding box, outside the triangle
        assert point_in_polygon(Coordinate(2.5, 3.5), triangle) is False

    def test_concave_polygon_notch(self):
        # U shape open towards high latitude
        u_shape = [
            Coordinate(0, 0), Coordinate(0, 3), Coordinate(3, 3), Coordinate(3, 2),
            Coordinate(1, 2), Coordinate(1, 1), Coordinate(3, 1), Coordinate(3, 0),
        ]
        assert point_in_polygon(Coordinate(0.5, 1.5), u_shape) is True
        assert point_in_polygon(Coordinate(2, 1.5), u_shape) is False
        assert point_in_polygon(Coordinate(2, 0.5), u_shape) is True

    @pytest.mark.parametrize("points", [
        [],
        [Coordinate(1, 1)],
        [Coordinate(0, 0), Coordinate(2, 2)],
    ])
    def test_degenerate_polygons_never_contain(self, points):
        assert point_in_polygon(Coordinate(1, 1), points) is False

    @pytest.mark.parametrize("point", [
        Coordinate(-1, 2),
        Coordinate(4, 2),
        Coordinate(1, -0.5),
        Coordinate(1, 5),
        Coordinate(-5, -5),
    ])
    def test_bounding_box_rejection_matches_ray_casting(self, triangle, point):
        assert not bounding_box_of(triangle).contains(point)
        assert point_in_polygon(point, triangle) == ray_cast_only(point, triangle) == False


class TestPolygonCenter:
    """Tests for vertex centroids."""

    def test_triangle_center(self, triangle):
        center = polygon_center(triangle)
        assert center.latitude == pytest.approx(1.0)
        assert center.longitude == pytest.approx(4 / 3)

    def test_single_point_center(self):
        center = polygon_center([Coordinate(1, 1)])
        assert center == Coordinate(1, 1)

    def test_line_center_is_midpoint(self):
        center = polygon_center([Coordinate(0, 0), Coordinate(0, 4)])
        assert center == Coordinate(0, 2)

    def test_vertex_mean_not_area_centroid(self):
        # Extra vertex on one edge pulls the vertex mean but not the area centroid
        square = [Coordinate(0, 0), Coordinate(0, 2), Coordinate(2, 2), Coordinate(2, 1), Coordinate(2, 0)]
        center = polygon_center(square)
        assert center.latitude == pytest.approx(1.2)
        assert center.longitude == pytest.approx(1.0)

    def test_empty_center_is_nan(self):
        center = polygon_center([])
        assert math.isnan(center.latitude)
        assert math.isnan(center.longitude)


class TestFindEnclosingBuilding:
    """Tests for resolving a point to a building."""

    def test_inside_returns_center(self, triangle_store):
        center = find_enclosing_building(Coordinate(1, 1), triangle_store.list_polygons())
        assert center is not None
        assert center.latitude == pytest.approx(1.0)
        assert center.longitude == pytest.approx(4 / 3)

    def test_outside_returns_none(self, triangle_store):
        assert find_enclosing_building(Coordinate(10, 10), triangle_store.list_polygons()) is None

    def test_first_match_wins_for_overlaps(self):
        big = make_building("Big", [(0, 0), (0, 10), (10, 10), (10, 0)])
        small = make_building("Small", [(0, 0), (0, 2), (2, 2), (2, 0)])
        point = Coordinate(1, 1)

        assert find_enclosing_polygon(point, [big, small]).name == "Big"
        assert find_enclosing_polygon(point, [small, big]).name == "Small"
        assert find_enclosing_building(point, [small, big]) == Coordinate(1, 1)

    def test_no_polygons(self):
        assert find_enclosing_building(Coordinate(0, 0), []) is None


class TestDistance:
    """Tests for haversine distance."""

    def test_same_point_is_zero(self):
        point = Coordinate(45.4953534, -73.578549)
        assert haversine_distance_km(point, point) == pytest.approx(0.0)

    def test_one_degree_of_latitude(self):
        distance = haversine_distance_km(Coordinate(0, 0), Coordinate(1, 0))
        assert distance == pytest.approx(2 * math.pi * 6371 / 360, rel=1e-9)

    def test_between_campuses(self):
        sgw = Coordinate(45.4953534, -73.578549)
        loyola = Coordinate(45.4582, -73.6405)
        distance = haversine_distance_km(sgw, loyola)
        assert 6.0 < distance < 6.5
        assert distance == pytest.approx(haversine_distance_km(loyola, sgw))

    def test_null_input_returns_sentinel(self):
        assert haversine_distance_km(None, Coordinate(1, 1)) == 9999
        assert haversine_distance_km(Coordinate(1, 1), None) == 9999
        assert settings.UNKNOWN_DISTANCE_KM == 9999

    def test_distance_km_reports_unknown_as_none(self):
        assert distance_km(None, Coordinate(1, 1)) is None
        assert distance_km(Coordinate(1, 1), None) is None
        assert distance_km(Coordinate(1, 1), Coordinate(1, 1)) == pytest.approx(0.0)


class TestCoordinate:
    """Tests for the coordinate value type."""

    def test_name_is_ignored_for_equality(self):
        assert Coordinate(1, 2, name="Hall") == Coordinate(1, 2)

    def test_to_dict(self):
        assert Coordinate(1, 2).to_dict() == {"latitude": 1, "longitude": 2}
        assert Coordinate(1, 2, name="Hall").to_dict()["name"] == "Hall"
