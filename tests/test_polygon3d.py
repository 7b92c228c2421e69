import logging
import math

import pytest
from PyQt5.QtGui import QColor

from perspective3d.models import Point2D, Point3D, Polygon3D, View
## unit tests for perspective3d Polygon3D and its projection


def unit_square(z=0.0, color=None):
    return Polygon3D(
        [Point3D(-1, -1, z), Point3D(1, -1, z), Point3D(1, 1, z), Point3D(-1, 1, z)],
        color,
    )


def front_view(**kwargs):
    return View(Point3D(0, 0, -10), Point3D(0, 0, 0), **kwargs)


class TestPolygon3D:
    """construction and rigid transforms"""

    def test_default_color(self):
        color = unit_square().color
        assert (color.red(), color.green(), color.blue()) == (192, 192, 192)

    def test_rejects_non_points(self):
        with pytest.raises(TypeError):
            Polygon3D([Point3D(), (1, 2, 3)])

    def test_from_coords(self):
        poly = Polygon3D.from_coords([0, 1, 2], [3, 4, 5], [6, 7, 8], QColor(1, 2, 3))
        assert poly.points == [Point3D(0, 3, 6), Point3D(1, 4, 7), Point3D(2, 5, 8)]
        assert poly.color == QColor(1, 2, 3)

    def test_from_coords_mismatch(self):
        with pytest.raises(ValueError):
            Polygon3D.from_coords([0, 1], [0, 1, 2], [0, 1])

    def test_transforms_keep_order_and_color(self):
        color = QColor(10, 20, 30)
        poly = unit_square(color=color)
        for moved in (
            poly.translate(1, 2, 3),
            poly.rot_about_x(0.4),
            poly.rot_about_y(0.4),
            poly.rot_about_z(0.4),
        ):
            assert moved.color == color
            assert len(moved.points) == 4
        assert poly.translate(1, 2, 3).points[2] == Point3D(2, 3, 3)
        assert poly.rot_about_z(math.pi).points[0].get_coords() == pytest.approx(
            (1, 1, 0), abs=1e-12
        )
        # original unchanged
        assert poly.points[0] == Point3D(-1, -1, 0)

    def test_center(self):
        assert unit_square(z=4).get_center() == pytest.approx((0, 0, 4))


class TestProjection:
    """3D to 2D projection pipeline"""

    def test_front_square(self):
        color = QColor(50, 60, 70)
        projection = unit_square(color=color).get_projection(front_view())
        # every vertex is 10 units in front of the eye
        m = 700.0 / 710.0
        expected = [
            (250 - m, 250 - m),
            (250 + m, 250 - m),
            (250 + m, 250 + m),
            (250 - m, 250 + m),
        ]
        for actual, wanted in zip(projection.get_coords(), expected):
            assert actual == pytest.approx(wanted)
        assert projection.priority == pytest.approx(10.0)
        assert projection.incline == pytest.approx(0.0)
        assert projection.color == color
        assert projection.highlighted is False

    def test_front_square_is_symmetric_about_center(self):
        projection = unit_square().get_projection(front_view())
        xs = [x for x, _ in projection.get_coords()]
        ys = [y for _, y in projection.get_coords()]
        assert sum(xs) / 4 == pytest.approx(250.0)
        assert sum(ys) / 4 == pytest.approx(250.0)

    def test_truncated_vertices(self):
        polygon = unit_square().get_projection(front_view()).to_qpolygon()
        points = [polygon.point(i) for i in range(polygon.size())]
        assert [(p.x(), p.y()) for p in points] == [
            (249, 249),
            (250, 249),
            (250, 250),
            (249, 250),
        ]

    def test_focal_length_scales(self):
        near = unit_square().get_projection(front_view(focal_length=10.0))
        # m = 10 / (10 + 10)
        assert near.get_coords()[0] == pytest.approx((249.5, 249.5))

    def test_viewport_center(self):
        projection = unit_square().get_projection(front_view(width=301, height=200))
        xs = [x for x, _ in projection.get_coords()]
        ys = [y for _, y in projection.get_coords()]
        # integer half of the viewport
        assert sum(xs) / 4 == pytest.approx(150.0)
        assert sum(ys) / 4 == pytest.approx(100.0)

    def test_near_plane_cull(self):
        # aligned depth -10 for every vertex
        projection = unit_square(z=-20).get_projection(front_view())
        assert projection.points == []
        assert projection.priority == 0
        assert projection.incline == 0

    def test_single_vertex_behind_culls_whole_polygon(self):
        poly = Polygon3D([Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, -16)])
        assert poly.get_projection(front_view()).is_empty()

    def test_near_plane_boundary_kept(self):
        # aligned depth exactly -5 is not culled
        projection = unit_square(z=-15).get_projection(front_view())
        assert len(projection.points) == 4
        assert projection.priority == pytest.approx(-5.0)

    def test_incline_and_tie_break(self):
        # aligned z: 10, 14, 10; the minimum tie goes to the later vertex
        poly = Polygon3D([Point3D(0, 0, 0), Point3D(3, 0, 4), Point3D(0, 3, 0)])
        projection = poly.get_projection(front_view())
        assert projection.incline == pytest.approx(4.0 / math.sqrt(18.0))
        assert projection.priority == pytest.approx(34.0 / 3.0)

    def test_incline_zero_for_parallel_polygon(self):
        projection = unit_square(z=7).get_projection(front_view())
        assert projection.incline == 0.0

    def test_side_view(self):
        # looking along +y: the square in the z=0 plane is seen edge-on
        view = View(Point3D(0, -10, 0), Point3D(0, 0, 0))
        projection = unit_square().get_projection(view)
        assert projection.priority == pytest.approx(10.0)
        assert math.isinf(projection.incline) or projection.incline > 1e6

    def test_roll_rotates_about_center(self):
        base = unit_square().get_projection(front_view())
        rolled = unit_square().get_projection(front_view(turn_angle=math.pi / 2))
        expected = base.rotate(math.pi / 2, Point2D(250, 250))
        for actual, wanted in zip(rolled.get_coords(), expected.get_coords()):
            assert actual == pytest.approx(wanted)
        assert rolled.get_coords()[0] != pytest.approx(base.get_coords()[0])

    def test_degenerate_view_propagates_nan(self, caplog):
        view = View(Point3D(1, 2, 3), Point3D(1, 2, 3))
        with caplog.at_level(logging.WARNING):
            projection = unit_square(z=5).get_projection(view)
        assert all(math.isnan(x) and math.isnan(y) for x, y in projection.get_coords())
        assert any("eye == target" in r.getMessage() for r in caplog.records)

    def test_nearly_coincident_view_is_not_degenerate(self, caplog):
        view = View(Point3D(0, 0, 0), Point3D(0, 0, 1e-10))
        with caplog.at_level(logging.WARNING):
            projection = unit_square(z=5).get_projection(view)
        assert all(math.isfinite(v) for xy in projection.get_coords() for v in xy)
        assert not any("eye == target" in r.getMessage() for r in caplog.records)

    def test_perspective_singularity_propagates(self):
        # aligned z = -2 and focal length 2: divisor is zero
        projection = unit_square(z=-12).get_projection(front_view(focal_length=2.0))
        assert len(projection.points) == 4
        assert not any(math.isfinite(v) for xy in projection.get_coords() for v in xy)

    def test_empty_polygon(self):
        assert Polygon3D([]).get_projection(front_view()).is_empty()
