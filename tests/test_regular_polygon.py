"""정다각형 꼭짓점 생성 테스트."""

import math

import numpy as np
import pytest

from regular_polygon import (
    InvalidInputError,
    Vertex,
    generate_polygon_points,
    validate_offset,
    validate_size,
    vertex_angles,
)


def _angles(vertices, center):
    cx, cy = center
    return [math.atan2(y - cy, x - cx) for x, y in vertices]


class TestGeneratePolygonPoints:
    @pytest.mark.parametrize("n", [3, 4, 5, 6, 8, 12, 100, 2000])
    def test_vertex_count(self, n):
        assert len(generate_polygon_points(n, 10.0)) == n

    @pytest.mark.parametrize("n, size", [(3, 1.0), (5, 100), (7, 0.5), (64, 350.0)])
    def test_vertices_on_circumcircle(self, n, size):
        center = (500.0, 400.0)
        for x, y in generate_polygon_points(n, size, center=center):
            assert math.hypot(x - center[0], y - center[1]) == pytest.approx(size)

    @pytest.mark.parametrize("n", [3, 4, 5, 9, 360])
    def test_equal_angular_steps(self, n):
        vertices = generate_polygon_points(n, 50.0)
        angles = _angles(vertices, (0.0, 0.0))
        steps = [
            (angles[(i + 1) % n] - angles[i]) % (2 * math.pi) for i in range(n)
        ]
        for step in steps:
            assert step == pytest.approx(2 * math.pi / n)
        assert sum(steps) == pytest.approx(2 * math.pi)

    def test_deterministic(self):
        assert generate_polygon_points(7, 123.4) == generate_polygon_points(7, 123.4)

    def test_square_is_regular(self):
        square = generate_polygon_points(4, 10.0)
        sides = [
            math.dist(square[i], square[(i + 1) % 4]) for i in range(4)
        ]
        assert sides == pytest.approx([10.0 * math.sqrt(2)] * 4)
        diagonals = [math.dist(square[0], square[2]), math.dist(square[1], square[3])]
        assert diagonals == pytest.approx([20.0, 20.0])

    def test_default_orientation_points_up(self):
        """첫 꼭짓점은 중심 바로 위에 있습니다 (이미지 y는 아래로 증가)."""
        first = generate_polygon_points(5, 100.0, center=(500.0, 500.0))[0]
        assert first.x == pytest.approx(500.0)
        assert first.y == pytest.approx(400.0)

    def test_offset_rotates(self):
        first = generate_polygon_points(4, 10.0, offset_deg=0.0)[0]
        assert first == pytest.approx((10.0, 0.0))

    def test_returns_vertex_tuples(self):
        v = generate_polygon_points(3, 1.0)[0]
        assert isinstance(v, Vertex)
        assert isinstance(v.x, float)

    def test_numpy_integer_sides(self):
        assert len(generate_polygon_points(np.int64(6), 5.0)) == 6

    @pytest.mark.parametrize("n", [2, 1, 0, -3])
    def test_too_few_sides_raises(self, n):
        with pytest.raises(InvalidInputError, match="at least 3 sides"):
            generate_polygon_points(n, 10.0)

    @pytest.mark.parametrize("n", [3.5, "5", True])
    def test_non_integer_sides_raises(self, n):
        with pytest.raises(InvalidInputError, match="integer"):
            generate_polygon_points(n, 10.0)

    @pytest.mark.parametrize("size", [0, 0.0, -1, -100.5])
    def test_non_positive_size_raises(self, size):
        with pytest.raises(InvalidInputError, match="positive"):
            generate_polygon_points(5, size)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            generate_polygon_points(2, 10.0)


class TestValidateSize:
    def test_numeric_string(self):
        assert validate_size("12.5") == 12.5

    @pytest.mark.parametrize("size", ["abc", None, float("nan"), float("inf")])
    def test_rejects_non_numbers(self, size):
        with pytest.raises(InvalidInputError):
            validate_size(size)


class TestVertexAngles:
    def test_square_default_offset(self):
        assert vertex_angles(4) == [270.0, 0.0, 90.0, 180.0]

    def test_octagon_offset(self):
        angles = vertex_angles(8, offset_deg=22.5)
        assert angles[0] == pytest.approx(22.5)
        assert angles[-1] == pytest.approx(337.5)

    def test_range(self):
        for angle in vertex_angles(7, offset_deg=-400.0):
            assert 0.0 <= angle < 360.0


class TestValidateOffset:
    def test_numeric(self):
        assert validate_offset("22.5") == 22.5

    @pytest.mark.parametrize("offset", [float("nan"), float("inf"), -float("inf"), "abc", None])
    def test_rejects_non_finite(self, offset):
        with pytest.raises(InvalidInputError, match="offset"):
            validate_offset(offset)

    def test_generator_rejects_nan_offset(self):
        with pytest.raises(InvalidInputError, match="offset"):
            generate_polygon_points(5, 100.0, offset_deg=float("nan"))

    def test_vertex_angles_rejects_inf_offset(self):
        with pytest.raises(InvalidInputError, match="offset"):
            vertex_angles(5, offset_deg=float("inf"))
