"""Tests for pure curve math."""

from app.curve.bezier import (
    cubic_bezier,
    denormalize_day,
    energy_from_y,
    lerp,
    nearest_index,
    normalize,
    sample_segment,
)


class TestNormalize:
    def test_corners(self):
        assert normalize(1, 1, 28) == (0.0, 0.0)
        assert normalize(28, 5, 28) == (1.0, 1.0)

    def test_mid(self):
        x, y = normalize(15, 3, 29)
        assert x == 0.5
        assert y == 0.5

    def test_degenerate_cycle(self):
        assert normalize(1, 1, 1) == (0.0, 0.0)

    def test_denormalize_inverse(self):
        x, _ = normalize(11, 1, 30)
        assert abs(denormalize_day(x, 30) - 11) < 1e-9


class TestCubicBezier:
    P0 = (0.0, 0.0)
    C1 = (0.2, 0.0)
    C2 = (0.6, 0.5)
    P3 = (1.0, 1.0)

    def test_endpoints_exact(self):
        assert cubic_bezier(0.0, self.P0, self.C1, self.C2, self.P3) == self.P0
        assert cubic_bezier(1.0, self.P0, self.C1, self.C2, self.P3) == self.P3

    def test_midpoint(self):
        x, y = cubic_bezier(0.5, self.P0, self.C1, self.C2, self.P3)
        # 0.375 * C1 + 0.375 * C2 + 0.125 * P3
        assert abs(x - (0.375 * 0.2 + 0.375 * 0.6 + 0.125)) < 1e-12
        assert abs(y - (0.375 * 0.5 + 0.125)) < 1e-12

    def test_sample_count(self):
        assert len(sample_segment(self.P0, self.C1, self.C2, self.P3, 100)) == 101
        assert len(sample_segment(self.P0, self.C1, self.C2, self.P3, 100, include_start=False)) == 100

    def test_skipping_start(self):
        samples = sample_segment(self.P0, self.C1, self.C2, self.P3, 10, include_start=False)
        assert samples[0] != self.P0
        assert samples[-1] == self.P3


class TestLerp:
    def test_fraction(self):
        assert lerp((0.0, 0.0), (1.0, 2.0), 0.3) == (0.3, 0.6)


class TestEnergyFromY:
    def test_scale(self):
        assert energy_from_y(0.0) == 1
        assert energy_from_y(0.5) == 3
        assert energy_from_y(1.0) == 5

    def test_half_rounds_up(self):
        # y = 0.125 → 1.5
        assert energy_from_y(0.125) == 2

    def test_clamped(self):
        assert energy_from_y(-0.4) == 1
        assert energy_from_y(1.3) == 5


class TestNearestIndex:
    def test_exact(self):
        xs = [0.0, 0.25, 0.5, 0.75, 1.0]
        assert nearest_index(xs, 3, 5) == 2

    def test_tie_goes_to_later(self):
        xs = [0.0, 0.5, 1.0]
        # days 1, 2, 3 → target 1.5 sits between the first two
        assert nearest_index(xs, 1.5, 3) == 1
