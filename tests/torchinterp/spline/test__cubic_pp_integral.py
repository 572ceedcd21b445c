"""Tests for definite integrals of piecewise-cubic interpolants."""

import math

import pytest
import torch


class TestCubicPPIntegral:
    def test_linear_with_extension(self):
        """The linear extension is integrated outside the knots."""
        from torchinterp.spline import cubic_pp_integral, linear_cubic_pp_fit

        x = torch.tensor([0.0, 1.0], dtype=torch.float64)
        y = torch.tensor([0.0, 2.0], dtype=torch.float64)
        spline = linear_cubic_pp_fit(x, y)

        result = cubic_pp_integral(spline, -1.0, 2.0)

        torch.testing.assert_close(
            result, torch.tensor(3.0, dtype=torch.float64)
        )

    def test_reversed_bounds(self):
        from torchinterp.spline import cubic_pp_integral, linear_cubic_pp_fit

        x = torch.tensor([0.0, 1.0], dtype=torch.float64)
        y = torch.tensor([0.0, 2.0], dtype=torch.float64)
        spline = linear_cubic_pp_fit(x, y)

        result = cubic_pp_integral(spline, 2.0, -1.0)

        torch.testing.assert_close(
            result, torch.tensor(-3.0, dtype=torch.float64)
        )

    def test_equal_bounds(self):
        from torchinterp.spline import cubic_pp_fit, cubic_pp_integral

        x = torch.linspace(0, 1, 6, dtype=torch.float64)
        spline = cubic_pp_fit(x, torch.sin(x))

        result = cubic_pp_integral(spline, 0.4, 0.4)

        assert result.item() == 0.0

    def test_cubic_exact(self):
        """A clamped spline of x^3 integrates exactly."""
        from torchinterp.spline import cubic_pp_fit, cubic_pp_integral

        x = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
        y = x**3
        spline = cubic_pp_fit(
            x, y, "first_derivative", 0.0, "first_derivative", 27.0
        )

        result = cubic_pp_integral(spline, 0.5, 2.5)

        expected = (2.5**4 - 0.5**4) / 4
        torch.testing.assert_close(
            result,
            torch.tensor(expected, dtype=torch.float64),
            atol=1e-12,
            rtol=1e-12,
        )

    def test_sine(self):
        from torchinterp.spline import cubic_pp_fit, cubic_pp_integral

        x = torch.linspace(0, math.pi, 40, dtype=torch.float64)
        spline = cubic_pp_fit(x, torch.sin(x))

        result = cubic_pp_integral(spline, 0.0, math.pi)

        torch.testing.assert_close(
            result,
            torch.tensor(2.0, dtype=torch.float64),
            atol=1e-5,
            rtol=1e-5,
        )

    def test_matches_scipy(self):
        pytest.importorskip("scipy")
        from scipy.interpolate import CubicSpline as ScipyCubicSpline

        from torchinterp.spline import cubic_pp_fit, cubic_pp_integral

        x = torch.tensor(
            [0.0, 0.4, 1.1, 1.5, 2.3, 3.0], dtype=torch.float64
        )
        y = torch.cos(x)
        spline = cubic_pp_fit(x, y)
        reference = ScipyCubicSpline(x.numpy(), y.numpy())

        result = cubic_pp_integral(spline, 0.2, 2.7)

        torch.testing.assert_close(
            result,
            torch.tensor(reference.integrate(0.2, 2.7), dtype=torch.float64),
            atol=1e-10,
            rtol=1e-10,
        )
