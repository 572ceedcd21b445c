"""Tests for the shape filters of C2 slopes."""

import pytest
import torch

MONOTONE_KINDS = ["c2_mp", "c2_mp2", "c2_hyman89"]


def _step_data():
    x = torch.arange(7, dtype=torch.float64)
    y = torch.tensor(
        [0.0, 0.1, 0.2, 5.0, 5.1, 5.2, 10.0], dtype=torch.float64
    )
    return x, y


class TestFilterSlope:
    def test_c2_leaves_slopes(self):
        from torchinterp.spline._cubic_pp._filter_slope import filter_slope

        y = torch.tensor([0.0, 1.0, 3.0, 2.0], dtype=torch.float64)
        dx = torch.ones(3, dtype=torch.float64)
        S = torch.tensor([1.0, 2.0, -1.0], dtype=torch.float64)
        b = torch.tensor([5.0, 10.0, 1.0, -7.0], dtype=torch.float64)

        filter_slope("c2", y, b, dx, S)

        torch.testing.assert_close(
            b, torch.tensor([5.0, 10.0, 1.0, -7.0], dtype=torch.float64)
        )

    def test_c2_mp_clamps(self):
        """Slopes are clamped to three times the smaller secant."""
        from torchinterp.spline._cubic_pp._filter_slope import filter_slope

        y = torch.tensor([0.0, 1.0, 3.0, 2.0], dtype=torch.float64)
        dx = torch.ones(3, dtype=torch.float64)
        S = torch.tensor([1.0, 2.0, -1.0], dtype=torch.float64)
        b = torch.tensor([5.0, 10.0, 1.0, -7.0], dtype=torch.float64)

        filter_slope("c2_mp", y, b, dx, S)

        torch.testing.assert_close(
            b, torch.tensor([3.0, 3.0, 0.0, -3.0], dtype=torch.float64)
        )

    def test_c2_mp2_clamps(self):
        """Interior slopes lie between minmod and the Huynh bound."""
        from torchinterp.spline._cubic_pp._filter_slope import filter_slope

        y = torch.tensor([0.0, 1.0, 3.0, 2.0], dtype=torch.float64)
        dx = torch.ones(3, dtype=torch.float64)
        S = torch.tensor([1.0, 2.0, -1.0], dtype=torch.float64)
        b = torch.tensor([5.0, 10.0, 1.0, -7.0], dtype=torch.float64)

        filter_slope("c2_mp2", y, b, dx, S)

        torch.testing.assert_close(
            b, torch.tensor([3.0, 2.0, 0.0, -3.0], dtype=torch.float64)
        )

    def test_c2_mp2_raises_small_slope_to_minmod(self):
        from torchinterp.spline._cubic_pp._filter_slope import filter_slope

        y = torch.tensor([0.0, 1.0, 3.0, 6.0], dtype=torch.float64)
        dx = torch.ones(3, dtype=torch.float64)
        S = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        b = torch.tensor([1.0, 0.5, 2.5, 3.0], dtype=torch.float64)

        filter_slope("c2_mp2", y, b, dx, S)

        torch.testing.assert_close(
            b, torch.tensor([1.0, 1.0, 2.5, 3.0], dtype=torch.float64)
        )

    def test_c2_hyman89(self):
        from torchinterp.spline._cubic_pp._filter_slope import filter_slope

        y = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
        dx = torch.ones(3, dtype=torch.float64)
        S = torch.ones(3, dtype=torch.float64)
        b = torch.tensor([4.0, 5.0, -1.0, 0.5], dtype=torch.float64)

        filter_slope("c2_hyman89", y, b, dx, S)

        torch.testing.assert_close(
            b, torch.tensor([3.0, 3.0, 0.0, 0.5], dtype=torch.float64)
        )

    def test_c2_hyman_non_negative(self):
        """Slopes keep each value on its own side of zero."""
        from torchinterp.spline._cubic_pp._filter_slope import filter_slope

        y = torch.tensor([1.0, 2.0, 0.0, -1.0], dtype=torch.float64)
        dx = torch.ones(3, dtype=torch.float64)
        S = torch.tensor([1.0, -2.0, -1.0], dtype=torch.float64)
        b = torch.tensor([-5.0, 10.0, 3.0, 4.0], dtype=torch.float64)

        filter_slope("c2_hyman_non_negative", y, b, dx, S)

        torch.testing.assert_close(
            b, torch.tensor([-3.0, 6.0, 0.0, 4.0], dtype=torch.float64)
        )

    def test_minmod(self):
        from torchinterp.spline._cubic_pp._filter_slope import minmod

        s = torch.tensor([1.0, -3.0, 2.0, 0.0], dtype=torch.float64)
        t = torch.tensor([2.0, -1.0, -2.0, 5.0], dtype=torch.float64)

        torch.testing.assert_close(
            minmod(s, t),
            torch.tensor([1.0, -1.0, 0.0, 0.0], dtype=torch.float64),
        )


class TestFilteredShape:
    def test_unfiltered_overshoots(self):
        """Without a filter the step data produces a decreasing stretch."""
        from torchinterp.spline import (
            cubic_pp_evaluate_derivative,
            cubic_pp_fit,
        )

        x, y = _step_data()
        spline = cubic_pp_fit(
            x, y, "first_difference", 0.0, "first_difference", 0.0, "c2"
        )
        t = torch.linspace(0, 6, 601, dtype=torch.float64)

        assert cubic_pp_evaluate_derivative(spline, t).min() < 0

    @pytest.mark.parametrize("kind", MONOTONE_KINDS)
    def test_monotone_data_stays_monotone(self, kind):
        from torchinterp.spline import (
            cubic_pp_evaluate,
            cubic_pp_evaluate_derivative,
            cubic_pp_fit,
        )

        x, y = _step_data()
        spline = cubic_pp_fit(x, y, kind=kind)
        t = torch.linspace(0, 6, 601, dtype=torch.float64)

        assert cubic_pp_evaluate_derivative(spline, t).min() >= -1e-12
        values = cubic_pp_evaluate(spline, t)
        assert torch.all(values[1:] - values[:-1] >= -1e-12)

    def test_non_negative_data_stays_non_negative(self):
        from torchinterp.spline import cubic_pp_evaluate, cubic_pp_fit

        x = torch.arange(7, dtype=torch.float64)
        y = torch.tensor(
            [0.0, 0.0, 0.0, 5.0, 0.0, 0.0, 0.0], dtype=torch.float64
        )
        t = torch.linspace(0, 6, 601, dtype=torch.float64)

        unfiltered = cubic_pp_fit(
            x, y, "first_difference", 0.0, "first_difference", 0.0, "c2"
        )
        filtered = cubic_pp_fit(x, y, kind="c2_hyman_non_negative")

        assert cubic_pp_evaluate(unfiltered, t).min() < 0
        assert cubic_pp_evaluate(filtered, t).min() >= -1e-12

    @pytest.mark.parametrize("kind", MONOTONE_KINDS)
    def test_filter_zeroes_slope_at_extremum(self, kind):
        from torchinterp.spline import cubic_pp_fit

        x = torch.arange(5, dtype=torch.float64)
        y = torch.tensor([0.0, 1.0, 0.0, 1.0, 0.0], dtype=torch.float64)

        spline = cubic_pp_fit(x, y, kind=kind)

        torch.testing.assert_close(
            spline.b[1:-1], torch.zeros(3, dtype=torch.float64)
        )
