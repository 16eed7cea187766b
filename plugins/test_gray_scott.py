#!/usr/bin/env python3
"""
Tests for the Gray-Scott stepper and grid store.

Verifies:
1. Interior update matches the closed-form Euler formulas
2. Border cells never change under stepping
3. Hand-computed 4x4 scenario
4. Pure diffusion does not blow up (stencil sign)
5. Reads come from the old fields only (no in-place leakage)
"""

import numpy as np
import pytest

from reaction_diffusion.errors import ConfigurationError
from reaction_diffusion.gray_scott import GrayScott
from reaction_diffusion.grid import GridState

F, K, DT = 0.03, 0.06, 0.05


def _reference_step(A, B, feed, kill, dt):
    """Cell-by-cell evaluation of the update rule (float64)."""
    A = A.astype(np.float64)
    B = B.astype(np.float64)
    nA, nB = A.copy(), B.copy()
    h, w = A.shape
    for y in range(1, h - 1):
        for x in range(1, w - 1):
            a, b = A[y, x], B[y, x]
            lap_a = A[y, x - 1] + A[y, x + 1] + A[y - 1, x] + A[y + 1, x] - 4 * a
            lap_b = B[y, x - 1] + B[y, x + 1] + B[y - 1, x] + B[y + 1, x] - 4 * b
            r = a * b * b
            nA[y, x] = a + dt * (lap_a - r + feed * (1 - a))
            nB[y, x] = b + dt * (lap_b + r - (feed + kill) * b)
    return nA, nB


def test_step_matches_formula():
    """Every interior cell follows the explicit Euler update."""
    rng = np.random.default_rng(7)
    state = GridState(12, 9)
    state.load(rng.random((9, 12)), rng.random((9, 12)))
    expected_a, expected_b = _reference_step(state.a, state.b, F, K, DT)

    GrayScott(feed=F, kill=K, dt=DT).step(state)

    np.testing.assert_allclose(state.a, expected_a, atol=1e-5)
    np.testing.assert_allclose(state.b, expected_b, atol=1e-5)


def test_border_is_frozen():
    """Outer ring keeps its seeded values over many steps."""
    rng = np.random.default_rng(3)
    state = GridState(16, 16)
    state.load(rng.random((16, 16)), rng.random((16, 16)))
    border = state.border_mask()
    a0 = state.a[border].copy()
    b0 = state.b[border].copy()

    gs = GrayScott(feed=F, kill=K, dt=DT)
    for _ in range(50):
        gs.step(state)

    assert np.array_equal(state.a[border], a0), "A border changed"
    assert np.array_equal(state.b[border], b0), "B border changed"


def test_four_by_four_scenario():
    """4x4 grid, A=1 everywhere, B=1 at one interior cell, one step."""
    state = GridState(4, 4)
    state.fill(1.0, 0.0)
    state.set(1, 1, 1.0, 1.0)

    GrayScott(feed=F, kill=K, dt=DT).step(state)

    # (1,1): lapA=0, lapB=-4, reaction=1
    #   A = 1 + 0.05*(0 - 1 + 0)          = 0.95
    #   B = 1 + 0.05*(-4 + 1 - 0.09)      = 0.8455
    # (2,1), (1,2): lapB=1, no reaction -> A=1, B=0.05
    # (2,2): diagonal to the B cell -> unchanged
    expected = {
        (1, 1): (0.95, 0.8455),
        (2, 1): (1.0, 0.05),
        (1, 2): (1.0, 0.05),
        (2, 2): (1.0, 0.0),
    }
    for (x, y), (ea, eb) in expected.items():
        a, b = state.get(x, y)
        assert a == pytest.approx(ea, abs=1e-5), f"A at {(x, y)}: {a}"
        assert b == pytest.approx(eb, abs=1e-5), f"B at {(x, y)}: {b}"


def test_pure_diffusion_does_not_diverge():
    """With F=K=0 and no noise, A+B obeys a maximum principle."""
    rng = np.random.default_rng(11)
    state = GridState(24, 24)
    state.load(rng.random((24, 24)), rng.random((24, 24)))
    total_max = float((state.a + state.b).max())

    gs = GrayScott(feed=0.0, kill=0.0, dt=DT)
    for _ in range(300):
        gs.step(state)

    assert np.isfinite(state.a).all() and np.isfinite(state.b).all()
    assert state.a.min() >= -1e-6, f"A went negative: {state.a.min()}"
    assert state.b.min() >= -1e-6, f"B went negative: {state.b.min()}"
    assert float((state.a + state.b).max()) <= total_max + 1e-4


def test_update_reads_old_values_only():
    """A single B spike spreads to direct neighbours only after one step."""
    state = GridState(7, 7)
    state.fill(0.0, 0.0)
    state.set(3, 3, 0.0, 1.0)

    GrayScott(feed=0.0, kill=0.0, dt=DT).step(state)

    # An in-place sweep would carry the spike further along the scan order
    assert state.get(4, 3)[1] == pytest.approx(DT)
    assert state.get(3, 4)[1] == pytest.approx(DT)
    assert state.get(5, 3)[1] == 0.0
    assert state.get(3, 5)[1] == 0.0
    assert state.get(4, 4)[1] == 0.0


def test_tiny_grid_has_no_interior():
    """Grids without interior cells step without error and stay put."""
    state = GridState(2, 2)
    state.set(0, 0, 0.3, 0.7)
    GrayScott().step(state)
    assert state.get(0, 0) == pytest.approx((0.3, 0.7))


def test_grid_rejects_bad_dimensions():
    with pytest.raises(ConfigurationError):
        GridState(0, 10)
    with pytest.raises(ConfigurationError):
        GridState(10, -1)


def test_grid_accessors():
    state = GridState(5, 3)
    assert state.shape == (3, 5)
    assert (state.width, state.height) == (5, 3)
    state.set(4, 2, 0.25, 0.5)
    assert state.get(4, 2) == (0.25, 0.5)
    with pytest.raises(IndexError):
        state.get(5, 0)
    with pytest.raises(ConfigurationError):
        state.load(np.zeros((5, 3)), np.zeros((5, 3)))


def test_commit_copies_whole_grid():
    state = GridState(4, 4)
    state.next_a[:] = 0.5
    state.next_b[:] = 0.25
    state.commit()
    assert np.all(state.a == 0.5)
    assert np.all(state.b == 0.25)


def test_set_params():
    gs = GrayScott()
    gs.set_params(feed=0.05, dt=0.1)
    assert gs.get_params() == {"feed": 0.05, "kill": 0.06, "dt": 0.1}


def test_border_written_by_fill_and_set_survives_step():
    """Cells written with fill/set keep their values through a step."""
    state = GridState(6, 6)
    state.fill(0.5, 0.5)
    state.set(0, 0, 0.2, 0.8)
    state.set(5, 3, 0.9, 0.1)
    border = state.border_mask()
    a0 = state.a[border].copy()
    b0 = state.b[border].copy()

    gs = GrayScott(feed=F, kill=K, dt=DT)
    for _ in range(3):
        gs.step(state)

    assert np.array_equal(state.a[border], a0), "A border changed"
    assert np.array_equal(state.b[border], b0), "B border changed"
    assert state.get(0, 0) == pytest.approx((0.2, 0.8))
