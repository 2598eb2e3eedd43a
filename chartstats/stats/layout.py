"""Provide point layouts for categorical swarm and strip plots."""

from __future__ import annotations

import math
import warnings
from typing import Dict, List, Optional, Sequence

import numpy as np

BEESWARM_SPACING = 2.2
BEESWARM_STEP = 0.8
BEESWARM_MAX_STEPS = 10_000
BEESWARM_MAX_TOTAL_STEPS = 1_000_000

_CANDIDATE_CHUNK = 64


def _candidate_positions(category_index: float, step: float, count: int) -> np.ndarray:
    """Sideways positions after 0 .. ``count`` steps: centre, +1, -2, +3, ... steps."""
    # cumsum adds sequentially, so offsets equal repeated ``offset += step``
    offsets = np.cumsum(np.full(count, step, dtype=float))
    signs = np.where(np.arange(count) % 2 == 0, 1.0, -1.0)
    centre = float(category_index)
    return np.concatenate(([centre], centre + offsets * signs))


def _first_free(candidates: np.ndarray, starts: np.ndarray, reach: np.ndarray) -> int:
    """Index of the first candidate outside every open blocked interval, or -1.

    ``starts`` are interval starts in ascending order and ``reach`` the running
    maximum of the matching interval ends.
    """
    pos = 0
    size = _CANDIDATE_CHUNK
    while pos < len(candidates):
        chunk = candidates[pos : pos + size]
        idx = np.searchsorted(starts, chunk, side="left")
        blocked = (idx > 0) & (reach[np.maximum(idx - 1, 0)] > chunk)
        free = np.flatnonzero(~blocked)
        if free.size:
            return pos + int(free[0])
        pos += size
        size *= 4
    return -1


def beeswarm_layout(
    values: Sequence[float],
    category_index: float,
    radius: float = 3,
    max_steps: int = BEESWARM_MAX_STEPS,
    max_total_steps: int = BEESWARM_MAX_TOTAL_STEPS,
) -> List[Dict[str, float]]:
    """Place points along a category axis without overlaps.

    Points are processed in ascending value order. Each starts at
    ``(category_index, value)`` and, while any already placed point is closer
    than ``radius * 2.2``, is displaced sideways by growing multiples of
    ``radius * 0.8``, alternating right and left.

    Args:
        values (Sequence[float]): Values giving each point's ``y`` position.
        category_index (float): Centre of the category on the ``x`` axis.
        radius (float, optional): Marker radius in axis units. Defaults to
            ``3``.
        max_steps (int, optional): Displacement steps tried per point before
            giving up. Defaults to ``10_000``.
        max_total_steps (int, optional): Displacement steps shared by the whole
            call. Defaults to ``1_000_000``.

    Returns:
        list[dict[str, float]]: Records ``{"x", "y", "value"}`` in ascending
        value order.

    Note:
        The packing is greedy and order dependent, not optimal. Only placed
        points within ``radius * 2.2`` vertically are checked, each blocking
        an open interval of candidate ``x`` positions, so a point costs
        ``O((k + s) log k)`` for ``k`` nearby points and ``s`` steps. Points
        that exhaust ``max_steps``, or arrive after ``max_total_steps`` is
        spent (roughly 850 coincident values at the defaults), keep
        their last candidate position, which may overlap, and a
        ``RuntimeWarning`` is issued once per call.
    """
    sorted_values = np.sort(np.asarray(values, dtype=float))
    n = int(sorted_values.size)
    min_distance = radius * BEESWARM_SPACING
    step = radius * BEESWARM_STEP

    # k nearby points block at most about 7.5 * k candidates
    needed = 2 * n * math.ceil(BEESWARM_SPACING / BEESWARM_STEP + 1) + 2
    candidates = _candidate_positions(
        category_index, step, max(0, min(int(max_steps), int(max_total_steps), needed))
    )

    placed_x = np.empty(n, dtype=float)
    placed_y = np.empty(n, dtype=float)
    positions: List[Dict[str, float]] = []
    steps_left = max(int(max_total_steps), 0)
    capped = 0

    for i, value in enumerate(sorted_values.tolist()):
        budget = max(0, min(int(max_steps), steps_left, len(candidates) - 1))
        lo = int(np.searchsorted(placed_y[:i], value - min_distance, side="right"))
        dy = value - placed_y[lo:i]
        near = np.abs(dy) < min_distance

        chosen = 0
        if np.any(near):
            half_width = np.sqrt(np.maximum(min_distance**2 - dy[near] ** 2, 0.0))
            centres = placed_x[lo:i][near]
            order = np.argsort(centres - half_width, kind="stable")
            starts = (centres - half_width)[order]
            reach = np.maximum.accumulate((centres + half_width)[order])
            chosen = _first_free(candidates[: budget + 1], starts, reach)
            if chosen < 0:
                chosen = budget
                capped += 1
        steps_left -= chosen

        x = float(candidates[chosen])
        placed_x[i] = x
        placed_y[i] = value
        positions.append({"x": x, "y": value, "value": value})

    if capped:
        warnings.warn(
            f"Beeswarm placement ran out of steps for {capped} point(s); "
            "those points may overlap.",
            RuntimeWarning,
            stacklevel=2,
        )

    return positions


def add_jitter(
    category_index: float,
    count: int,
    jitter_amount: float = 0.3,
    rng: Optional[np.random.Generator] = None,
) -> List[float]:
    """Uniform horizontal jitter around a category centre for strip plots.

    Returns ``count`` independent draws of
    ``category_index + (U(0, 1) - 0.5) * jitter_amount``. Pass a seeded
    ``numpy.random.Generator`` for reproducible output.
    """
    if rng is None:
        rng = np.random.default_rng()
    draws = rng.random(max(int(count), 0))
    return (category_index + (draws - 0.5) * jitter_amount).tolist()
