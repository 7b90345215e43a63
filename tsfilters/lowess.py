"""Locally weighted scatterplot smoothing (LOWESS) with robustness iterations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["LowessResult", "lowess"]


@dataclass(frozen=True)
class LowessResult:
    """Smoothed values, residuals and robustness weights of a lowess fit."""

    fitted: tuple[float, ...]
    residuals: tuple[float, ...]
    robustness_weights: tuple[float, ...]


def _square(v: float) -> float:
    return v * v


def _cube(v: float) -> float:
    return v * v * v


def _update_neighborhood(
    x: Sequence[float], i: int, nleft: int, nright: int
) -> tuple[int, int]:
    """Slide the window right while doing so shrinks its radius around x[i]."""
    n = len(x)
    while nright < n - 1:
        if x[i] - x[nleft] <= x[nright + 1] - x[i]:
            break
        nleft += 1
        nright += 1
    return nleft, nright


def _local_fit(
    x: Sequence[float],
    y: Sequence[float],
    i: int,
    nleft: int,
    nright: int,
    resid_weights: Sequence[float] | None,
) -> float | None:
    """Weighted local linear fit at x[i], or None when every weight is zero."""
    current = x[i]
    h = max(current - x[nleft], x[nright] - current)
    h9 = 0.999 * h
    h1 = 0.001 * h

    weights: list[float] = []
    total = 0.0
    for j in range(nleft, len(x)):
        r = abs(x[j] - current)
        if r <= h9:
            w = 1.0 if r <= h1 else _cube(1.0 - _cube(r / h))
            if resid_weights is not None:
                w = resid_weights[j] * w
            total += w
            weights.append(w)
        elif x[j] > current:
            break
        else:
            weights.append(0.0)

    if total <= 0.0:
        return None

    weights = [w / total for w in weights]
    stop = nleft + len(weights)
    xw = x[nleft:stop]
    yw = y[nleft:stop]

    if h > 0.0:
        spread = x[-1] - x[0]
        center = 0.0
        for w, xj in zip(weights, xw):
            center += w * xj
        slope = current - center
        sqdev = 0.0
        for w, xj in zip(weights, xw):
            sqdev += w * (xj - center) * (xj - center)
        if math.sqrt(sqdev) > 0.001 * spread:
            slope = slope / sqdev
            weights = [w * (1.0 + slope * (xj - center)) for w, xj in zip(weights, xw)]

    fitted = 0.0
    for w, yj in zip(weights, yw):
        fitted += w * yj
    return fitted


def _interpolate_skipped(
    x: Sequence[float], i: int, last: int, fitted: list[float]
) -> None:
    denom = x[i] - x[last]
    for j in range(last + 1, i):
        alpha = (x[j] - x[last]) / denom
        fitted[j] = alpha * fitted[i] + (1.0 - alpha) * fitted[last]


def _advance(
    x: Sequence[float], delta: float, i: int, fitted: list[float]
) -> tuple[int, int]:
    """Return the next index to fit and the last index now holding a fit."""
    n = len(x)
    last = i
    cut = x[last] + delta
    beyond = n
    for j in range(last + 1, n):
        if x[j] > cut:
            beyond = j
            break
        if x[j] == x[last]:
            fitted[j] = fitted[last]
            last = j
    return max(last + 1, beyond - 1), last


def _robustness_weights(residuals: Sequence[float]) -> list[float]:
    n = len(residuals)
    magnitudes = sorted(abs(r) for r in residuals)
    m1 = n // 2
    cmad = 3.0 * (magnitudes[m1] + magnitudes[m1 - 1])
    c9 = 0.999 * cmad
    c1 = 0.001 * cmad

    weights = []
    for res in residuals:
        r = abs(res)
        if r <= c1:
            weights.append(1.0)
        elif r > c9:
            weights.append(0.0)
        else:
            weights.append(_square(1.0 - _square(r / cmad)))
    return weights


def lowess(x, y, frac, nsteps=2, delta=0.0) -> LowessResult:
    """Smooth y against ascending x.

    frac is the share of points in each local regression (at least two are
    used), nsteps the number of robustness iterations, and points within
    delta of the last fitted x are interpolated instead of fitted.
    """
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    n = len(xs)
    if n != len(ys):
        raise ValueError("x and y must have the same length")
    if n == 0:
        raise ValueError("lowess needs at least one point")
    if nsteps < 0:
        raise ValueError("nsteps must not be negative")

    if n < 2:
        return LowessResult((ys[0],), (0.0,), (0.0,))

    ns = max(min(int(frac * n), n), 2)
    fitted = [0.0] * n
    resid_weights = [0.0] * n
    residuals = [0.0] * n

    for iteration in range(1, nsteps + 2):
        nleft, nright = 0, ns - 1
        last = -1
        i = 0
        while True:
            nleft, nright = _update_neighborhood(xs, i, nleft, nright)
            value = _local_fit(
                xs, ys, i, nleft, nright, resid_weights if iteration > 1 else None
            )
            fitted[i] = ys[i] if value is None else value
            if last < i - 1:
                _interpolate_skipped(xs, i, last, fitted)
            i, last = _advance(xs, delta, i, fitted)
            if last >= n - 1:
                break

        residuals = [yv - fv for yv, fv in zip(ys, fitted)]
        if iteration > nsteps:
            break
        resid_weights = _robustness_weights(residuals)

    return LowessResult(tuple(fitted), tuple(residuals), tuple(resid_weights))