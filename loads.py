"""Analytic load primitives acting along the beam axis.

Every load is an immutable value object from a closed set of four variants.
The evaluators (``pressure_at``, ``shear_at``, ``moment_at``) accept a scalar
coordinate or a numpy array of coordinates and return numpy values of the same
shape.

Sign convention: positive pressure acts along the beam's local up axis,
``shear(x) = -integral(pressure, 0, x)`` and ``moment(x) = integral(shear, 0, x)``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.polynomial import polynomial as P


def _check_extent(lower: float, upper: float) -> None:
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise ValueError(f"Load edges must be finite, got [{lower}, {upper}]")
    if lower > upper:
        raise ValueError(f"lower_edge must not exceed upper_edge, got [{lower}, {upper}]")


def _freeze_coefficients(coefficients: Sequence[float]) -> Tuple[float, ...]:
    coeffs = tuple(float(c) for c in coefficients)
    if not coeffs:
        raise ValueError("Polynomial load needs at least one coefficient")
    return coeffs


@dataclass(frozen=True)
class PointForce:
    point: float  # Position along beam [m]
    force: float  # [N], positive along up

    def __post_init__(self) -> None:
        _check_extent(self.point, self.point)

    @property
    def lower_edge(self) -> float:
        return self.point

    @property
    def upper_edge(self) -> float:
        return self.point


@dataclass(frozen=True)
class PointMoment:
    point: float  # Position along beam [m]
    moment: float  # [N·m]

    def __post_init__(self) -> None:
        _check_extent(self.point, self.point)

    @property
    def lower_edge(self) -> float:
        return self.point

    @property
    def upper_edge(self) -> float:
        return self.point


@dataclass(frozen=True)
class PolynomialForce:
    """Distributed force with pressure ``sum(c[i] * t**i)``, ``t = x - lower_edge``."""

    lower_edge: float  # [m]
    upper_edge: float  # [m]
    coefficients: Tuple[float, ...]  # [N/m^(i+1)]

    def __post_init__(self) -> None:
        _check_extent(self.lower_edge, self.upper_edge)
        object.__setattr__(self, "coefficients", _freeze_coefficients(self.coefficients))

    @property
    def span(self) -> float:
        return self.upper_edge - self.lower_edge


@dataclass(frozen=True)
class PolynomialMoment:
    """Distributed pure moment; the moment is ``sum(c[i] * t**i)`` from ``lower_edge`` on."""

    lower_edge: float  # [m]
    upper_edge: float  # [m]
    coefficients: Tuple[float, ...]  # [N·m/m^i]

    def __post_init__(self) -> None:
        _check_extent(self.lower_edge, self.upper_edge)
        object.__setattr__(self, "coefficients", _freeze_coefficients(self.coefficients))

    @property
    def span(self) -> float:
        return self.upper_edge - self.lower_edge


Load = Union[PointForce, PointMoment, PolynomialForce, PolynomialMoment]


def is_force(load: Load) -> bool:
    return isinstance(load, (PointForce, PolynomialForce))


def _shear_poly(coefficients: Tuple[float, ...], t):
    return -P.polyval(t, P.polyint(coefficients))


def _moment_poly(coefficients: Tuple[float, ...], t):
    return -P.polyval(t, P.polyint(coefficients, 2))


def pressure_at(load: Load, x, resolution: float):
    """Force per unit length at ``x``.

    Point forces are spread over one sample bin of width ``resolution``; the
    bin is half-open so a load between two samples is picked up exactly once.
    """
    x = np.asarray(x, dtype=float)
    match load:
        case PointForce(point=p, force=f):
            if resolution <= 0:
                raise ValueError(f"resolution must be positive, got {resolution}")
            offset = x - p
            hit = (offset >= -0.5 * resolution) & (offset < 0.5 * resolution)
            return np.where(hit, f / resolution, 0.0)
        case PolynomialForce(lower_edge=a, upper_edge=b, coefficients=c):
            inside = (x >= a) & (x <= b)
            return np.where(inside, P.polyval(x - a, c), 0.0)
        case PointMoment() | PolynomialMoment():
            return np.zeros_like(x)
    raise TypeError(f"Unsupported load type: {type(load).__name__}")


def shear_at(load: Load, x):
    x = np.asarray(x, dtype=float)
    match load:
        case PointForce(point=p, force=f):
            return np.where(x > p, -f, 0.0)
        case PolynomialForce(lower_edge=a, upper_edge=b, coefficients=c):
            t = np.clip(x - a, 0.0, b - a)
            return _shear_poly(c, t)
        case PointMoment() | PolynomialMoment():
            return np.zeros_like(x)
    raise TypeError(f"Unsupported load type: {type(load).__name__}")


def moment_at(load: Load, x):
    x = np.asarray(x, dtype=float)
    match load:
        case PointForce(point=p, force=f):
            return np.where(x > p, -f * (x - p), 0.0)
        case PointMoment(point=p, moment=m):
            return np.where(x > p, m, 0.0)
        case PolynomialForce(lower_edge=a, upper_edge=b, coefficients=c):
            span = b - a
            t = np.clip(x - a, 0.0, span)
            # Shear is constant past the right edge
            overhang = np.maximum(x - b, 0.0)
            return _moment_poly(c, t) + _shear_poly(c, span) * overhang
        case PolynomialMoment(lower_edge=a, coefficients=c):
            # Not clamped at upper_edge: the moment persists to the beam end
            return np.where(x >= a, P.polyval(x - a, c), 0.0)
    raise TypeError(f"Unsupported load type: {type(load).__name__}")


def resultant_force(load: Load) -> float:
    match load:
        case PointForce(force=f):
            return float(f)
        case PolynomialForce(coefficients=c, lower_edge=a, upper_edge=b):
            return float(-_shear_poly(c, b - a))
    return 0.0
