from dataclasses import dataclass, field
from typing import Sequence

import numpy as np


def _as_vector(value: Sequence[float]) -> np.ndarray:
    vec = np.asarray(value, dtype=float)
    if vec.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {vec.shape}")
    return vec


def _unit(value: Sequence[float]) -> np.ndarray:
    vec = _as_vector(value)
    norm = np.linalg.norm(vec)
    if norm <= 0:
        raise ValueError("Axis vector must be non-zero")
    return vec / norm


@dataclass(eq=False)
class BeamModel:
    length: float  # Beam length [m]
    thickness: float = 0.0  # Cross-section depth [m]
    origin: np.ndarray = field(default_factory=lambda: np.zeros(2))  # World position of x=0
    right: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0]))  # Beam axis
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0]))  # Local "up" axis
    mass: float = 0.0  # [kg]
    gravity_scale: float = 1.0

    def __post_init__(self) -> None:
        self.origin = _as_vector(self.origin)
        self.right = _unit(self.right)
        self.up = _unit(self.up)

    @classmethod
    def from_transform(
        cls,
        center: Sequence[float],
        right: Sequence[float],
        length: float,
        thickness: float = 0.0,
        mass: float = 0.0,
        gravity_scale: float = 1.0,
    ) -> "BeamModel":
        """Build the frame from a host transform reporting the beam centre."""
        axis = _unit(right)
        up = np.array([-axis[1], axis[0]])
        origin = _as_vector(center) - axis * length / 2
        return cls(
            length=length,
            thickness=thickness,
            origin=origin,
            right=axis,
            up=up,
            mass=mass,
            gravity_scale=gravity_scale,
        )

    @property
    def half_thickness(self) -> float:
        return 0.5 * self.thickness

    def to_1d(self, point: Sequence[float]) -> float:
        return float(np.dot(_as_vector(point) - self.origin, self.right))

    def to_world_space(self, x):
        """Map beam coordinate(s) to world points; an array of N coordinates gives an (N, 2) array."""
        x = np.asarray(x, dtype=float)
        return self.origin + np.multiply.outer(x, self.right)

    def weight_along_up(self, gravity: Sequence[float]) -> float:
        # Total weight component along the local up axis [N]
        return self.mass * self.gravity_scale * float(np.dot(_as_vector(gravity), self.up))
