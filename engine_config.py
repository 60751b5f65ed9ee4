from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from classifier import GRAVITY, MIN_EDGE_SPAN
from shear_moment import DEFAULT_SAMPLES


@dataclass
class EngineConfig:
    samples: int = DEFAULT_SAMPLES
    min_edge_span: float = MIN_EDGE_SPAN  # [m]
    # Rendering divisors applied to each diagram before offsetting along up
    pressure_divisor: float = 1.0
    shear_divisor: float = 1.0
    moment_divisor: float = 1.0
    gravity: Tuple[float, float] = GRAVITY  # [m/s^2]

    def __post_init__(self) -> None:
        self.samples = int(self.samples)
        self.gravity = tuple(float(g) for g in self.gravity)
        self.validate()

    def validate(self) -> None:
        if self.samples < 2:
            raise ValueError(f"samples must be at least 2, got {self.samples}")
        if self.min_edge_span < 0:
            raise ValueError(f"min_edge_span must be non-negative, got {self.min_edge_span}")
        for name in ("pressure_divisor", "shear_divisor", "moment_divisor"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if len(self.gravity) != 2:
            raise ValueError(f"gravity must be a 2D vector, got {self.gravity}")
