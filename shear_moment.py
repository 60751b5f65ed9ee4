import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from loads import Load, moment_at, pressure_at, shear_at

logger = logging.getLogger("beam_loads.shear_moment")

DEFAULT_SAMPLES = 20


@dataclass(frozen=True, eq=False)
class DiagramSample:
    x: np.ndarray  # Sample coordinates [m]
    pressure: np.ndarray  # [N/m]
    shear: np.ndarray  # [N]
    moment: np.ndarray  # [N·m]
    skipped: bool = False

    def max_abs(self) -> Tuple[float, float]:
        """Largest absolute shear and moment over the samples."""
        if self.shear.size == 0:
            return 0.0, 0.0
        return float(np.max(np.abs(self.shear))), float(np.max(np.abs(self.moment)))


def _check_samples(samples: int) -> None:
    if samples < 2:
        raise ValueError(f"At least 2 samples are required, got {samples}")


def sample_coordinates(length: float, samples: int = DEFAULT_SAMPLES) -> np.ndarray:
    _check_samples(samples)
    return np.linspace(0.0, length, samples)


def sample_diagrams(loads: Iterable[Load], length: float, samples: int = DEFAULT_SAMPLES) -> DiagramSample:
    """Superpose all loads at ``samples`` equally spaced points over ``[0, length]``."""
    _check_samples(samples)
    if not length > 0:
        logger.warning("Beam length %g is not positive; skipping diagram sampling", length)
        return DiagramSample(
            x=np.zeros(samples),
            pressure=np.zeros(samples),
            shear=np.zeros(samples),
            moment=np.zeros(samples),
            skipped=True,
        )

    x = sample_coordinates(length, samples)
    resolution = length / (samples - 1)
    pressure = np.zeros_like(x)
    shear = np.zeros_like(x)
    moment = np.zeros_like(x)
    for load in loads:
        pressure += pressure_at(load, x, resolution)
        shear += shear_at(load, x)
        moment += moment_at(load, x)

    return DiagramSample(x=x, pressure=pressure, shear=shear, moment=moment)
