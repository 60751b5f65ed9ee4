from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from beam_model import BeamModel
from contact import Contact
from engine_config import EngineConfig
from shear_moment import DiagramSample


@dataclass(frozen=True, eq=False)
class DiagramLines:
    pressure: np.ndarray  # (N, 2) world points
    shear: np.ndarray
    moment: np.ndarray


def _offset_line(model: BeamModel, base: np.ndarray, values: np.ndarray, divisor: float) -> np.ndarray:
    return base + np.multiply.outer(values / divisor, model.up)


def diagram_lines(model: BeamModel, sample: DiagramSample, config: EngineConfig) -> DiagramLines:
    """Place each diagram along the beam, offset along up by value / divisor."""
    base = model.to_world_space(sample.x)
    return DiagramLines(
        pressure=_offset_line(model, base, sample.pressure, config.pressure_divisor),
        shear=_offset_line(model, base, sample.shear, config.shear_divisor),
        moment=_offset_line(model, base, sample.moment, config.moment_divisor),
    )


def contact_markers(contacts: Iterable[Contact]) -> List[Tuple[np.ndarray, float]]:
    # Marker size tracks the normal impulse
    return [(np.asarray(c.position, dtype=float), float(c.normal_impulse)) for c in contacts]
