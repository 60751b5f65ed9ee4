"""Per-step pipeline: contacts to loads to diagrams to renderer output.

``run_step`` is called once per fixed simulation step. It keeps no state
between calls; the host passes a freshly built ``BeamModel`` and the contacts
reported for the step.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from beam_model import BeamModel
from contact import Contact
from diagram_output import DiagramLines, contact_markers, diagram_lines
from engine_config import EngineConfig
from load_set import LoadSet, build_load_set
from shear_moment import DiagramSample, sample_diagrams

logger = logging.getLogger("beam_loads.beam_step")


@dataclass(frozen=True)
class StepResult:
    loads: LoadSet
    sample: DiagramSample
    lines: DiagramLines
    markers: List[Tuple[np.ndarray, float]]


def run_step(
    model: BeamModel,
    contacts: Iterable[Contact],
    dt: float,
    config: Optional[EngineConfig] = None,
) -> StepResult:
    config = config or EngineConfig()
    contacts = tuple(contacts)

    if not dt > 0:
        logger.warning("Step duration %g is not positive; ignoring %d contact(s)", dt, len(contacts))
        loads = build_load_set(model, (), dt, config.gravity, config.min_edge_span)
    else:
        loads = build_load_set(model, contacts, dt, config.gravity, config.min_edge_span)

    sample = sample_diagrams(loads, model.length, config.samples)
    return StepResult(
        loads=loads,
        sample=sample,
        lines=diagram_lines(model, sample, config),
        markers=contact_markers(contacts),
    )
