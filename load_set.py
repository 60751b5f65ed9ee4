from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from beam_model import BeamModel
from classifier import GRAVITY, MIN_EDGE_SPAN, classify_contacts, self_weight_load
from contact import Contact
from loads import Load, is_force, resultant_force

logger = logging.getLogger("beam_loads.load_set")


@dataclass(frozen=True)
class LoadSet:
    """Loads active during one step; self-weight first, then contact loads."""

    loads: Tuple[Load, ...] = ()

    def __iter__(self) -> Iterator[Load]:
        return iter(self.loads)

    def __len__(self) -> int:
        return len(self.loads)

    def forces(self) -> Tuple[Load, ...]:
        return tuple(load for load in self.loads if is_force(load))

    def moments(self) -> Tuple[Load, ...]:
        return tuple(load for load in self.loads if not is_force(load))

    def net_force(self) -> float:
        return sum(resultant_force(load) for load in self.loads)


def build_load_set(
    model: BeamModel,
    contacts: Iterable[Contact],
    dt: float,
    gravity: Sequence[float] = GRAVITY,
    min_edge_span: float = MIN_EDGE_SPAN,
) -> LoadSet:
    loads = []
    weight = self_weight_load(model, gravity)
    if weight is not None:
        loads.append(weight)
    loads.extend(classify_contacts(model, contacts, dt, min_edge_span))

    load_set = LoadSet(tuple(loads))
    logger.debug("Step load set: %d load(s), net force %.6g N", len(load_set), load_set.net_force())
    return load_set
