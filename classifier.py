"""Turn raw contact events into load primitives.

Classification runs in two phases. Contacts are first grouped by the body
that produced them; then each group is converted to loads. The first two
contacts of a body describe the edges of one distributed load. Any other
contact is treated as a discrete point force plus a friction couple.
"""
from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from beam_model import BeamModel
from contact import Contact
from loads import Load, PointForce, PointMoment, PolynomialForce, PolynomialMoment

logger = logging.getLogger("beam_loads.classifier")

GRAVITY = (0.0, -9.81)
MIN_EDGE_SPAN = 1e-9  # [m]


def group_contacts(contacts: Iterable[Contact]) -> Tuple[List[Tuple[Contact, Contact]], List[Contact]]:
    """Split contacts into edge pairs and singletons.

    Only the first two contacts of a body are paired; further contacts of the
    same body stay singletons.
    """
    by_body: Dict[Hashable, List[Contact]] = {}
    for contact in contacts:
        by_body.setdefault(contact.body_id, []).append(contact)

    pairs: List[Tuple[Contact, Contact]] = []
    singles: List[Contact] = []
    for body_id, body_contacts in by_body.items():
        if len(body_contacts) < 2:
            singles.extend(body_contacts)
            continue
        pairs.append((body_contacts[0], body_contacts[1]))
        if len(body_contacts) > 2:
            logger.debug("Body %r reported %d contacts; pairing the first two", body_id, len(body_contacts))
            singles.extend(body_contacts[2:])
    return pairs, singles


def _project(model: BeamModel, contact: Contact) -> float:
    x = model.to_1d(contact.position)
    return min(max(x, 0.0), max(model.length, 0.0))


def perpendicular_force(model: BeamModel, contact: Contact, dt: float) -> float:
    sign = 1.0 if np.dot(contact.normal, model.up) > 0 else -1.0
    return sign * contact.normal_impulse / dt


def parallel_force(contact: Contact, dt: float) -> float:
    return contact.tangent_impulse / dt


def point_loads(model: BeamModel, contact: Contact, dt: float) -> List[Load]:
    x = _project(model, contact)
    return [
        PointForce(point=x, force=perpendicular_force(model, contact, dt)),
        # Friction at the surface acts as a couple about the centreline
        PointMoment(point=x, moment=parallel_force(contact, dt) * model.half_thickness),
    ]


def edge_loads(
    model: BeamModel,
    first: Contact,
    second: Contact,
    dt: float,
    min_edge_span: float = MIN_EDGE_SPAN,
) -> List[Load]:
    ends = sorted(((_project(model, c), c) for c in (first, second)), key=lambda item: item[0])
    (lower, lower_contact), (upper, upper_contact) = ends
    span = upper - lower
    if span <= min_edge_span:
        logger.debug("Edge span %g at x=%g is degenerate; using point loads", span, lower)
        return point_loads(model, first, dt) + point_loads(model, second, dt)

    # Each edge force is carried by half of the span, linear profile between the two
    p_lower = perpendicular_force(model, lower_contact, dt) / (span / 2)
    p_upper = perpendicular_force(model, upper_contact, dt) / (span / 2)
    gradient = (p_upper - p_lower) / span

    # Friction is taken as uniform along the edge
    total_parallel = parallel_force(first, dt) + parallel_force(second, dt)
    moment_gradient = total_parallel / span * model.half_thickness

    return [
        PolynomialForce(lower_edge=lower, upper_edge=upper, coefficients=(p_lower, gradient)),
        PolynomialMoment(lower_edge=lower, upper_edge=upper, coefficients=(0.0, moment_gradient)),
    ]


def classify_contacts(
    model: BeamModel,
    contacts: Iterable[Contact],
    dt: float,
    min_edge_span: float = MIN_EDGE_SPAN,
) -> List[Load]:
    contacts = tuple(contacts)
    if not contacts:
        return []
    if dt <= 0:
        raise ValueError(f"Step duration must be positive, got {dt}")

    finite = tuple(c for c in contacts if np.all(np.isfinite(c.position)))
    if len(finite) < len(contacts):
        logger.warning("Dropping %d contact(s) with a non-finite position", len(contacts) - len(finite))

    pairs, singles = group_contacts(finite)
    loads: List[Load] = []
    for first, second in pairs:
        loads.extend(edge_loads(model, first, second, dt, min_edge_span))
    for contact in singles:
        loads.extend(point_loads(model, contact, dt))

    logger.debug("Classified %d contact(s) into %d edge(s) and %d point(s)", len(contacts), len(pairs), len(singles))
    return loads


def self_weight_load(model: BeamModel, gravity: Sequence[float] = GRAVITY) -> Optional[PolynomialForce]:
    if model.length <= 0:
        return None
    pressure = model.weight_along_up(gravity) / model.length
    return PolynomialForce(lower_edge=0.0, upper_edge=model.length, coefficients=(pressure,))
