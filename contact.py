from dataclasses import dataclass
from typing import Hashable, Tuple


@dataclass(frozen=True)
class Contact:
    position: Tuple[float, float]  # World-space contact point [m]
    normal: Tuple[float, float]  # Unit contact normal
    normal_impulse: float  # [N·s]
    tangent_impulse: float  # [N·s]
    body_id: Hashable  # Identity of the contacting body
