from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias


Operator: TypeAlias = Literal["greater_than", "less_than", "equal"]
ExplodeMode: TypeAlias = Literal["standard", "penetrating", "compounding"]
DiscardAction: TypeAlias = Literal["keep", "discard"]
Extremum: TypeAlias = Literal["highest", "lowest"]
CriticalKind: TypeAlias = Literal["success", "failure"]


@dataclass(frozen=True)
class Comparison:
    """Relational condition shared by every modifier.

    A missing threshold is left for the evaluator to fill in from context
    (e.g. the die's maximum face for explode).
    """

    operator: Operator = "equal"
    threshold: int | None = None


@dataclass(frozen=True)
class RangeFace:
    high: int
    low: int = 0


@dataclass(frozen=True)
class StandardFace:
    faces: int


@dataclass(frozen=True)
class PercentileFace:
    """A d100 written as ``d%``."""


@dataclass(frozen=True)
class FateFace:
    """Fudge/Fate die: -1, 0 or +1."""


FaceSpec: TypeAlias = RangeFace | StandardFace | PercentileFace | FateFace


@dataclass(frozen=True)
class Die:
    face: FaceSpec
    count: int = 1


@dataclass(frozen=True)
class Reroll:
    comparison: Comparison = field(default_factory=Comparison)


@dataclass(frozen=True)
class Explode:
    mode: ExplodeMode = "standard"
    comparison: Comparison = field(default_factory=Comparison)


@dataclass(frozen=True)
class KeepDiscard:
    action: DiscardAction
    extremum: Extremum | None = None
    comparison: Comparison = field(default_factory=Comparison)


@dataclass(frozen=True)
class Critical:
    kind: CriticalKind = "success"
    comparison: Comparison = field(default_factory=Comparison)


Modifier: TypeAlias = Reroll | Explode | KeepDiscard | Critical


@dataclass(frozen=True)
class Roll:
    die: Die
    modifiers: tuple[Modifier, ...] = ()
