from __future__ import annotations

from .errors import DiceError
from .models import (
    Comparison,
    Critical,
    Die,
    Explode,
    FaceSpec,
    FateFace,
    KeepDiscard,
    Modifier,
    PercentileFace,
    RangeFace,
    Reroll,
    Roll,
    StandardFace,
)


_OPERATOR_SYMBOLS = {"greater_than": ">", "less_than": "<", "equal": ""}
_EXPLODE_FLAGS = {"standard": "", "penetrating": "!", "compounding": "c"}
_EXTREMUM_FLAGS = {"highest": "h", "lowest": "l", None: ""}
_CRITICAL_FLAGS = {"success": "s", "failure": "f"}


def render_comparison(comparison: Comparison) -> str:
    threshold = "" if comparison.threshold is None else str(comparison.threshold)
    return _OPERATOR_SYMBOLS[comparison.operator] + threshold


def render_face(face: FaceSpec) -> str:
    if isinstance(face, RangeFace):
        return f"{face.low}:{face.high}"
    if isinstance(face, StandardFace):
        return str(face.faces)
    if isinstance(face, PercentileFace):
        return "%"
    if isinstance(face, FateFace):
        return "F"
    raise TypeError(f"Unknown face spec: {face!r}")


def render_die(die: Die) -> str:
    face = render_face(die.face)
    return f"d{face}" if die.count == 1 else f"{die.count}d{face}"


def render_modifier(modifier: Modifier, explode_leader: str = "!") -> str:
    if isinstance(modifier, Reroll):
        head = "r"
    elif isinstance(modifier, Explode):
        head = explode_leader + _EXPLODE_FLAGS[modifier.mode]
    elif isinstance(modifier, KeepDiscard):
        head = ("k" if modifier.action == "keep" else "d") + _EXTREMUM_FLAGS[modifier.extremum]
    elif isinstance(modifier, Critical):
        head = "c" + _CRITICAL_FLAGS[modifier.kind]
    else:
        raise TypeError(f"Unknown modifier: {modifier!r}")
    return head + render_comparison(modifier.comparison)


def _is_bare_explode(modifier: Modifier) -> bool:
    return (
        isinstance(modifier, Explode)
        and modifier.mode == "standard"
        and modifier.comparison == Comparison()
    )


def render_roll(roll: Roll) -> str:
    """Render ``roll`` back to canonical notation that parses to an equal Roll.

    A plain ``!`` swallows whatever sub-flag comes next, so an explode right
    after it is written with the ``x`` leader. A critical cannot follow it at
    all: ``!c`` always reads as a compounding explode.
    """

    chunks: list[str] = [render_die(roll.die)]
    previous: Modifier | None = None

    for modifier in roll.modifiers:
        explode_leader = "!"
        if previous is not None and _is_bare_explode(previous):
            if isinstance(modifier, Critical):
                raise DiceError(
                    "[UNRENDERABLE] A critical cannot directly follow a bare '!' explode. "
                    "Example: '4d6!>5cs6'."
                )
            explode_leader = "x"
        chunks.append(render_modifier(modifier, explode_leader=explode_leader))
        previous = modifier

    return "".join(chunks)
