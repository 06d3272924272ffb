"""Roll notation parser.

Grammar (literals are ASCII case-insensitive)::

    roll       := die behavior* EOI
    die        := digit* "d" facespec
    facespec   := range | digit+ | "%" | "fate" | "f"
    range      := digit* ":" digit+
    behavior   := reroll | explode | discard | critical
    comparison := (">" | "<")? digit*
    reroll     := "r" comparison
    explode    := ("!" | "x") ("!" | "c" | "p")? comparison
    discard    := ("d" | "k") ("h" | "l")? comparison
    critical   := "c" ("s" | "f")? comparison

Every choice is ordered: alternatives are tried left to right and the first
one that matches wins, so ``d6:10`` is a range and never ``d6`` followed by
junk.
"""

from __future__ import annotations

import re
from typing import Callable

from .errors import DiceSyntaxError
from .models import (
    Comparison,
    Critical,
    CriticalKind,
    Die,
    Explode,
    ExplodeMode,
    Extremum,
    FaceSpec,
    FateFace,
    KeepDiscard,
    Modifier,
    Operator,
    PercentileFace,
    RangeFace,
    Reroll,
    Roll,
    StandardFace,
)


# ASCII digits only; str.isdigit() would also accept things like '²'.
_DIGITS_RE = re.compile(r"[0-9]*")
_FACES_RE = re.compile(r"[0-9]+")
_RANGE_RE = re.compile(r"(?P<low>[0-9]*):(?P<high>[0-9]+)")

_OPERATORS: dict[str, Operator] = {">": "greater_than", "<": "less_than"}
_EXPLODE_MODES: dict[str, ExplodeMode] = {"!": "penetrating", "c": "compounding", "p": "compounding"}
_EXTREMA: dict[str, Extremum] = {"h": "highest", "l": "lowest"}
_CRITICAL_KINDS: dict[str, CriticalKind] = {"s": "success", "f": "failure"}


class _Cursor:
    """Read position over the input; rules move it forward only on a match."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def literal(self, *options: str) -> str | None:
        """Consume the first of ``options`` found at the cursor.

        Options are given in lowercase. Only ASCII text is folded, so e.g. the
        KELVIN SIGN never matches ``k``.
        """
        for option in options:
            end = self.pos + len(option)
            chunk = self.text[self.pos:end]
            if chunk.isascii() and chunk.lower() == option:
                self.pos = end
                return option
        return None

    def pattern(self, regex: re.Pattern[str]) -> re.Match[str] | None:
        m = regex.match(self.text, self.pos)
        if m:
            self.pos = m.end()
        return m

    def digits(self) -> str:
        return self.pattern(_DIGITS_RE).group()


def _parse_comparison(cursor: _Cursor) -> Comparison:
    # Both parts are optional, so this never fails.
    symbol = cursor.literal(">", "<")
    digits = cursor.digits()
    return Comparison(
        operator=_OPERATORS[symbol] if symbol else "equal",
        threshold=int(digits) if digits else None,
    )


def _parse_face(cursor: _Cursor) -> FaceSpec | None:
    m = cursor.pattern(_RANGE_RE)
    if m:
        low = m.group("low")
        return RangeFace(low=int(low) if low else 0, high=int(m.group("high")))

    m = cursor.pattern(_FACES_RE)
    if m:
        return StandardFace(faces=int(m.group()))

    if cursor.literal("%"):
        return PercentileFace()

    if cursor.literal("fate", "f"):
        return FateFace()

    return None


def _parse_die(cursor: _Cursor) -> Die:
    start = cursor.pos
    count = cursor.digits()
    if not cursor.literal("d"):
        raise DiceSyntaxError(cursor.text, start, "die")

    face_at = cursor.pos
    face = _parse_face(cursor)
    if face is None:
        raise DiceSyntaxError(cursor.text, face_at, "face")

    # A count of 0 is syntactically fine; what it means is up to the evaluator.
    return Die(face=face, count=int(count) if count else 1)


def _parse_reroll(cursor: _Cursor) -> Modifier | None:
    if not cursor.literal("r"):
        return None
    return Reroll(comparison=_parse_comparison(cursor))


def _parse_explode(cursor: _Cursor) -> Modifier | None:
    if not cursor.literal("!", "x"):
        return None
    flag = cursor.literal("!", "c", "p")
    return Explode(
        mode=_EXPLODE_MODES[flag] if flag else "standard",
        comparison=_parse_comparison(cursor),
    )


def _parse_discard(cursor: _Cursor) -> Modifier | None:
    leader = cursor.literal("d", "k")
    if not leader:
        return None
    flag = cursor.literal("h", "l")
    return KeepDiscard(
        action="keep" if leader == "k" else "discard",
        extremum=_EXTREMA[flag] if flag else None,
        comparison=_parse_comparison(cursor),
    )


def _parse_critical(cursor: _Cursor) -> Modifier | None:
    if not cursor.literal("c"):
        return None
    flag = cursor.literal("s", "f")
    return Critical(
        kind=_CRITICAL_KINDS[flag] if flag else "success",
        comparison=_parse_comparison(cursor),
    )


# Tried in this order at each position; the first match wins.
_MODIFIER_PARSERS: tuple[Callable[[_Cursor], Modifier | None], ...] = (
    _parse_reroll,
    _parse_explode,
    _parse_discard,
    _parse_critical,
)


def _parse_behaviors(cursor: _Cursor) -> list[Modifier]:
    modifiers: list[Modifier] = []
    while True:
        for parse in _MODIFIER_PARSERS:
            start = cursor.pos
            modifier = parse(cursor)
            if modifier is not None:
                modifiers.append(modifier)
                break
            cursor.pos = start
        else:
            return modifiers


def parse_roll(text: str) -> Roll:
    """Parse roll notation such as ``4d6kh3`` or ``d20r1`` into a :class:`Roll`.

    Raises :class:`DiceSyntaxError` carrying the offset of the first character
    that could not be parsed. There is no partial result.
    """

    cursor = _Cursor(text)
    die = _parse_die(cursor)
    modifiers = _parse_behaviors(cursor)

    if not cursor.at_end():
        raise DiceSyntaxError(text, cursor.pos, "modifier or end of input")

    return Roll(die=die, modifiers=tuple(modifiers))
