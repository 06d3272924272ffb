from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from .config import Settings, get_settings
from .errors import DiceError, DiceInputError
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
from .parser import parse_roll
from .render import render_roll


logger = logging.getLogger(__name__)


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _comparison_to_dict(comparison: Comparison) -> dict[str, Any]:
    return {"operator": comparison.operator, "threshold": comparison.threshold}


def _face_to_dict(face: FaceSpec) -> dict[str, Any]:
    if isinstance(face, RangeFace):
        return {"type": "range", "low": face.low, "high": face.high}
    if isinstance(face, StandardFace):
        return {"type": "standard", "faces": face.faces}
    if isinstance(face, PercentileFace):
        return {"type": "percentile"}
    if isinstance(face, FateFace):
        return {"type": "fate"}
    raise TypeError(f"Unknown face spec: {face!r}")


def _die_to_dict(die: Die) -> dict[str, Any]:
    return {"count": die.count, "face": _face_to_dict(die.face)}


def _modifier_to_dict(modifier: Modifier) -> dict[str, Any]:
    comparison = _comparison_to_dict(modifier.comparison)
    if isinstance(modifier, Reroll):
        return {"type": "reroll", "comparison": comparison}
    if isinstance(modifier, Explode):
        return {"type": "explode", "mode": modifier.mode, "comparison": comparison}
    if isinstance(modifier, KeepDiscard):
        return {
            "type": "keep_discard",
            "action": modifier.action,
            "extremum": modifier.extremum,
            "comparison": comparison,
        }
    if isinstance(modifier, Critical):
        return {"type": "critical", "kind": modifier.kind, "comparison": comparison}
    raise TypeError(f"Unknown modifier: {modifier!r}")


def roll_to_dict(roll: Roll) -> dict[str, Any]:
    """JSON-ready form of ``roll``; unions are tagged with a ``type`` key."""

    return {
        "die": _die_to_dict(roll.die),
        "modifiers": [_modifier_to_dict(m) for m in roll.modifiers],
    }


def parse_from_text(text: str, settings: Settings | None = None) -> dict[str, Any]:
    """Validate, parse, then describe. Raises DiceError for invalid input."""

    settings = settings or get_settings()
    request_id = uuid.uuid4().hex

    if len(text) > settings.max_input_length:
        logger.info("request %s rejected: %d characters", request_id, len(text))
        raise DiceInputError(
            f"[INPUT_TOO_LONG] Notation is limited to {settings.max_input_length} characters. "
            "Example: '4d6kh3'."
        )

    try:
        roll = parse_roll(text)
    except DiceError as e:
        logger.info("request %s rejected: %s", request_id, e)
        raise

    logger.debug("request %s parsed %r into %d modifier(s)", request_id, text, len(roll.modifiers))

    return {
        "request_id": request_id,
        "timestamp": _now_utc_iso(),
        "input": text,
        "normalized_expression": render_roll(roll),
        "roll": roll_to_dict(roll),
    }
