from __future__ import annotations


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, nothing is parsed)."""


class DiceInputError(DiceError):
    """Input rejected before the grammar is even tried."""


class DiceSyntaxError(DiceError):
    """No grammar alternative matched at ``position``.

    ``position`` is the 0-based character offset of the first unparseable
    character (``len(text)`` when the input ended too early) and
    ``expected_rule`` names the rule that was being attempted there.
    """

    def __init__(self, text: str, position: int, expected_rule: str) -> None:
        self.text = text
        self.position = position
        self.expected_rule = expected_rule
        super().__init__(
            f"[SYNTAX_ERROR] Expected {expected_rule} at position {position} in {text!r}. "
            "Example: '3d6r1' or '8d6kh3'."
        )
