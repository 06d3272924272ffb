from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .config import get_settings
from .dice import parse_from_text
from .errors import DiceError
from .log import setup_logging


mcp = FastMCP(get_settings().server_name)


@mcp.tool()
def parse_dice_notation(text: str):
    """Parse roll notation (e.g. '4d6kh3', 'd20r1', '4dF!c>5') into a structured roll.

    Input: text (string)
    Output: structured JSON with the die, the ordered modifiers and a
    canonical rendering of the notation.

    Raises a hard error (exception) on invalid input.
    """

    try:
        return parse_from_text(text)
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


def run() -> None:
    setup_logging(get_settings().log_level)
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
