import pytest

from mcp_dice_notation.server import parse_dice_notation


def test_tool_returns_structured_roll():
    result = parse_dice_notation("8d6kh3")

    assert result["normalized_expression"] == "8d6kh3"
    assert result["roll"]["modifiers"][0]["type"] == "keep_discard"


def test_tool_surfaces_error_codes():
    with pytest.raises(ValueError) as exc:
        parse_dice_notation("1d20cs>=18")

    assert str(exc.value).startswith("[SYNTAX_ERROR]")
    assert "position 7" in str(exc.value)
