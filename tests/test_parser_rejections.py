import pytest

from mcp_dice_notation.errors import DiceError, DiceSyntaxError
from mcp_dice_notation.parser import parse_roll


@pytest.mark.parametrize(
    ("text", "position", "expected_rule"),
    [
        ("", 0, "die"),
        ("abc", 0, "die"),
        ("12", 0, "die"),
        (" 3d6", 0, "die"),
        ("d", 1, "face"),
        ("3dz", 2, "face"),
        ("2d:", 2, "face"),
        ("d\u00b2", 1, "face"),
        ("d6:", 2, "modifier or end of input"),
        ("1d20cs>=18", 7, "modifier or end of input"),
        ("d6!cs", 4, "modifier or end of input"),
        ("3d6 r1", 3, "modifier or end of input"),
        ("1d6+1d4", 3, "modifier or end of input"),
        ("4d6\u212ah3", 3, "modifier or end of input"),
        ("d20r1q", 5, "modifier or end of input"),
    ],
)
def test_parse_rejections(text, position, expected_rule):
    with pytest.raises(DiceSyntaxError) as exc:
        parse_roll(text)

    assert exc.value.position == position
    assert exc.value.expected_rule == expected_rule
    assert exc.value.text == text
    assert str(exc.value).startswith("[SYNTAX_ERROR]")


def test_syntax_error_is_a_dice_error():
    with pytest.raises(DiceError):
        parse_roll("roll some dice")
    with pytest.raises(ValueError):
        parse_roll("roll some dice")
