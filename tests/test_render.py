import pytest

from mcp_dice_notation.errors import DiceError
from mcp_dice_notation.models import Comparison, Critical, Die, Explode, Roll, StandardFace
from mcp_dice_notation.parser import parse_roll
from mcp_dice_notation.render import render_roll


@pytest.mark.parametrize(
    ("text", "rendered"),
    [
        ("1d20", "d20"),
        ("3D6", "3d6"),
        ("2d%", "2d%"),
        ("dFate", "dF"),
        ("d:8", "d0:8"),
        ("d20c", "d20cs"),
        ("4d6x>4", "4d6!>4"),
        ("4d6xp", "4d6!c"),
        ("4d6!x!", "4d6!x!"),
        ("8d6KH3Cs6", "8d6kh3cs6"),
        ("d20r<3cf1", "d20r<3cf1"),
    ],
)
def test_render_canonical(text, rendered):
    assert render_roll(parse_roll(text)) == rendered


@pytest.mark.parametrize(
    "text",
    [
        "3d6r1",
        "4dF!c>5",
        "8d6kh3cs6",
        "4d6r1!!kh2",
        "d6:10!",
        "d6!!!",
        "d6!xx!c",
        "0d%d<2k",
        "d20r>",
    ],
)
def test_reparse_of_rendering_gives_equal_roll(text):
    roll = parse_roll(text)

    assert parse_roll(render_roll(roll)) == roll


def test_bare_explode_then_critical_cannot_be_rendered():
    roll = Roll(
        die=Die(face=StandardFace(6)),
        modifiers=(Explode("standard", Comparison()), Critical("success", Comparison())),
    )

    with pytest.raises(DiceError) as exc:
        render_roll(roll)
    assert str(exc.value).startswith("[UNRENDERABLE]")
