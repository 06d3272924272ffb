from mcp_dice_notation.parser import parse_roll


def test_parse_is_deterministic():
    text = "4d6r1!!kh2cs6"
    a = parse_roll(text)
    b = parse_roll(text)

    assert a == b
    assert a is not b


def test_roll_is_immutable():
    roll = parse_roll("3d6r1")

    assert isinstance(roll.modifiers, tuple)
    assert hash(roll) == hash(parse_roll("3d6r1"))
