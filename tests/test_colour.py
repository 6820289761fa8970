import pytest
from typed_ansi import (
    Ansi4BitColour,
    AnsiColour,
    AnsiColourOutOfRange,
    AnsiColourType,
    AnsiColourTypeMismatch,
    AnsiRgbColour,
)


def test_none():
    c = AnsiColour()
    assert c.type is AnsiColourType.NONE
    assert c.is_bg == False
    assert c.serialize() is None
    assert str(c) == ""


def test_none_bg():
    assert AnsiColour.BG_INIT.type is AnsiColourType.NONE
    assert AnsiColour.BG_INIT.is_bg == True
    assert AnsiColour.BG_INIT.serialize() is None
    assert AnsiColour.BG_INIT != AnsiColour()


def test_four_bit_fg():
    for code in Ansi4BitColour:
        c = AnsiColour.four_bit(code)
        assert c.type is AnsiColourType.FOUR_BIT
        assert c.serialize() == str(int(code))


def test_four_bit_bg():
    for code in Ansi4BitColour:
        c = AnsiColour.four_bit(code, is_bg=True)
        assert c.serialize() == str(int(code) + 10)


def test_four_bit_from_int():
    c = AnsiColour.four_bit(91)
    assert c.as_four_bit() is Ansi4BitColour.BrightRed


def test_four_bit_invalid():
    with pytest.raises(AnsiColourOutOfRange):
        AnsiColour.four_bit(38)


def test_eight_bit_A():
    c = AnsiColour.eight_bit(200)
    assert c.type is AnsiColourType.EIGHT_BIT
    assert c.serialize() == "38;5;200"
    assert c.as_eight_bit() == 200


def test_eight_bit_B():
    assert AnsiColour.eight_bit(200, is_bg=True).serialize() == "48;5;200"
    assert AnsiColour.eight_bit(0).serialize() == "38;5;0"
    assert AnsiColour.eight_bit(255).serialize() == "38;5;255"


def test_eight_bit_out_of_range():
    with pytest.raises(AnsiColourOutOfRange):
        AnsiColour.eight_bit(256)
    with pytest.raises(AnsiColourOutOfRange):
        AnsiColour.eight_bit(-1)
    with pytest.raises(TypeError):
        AnsiColour.eight_bit("12")  # type: ignore


def test_rgb_A():
    c = AnsiColour.rgb(10, 20, 30)
    assert c.type is AnsiColourType.RGB
    assert c.serialize() == "38;2;10;20;30"
    assert c.as_rgb() == AnsiRgbColour(10, 20, 30)


def test_rgb_B():
    c = AnsiColour.from_rgb(AnsiRgbColour(1, 2, 3), is_bg=True)
    assert c.type is AnsiColourType.RGB
    assert c.serialize() == "48;2;1;2;3"


def test_rgb_out_of_range():
    with pytest.raises(AnsiColourOutOfRange) as e:
        AnsiColour.rgb(0, 300, 0)
    assert e.value.name == "g"
    assert e.value.val == 300


def test_hex_A():
    assert AnsiColour.from_hex("#ff8000") == AnsiColour.rgb(255, 128, 0)
    assert AnsiColour.from_hex("0A0b0C") == AnsiColour.rgb(10, 11, 12)


def test_hex_B():
    for bad in ["#fff", "gg0000", "#ff80000", "+f0000"]:
        with pytest.raises(AnsiColourOutOfRange):
            AnsiColour.from_hex(bad)


def test_from_value():
    assert AnsiColour.from_value(Ansi4BitColour.Red) == AnsiColour.four_bit(
        Ansi4BitColour.Red
    )
    assert AnsiColour.from_value(31) == AnsiColour.eight_bit(31)
    assert AnsiColour.from_value((1, 2, 3)) == AnsiColour.rgb(1, 2, 3)
    assert AnsiColour.from_value("#010203", is_bg=True) == AnsiColour.rgb(
        1, 2, 3, is_bg=True
    )
    c = AnsiColour.eight_bit(7)
    assert AnsiColour.from_value(c) is c
    assert AnsiColour.from_value(c, is_bg=True).is_bg == True


def test_from_value_invalid():
    with pytest.raises(TypeError):
        AnsiColour.from_value(True)  # type: ignore
    with pytest.raises(TypeError):
        AnsiColour.from_value(1.5)  # type: ignore
    with pytest.raises(AnsiColourOutOfRange):
        AnsiColour.from_value((1, 2))  # type: ignore


def test_accessor_mismatch():
    c = AnsiColour.eight_bit(10)
    with pytest.raises(AnsiColourTypeMismatch):
        c.as_four_bit()
    with pytest.raises(AnsiColourTypeMismatch):
        c.as_rgb()
    with pytest.raises(AnsiColourTypeMismatch):
        AnsiColour().as_eight_bit()


def test_accessor_mismatch_is_assertion():
    with pytest.raises(AssertionError):
        AnsiColour.rgb(1, 2, 3).as_eight_bit()


def test_equality():
    assert AnsiColour.eight_bit(30) == AnsiColour.eight_bit(30)
    assert AnsiColour.eight_bit(30) != AnsiColour.eight_bit(30, is_bg=True)
    assert AnsiColour.four_bit(Ansi4BitColour.Black) != AnsiColour.eight_bit(
        30
    )
    assert AnsiColour.rgb(1, 2, 3) != AnsiColour.eight_bit(1)
    assert len({AnsiColour.rgb(1, 2, 3), AnsiColour.rgb(1, 2, 3)}) == 1


def test_immutable():
    c = AnsiColour.eight_bit(1)
    with pytest.raises(AttributeError):
        c._is_bg = True  # type: ignore


def test_with_bg():
    c = AnsiColour.rgb(1, 2, 3)
    bg = c.with_bg(True)
    assert bg.is_bg == True
    assert c.is_bg == False
    assert bg.as_rgb() == c.as_rgb()
    assert c.with_bg(False) is c


def test_repr():
    assert repr(AnsiColour()) == "AnsiColour()"
    assert repr(AnsiColour.eight_bit(5, is_bg=True)) == (
        "AnsiColour.eight_bit(5, is_bg=True)"
    )
    assert repr(AnsiColour.four_bit(Ansi4BitColour.Red)) == (
        "AnsiColour.four_bit(Ansi4BitColour.Red)"
    )
