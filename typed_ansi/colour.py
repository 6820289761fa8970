from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, ClassVar, NamedTuple, Optional, Tuple, Union

from .types import AnsiColourOutOfRange, AnsiColourTypeMismatch


class AnsiColourType(Enum):
    NONE = 0
    FOUR_BIT = 1
    EIGHT_BIT = 2
    RGB = 3


class Ansi4BitColour(IntEnum):
    """standard 4-bit colours; the widest supported option between terminals"""

    # background code is the foreground code + 10
    Black = 30
    Red = 31
    Green = 32
    Yellow = 33
    Blue = 34
    Magenta = 35
    Cyan = 36
    White = 37
    BrightBlack = 90
    BrightRed = 91
    BrightGreen = 92
    BrightYellow = 93
    BrightBlue = 94
    BrightMagenta = 95
    BrightCyan = 96
    BrightWhite = 97


class AnsiRgbColour(NamedTuple):
    r: int
    g: int
    b: int


BG_OFFSET = 10

_HEX_RE = re.compile(r"#?(?P<hex>[0-9a-fA-F]{6})")

_Payload = Union[None, Ansi4BitColour, int, AnsiRgbColour]
ColourVal = Union[
    "AnsiColour", Ansi4BitColour, int, Tuple[int, int, int], AnsiRgbColour, str
]


def _check_byte(name: str, val: Any) -> int:
    if isinstance(val, bool) or not isinstance(val, int):
        raise TypeError(f"'{name}' must be an int, got {type(val).__name__}")
    if not 0 <= val <= 255:
        raise AnsiColourOutOfRange(name, val)
    return int(val)


@dataclass(frozen=True, init=False, repr=False)
class AnsiColour:
    """
    A 4-bit, 8-bit or 24-bit colour, or no colour at all.

    The kind and its payload are only ever set together by one of the
    factories (`four_bit`, `eight_bit`, `rgb`, `from_rgb`, `from_hex`,
    `from_value`); `AnsiColour()` is the empty colour.

    `serialize` gives the colour's fragment of an ANSI command, not a
    complete command. Wrap it with `command.create_ansi_escape_code` to get
    one.
    """

    _type: AnsiColourType
    _value: _Payload
    _is_bg: bool

    BG_INIT: ClassVar[AnsiColour]
    """the empty colour, flavoured as a background"""

    def __init__(self, is_bg: bool = False) -> None:
        self._assign(AnsiColourType.NONE, None, is_bg)

    def _assign(self, t: AnsiColourType, val: _Payload, is_bg: bool) -> None:
        object.__setattr__(self, "_type", t)
        object.__setattr__(self, "_value", val)
        object.__setattr__(self, "_is_bg", bool(is_bg))

    @classmethod
    def _create(
        cls, t: AnsiColourType, val: _Payload, is_bg: bool
    ) -> AnsiColour:
        colour = cls.__new__(cls)
        colour._assign(t, val, is_bg)
        return colour

    @classmethod
    def four_bit(
        cls, code: Union[Ansi4BitColour, int], is_bg: bool = False
    ) -> AnsiColour:
        try:
            code = Ansi4BitColour(code)
        except ValueError:
            raise AnsiColourOutOfRange("four_bit", code, None) from None
        return cls._create(AnsiColourType.FOUR_BIT, code, is_bg)

    @classmethod
    def eight_bit(cls, code: int, is_bg: bool = False) -> AnsiColour:
        code = _check_byte("eight_bit", code)
        return cls._create(AnsiColourType.EIGHT_BIT, code, is_bg)

    @classmethod
    def rgb(cls, r: int, g: int, b: int, is_bg: bool = False) -> AnsiColour:
        rgb = AnsiRgbColour(
            _check_byte("r", r), _check_byte("g", g), _check_byte("b", b)
        )
        return cls._create(AnsiColourType.RGB, rgb, is_bg)

    @classmethod
    def from_rgb(cls, rgb: AnsiRgbColour, is_bg: bool = False) -> AnsiColour:
        return cls.rgb(rgb.r, rgb.g, rgb.b, is_bg)

    @classmethod
    def from_hex(cls, code: str, is_bg: bool = False) -> AnsiColour:
        """`#rrggbb` or `rrggbb` to an RGB colour"""
        m = _HEX_RE.fullmatch(code)
        if m is None:
            raise AnsiColourOutOfRange("hex", code, None)
        h = m.group("hex")
        r, g, b = (int(h[i : i + 2], 16) for i in range(0, 6, 2))
        return cls.rgb(r, g, b, is_bg)

    @classmethod
    def from_value(cls, c: ColourVal, is_bg: bool = False) -> AnsiColour:
        if isinstance(c, AnsiColour):
            return c.with_bg(is_bg)
        elif isinstance(c, Ansi4BitColour):
            return cls.four_bit(c, is_bg)
        elif isinstance(c, bool):
            raise TypeError(f"unsupported colour value {c!r}")
        elif isinstance(c, int):
            return cls.eight_bit(c, is_bg)
        elif isinstance(c, tuple):
            if len(c) != 3:
                raise AnsiColourOutOfRange("rgb", c, None)
            return cls.rgb(c[0], c[1], c[2], is_bg)
        elif isinstance(c, str):
            return cls.from_hex(c, is_bg)
        else:
            raise TypeError(f"unsupported colour value {c!r}")

    @property
    def type(self) -> AnsiColourType:
        return self._type

    @property
    def is_bg(self) -> bool:
        """whether this colour is for a background (it affects the output)"""
        return self._is_bg

    def with_bg(self, is_bg: bool) -> AnsiColour:
        if self._is_bg == bool(is_bg):
            return self
        return self._create(self._type, self._value, is_bg)

    def _expect(self, t: AnsiColourType) -> None:
        if self._type is not t:
            raise AnsiColourTypeMismatch(t, self._type)

    def as_four_bit(self) -> Ansi4BitColour:
        self._expect(AnsiColourType.FOUR_BIT)
        return self._value  # type: ignore

    def as_eight_bit(self) -> int:
        self._expect(AnsiColourType.EIGHT_BIT)
        return self._value  # type: ignore

    def as_rgb(self) -> AnsiRgbColour:
        self._expect(AnsiColourType.RGB)
        return self._value  # type: ignore

    def serialize(self) -> Optional[str]:
        t = self._type
        if t is AnsiColourType.NONE:
            return None
        elif t is AnsiColourType.FOUR_BIT:
            code = int(self.as_four_bit())
            return str(code + BG_OFFSET if self._is_bg else code)
        marker = "48" if self._is_bg else "38"
        if t is AnsiColourType.EIGHT_BIT:
            return f"{marker};5;{self.as_eight_bit()}"
        elif t is AnsiColourType.RGB:
            r, g, b = self.as_rgb()
            return f"{marker};2;{r};{g};{b}"
        else:
            raise ValueError(t)

    def __str__(self) -> str:
        s = self.serialize()
        return "" if s is None else s

    def __repr__(self) -> str:
        t = self._type
        if t is AnsiColourType.NONE:
            args = ""
        elif t is AnsiColourType.FOUR_BIT:
            args = f"Ansi4BitColour.{self.as_four_bit().name}"
        elif t is AnsiColourType.EIGHT_BIT:
            args = str(self.as_eight_bit())
        else:
            args = ", ".join(str(c) for c in self.as_rgb())
        bg = "is_bg=True" if self._is_bg else ""
        if t is AnsiColourType.NONE:
            return f"AnsiColour({bg})"
        name = t.name.lower()
        return f"AnsiColour.{name}({args}{', ' + bg if bg else ''})"


AnsiColour.BG_INIT = AnsiColour(is_bg=True)
