from __future__ import annotations
from typing import Any, Optional, Protocol, Union

from .colour import Ansi4BitColour, AnsiColour, AnsiColourType, ColourVal
from .command import RESET_COMMAND, compose
from .flags import AnsiTextFlags


class _ToStr(Protocol):
    def __str__(self) -> str:
        ...


def _uses_ansi(fg: AnsiColour, bg: AnsiColour, flags: AnsiTextFlags) -> bool:
    return (
        fg.type is not AnsiColourType.NONE
        or bg.type is not AnsiColourType.NONE
        or flags != AnsiTextFlags.NONE
    )


class AnsiText:
    """
    Composes a piece of ANSI styled text with a fluent builder:

        AnsiText("Hello").fg(Ansi4BitColour.Red).bold().render()

    Every setter returns the same `AnsiText`, so calls can be chained. The
    rendered string is cached until a setter changes the styling. A reset
    command is appended to styled text automatically. Text without any
    styling is rendered as-is.
    """

    _cached_text: Optional[str]
    _text: str
    _fg: AnsiColour
    _bg: AnsiColour
    _flags: AnsiTextFlags

    def __init__(self, text: str) -> None:
        self._cached_text = None
        self._text = text
        self._fg = AnsiColour()
        self._bg = AnsiColour.BG_INIT
        self._flags = AnsiTextFlags.NONE

    @classmethod
    def from_colorable(cls, target: Colorable) -> AnsiText:
        if isinstance(target, cls):
            return target
        elif isinstance(target, str):
            return cls(target)
        else:
            return cls(str(target))

    def _set_colour(self, colour: AnsiColour, is_bg: bool) -> AnsiText:
        if is_bg:
            self._bg = colour.with_bg(True)
        else:
            self._fg = colour.with_bg(False)
        self._cached_text = None
        return self

    def _set_flag(self, flag: AnsiTextFlags, is_set: bool) -> AnsiText:
        self._flags = self._flags.set(flag, is_set)
        self._cached_text = None
        return self

    def fg(self, colour: ColourVal) -> AnsiText:
        """
        Sets the foreground (text) colour; see `AnsiColour.from_value` for the
        accepted values.
        """
        return self._set_colour(AnsiColour.from_value(colour), False)

    def bg(self, colour: ColourVal) -> AnsiText:
        return self._set_colour(AnsiColour.from_value(colour), True)

    def fg_4bit(self, code: Ansi4BitColour) -> AnsiText:
        return self._set_colour(AnsiColour.four_bit(code), False)

    def bg_4bit(self, code: Ansi4BitColour) -> AnsiText:
        return self._set_colour(AnsiColour.four_bit(code), True)

    def fg_8bit(self, code: int) -> AnsiText:
        return self._set_colour(AnsiColour.eight_bit(code), False)

    def bg_8bit(self, code: int) -> AnsiText:
        return self._set_colour(AnsiColour.eight_bit(code), True)

    def fg_rgb(self, r: int, g: int, b: int) -> AnsiText:
        return self._set_colour(AnsiColour.rgb(r, g, b), False)

    def bg_rgb(self, r: int, g: int, b: int) -> AnsiText:
        return self._set_colour(AnsiColour.rgb(r, g, b), True)

    def bold(self, is_set: bool = True) -> AnsiText:
        return self._set_flag(AnsiTextFlags.BOLD, is_set)

    def dim(self, is_set: bool = True) -> AnsiText:
        """dimmed text; the opposite of bold"""
        return self._set_flag(AnsiTextFlags.DIM, is_set)

    def italic(self, is_set: bool = True) -> AnsiText:
        return self._set_flag(AnsiTextFlags.ITALIC, is_set)

    def underline(self, is_set: bool = True) -> AnsiText:
        return self._set_flag(AnsiTextFlags.UNDERLINE, is_set)

    def slow_blink(self, is_set: bool = True) -> AnsiText:
        return self._set_flag(AnsiTextFlags.SLOW_BLINK, is_set)

    def fast_blink(self, is_set: bool = True) -> AnsiText:
        return self._set_flag(AnsiTextFlags.FAST_BLINK, is_set)

    def invert(self, is_set: bool = True) -> AnsiText:
        """swaps the foreground and background colours"""
        return self._set_flag(AnsiTextFlags.INVERT, is_set)

    def strike(self, is_set: bool = True) -> AnsiText:
        return self._set_flag(AnsiTextFlags.STRIKE, is_set)

    def set_flags(self, flags: Union[AnsiTextFlags, int]) -> AnsiText:
        self._flags = AnsiTextFlags.with_flags(flags)
        self._cached_text = None
        return self

    @property
    def flags(self) -> AnsiTextFlags:
        return self._flags

    @property
    def foreground(self) -> AnsiColour:
        return self._fg

    @property
    def background(self) -> AnsiColour:
        return self._bg

    @property
    def raw_text(self) -> str:
        return self._text

    def render(self) -> str:
        if not _uses_ansi(self._fg, self._bg, self._flags):
            return self._text

        if self._cached_text is None:
            self._cached_text = (
                compose(self._fg, self._bg, self._flags)
                + self._text
                + RESET_COMMAND
            )
        return self._cached_text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"AnsiText({self._text!r}, fg={self._fg!r}, bg={self._bg!r}, "
            f"flags={self._flags!r})"
        )


Colorable = Union[AnsiText, _ToStr, str]


def ansi(text: str) -> AnsiText:
    return AnsiText(text)


def fg(target: Colorable, colour: ColourVal) -> AnsiText:
    return AnsiText.from_colorable(target).fg(colour)


def bg(target: Colorable, colour: ColourVal) -> AnsiText:
    return AnsiText.from_colorable(target).bg(colour)


def bold(target: Colorable) -> AnsiText:
    return AnsiText.from_colorable(target).bold()


def dim(target: Colorable) -> AnsiText:
    return AnsiText.from_colorable(target).dim()


def italic(target: Colorable) -> AnsiText:
    return AnsiText.from_colorable(target).italic()


def underline(target: Colorable) -> AnsiText:
    return AnsiText.from_colorable(target).underline()


def slow_blink(target: Colorable) -> AnsiText:
    return AnsiText.from_colorable(target).slow_blink()


def fast_blink(target: Colorable) -> AnsiText:
    return AnsiText.from_colorable(target).fast_blink()


def invert(target: Colorable) -> AnsiText:
    return AnsiText.from_colorable(target).invert()


def strike(target: Colorable) -> AnsiText:
    return AnsiText.from_colorable(target).strike()


class AnsiChar:
    """a single character with ANSI styling"""

    _value: str
    _fg: AnsiColour
    _bg: AnsiColour
    flags: AnsiTextFlags

    def __init__(
        self,
        value: str = " ",
        fg: Optional[ColourVal] = None,
        bg: Optional[ColourVal] = None,
        flags: AnsiTextFlags = AnsiTextFlags.NONE,
    ) -> None:
        self.value = value
        self.fg = AnsiColour() if fg is None else fg  # type: ignore
        self.bg = AnsiColour.BG_INIT if bg is None else bg  # type: ignore
        self.flags = flags

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, v: str) -> None:
        if not isinstance(v, str) or len(v) != 1:
            raise ValueError(f"AnsiChar expects a single character, got {v!r}")
        self._value = v

    @property
    def fg(self) -> AnsiColour:
        return self._fg

    @fg.setter
    def fg(self, colour: ColourVal) -> None:
        self._fg = AnsiColour.from_value(colour, is_bg=False)

    @property
    def bg(self) -> AnsiColour:
        return self._bg

    @bg.setter
    def bg(self, colour: ColourVal) -> None:
        # always stored as a background, whatever flavour was passed in
        self._bg = AnsiColour.from_value(colour, is_bg=True)

    @property
    def uses_ansi(self) -> bool:
        return _uses_ansi(self._fg, self._bg, self.flags)

    def __str__(self) -> str:
        if not self.uses_ansi:
            return self._value
        return (
            compose(self._fg, self._bg, self.flags)
            + self._value
            + RESET_COMMAND
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AnsiChar):
            return NotImplemented
        return (self._value, self._fg, self._bg, self.flags) == (
            other._value,
            other._fg,
            other._bg,
            other.flags,
        )

    def __repr__(self) -> str:
        return (
            f"AnsiChar({self._value!r}, fg={self._fg!r}, bg={self._bg!r}, "
            f"flags={self.flags!r})"
        )
