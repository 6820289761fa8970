from __future__ import annotations
from enum import IntFlag
from typing import List, Tuple


# index is the flag's position in the bitmask: bold is 0, strike is 7
FLAG_AS_ANSI_CODE_MAP: Tuple[str, ...] = (
    "1",
    "2",
    "3",
    "4",
    "5",
    "6",
    "7",
    "9",
)
FLAG_COUNT = len(FLAG_AS_ANSI_CODE_MAP)
FLAG_MASK = (1 << FLAG_COUNT) - 1


class AnsiTextFlags(IntFlag):
    NONE = 0
    BOLD = 1 << 0
    DIM = 1 << 1
    ITALIC = 1 << 2
    UNDERLINE = 1 << 3
    SLOW_BLINK = 1 << 4
    FAST_BLINK = 1 << 5
    INVERT = 1 << 6
    STRIKE = 1 << 7

    @classmethod
    def with_flags(cls, mask: int) -> AnsiTextFlags:
        if isinstance(mask, bool) or not 0 <= int(mask) <= FLAG_MASK:
            raise ValueError(
                f"flag mask {mask!r} is out of range [0, {FLAG_MASK}]"
            )
        return cls(int(mask))

    def is_set(self, flag: AnsiTextFlags) -> bool:
        return int(flag) != 0 and int(self) & int(flag) == int(flag)

    def set(self, flag: AnsiTextFlags, is_set: bool = True) -> AnsiTextFlags:
        if is_set:
            return AnsiTextFlags(int(self) | int(flag))
        else:
            return AnsiTextFlags(int(self) & ~int(flag) & FLAG_MASK)

    def active_fragments(self) -> List[str]:
        """ANSI codes of every set flag, in ascending bit order"""
        return [
            FLAG_AS_ANSI_CODE_MAP[i]
            for i in range(FLAG_COUNT)
            if int(self) & (1 << i)
        ]
