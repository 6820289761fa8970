from typing import List

from typed_ansi import RESET_COMMAND


ESC = "\x1b["


def styled(params: str, text: str) -> str:
    return f"{ESC}{params}m{text}{RESET_COMMAND}"


def popcount(n: int) -> int:
    return bin(n).count("1")


def codes(*c: int) -> List[str]:
    return [str(i) for i in c]
