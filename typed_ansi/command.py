from typing import Iterable, List, Optional

from .colour import AnsiColour
from .flags import AnsiTextFlags


RESET_COMMAND = "\x1b[0m"
"""the ANSI command to reset all styling"""


def create_ansi_escape_code(param: str) -> str:
    return f"\x1b[{param}m"


def populate_active_ansi_components(
    fg: AnsiColour, bg: AnsiColour, flags: AnsiTextFlags
) -> List[str]:
    """
    Collects every active component of an ANSI command, in command order:

    * the foreground fragment, if `fg` has a colour
    * the background fragment, if `bg` has a colour
    * the code of each set flag, in ascending bit order
    """
    components: List[str] = []
    for colour in (fg, bg):
        fragment = colour.serialize()
        if fragment is not None:
            components.append(fragment)
    components.extend(AnsiTextFlags(flags).active_fragments())
    return components


def create_ansi_command_string(components: Iterable[Optional[str]]) -> str:
    return create_ansi_escape_code(";".join(c for c in components if c))


def compose(fg: AnsiColour, bg: AnsiColour, flags: AnsiTextFlags) -> str:
    # nothing active gives "\x1b[m", which terminals treat as a reset
    return create_ansi_command_string(
        populate_active_ansi_components(fg, bg, flags)
    )
