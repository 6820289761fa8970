from .colour import (
    Ansi4BitColour,
    AnsiColour,
    AnsiColourType,
    AnsiRgbColour,
)
from .command import (
    RESET_COMMAND,
    compose,
    create_ansi_command_string,
    create_ansi_escape_code,
    populate_active_ansi_components,
)
from .console import enable_ansi
from .flags import AnsiTextFlags
from .text import AnsiChar, AnsiText, ansi
from .types import (
    AnsiColourOutOfRange,
    AnsiColourTypeMismatch,
    ResultTypeMismatch,
)
from .utils.result import Result
