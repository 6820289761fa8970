"""
Enabling ANSI rendering on terminals that do not interpret it by default
(the legacy Windows console). The rest of the package never depends on it;
call `enable_ansi` once when the application starts.
"""
from colorama import just_fix_windows_console

from .utils import warn
from .utils.result import Result


_enabled = False


def enable_ansi() -> Result[bool]:
    """
    Returns `True` when the console was patched by this call, `False` when
    an earlier call already did.
    """
    global _enabled
    if _enabled:
        return Result.success(False)
    try:
        just_fix_windows_console()
    except OSError as err:
        msg = f"enable_ansi: cannot enable ANSI rendering: {err}"
        warn(msg)
        return Result.failure(msg)
    _enabled = True
    return Result.success(True)
