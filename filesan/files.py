#1
import logging
from filesan import config
from filesan.flags import Mode
from filesan.escaping import WINDOWS_RESERVED, UNIX_RESERVED, SYSTEM_RESERVED, allowed, escape_str

logger = logging.getLogger(__name__)

reserved_filenames: tuple[str, ...] = SYSTEM_RESERVED

def reserved_names(mode: Mode) -> tuple[str, ...]:
    ret: tuple[str, ...] = ()
    if mode.contains(Mode.WINDOWS): ret += WINDOWS_RESERVED
    if mode.intersects(Mode.UNIX | Mode.MAC): ret += UNIX_RESERVED
    return ret

def is_reserved(name: str, mode: Mode) -> bool:
    """
    True if escape_str would treat the name as reserved under mode.
    On windows the part before the last dot is checked as well, so 'NUL.txt' is reserved.
    """
    if mode.contains(Mode.WINDOWS):
        stem, dot, _ = name.rpartition('.')
        if (stem if dot else name) in WINDOWS_RESERVED: return True
    return mode.intersects(Mode.UNIX | Mode.MAC) and name in UNIX_RESERVED

def escape_filename(name: str, mode: Mode = Mode.SYSTEM, esc: str|None = None) -> str:
    if esc is None: esc = config.filenames.escape_char
    if len(esc) == 1 and not allowed(esc, mode):
        logger.warning(f"Escape character {esc!r} is not a valid filename character for {mode}.")
    return escape_str(name, esc, mode)
