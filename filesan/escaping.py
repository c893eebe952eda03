#2
import logging
from filesan.flags import Mode

logger = logging.getLogger(__name__)

NON = Mode.NONE
WWW = Mode.WINDOWS
WWM = Mode.WINDOWS | Mode.MAC
UWM = Mode.UNIX | Mode.WINDOWS | Mode.MAC
WEE = Mode.WINDOWS_END

# Modes in which each ascii character is disallowed. Anything past the end is allowed everywhere.
DISALLOWED_CHARS: tuple[Mode, ...] = (
    # NUL SOH STX ETX  EOT  ENQ  ACK  BEL  BS   TAB  LF   VT   FF   CR   SO
    UWM, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW,
    # SI DLE DC1  DC2  DC3  DC4  NAK  SYN  ETB  CAN  EM   SUB  ESC  FS   GS
    UWM, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW, WWW,
    # RS US  SP   !    "    #    $    %    &    '    (    )    *    +    ,
    WWW, WWW, WEE, NON, WWW, NON, NON, NON, NON, NON, NON, NON, WWW, NON, NON,
    # - .    /    0    1    2    3    4    5    6    7    8    9    :    ;
    NON, WEE, UWM, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, WWM, NON,
    # < =    >    ?    @    A    B    C    D    E    F    G    H    I    J
    WWW, NON, WWW, WWW, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON,
    # K L    M    N    O    P    Q    R    S    T    U    V    W    X    Y
    NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON,
    # Z [    \    ]    ^    _    `    a    b    c    d    e    f    g    h
    NON, NON, WWW, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON,
    # i j    k    l    m    n    o    p    q    r    s    t    u    v    w
    NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON, NON,
    # x y    z    {    |    }    ~    DEL
    NON, NON, NON, NON, WWW, NON, NON, NON,
)

WINDOWS_RESERVED: tuple[str, ...] = (
    "CON", "PRN", "AUX", "NUL",
    *(f"COM{i}" for i in range(1, 10)),
    *(f"LPT{i}" for i in range(1, 10)),
)
UNIX_RESERVED: tuple[str, ...] = (".", "..")
SYSTEM_RESERVED: tuple[str, ...] = WINDOWS_RESERVED if Mode.SYSTEM == Mode.WINDOWS else UNIX_RESERVED

def allowed(c: str, mode: Mode) -> bool:
    """Checks if the character c may appear in a filename on all of the systems in mode."""
    if len(c) != 1: raise ValueError(f"Expected a single character, got {c!r}.")
    n = ord(c)
    if n >= len(DISALLOWED_CHARS): return True
    return not DISALLOWED_CHARS[n].intersects(mode)

def _hex(c: str, esc: str) -> str:
    return f"{esc}{ord(c):02X}"

def escape_str(text: str, esc: str, mode: Mode) -> str:
    """
    Escapes text so that it can be used as a filename on all of the systems in mode.
    Distinct inputs always give distinct outputs, for the same esc and mode, as long as esc is at most U+00FF.
    A wider esc is written with more than two hex digits, which can run into the escape of a control character
    followed by a hex digit (esc U+0100 turns both "\\u0100" and "\\x100" into "\\u0100100" on windows).
    Args:
        text: The filename to escape.
        esc: The escape character. It should itself be a valid filename character on the target systems,
            since it is written to the output as is. '_' is a good choice.
        mode: Combination of:
            - UNIX: escapes '\\x00' and '/', prefixes the names '.' and '..'.
            - WINDOWS: escapes control characters and <>:"/\\|?*, prefixes the reserved device names
                (with or without an extension) and escapes a trailing space or dot.
            - MAC: escapes '\\x00', '/' and ':', prefixes the names '.' and '..'.
    Returns:
        The escaped text. Escaped characters are replaced with esc followed by
        at least two uppercase hex digits of the code point. Reserved names are prefixed with esc.
    """
    if len(esc) != 1: raise ValueError(f"The escape character must be a single character, got {esc!r}.")
    parts: list[str] = []

    if mode.contains(Mode.WINDOWS):
        stem, dot, rest = text.rpartition('.')
        if dot:
            if stem in WINDOWS_RESERVED:
                logger.debug(f"Escaping reserved windows name {stem!r} with extension.")
                parts.append(f"{esc}{stem}.")
                text = rest
        elif text in WINDOWS_RESERVED:
            logger.debug(f"Escaping reserved windows name {text!r}.")
            return f"{esc}{text}"

    if not parts and mode.intersects(Mode.UNIX | Mode.MAC) and text in UNIX_RESERVED:
        logger.debug(f"Escaping reserved name {text!r}.")
        return f"{esc}{text}"

    for c in text:
        if c == esc or not allowed(c, mode): parts.append(_hex(c, esc))
        else: parts.append(c)
    result = "".join(parts)

    if mode.intersects(Mode.WINDOWS) and result and not allowed(result[-1], Mode.WINDOWS_END):
        result = result[:-1] + _hex(result[-1], esc)
    return result
