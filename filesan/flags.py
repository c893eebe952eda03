#1
from __future__ import annotations
from enum import Flag
from filesan.system import target_system

_SYSTEM = target_system()

class Mode(Flag):
    """
    Set of operating systems whose filename rules are applied.
    WINDOWS_END is not part of WINDOWS or ALL, it only marks characters a windows filename can't end with.
    SYSTEM is an alias of the system resolved when this module is first imported.
    """
    NONE = 0
    UNIX = 1
    WINDOWS = 2
    MAC = 4
    WINDOWS_END = 8
    ALL = UNIX | WINDOWS | MAC
    SYSTEM = WINDOWS if _SYSTEM == 'windows' else MAC if _SYSTEM == 'mac' else UNIX

    def contains(self, other: Mode) -> bool:
        return self & other == other
    def intersects(self, other: Mode) -> bool:
        return bool(self & other)
