#1
import os
import sys
from typing import Literal, TypeAlias
from filesan import config

system_type: TypeAlias = Literal['unix', 'windows', 'mac']

def detect_system() -> system_type:
    if os.name == "nt": return 'windows'
    if sys.platform == "darwin": return 'mac'
    if os.name == "posix": return 'unix'
    raise Exception(f"Unsupported os type {os.name}.")

def target_system() -> system_type:
    """
    The system that Mode.SYSTEM stands for.
    Taken from config.filenames.system, or detected from the host when that is 'auto'.
    """
    system = config.filenames.system
    if system == 'auto': return detect_system()
    if system not in ('unix', 'windows', 'mac'): raise ValueError(f"Unknown system {system}.")
    return system
