from typing import Literal, TypeAlias

class filenames:
    system_type: TypeAlias = Literal['auto', 'unix', 'windows', 'mac']
    system: system_type = 'auto'
    escape_char: str = '_'
