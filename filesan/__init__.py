from .flags import Mode
from .escaping import WINDOWS_RESERVED, UNIX_RESERVED, SYSTEM_RESERVED, allowed, escape_str
from .files import reserved_filenames, reserved_names, is_reserved, escape_filename
