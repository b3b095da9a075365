"""Terminal styles for the semantic parts of a rendered tree."""

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from humanfriendly.terminal import ansi_wrap


class Role(str, Enum):
    """Semantic role of a piece of rendered text.

    Values:
        FOLDER: Directory lines, including the root line
        FILE: File lines up to the opening parenthesis of the size
        SIZE_ZERO: The magnitude of an empty file
        SIZE_NONZERO: The magnitude of a non-empty file
        UNIT: The size unit
        ERROR: Marker lines for directories that could not be listed
    """

    FOLDER = "folder"
    FILE = "file"
    SIZE_ZERO = "size_zero"
    SIZE_NONZERO = "size_nonzero"
    UNIT = "unit"
    ERROR = "error"


# Keyword arguments for humanfriendly.terminal.ansi_style, one entry per role
DEFAULT_STYLES: Dict[Role, Dict[str, Any]] = {
    Role.FOLDER: {"color": (255, 255, 0)},
    Role.FILE: {"color": (0, 255, 255)},
    Role.SIZE_ZERO: {"bold": True, "color": (255, 255, 255), "background": "red"},
    Role.SIZE_NONZERO: {"color": (255, 128, 255)},
    Role.UNIT: {"color": 214},
    Role.ERROR: {"bold": True, "color": (255, 255, 255), "background": "red"},
}


class StyleTable:
    """Maps each Role to the ANSI style used when colors are enabled.

    Roles missing from the table are rendered without styling.

    Attributes:
        styles (Dict[Role, Dict[str, Any]]): ansi_style keyword arguments per role.

    Example:
        >>> table = StyleTable({Role.FILE: {"color": "green"}})
        >>> table.apply(Role.FILE, "a.txt")
        '\\x1b[32ma.txt\\x1b[0m'
        >>> StyleTable({}).apply(Role.FILE, "a.txt")
        'a.txt'
    """

    def __init__(self, styles: Optional[Mapping[Role, Mapping[str, Any]]] = None) -> None:
        source = DEFAULT_STYLES if styles is None else styles
        self.styles = {role: dict(kwargs) for role, kwargs in source.items()}

    def apply(self, role: Optional[Role], text: str) -> str:
        """Wrap ``text`` in the escape sequences for ``role``."""
        if role is None or role not in self.styles:
            return text
        return ansi_wrap(text, **self.styles[role])
