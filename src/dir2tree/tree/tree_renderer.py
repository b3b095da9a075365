"""Depth-first rendering of a directory as an annotated tree.

Output looks like this::

    📂 /home/user/project/
    ├── 📁 src/
    │   └── 📄 main.py (1.50 KB)
    └── 📄 README.md (0.00 B)
"""

import os
from typing import List, Optional

from dir2tree.exclusion_rules.base_rules import BaseExclusionRules
from dir2tree.size_format import human_size
from dir2tree.tree.directory_entry import DirectoryEntry, display_name
from dir2tree.tree.render_state import RenderState
from dir2tree.tree.styles import Role
from dir2tree.types import PathType

BRANCH_CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
VERTICAL_PREFIX = "│   "
BLANK_PREFIX = "    "

ROOT_MARKER = "📂"
FOLDER_MARKER = "📁"
FILE_MARKER = "📄"
DENIED_TEXT = "🔒 [Permission Denied]"


class TreeRenderer:
    """Renders directories line by line into a RenderState.

    Children of each directory are filtered through the exclusion rules first and then
    sorted by name in code point order, so the last visible child always receives the
    closing connector. Directories that cannot be listed produce a single marker line
    and the walk continues with their siblings. Entries whose metadata cannot be read
    are skipped silently.

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Rules deciding which entries
            are hidden. None shows everything.

    Example:
        >>> import tempfile
        >>> from pathlib import Path
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     (Path(tmpdir) / "docs").mkdir()
        ...     _ = (Path(tmpdir) / "docs" / "index.md").write_text("hi")
        ...     state = RenderState()
        ...     TreeRenderer().render(tmpdir, "", state)
        >>> print(state.getvalue(), end="")
        └── 📁 docs/
            └── 📄 index.md (2.00 B)
    """

    def __init__(self, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        self.exclusion_rules = exclusion_rules

    def render_root(self, root: PathType, state: RenderState) -> None:
        """Emit the root line for ``root`` and then its whole tree."""
        state.emit([(Role.FOLDER, f"{ROOT_MARKER} {display_name(os.fspath(root))}{os.sep}")])
        self.render(root, "", state)

    def render(self, directory: PathType, prefix: str, state: RenderState) -> None:
        """Render the children of ``directory``, each line starting with ``prefix``.

        Args:
            directory: Directory whose children are rendered.
            prefix: Indentation inherited from the ancestors.
            state: Destination for the rendered lines.
        """
        try:
            entries = self.list_entries(directory)
        except OSError:
            state.emit([(Role.ERROR, f"{prefix}{LAST_CONNECTOR}{DENIED_TEXT}")])
            state.unreadable_count += 1
            return

        for index, entry in enumerate(entries):
            is_last = index == len(entries) - 1
            connector = LAST_CONNECTOR if is_last else BRANCH_CONNECTOR

            if entry.is_directory:
                state.emit([(Role.FOLDER, f"{prefix}{connector}{FOLDER_MARKER} {entry.name}{os.sep}")])
                state.directory_count += 1
                child_prefix = prefix + (BLANK_PREFIX if is_last else VERTICAL_PREFIX)
                self.render(entry.path, child_prefix, state)
            else:
                value, unit = human_size(entry.size)
                size_role = Role.SIZE_ZERO if float(value) == 0 else Role.SIZE_NONZERO
                state.emit(
                    [
                        (Role.FILE, f"{prefix}{connector}{FILE_MARKER} {entry.name} ("),
                        (size_role, value),
                        (None, " "),
                        (Role.UNIT, unit),
                        (None, ")"),
                    ]
                )
                state.file_count += 1
                state.total_size += entry.size

    def list_entries(self, directory: PathType) -> List[DirectoryEntry]:
        """List the visible children of ``directory`` sorted by name.

        Raises:
            OSError: If the directory cannot be listed.
        """
        entries = []
        with os.scandir(directory) as it:
            for dir_entry in it:
                if self.exclusion_rules is not None and self.exclusion_rules.exclude(dir_entry.name):
                    continue
                try:
                    entries.append(DirectoryEntry.from_dir_entry(dir_entry))
                except OSError:
                    continue
        return sorted(entries, key=lambda entry: entry.name)

