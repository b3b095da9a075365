"""Directory tree rendering with exclusion configuration.

This module ties the pieces together: it resolves the root directory, loads ignore
files, parses exception patterns and renders the tree.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from dir2tree.exceptions import PatternParseError
from dir2tree.exclusion_rules.exclusion_config import ExclusionConfig
from dir2tree.exclusion_rules.ignore_rules import load_ignore_rules
from dir2tree.exclusion_rules.patterns import parse_exception_patterns
from dir2tree.tree.render_state import RenderState, Writable
from dir2tree.tree.styles import StyleTable
from dir2tree.tree.tree_renderer import TreeRenderer
from dir2tree.types import PathType


def resolve_root(directory: PathType) -> Path:
    """Canonicalize the root directory.

    Raises:
        FileNotFoundError: If the path does not exist.
        NotADirectoryError: If the path is not a directory.
    """
    path = Path(directory)
    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError:
        raise FileNotFoundError(f"Root path does not exist: {directory}")
    if not resolved.is_dir():
        raise NotADirectoryError(f"Root path is not a directory: {resolved}")
    return resolved


class Dir2Tree:
    """Renders one directory as an annotated tree.

    The exclusion configuration is built once, at construction, and reused by every
    render. Rendering twice without filesystem changes yields identical text.

    Invalid ``regex:`` exception patterns do not stop construction; they are dropped and
    collected in ``pattern_errors`` for the caller to report.

    Attributes:
        directory (Path): Absolute, canonical root directory.
        config (ExclusionConfig): Exclusion settings used during traversal.
        pattern_errors (List[PatternParseError]): Exception patterns that failed to parse.
        use_colors (bool): Whether lines written to a live output are styled.
        styles (StyleTable): Styles used when colors are enabled.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     (Path(tmpdir) / ".git").mkdir()
        ...     _ = (Path(tmpdir) / "app.py").write_text("")
        ...     text = Dir2Tree(tmpdir).render().getvalue()
        >>> print(text.splitlines()[1])
        └── 📄 app.py (0.00 B)

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        excludes: Iterable[str] = (),
        ignore_files: Optional[Sequence[str]] = None,
        show_all: bool = False,
        exceptions: Iterable[str] = (),
        use_colors: bool = False,
        styles: Optional[StyleTable] = None,
    ) -> None:
        """Resolve the directory and build the exclusion configuration.

        Args:
            directory: Root of the tree. Relative paths and symlinks are resolved.
            excludes: Names excluded by exact match.
            ignore_files: Basenames of ignore files to read from the root. None reads
                every known ignore file.
            show_all: Skip the built-in version control and OS artifact excludes.
            exceptions: Raw exception patterns in evaluation order.
            use_colors: Style lines written to a live output.
            styles: Style table; defaults to the standard colors.
        """
        self.directory = resolve_root(directory)

        ignore_rules = load_ignore_rules(self.directory, ignore_files, suppress_defaults=show_all)
        patterns, self.pattern_errors = parse_exception_patterns(exceptions)

        self.config = ExclusionConfig(
            manual_excludes=frozenset(excludes),
            ignore_rules=ignore_rules.rules,
            exceptions=tuple(patterns),
        )
        self.use_colors = use_colors
        self.styles = styles if styles is not None else StyleTable()
        self._renderer = TreeRenderer(self.config)

    def render(self, output: Optional[Writable] = None) -> RenderState:
        """Render the tree, writing lines to ``output`` as they are produced.

        Args:
            output: Live output stream. When None the tree is only buffered.

        Returns:
            The state holding the uncolored buffer and the counts of this render.
        """
        state = RenderState(output, use_colors=self.use_colors, styles=self.styles)
        self._renderer.render_root(self.directory, state)
        return state

    def get_tree_representation(self) -> str:
        """Render the tree and return it as uncolored text."""
        return self.render().getvalue()


def format_pattern_errors(errors: Sequence[PatternParseError]) -> List[str]:
    """Format parse errors as warning lines."""
    return [f"Warning: {error}" for error in errors]
