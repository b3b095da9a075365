"""Output state shared by every level of a tree render."""

from typing import List, Optional, Protocol, Sequence, Tuple

from dir2tree.tree.styles import Role, StyleTable

# A rendered line as (role, text) pieces; a role of None leaves the text unstyled
Segments = Sequence[Tuple[Optional[Role], str]]


class Writable(Protocol):
    def write(self, data: str) -> object: ...


class RenderState:
    """Accumulates the output of one render.

    Every line is appended to ``buffer`` without styling and with a trailing newline.
    When an output stream is attached the same line is written to it as well, styled
    when ``use_colors`` is set. The buffer is append-only.

    Attributes:
        output (Optional[Writable]): Live output stream, or None to only buffer.
        use_colors (bool): Whether lines written to ``output`` are styled.
        styles (StyleTable): Styles applied when ``use_colors`` is set.
        buffer (List[str]): Every emitted line, uncolored and newline-terminated.
        directory_count (int): Directories rendered, excluding the root.
        file_count (int): Files rendered.
        total_size (int): Sum of the sizes of rendered files, in bytes.
        unreadable_count (int): Directories whose contents could not be listed.

    Example:
        >>> import io
        >>> stream = io.StringIO()
        >>> state = RenderState(stream)
        >>> state.emit([(Role.FILE, "a.txt")])
        >>> stream.getvalue() == state.getvalue() == "a.txt\\n"
        True
    """

    def __init__(
        self,
        output: Optional[Writable] = None,
        use_colors: bool = False,
        styles: Optional[StyleTable] = None,
    ) -> None:
        self.output = output
        self.use_colors = use_colors
        self.styles = styles if styles is not None else StyleTable()
        self.buffer: List[str] = []
        self.directory_count = 0
        self.file_count = 0
        self.total_size = 0
        self.unreadable_count = 0

    def emit(self, segments: Segments) -> None:
        """Record one line and write it to the live output, if any."""
        plain = "".join(text for _, text in segments)
        self.buffer.append(plain + "\n")

        if self.output is not None:
            if self.use_colors:
                line = "".join(self.styles.apply(role, text) for role, text in segments)
            else:
                line = plain
            self.output.write(line + "\n")

    def getvalue(self) -> str:
        """Return the uncolored text of everything emitted so far."""
        return "".join(self.buffer)
