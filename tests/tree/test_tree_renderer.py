"""Unit tests for the TreeRenderer class."""

import io
import os

import pytest

from dir2tree.exclusion_rules.exclusion_config import ExclusionConfig
from dir2tree.exclusion_rules.patterns import Pattern
from dir2tree.tree.directory_entry import DirectoryEntry
from dir2tree.tree.render_state import RenderState
from dir2tree.tree.styles import Role, StyleTable
from dir2tree.tree.tree_renderer import TreeRenderer


@pytest.fixture
def temp_directory(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("x" * 1536)
    (tmp_path / "src" / "utils").mkdir()
    (tmp_path / "src" / "utils" / "helpers.py").write_text("")
    (tmp_path / "README.md").write_text("# Readme\n")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "output.bin").write_bytes(b"\0" * 2048)
    return tmp_path


def render_lines(directory, exclusion_rules=None):
    state = RenderState()
    TreeRenderer(exclusion_rules).render(directory, "", state)
    return state.getvalue().splitlines()


def test_render_full_tree(temp_directory):
    assert render_lines(temp_directory) == [
        "├── 📄 README.md (9.00 B)",
        "├── 📁 build/",
        "│   └── 📄 output.bin (2.00 KB)",
        "└── 📁 src/",
        "    ├── 📄 main.py (1.50 KB)",
        "    └── 📁 utils/",
        "        └── 📄 helpers.py (0.00 B)",
    ]


def test_render_root_line(temp_directory):
    state = RenderState()
    TreeRenderer().render_root(temp_directory, state)
    lines = state.getvalue().splitlines()
    assert lines[0] == f"📂 {temp_directory}{os.sep}"
    assert lines[1] == "├── 📄 README.md (9.00 B)"


def test_connectors_computed_after_filtering(temp_directory):
    # "src" is last on disk; excluding it makes "build" the last visible entry
    lines = render_lines(temp_directory, ExclusionConfig(manual_excludes=frozenset({"src"})))
    assert lines == [
        "├── 📄 README.md (9.00 B)",
        "└── 📁 build/",
        "    └── 📄 output.bin (2.00 KB)",
    ]


def test_two_children_connectors_and_prefixes(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "inner.txt").touch()
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "inner.txt").touch()

    lines = render_lines(tmp_path)

    assert lines[0] == "├── 📁 a/"
    assert lines[1] == "│   └── 📄 inner.txt (0.00 B)"
    assert lines[2] == "└── 📁 b/"
    assert lines[3] == "    └── 📄 inner.txt (0.00 B)"
    assert "│" not in lines[3]


def test_sort_is_code_point_order(tmp_path):
    for name in ["b.txt", "é.txt", "B.txt", "a.txt", "_x.txt", "Z.txt"]:
        (tmp_path / name).touch()

    names = [line.split(" ")[2] for line in render_lines(tmp_path)]

    assert names == ["B.txt", "Z.txt", "_x.txt", "a.txt", "b.txt", "é.txt"]


def make_undecodable_file(directory):
    raw_name = b"bad\xff.txt"
    try:
        with open(os.path.join(os.fsencode(directory), raw_name), "wb"):
            pass
    except (OSError, ValueError):
        pytest.skip("Filesystem rejects names that are not valid UTF-8")
    return os.fsdecode(raw_name)


def test_undecodable_name_is_rendered_lossily(tmp_path):
    make_undecodable_file(tmp_path)
    (tmp_path / "z.txt").touch()

    assert render_lines(tmp_path) == [
        "├── 📄 bad�.txt (0.00 B)",
        "└── 📄 z.txt (0.00 B)",
    ]


def test_undecodable_name_is_written_to_live_output(tmp_path):
    make_undecodable_file(tmp_path)
    (tmp_path / "z.txt").touch()
    output = io.StringIO()
    state = RenderState(output)

    TreeRenderer().render(tmp_path, "", state)

    assert output.getvalue() == state.getvalue()
    assert "�" in output.getvalue()
    assert output.getvalue().endswith("└── 📄 z.txt (0.00 B)\n")


def test_exclusion_sees_the_name_from_the_filesystem(tmp_path):
    os_name = make_undecodable_file(tmp_path)
    (tmp_path / "z.txt").touch()

    lines = render_lines(tmp_path, ExclusionConfig(manual_excludes=frozenset({os_name})))

    assert lines == ["└── 📄 z.txt (0.00 B)"]


def test_directories_and_files_are_interleaved_by_name(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "a.txt").touch()
    (tmp_path / "c.txt").touch()

    assert render_lines(tmp_path) == [
        "├── 📄 a.txt (0.00 B)",
        "├── 📁 b/",
        "└── 📄 c.txt (0.00 B)",
    ]


def test_empty_directory(tmp_path):
    (tmp_path / "empty").mkdir()
    assert render_lines(tmp_path) == ["└── 📁 empty/"]


def test_exception_pattern_reincludes_entry(tmp_path):
    (tmp_path / "keep.secret").touch()
    (tmp_path / "x.secret").touch()
    config = ExclusionConfig(
        ignore_rules=frozenset({"*.secret"}),
        exceptions=(Pattern.from_string("keep.secret"),),
    )

    assert render_lines(tmp_path, config) == ["└── 📄 keep.secret (0.00 B)"]


def test_exclusion_applies_at_every_level(temp_directory):
    (temp_directory / "src" / "utils" / "README.md").touch()
    config = ExclusionConfig(manual_excludes=frozenset({"README.md", "build"}))

    lines = render_lines(temp_directory, config)

    assert not any("README.md" in line for line in lines)
    assert not any("build" in line for line in lines)


def test_unreadable_directory_marker(temp_directory, monkeypatch):
    real_scandir = os.scandir

    def fake_scandir(path):
        if os.path.basename(path) == "build":
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    state = RenderState()
    TreeRenderer().render(temp_directory, "", state)

    assert state.getvalue().splitlines()[:4] == [
        "├── 📄 README.md (9.00 B)",
        "├── 📁 build/",
        "│   └── 🔒 [Permission Denied]",
        "└── 📁 src/",
    ]
    assert state.unreadable_count == 1
    assert state.file_count == 3


def test_unreadable_root_emits_marker(tmp_path, monkeypatch):
    def fake_scandir(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(os, "scandir", fake_scandir)
    assert render_lines(tmp_path) == ["└── 🔒 [Permission Denied]"]


def test_unreadable_metadata_is_skipped_silently(tmp_path, monkeypatch):
    (tmp_path / "a.txt").touch()
    (tmp_path / "ghost.txt").touch()
    real_from_dir_entry = DirectoryEntry.from_dir_entry

    def fake_from_dir_entry(dir_entry):
        if dir_entry.name == "ghost.txt":
            raise FileNotFoundError(dir_entry.path)
        return real_from_dir_entry(dir_entry)

    monkeypatch.setattr(DirectoryEntry, "from_dir_entry", fake_from_dir_entry)

    # The skipped entry does not leave "a.txt" with a branch connector
    assert render_lines(tmp_path) == ["└── 📄 a.txt (0.00 B)"]


def test_symlinks_are_not_followed(tmp_path):
    (tmp_path / "real").mkdir()
    (tmp_path / "real" / "file.txt").touch()
    try:
        os.symlink(tmp_path / "real", tmp_path / "zlink")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    lines = render_lines(tmp_path)

    assert lines[2].startswith("└── 📄 zlink (")
    assert len(lines) == 3


def test_counts(temp_directory):
    state = RenderState()
    TreeRenderer().render(temp_directory, "", state)

    assert state.directory_count == 3
    assert state.file_count == 4
    assert state.total_size == 1536 + 9 + 2048


def test_buffer_is_uncolored_when_output_is_colored(temp_directory):
    stream = io.StringIO()
    state = RenderState(stream, use_colors=True)
    TreeRenderer().render(temp_directory, "", state)

    assert "\x1b[" in stream.getvalue()
    assert "\x1b[" not in state.getvalue()
    assert all(line.endswith("\n") for line in state.buffer)


def test_plain_output_matches_buffer(temp_directory):
    stream = io.StringIO()
    state = RenderState(stream, use_colors=False)
    TreeRenderer().render(temp_directory, "", state)

    assert stream.getvalue() == state.getvalue()


def test_zero_size_uses_distinct_style(tmp_path):
    (tmp_path / "empty.txt").touch()
    (tmp_path / "full.txt").write_text("x")
    styles = StyleTable()
    stream = io.StringIO()
    state = RenderState(stream, use_colors=True, styles=styles)
    TreeRenderer().render(tmp_path, "", state)

    empty_line, full_line = stream.getvalue().splitlines()
    assert styles.apply(Role.SIZE_ZERO, "0.00") in empty_line
    assert styles.apply(Role.SIZE_NONZERO, "1.00") in full_line
    assert styles.apply(Role.SIZE_ZERO, "0.00") != styles.apply(Role.SIZE_NONZERO, "0.00")


def test_render_is_idempotent(temp_directory):
    first = RenderState()
    second = RenderState()
    renderer = TreeRenderer(ExclusionConfig(ignore_rules=frozenset({"*.bin"})))

    renderer.render(temp_directory, "", first)
    renderer.render(temp_directory, "", second)

    assert first.getvalue() == second.getvalue()


def test_list_entries(temp_directory):
    entries = TreeRenderer().list_entries(temp_directory)

    assert [entry.name for entry in entries] == ["README.md", "build", "src"]
    assert [entry.is_directory for entry in entries] == [False, True, True]
    assert entries[0].size == 9
    assert entries[0].path == temp_directory / "README.md"


def test_list_entries_raises_for_missing_directory(tmp_path):
    with pytest.raises(OSError):
        TreeRenderer().list_entries(tmp_path / "missing")
