from __future__ import annotations

"""
Unit tests for the directory probing strategies.

Verifies:
1. The quick probe reads the target, then its parent.
2. The fuzzy walk recovers real casing from the root down.
3. Listing failures abort the walk instead of raising.
"""

from detect_file.core.probe import fuzzy_walk, try_readdir
from detect_file.domain.conventions import POSIX, WINDOWS
from detect_file.domain.models import DirectoryProbe


def test_try_readdir_lists_target_directory(fake_fs) -> None:
    fs = fake_fs(["/data/a.txt", "/data/b.txt"])

    probe = try_readdir("/data", fs, POSIX)

    assert probe == DirectoryProbe(path="/data", entries=("a.txt", "b.txt"))
    assert fs.list_calls == ["/data"]


def test_try_readdir_falls_back_to_parent(fake_fs) -> None:
    fs = fake_fs(["/data/FooFile.js"])

    probe = try_readdir("/data/foofile.js", fs, POSIX)

    assert probe == DirectoryProbe(path="/data", entries=("FooFile.js",))
    assert fs.list_calls == ["/data/foofile.js", "/data"]


def test_try_readdir_defers_to_fuzzy_walk(fake_fs) -> None:
    fs = fake_fs(["/Data/Sub/File.txt"])

    probe = try_readdir("/data/sub/file.txt", fs, POSIX)

    assert probe == DirectoryProbe(path="/Data/Sub", entries=("File.txt",))
    assert fs.list_calls == [
        "/data/sub/file.txt",
        "/data/sub",
        "/",
        "/Data",
        "/Data/Sub",
    ]


def test_fuzzy_walk_recovers_deep_casing(fake_fs) -> None:
    fs = fake_fs(["/Users/me/Mixed/cAsEd/path/SEGMENTS/FooFile.js"])

    probe = fuzzy_walk("/users/me/mixed/cased/path/segments/foofile.js", fs, POSIX)

    assert probe is not None
    assert probe.path == "/Users/me/Mixed/cAsEd/path/SEGMENTS"
    assert probe.entries == ("FooFile.js",)


def test_fuzzy_walk_first_listed_match_wins(fake_fs) -> None:
    fs = fake_fs(["/root/Docs/readme.md", "/root/DOCS/other.md"])

    probe = fuzzy_walk("/root/docs/readme.md", fs, POSIX)

    assert probe is not None
    assert probe.path == "/root/Docs"


def test_fuzzy_walk_aborts_on_unlistable_ancestor(fake_fs) -> None:
    fs = fake_fs(["/A/Mixed/CaSeD/File.txt"], unreadable=["/A/Mixed"])

    assert fuzzy_walk("/a/mixed/cased/file.txt", fs, POSIX) is None


def test_fuzzy_walk_skips_unmatched_segment(fake_fs) -> None:
    """An unmatched segment keeps the walk on the last confirmed directory."""
    fs = fake_fs(["/A/file.txt"])

    probe = fuzzy_walk("/a/missing/file.txt", fs, POSIX)

    assert probe == DirectoryProbe(path="/A", entries=("file.txt",))


def test_fuzzy_walk_windows_convention(fake_fs) -> None:
    fs = fake_fs(["C:\\Users\\Me\\Docs\\Report.TXT"], convention=WINDOWS)

    probe = fuzzy_walk("C:\\users\\me\\docs\\report.txt", fs, WINDOWS)

    assert probe == DirectoryProbe(path="C:\\Users\\Me\\Docs", entries=("Report.TXT",))
    assert fs.list_calls[0] == "C:\\"
