"""
dirbridge/reporter.py   •   one-level directory listing as plain text

`generate_report(path)` never raises: a missing path, a plain file, an empty
directory or an unreadable directory all come back as ordinary report text.

Example
-------
    Directory: /tmp/x
    Found 2 entries:

    a.txt -> 12 Bytes
    b -> [directory]
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from typing import List, Optional

DIRECTORY_MARKER = "[directory]"
OTHER_MARKER = "[other]"
SIZE_UNIT = "Bytes"
UNREADABLE_SIZE = "unable to read file size"


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass
class DirectoryEntry:
    name: str
    kind: EntryKind
    size: Optional[int] = None  # only for files whose size could be read


# ─────────────────────────── helpers ────────────────────────────────
def _classify(entry: os.DirEntry) -> DirectoryEntry:
    # is_file()/is_dir() follow symlinks; a dangling link is neither.
    if entry.is_file():
        try:
            size = entry.stat().st_size
        except OSError as exc:
            logging.warning("⚠️  size unavailable for %s: %s", entry.path, exc)
            size = None
        return DirectoryEntry(entry.name, EntryKind.FILE, size)
    if entry.is_dir():
        return DirectoryEntry(entry.name, EntryKind.DIRECTORY)
    return DirectoryEntry(entry.name, EntryKind.OTHER)


def _one_line(name: str) -> str:
    return name.replace("\r", "\\r").replace("\n", "\\n")


def scan_directory(path: str) -> List[DirectoryEntry]:
    """
    Return the immediate children of *path* in filesystem order.

    Raises OSError when the directory itself cannot be read.
    """
    with os.scandir(path) as it:
        return [_classify(entry) for entry in it]


def render_entry(entry: DirectoryEntry) -> str:
    name = _one_line(entry.name)
    if entry.kind is EntryKind.FILE:
        if entry.size is None:
            return f"{name} -> {UNREADABLE_SIZE}"
        return f"{name} -> {entry.size} {SIZE_UNIT}"
    if entry.kind is EntryKind.DIRECTORY:
        return f"{name} -> {DIRECTORY_MARKER}"
    return f"{name} -> {OTHER_MARKER}"


def render_report(path: str, entries: List[DirectoryEntry]) -> str:
    if not entries:
        return f"Directory '{path}' contains no entries"
    lines = [render_entry(e) for e in entries]
    return f"Directory: {_one_line(path)}\nFound {len(lines)} entries:\n\n" + "\n".join(lines)


# ────────────────────────── public API ──────────────────────────────
def generate_report(path: str) -> str:
    """
    Describe the immediate entries of the directory at *path*.

    Checks run in order: existence, then directory-ness.  Per-file size
    failures degrade a single line; any other OSError while listing turns
    the whole result into one error message.
    """
    try:
        if not os.path.exists(path):
            return f"Error: directory '{path}' does not exist"
        if not os.path.isdir(path):
            return f"Error: '{path}' is not a directory"

        logging.info("📂 scanning %s", path)
        return render_report(path, scan_directory(path))
    except OSError as exc:
        logging.warning("❌ listing %s failed: %s", path, exc)
        return f"Error while accessing directory: {exc}"


# ────────────────────────── tool spec ───────────────────────────────
tool_spec = {
    "type": "function",
    "name": "load_directory_report",
    "description": (
        "List the immediate entries of a directory with their type and, for "
        "files, their size in bytes."
    ),
    "parameters": {
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "Directory to list (e.g. '/system/fonts').",
            }
        },
        "required": ["path"],
        "additionalProperties": False,
    },
}
