"""
dirbridge/bridge.py   •   host <-> reporter marshalling

Three ways in, one report out:

* `load_directory_report(handle)`  Python hosts hand over bytes / str /
  ctypes pointers and get UTF-8 bytes back.
* `native_load_directory_report`   a C callback, `char *fn(const char *)`.
  The returned buffer comes from the C library's `strdup`; the host owns it
  and frees it (or calls `release_native_string`).
* `call_tool(name, arguments)`     JSON tool dispatch for agent-style hosts.

Errors are never signalled separately: they are part of the returned text.
"""

from __future__ import annotations

import contextlib
import ctypes
import ctypes.util
import json
import logging
import os
from typing import Any, Dict, Iterator, Optional, Union

from . import reporter
from .config import HOST_ENCODING

HostString = Union[bytes, bytearray, memoryview, str, ctypes.c_char_p, int, None]

REPORT_FUNC = ctypes.CFUNCTYPE(ctypes.c_void_p, ctypes.c_char_p)

_libc: Optional[ctypes.CDLL] = None


# ───────────────────────── marshalling ──────────────────────────────
@contextlib.contextmanager
def _borrow(handle: HostString) -> Iterator[memoryview]:
    """Expose the caller's buffer as a read-only view, released on exit."""
    if handle is None:
        raise ValueError("NULL string handle")
    if isinstance(handle, ctypes.c_char_p):
        if handle.value is None:
            raise ValueError("NULL string handle")
        handle = handle.value
    elif isinstance(handle, int) and not isinstance(handle, bool):
        if handle == 0:
            raise ValueError("NULL string handle")
        handle = ctypes.string_at(handle)
    if not isinstance(handle, (bytes, bytearray, memoryview)):
        raise TypeError(f"unsupported string handle type {type(handle).__name__}")

    view = memoryview(handle)
    try:
        yield view
    finally:
        view.release()


def to_native(handle: HostString) -> str:
    """Copy the host string into a Python str (filesystem encoding)."""
    if isinstance(handle, str):
        return handle
    with _borrow(handle) as view:
        raw = view.tobytes()
    return os.fsdecode(raw)


def to_host(text: str) -> bytes:
    # names that were not valid in the filesystem encoding come out as "?"
    return text.encode(HOST_ENCODING, errors="replace")


# ────────────────────────── public API ──────────────────────────────
def load_directory_report(handle: HostString) -> bytes:
    try:
        path = to_native(handle)
    except (TypeError, ValueError) as exc:
        error_msg = f"Argument conversion failed: {exc}"
        logging.error(error_msg)
        return to_host(error_msg)
    return to_host(reporter.generate_report(path))


# ───────────────────────── native surface ───────────────────────────
def _c_library() -> ctypes.CDLL:
    global _libc
    if _libc is None:
        name = ctypes.util.find_library("c")
        if name is None:
            raise OSError("C library not found")
        lib = ctypes.CDLL(name)
        lib.strdup.argtypes = [ctypes.c_char_p]
        lib.strdup.restype = ctypes.c_void_p
        lib.free.argtypes = [ctypes.c_void_p]
        lib.free.restype = None
        _libc = lib
    return _libc


def _native_report(path: Optional[bytes]) -> int:
    # ctypes has already copied the inbound char * into `path` (None for NULL)
    return _c_library().strdup(load_directory_report(path))


native_load_directory_report = REPORT_FUNC(_native_report)


def native_entry_address() -> int:
    return ctypes.cast(native_load_directory_report, ctypes.c_void_p).value


def release_native_string(address: int) -> None:
    """Free a buffer returned by the native callback."""
    if address:
        _c_library().free(address)


# ───────────────────────── tool dispatch ────────────────────────────
def _report_tool(path: str) -> str:
    # os.path.exists() would treat an int as a file descriptor
    if not isinstance(path, str):
        raise TypeError(f"path must be a string, not {type(path).__name__}")
    return reporter.generate_report(path)


TOOLS: Dict[str, Dict[str, Any]] = {
    "load_directory_report": {
        "impl": _report_tool,
        "spec": reporter.tool_spec,
    },
}
TOOL_SPECS = [t["spec"] for t in TOOLS.values()]


def call_tool(name: str, arguments: Union[str, Dict[str, Any], None] = None) -> str:
    """Run tool *name* with JSON (or dict) *arguments*; failures become text."""
    args: Any = arguments
    try:
        if not isinstance(args, dict):
            args = json.loads(args or "{}")
        tool = TOOLS[name]["impl"]
        result = tool(**args)
    except Exception as exc:
        result = f"❌ {exc.__class__.__name__}: {exc}"

    logging.info("🔧 %-15s %s", name, args)
    logging.info("✅ %-15s %s", name, str(result)[:120])
    return result
