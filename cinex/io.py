"""
cinex.io - Text and JSON read/write helpers, atomic file writes.

Centralized I/O utilities for the command-line tools. The codec itself
works on strings and never touches the filesystem.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any


def read_json(path: Path) -> dict[str, Any]:
    """Read JSON file with UTF-8 encoding.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON data as dictionary

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file contains invalid JSON
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: dict[str, Any], indent: int = 2) -> None:
    """Write JSON file atomically with pretty formatting.

    Args:
        path: Destination path for JSON file
        data: Data to write
        indent: Indentation level for pretty printing (default: 2)
    """
    write_text(path, json.dumps(data, indent=indent, ensure_ascii=False) + "\n")


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file; CRLF line endings come back as LF.

    Args:
        path: Path to text file
        encoding: Text encoding (default: utf-8)

    Returns:
        File contents as string
    """
    with open(path, encoding=encoding) as f:
        return f.read()


def write_text(path: Path, content: str, encoding: str = "utf-8", newline: str = "\n") -> None:
    """Write text file atomically.

    Writes to a temp file first, then renames to prevent corruption
    on interruption.

    Args:
        path: Destination path
        content: Text content with LF line endings
        encoding: Text encoding (default: utf-8)
        newline: Line ending written for each LF in content
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding=encoding,
        newline=newline,
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(content)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
    tmp_path.replace(path)
