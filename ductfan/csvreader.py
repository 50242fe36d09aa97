"""Minimal comma-separated file reader."""

from __future__ import annotations

import os


def read_csv(file_path: str | os.PathLike[str]) -> list[list[str]]:
    """Read a file and split every line on commas.

    No quoting is recognised. A trailing empty field is dropped, so an empty
    line gives an empty row. Raises OSError if the file cannot be opened.
    """
    with open(file_path, encoding="utf-8", newline="") as handle:
        content = handle.read()

    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    rows = []
    for line in lines:
        cells = line.split(",")
        if cells[-1] == "":
            cells.pop()
        rows.append(cells)
    return rows