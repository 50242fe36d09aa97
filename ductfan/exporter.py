"""Writing flow fields to CSV."""

from __future__ import annotations

import os

from ductfan.flowfield import FlowField

_HEADER = "x,y,z,u,v,w\n"


def write_flow_field_csv(file_path: str | os.PathLike[str], field: FlowField) -> None:
    """Write one row per point with six significant digits.

    Raises OSError if the file cannot be created.
    """
    with open(file_path, "w", encoding="utf-8", newline="") as out:
        out.write(_HEADER)
        for p in field.points:
            out.write(",".join(f"{value:g}" for value in (p.x, p.y, p.z, p.u, p.v, p.w)))
            out.write("\n")