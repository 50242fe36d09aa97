"""Airfoil polars and a database that looks coefficients up by Re and Mach."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from ductfan.csvreader import read_csv
from ductfan.mathutils import linear_interpolate


class MissingPolarError(LookupError):
    """Raised when no polar is stored for the requested airfoil."""


@dataclass
class AirfoilPolar:
    """Tabulated coefficients of one airfoil at one Reynolds and Mach number."""

    airfoil_name: str = ""
    re: float = 0.0
    mach: float = 0.0
    alpha_deg: list[float] = field(default_factory=list)
    cl: list[float] = field(default_factory=list)
    cd: list[float] = field(default_factory=list)
    cm: list[float] = field(default_factory=list)


class AirfoilDatabase:
    """Polars grouped by airfoil name."""

    def __init__(self) -> None:
        self._polars: dict[str, list[AirfoilPolar]] = {}

    def add_polar(self, polar: AirfoilPolar) -> None:
        """Store a polar under its airfoil name."""
        self._polars.setdefault(polar.airfoil_name, []).append(polar)

    def load_from_directory(self, directory_path: str | os.PathLike[str]) -> int:
        """Read every .csv file in the directory and return how many were read.

        Unreadable files are skipped. The file contents are not yet turned into
        polars. Raises OSError if the directory cannot be listed.
        """
        count = 0
        for entry in Path(directory_path).iterdir():
            if not entry.is_file() or entry.suffix != ".csv":
                continue
            try:
                read_csv(entry)
            except (OSError, UnicodeDecodeError):
                continue
            count += 1
        return count

    def find_closest_polar(
        self, airfoil_name: str, re: float, mach: float
    ) -> AirfoilPolar | None:
        """Polar of the airfoil nearest in (Re, Mach), or None if there is none."""
        polars = self._polars.get(airfoil_name)
        if not polars:
            return None
        return min(polars, key=lambda p: (p.re - re) ** 2 + (p.mach - mach) ** 2)

    def _require(self, airfoil_name: str, re: float, mach: float) -> AirfoilPolar:
        polar = self.find_closest_polar(airfoil_name, re, mach)
        if polar is None:
            raise MissingPolarError(f"No polar data for airfoil: {airfoil_name}")
        return polar

    def get_cl(self, airfoil_name: str, alpha_deg: float, re: float, mach: float) -> float:
        """Lift coefficient at the given angle of attack [deg]."""
        polar = self._require(airfoil_name, re, mach)
        return linear_interpolate(polar.alpha_deg, polar.cl, alpha_deg)

    def get_cd(self, airfoil_name: str, alpha_deg: float, re: float, mach: float) -> float:
        """Drag coefficient at the given angle of attack [deg]."""
        polar = self._require(airfoil_name, re, mach)
        return linear_interpolate(polar.alpha_deg, polar.cd, alpha_deg)

    def get_cm(self, airfoil_name: str, alpha_deg: float, re: float, mach: float) -> float:
        """Moment coefficient at the given angle of attack [deg]."""
        polar = self._require(airfoil_name, re, mach)
        return linear_interpolate(polar.alpha_deg, polar.cm, alpha_deg)