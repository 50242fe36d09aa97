"""Geometric building blocks and the ducted-fan description."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point3D:
    """A point in Cartesian space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Triangle:
    """A triangle given by its three vertices."""

    v0: Point3D = field(default_factory=Point3D)
    v1: Point3D = field(default_factory=Point3D)
    v2: Point3D = field(default_factory=Point3D)


@dataclass
class BladeSection:
    """One radial station of a blade."""

    r: float
    chord: float
    twist_deg: float
    airfoil_name: str


@dataclass
class Blade:
    """A blade described by its radial sections, root to tip."""

    sections: list[BladeSection] = field(default_factory=list)

    def tip_radius(self) -> float:
        """Radius of the outermost section."""
        if not self.sections:
            raise ValueError("blade has no sections")
        return self.sections[-1].r


@dataclass
class Duct:
    """Simple duct geometry."""

    naca_code: str = ""
    length: float = 0.0
    inner_radius: float = 0.0
    outer_radius: float = 0.0


@dataclass
class DuctedFan:
    """A rotor inside a duct."""

    rotor: Blade = field(default_factory=Blade)
    duct: Duct = field(default_factory=Duct)
    blade_count: int = 0
    rpm: float = 0.0