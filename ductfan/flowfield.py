"""Sampled velocity field around the rotor."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ductfan.bemt import BEMTResults
from ductfan.config import OperatingCondition
from ductfan.mathutils import PI, TWO_PI

_CIRCUMFERENTIAL_POINTS = 4


def _div(num: float, den: float) -> float:
    """Floating-point division that yields inf/nan instead of raising."""
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


@dataclass
class FlowPoint:
    """Position [m] and velocity [m/s] at one sample point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    u: float = 0.0
    v: float = 0.0
    w: float = 0.0


@dataclass
class FlowField:
    """A collection of flow samples."""

    points: list[FlowPoint] = field(default_factory=list)


def _axial_profile(x: float, radius: float) -> float:
    """0 upstream, ramping to 1 at x = 0.2 R, approaching 2 downstream."""
    ramp = 0.2 * radius
    if x < 0.0:
        return 0.0
    if x <= ramp:
        return _div(x, ramp)
    return 1.0 + min(_div(x - ramp, 0.8 * radius), 1.0)


def generate_axisymmetric_field(
    bem: BEMTResults,
    op: OperatingCondition,
    x_min: float,
    x_max: float,
    nx: int,
    r_max: float,
    nr: int,
) -> FlowField:
    """Axial velocity field from the rotor thrust via momentum theory.

    Samples nx axial stations by nr radii, with four points around each circle.
    """
    radius = bem.r
    rho = op.rho
    area = PI * radius * radius
    vi = 0.0
    if rho > 0.0 and area > 0.0:
        vi = math.sqrt(max(0.0, bem.thrust) / (2.0 * rho * area))

    dx = (x_max - x_min) / (nx - 1) if nx > 1 else 0.0
    dr = r_max / (nr - 1) if nr > 1 else 0.0
    angles = [(TWO_PI / _CIRCUMFERENTIAL_POINTS) * k for k in range(_CIRCUMFERENTIAL_POINTS)]

    points = []
    for ix in range(nx):
        x = x_min + ix * dx
        u = op.v_infty + vi * _axial_profile(x, radius)
        for ir in range(nr):
            r = ir * dr
            points.extend(
                FlowPoint(x=x, y=r * math.cos(angle), z=r * math.sin(angle), u=u)
                for angle in angles
            )
    return FlowField(points)