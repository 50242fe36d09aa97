"""Blade-element momentum theory (BEMT) rotor model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ductfan.airfoils import AirfoilDatabase
from ductfan.config import OperatingCondition
from ductfan.geometry import Blade, BladeSection
from ductfan.mathutils import PI

_MAX_ITERATIONS = 100
_TOLERANCE = 1e-4
_RELAXATION = 0.3


def _div(num: float, den: float) -> float:
    """Floating-point division that yields inf/nan instead of raising."""
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _thin_airfoil_coefficients(alpha_rad: float) -> tuple[float, float]:
    """Thin-airfoil lift with a simple parabolic drag polar."""
    cl = 2.0 * PI * alpha_rad
    cd0 = 0.01
    k = 0.02
    return cl, cd0 + k * cl * cl


def _tip_loss(blade_count: int, tip_radius: float, r: float, phi: float) -> float:
    """Prandtl tip-loss factor, bounded below by 1e-3."""
    sin_phi = math.sin(phi)
    if tip_radius <= r or abs(sin_phi) < 1e-6:
        return 1.0
    f = (blade_count / 2.0) * _div(tip_radius - r, r * sin_phi)
    if not f >= 0.0:
        return math.nan
    factor = (2.0 / PI) * math.acos(math.exp(-f))
    return max(factor, 1e-3)


@dataclass
class ElementResult:
    """Converged state and loads of one blade element."""

    r: float = 0.0  # radial position [m]
    dr: float = 0.0  # radial width [m]
    a: float = 0.0  # axial induction factor
    a_prime: float = 0.0  # tangential induction factor
    phi: float = 0.0  # inflow angle [rad]
    alpha_deg: float = 0.0  # angle of attack [deg]
    cl: float = 0.0
    cd: float = 0.0
    dt: float = 0.0  # thrust contribution [N]
    dq: float = 0.0  # torque contribution [N*m]


@dataclass
class BEMTResults:
    """Integrated rotor performance."""

    thrust: float = 0.0  # N
    torque: float = 0.0  # N*m
    power: float = 0.0  # W
    ct: float = 0.0
    cp: float = 0.0
    eta: float = 0.0
    r: float = 0.0  # tip radius [m]
    omega: float = 0.0  # rad/s
    u_tip: float = 0.0  # m/s
    elements: list[ElementResult] = field(default_factory=list)


def _element_widths(radii: list[float]) -> list[float]:
    middle = [0.5 * (nxt - prv) for prv, nxt in zip(radii, radii[2:])]
    return [radii[1] - radii[0], *middle, radii[-1] - radii[-2]]


class BEMTRotorModel:
    """Iterates induction factors per radial station and integrates the loads."""

    def solve(
        self,
        blade: Blade,
        blade_count: int,
        op: OperatingCondition,
        db: AirfoilDatabase,
        rpm: float,
    ) -> BEMTResults:
        """Solve the rotor at the given RPM.

        Raises ValueError if the blade has fewer than two sections.
        """
        sections = blade.sections
        if len(sections) < 2:
            raise ValueError("BEMTRotorModel: blade must have at least 2 sections.")

        tip_radius = sections[-1].r
        res = BEMTResults(r=tip_radius)
        res.omega = rpm * (2.0 * PI / 60.0)
        res.u_tip = res.omega * tip_radius

        widths = _element_widths([s.r for s in sections])
        for section, width in zip(sections, widths):
            element = self._solve_element(
                section, width, blade_count, tip_radius, res.omega, op, db
            )
            res.thrust += element.dt
            res.torque += element.dq
            res.elements.append(element)

        res.power = res.torque * res.omega

        if tip_radius > 0.0:
            area = PI * tip_radius * tip_radius
            if op.rho > 0.0 and area > 0.0 and res.u_tip > 0.0:
                res.ct = res.thrust / (op.rho * area * res.u_tip**2)
                res.cp = res.power / (op.rho * area * res.u_tip**3)

        if op.v_infty > 0.0 and res.power > 0.0:
            res.eta = res.thrust * op.v_infty / res.power
        else:
            res.eta = 0.0

        return res

    @staticmethod
    def _coefficients(
        db: AirfoilDatabase,
        section: BladeSection,
        alpha_rad: float,
        alpha_deg: float,
        re: float,
        mach: float,
    ) -> tuple[float, float]:
        try:
            cl = db.get_cl(section.airfoil_name, alpha_deg, re, mach)
            cd = db.get_cd(section.airfoil_name, alpha_deg, re, mach)
        except (LookupError, ValueError):
            return _thin_airfoil_coefficients(alpha_rad)
        return cl, cd

    def _solve_element(
        self,
        section: BladeSection,
        width: float,
        blade_count: int,
        tip_radius: float,
        omega: float,
        op: OperatingCondition,
        db: AirfoilDatabase,
    ) -> ElementResult:
        r = section.r
        chord = section.chord
        theta = math.radians(section.twist_deg)
        v_infty = op.v_infty

        a = 0.1
        a_prime = 0.0
        phi = 0.0
        alpha_deg = 0.0
        cl = cd = 0.0

        for _ in range(_MAX_ITERATIONS):
            v_axial = v_infty * (1.0 - a)
            v_tangential = omega * r * (1.0 + a_prime)

            phi = math.atan2(v_axial, v_tangential)
            alpha = theta - phi
            alpha_deg = alpha * 180.0 / PI

            v_rel = math.hypot(v_axial, v_tangential)
            re = op.rho * v_rel * chord / op.mu if op.mu > 0.0 else 0.0
            cl, cd = self._coefficients(db, section, alpha, alpha_deg, re, op.mach)

            sin_phi = math.sin(phi)
            cos_phi = math.cos(phi)
            cn = cl * cos_phi + cd * sin_phi
            ct = cl * sin_phi - cd * cos_phi

            sigma = _div(blade_count * chord, 2.0 * PI * r)
            tip_factor = _tip_loss(blade_count, tip_radius, r, phi)

            if sigma * cn < 1e-6:
                break

            a_new = 1.0 / (_div(4.0 * tip_factor * sin_phi * sin_phi, sigma * cn) + 1.0)

            a_prime_new = a_prime
            if abs(ct) > 1e-6:
                a_prime_new = _div(
                    1.0, _div(4.0 * tip_factor * sin_phi * cos_phi, sigma * ct) - 1.0
                )

            a_new = a + _RELAXATION * (a_new - a)
            a_prime_new = a_prime + _RELAXATION * (a_prime_new - a_prime)

            converged = abs(a_new - a) < _TOLERANCE and abs(a_prime_new - a_prime) < _TOLERANCE
            a, a_prime = a_new, a_prime_new
            if converged:
                break

        v_axial = v_infty * (1.0 - a)
        v_tangential = omega * r * (1.0 + a_prime)
        q = 0.5 * op.rho * (v_axial * v_axial + v_tangential * v_tangential)

        d_lift = q * chord * cl * width
        d_drag = q * chord * cd * width
        sin_phi = math.sin(phi)
        cos_phi = math.cos(phi)

        return ElementResult(
            r=r,
            dr=width,
            a=a,
            a_prime=a_prime,
            phi=phi,
            alpha_deg=alpha_deg,
            cl=cl,
            cd=cd,
            dt=blade_count * (d_lift * cos_phi + d_drag * sin_phi),
            dq=blade_count * (d_lift * sin_phi - d_drag * cos_phi) * r,
        )