"""Ideal momentum (actuator-disk) theory for a ducted fan."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ductfan.config import OperatingCondition
from ductfan.geometry import DuctedFan
from ductfan.mathutils import PI

# Scale of the rough thrust estimate T = K * rho * rpm^2 * R^4
_RPM_THRUST_FACTOR = 1e-10


def _div(num: float, den: float) -> float:
    """Floating-point division that yields inf/nan instead of raising."""
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _sqrt(value: float) -> float:
    """Square root that yields nan for negative or nan input."""
    return math.sqrt(value) if value >= 0.0 else math.nan


@dataclass
class MomentumResults:
    """Outcome of a momentum-disk calculation."""

    disk_area: float = 0.0  # m^2
    vi_hover: float = 0.0  # induced velocity in hover [m/s]
    vi_forward: float = 0.0  # induced velocity in forward flight [m/s]
    vi: float = 0.0  # induced velocity actually used [m/s]
    thrust: float = 0.0  # N
    power: float = 0.0  # W
    ct: float = 0.0  # thrust coefficient
    cp: float = 0.0  # power coefficient
    eta: float = 0.0  # ideal efficiency
    mass_flow: float = 0.0  # kg/s


class MomentumDiskModel:
    """Actuator-disk model sized by the rotor tip radius."""

    @staticmethod
    def _disk_area(radius: float) -> float:
        return PI * radius * radius

    @staticmethod
    def _estimate_thrust_from_rpm(fan: DuctedFan, op: OperatingCondition) -> float:
        radius = fan.rotor.tip_radius()
        return _RPM_THRUST_FACTOR * op.rho * fan.rpm * fan.rpm * radius**4

    def solve_with_thrust(
        self, fan: DuctedFan, op: OperatingCondition, thrust: float
    ) -> MomentumResults:
        """Induced velocity, power and coefficients for a given thrust [N]."""
        radius = fan.rotor.tip_radius()
        disk_area = self._disk_area(radius)

        vi_hover = _sqrt(_div(thrust, 2.0 * op.rho * disk_area))

        v_infty = op.v_infty
        vi_forward = 0.0
        if v_infty > 0.0:
            vi_forward = (-v_infty + _sqrt(v_infty * v_infty + 4.0 * vi_hover * vi_hover)) / 2.0

        vi = vi_forward if v_infty > 0.0 else vi_hover

        power = thrust * (v_infty + vi)
        mass_flow = op.rho * disk_area * (v_infty + vi)

        omega = fan.rpm * (2.0 * PI / 60.0)
        u_tip = omega * radius

        ct = _div(thrust, op.rho * disk_area * u_tip * u_tip)
        cp = _div(power, op.rho * disk_area * u_tip**3)

        eta = v_infty / (v_infty + vi) if v_infty + vi != 0.0 else 0.0

        return MomentumResults(
            disk_area=disk_area,
            vi_hover=vi_hover,
            vi_forward=vi_forward,
            vi=vi,
            thrust=thrust,
            power=power,
            ct=ct,
            cp=cp,
            eta=eta,
            mass_flow=mass_flow,
        )

    def solve_with_rpm(self, fan: DuctedFan, op: OperatingCondition) -> MomentumResults:
        """Estimate thrust from the fan's RPM, then solve as for a known thrust."""
        return self.solve_with_thrust(fan, op, self._estimate_thrust_from_rpm(fan, op))