"""Operating conditions and simulation settings."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass
class OperatingCondition:
    """Ambient air state and flight speed."""

    rho: float = 1.225  # kg/m^3
    mu: float = 1.7894e-5  # Pa*s
    p_ambient: float = 101325.0  # Pa
    t_ambient: float = 288.15  # K
    v_infty: float = 0.0  # m/s
    mach: float = 0.0


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Config:
    """Simulation settings and file paths."""

    airfoil_data_dir: str = "data/airfoils"
    nasa_data_dir: str = "data/nasa"
    duct_stl_path: str = ""
    rotor_stl_path: str = ""
    flow_field_output_path: str = "output/flowfield.csv"
    performance_output_path: str = "output/performance.txt"
    op_cond: OperatingCondition = field(default_factory=OperatingCondition)
    rpm: float = 5000.0
    blade_count: int = 3

    def summary(self) -> str:
        """Human-readable description of the configuration."""
        op = self.op_cond
        lines = [
            "=== Simulation Configuration ===",
            f"Airfoil data directory: {self.airfoil_data_dir}",
            f"NASA data directory   : {self.nasa_data_dir}",
            f"Duct STL path         : {self.duct_stl_path}",
            f"Rotor STL path        : {self.rotor_stl_path}",
            f"Output flow field     : {self.flow_field_output_path}",
            f"Output performance    : {self.performance_output_path}",
            f"RPM                   : {_fmt(self.rpm)}",
            f"Blade count           : {self.blade_count}",
            "Operating condition:",
            f"  rho        = {_fmt(op.rho)} kg/m^3",
            f"  mu         = {_fmt(op.mu)} Pa*s",
            f"  V_infty    = {_fmt(op.v_infty)} m/s",
            f"  p_ambient  = {_fmt(op.p_ambient)} Pa",
            f"  T_ambient  = {_fmt(op.t_ambient)} K",
            f"  Mach       = {_fmt(op.mach)}",
            "================================",
        ]
        return "\n".join(lines) + "\n"

    def print_summary(self) -> str:
        """Write the summary to standard output and return the text written."""
        text = self.summary()
        sys.stdout.write(text)
        sys.stdout.flush()
        return text