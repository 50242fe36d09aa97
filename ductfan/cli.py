"""Command that runs the sample ducted-fan simulation."""

from __future__ import annotations

import argparse
import contextlib
from collections.abc import Sequence
from pathlib import Path

from ductfan.airfoils import AirfoilDatabase
from ductfan.bemt import BEMTRotorModel
from ductfan.config import Config
from ductfan.exporter import write_flow_field_csv
from ductfan.flowfield import generate_axisymmetric_field
from ductfan.geometry import Blade, BladeSection, Duct, DuctedFan
from ductfan.momentum import MomentumDiskModel

_TEST_THRUST = 100.0  # N
_FLOW_NX = 40
_FLOW_NR = 20


def _fmt(value: float) -> str:
    return f"{value:g}"


def build_test_fan(config: Config) -> DuctedFan:
    """A five-station, 1 m radius test fan inside a simple duct."""
    rotor = Blade(
        [
            BladeSection(0.2, 0.08, 25.0, "NACA2412"),
            BladeSection(0.4, 0.06, 18.0, "NACA2412"),
            BladeSection(0.6, 0.05, 12.0, "NACA2412"),
            BladeSection(0.8, 0.04, 8.0, "NACA2412"),
            BladeSection(1.0, 0.03, 5.0, "NACA2412"),
        ]
    )
    duct = Duct(naca_code="NACA0015", length=0.5, inner_radius=1.0, outer_radius=1.05)
    return DuctedFan(rotor=rotor, duct=duct, blade_count=config.blade_count, rpm=config.rpm)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the momentum and BEM models on the test fan and export a flow field."""
    parser = argparse.ArgumentParser(
        prog="ductfan", description="Ducted fan simulation: BEM and momentum test."
    )
    parser.parse_args(argv)

    print(f"Working directory: {Path.cwd()}\n")
    print("Ducted Fan Simulation - BEM + Momentum Test")

    cfg = Config()
    cfg.print_summary()

    fan = build_test_fan(cfg)
    cfg.op_cond.v_infty = 0.0

    mom = MomentumDiskModel().solve_with_thrust(fan, cfg.op_cond, _TEST_THRUST)
    print("\n=== Momentum Disk Model ===")
    print(f"Thrust (input): {_fmt(mom.thrust)} N")
    print(f"Power (ideal):  {_fmt(mom.power)} W")
    print(f"Vi (hover):     {_fmt(mom.vi_hover)} m/s")

    airfoils = AirfoilDatabase()
    with contextlib.suppress(OSError):
        airfoils.load_from_directory(cfg.airfoil_data_dir)

    bem = BEMTRotorModel().solve(fan.rotor, fan.blade_count, cfg.op_cond, airfoils, fan.rpm)
    print("\n=== BEM Rotor Model ===")
    print(f"Thrust: {_fmt(bem.thrust)} N")
    print(f"Torque: {_fmt(bem.torque)} N*m")
    print(f"Power:  {_fmt(bem.power)} W")
    print(f"Ct:     {_fmt(bem.ct)}")
    print(f"Cp:     {_fmt(bem.cp)}")
    print(f"Eta:    {_fmt(bem.eta)}")
    print(f"R:      {_fmt(bem.r)} m")

    print("\nElement breakdown (r, a, a', alpha, dT, dQ):")
    for e in bem.elements:
        print(
            f"r={_fmt(e.r)} a={_fmt(e.a)} a'={_fmt(e.a_prime)} "
            f"alpha={_fmt(e.alpha_deg)} dT={_fmt(e.dt)} dQ={_fmt(e.dq)}"
        )

    flow_file = cfg.flow_field_output_path
    parent = Path(flow_file).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(
            f"\nWarning: could not create output directory '{parent}': "
            f"{exc.strerror or exc}"
        )

    flow = generate_axisymmetric_field(
        bem, cfg.op_cond, -1.0 * bem.r, 2.0 * bem.r, _FLOW_NX, bem.r * 1.5, _FLOW_NR
    )

    try:
        write_flow_field_csv(flow_file, flow)
    except OSError:
        print(f"\nFailed to write flow field to {flow_file}")
    else:
        print(f"\nFlow field written to {flow_file}")

    print("\nSimulation complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())