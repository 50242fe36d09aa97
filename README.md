# ductfan

Quick performance estimates for a ducted fan rotor. The package provides:

- an ideal **momentum disk** model (`ductfan.momentum.MomentumDiskModel`). It gives the
  induced velocity, ideal power, mass flow, thrust and power coefficients and ideal
  efficiency for a given thrust (`solve_with_thrust`), or for a thrust estimated from the
  fan's RPM (`solve_with_rpm`);
- a **blade element momentum** rotor model (`ductfan.bemt.BEMTRotorModel`) with Prandtl
  tip loss. It iterates the axial and tangential induction factors at each blade section,
  with relaxation, and integrates thrust, torque and power. Lift and drag come from an
  `ductfan.airfoils.AirfoilDatabase`. When the database has no polar for a section's
  airfoil, the model uses thin-airfoil lift (2πα) with a parabolic drag polar;
- a simple axisymmetric **flow field** generator
  (`ductfan.flowfield.generate_axisymmetric_field`). It derives the induced velocity from
  the BEM thrust by momentum theory and writes it out as an axial velocity profile. A CSV
  writer for the field is `ductfan.exporter.write_flow_field_csv`.

Supporting modules are `ductfan.geometry` (`BladeSection`, `Blade`, `Duct`, `DuctedFan`,
`Point3D`, `Triangle`), `ductfan.config` (`OperatingCondition`, `Config`),
`ductfan.mathutils` (`linear_interpolate`, `Vector3`) and `ductfan.csvreader` (`read_csv`).

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no runtime dependencies.

## Command line

```
ductfan
```

This command takes no options. It runs the built-in test case, which
`ductfan.cli.build_test_fan` also returns: a three-bladed rotor at 5000 RPM with five
NACA2412 sections, tip radius 1 m, in hover. The command prints the working directory and
the configuration. It then prints the momentum disk results for 100 N of thrust, the BEM
totals and a breakdown per element. Last, it writes the flow field to
`output/flowfield.csv` and creates the directory if it does not exist. If the directory
cannot be created or the file cannot be written, it prints a message and still exits with
status 0.

## Library use

```python
from ductfan.config import Config
from ductfan.cli import build_test_fan
from ductfan.airfoils import AirfoilDatabase
from ductfan.bemt import BEMTRotorModel
from ductfan.momentum import MomentumDiskModel
from ductfan.flowfield import generate_axisymmetric_field
from ductfan.exporter import write_flow_field_csv

config = Config()
fan = build_test_fan(config)

mom = MomentumDiskModel().solve_with_thrust(fan, config.op_cond, 100.0)
print(mom.power, mom.vi_hover)

db = AirfoilDatabase()
bem = BEMTRotorModel().solve(fan.rotor, fan.blade_count, config.op_cond, db, fan.rpm)
print(bem.thrust, bem.torque, bem.power, bem.ct, bem.cp)
for element in bem.elements:
    print(element.r, element.a, element.a_prime, element.alpha_deg, element.dt, element.dq)

field = generate_axisymmetric_field(bem, config.op_cond, -bem.r, 2 * bem.r, 40, 1.5 * bem.r, 20)
write_flow_field_csv("flowfield.csv", field)
```

`BEMTRotorModel.solve` raises `ValueError` if the blade has fewer than two sections.

To use tabulated data, add `AirfoilPolar` objects with `AirfoilDatabase.add_polar`. For a
given airfoil name, `get_cl`, `get_cd` and `get_cm` choose the polar whose Reynolds and
Mach numbers are closest. Within that polar they interpolate linearly in angle of attack
and clamp at the ends of the table. They raise `ductfan.airfoils.MissingPolarError` (a
`LookupError`) if no polar is stored for the airfoil.

The flow field samples `nx` axial stations by `nr` radii, with four points around each
circle. The exported CSV has the header `x,y,z,u,v,w` and one row per point, with values
written to six significant digits.

## Limitations

- `AirfoilDatabase.load_from_directory` lists and reads the `.csv` files in a directory
  and returns how many it read, but it does not yet turn them into polars. Polars must be
  added in code with `add_polar`. Without them, the BEM model always uses the
  thin-airfoil fallback.
- `Config` holds defaults only. It cannot be loaded from a file, and the command does not
  write anything to `performance_output_path`.
- The duct geometry (`Duct`) is descriptive only. Neither solver models duct effects.
- The flow field has axial velocity only. There is no swirl, so `v` and `w` are always zero.