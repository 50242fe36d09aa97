import math

import pytest

from ductfan.bemt import BEMTResults
from ductfan.config import OperatingCondition
from ductfan.flowfield import generate_axisymmetric_field
from ductfan.geometry import Blade, BladeSection, DuctedFan
from ductfan.momentum import MomentumDiskModel


def hover_velocity(thrust, op):
    fan = DuctedFan(rotor=Blade([BladeSection(0.5, 0.05, 10.0, "A"), BladeSection(1.0, 0.03, 5.0, "A")]))
    return MomentumDiskModel().solve_with_thrust(fan, op, thrust).vi_hover


@pytest.fixture
def op():
    return OperatingCondition(v_infty=5.0)


@pytest.fixture
def bem():
    return BEMTResults(thrust=100.0, r=1.0)


def test_point_count(bem, op):
    field = generate_axisymmetric_field(bem, op, -1.0, 2.0, 7, 1.5, 5)
    assert len(field.points) == 7 * 5 * 4


def test_no_swirl(bem, op):
    field = generate_axisymmetric_field(bem, op, -1.0, 2.0, 6, 1.5, 4)
    assert all(p.v == 0.0 and p.w == 0.0 for p in field.points)


def test_axial_profile(bem, op):
    field = generate_axisymmetric_field(bem, op, -1.0, 2.0, 4, 1.5, 3)
    vi = hover_velocity(100.0, op)
    for p in field.points:
        if p.x <= 0.0:
            assert p.u == pytest.approx(op.v_infty)
        else:
            assert p.u == pytest.approx(op.v_infty + 2.0 * vi)


def test_ramp_midpoint(bem, op):
    field = generate_axisymmetric_field(bem, op, 0.1, 0.1, 1, 1.0, 2)
    vi = hover_velocity(100.0, op)
    assert all(p.u == pytest.approx(op.v_infty + 0.5 * vi) for p in field.points)


def test_points_lie_on_circles(bem, op):
    field = generate_axisymmetric_field(bem, op, -1.0, 1.0, 2, 1.5, 4)
    radii = sorted({round(math.hypot(p.y, p.z), 9) for p in field.points})
    assert radii == pytest.approx([0.0, 0.5, 1.0, 1.5])


def test_single_station_uses_x_min(bem, op):
    field = generate_axisymmetric_field(bem, op, -0.3, 5.0, 1, 1.0, 3)
    assert {p.x for p in field.points} == {-0.3}


def test_single_radius_at_axis(bem, op):
    field = generate_axisymmetric_field(bem, op, -1.0, 1.0, 3, 2.0, 1)
    assert all(p.y == 0.0 and p.z == 0.0 for p in field.points)


def test_negative_thrust_has_no_induced_velocity(op):
    bem = BEMTResults(thrust=-50.0, r=1.0)
    field = generate_axisymmetric_field(bem, op, -1.0, 2.0, 5, 1.0, 2)
    assert all(p.u == op.v_infty for p in field.points)


def test_empty_when_no_stations(bem, op):
    field = generate_axisymmetric_field(bem, op, -1.0, 2.0, 0, 1.0, 5)
    assert field.points == []