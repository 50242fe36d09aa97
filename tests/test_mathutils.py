import pytest

from ductfan.mathutils import Vector3, linear_interpolate


XS = [-10.0, 0.0, 5.0, 15.0]
YS = [-1.0, 0.2, 0.8, 1.3]


def test_interpolate_hits_table_points():
    for x, y in zip(XS, YS):
        assert linear_interpolate(XS, YS, x) == pytest.approx(y)


def test_interpolate_clamps_below_and_above():
    assert linear_interpolate(XS, YS, -100.0) == YS[0]
    assert linear_interpolate(XS, YS, 100.0) == YS[-1]


def test_interpolate_midpoint_is_average():
    mid = 0.5 * (XS[1] + XS[2])
    assert linear_interpolate(XS, YS, mid) == pytest.approx(0.5 * (YS[1] + YS[2]))


def test_interpolate_stays_within_interval_bounds():
    for i in range(len(XS) - 1):
        x = XS[i] + 0.3 * (XS[i + 1] - XS[i])
        y = linear_interpolate(XS, YS, x)
        assert min(YS[i], YS[i + 1]) <= y <= max(YS[i], YS[i + 1])


@pytest.mark.parametrize(
    "xs, ys",
    [([], []), ([1.0, 2.0], [1.0]), ([1.0], [1.0, 2.0])],
)
def test_interpolate_rejects_invalid_tables(xs, ys):
    with pytest.raises(ValueError, match="Interpolation tables are invalid"):
        linear_interpolate(xs, ys, 0.0)


def test_single_point_table_returns_that_value():
    assert linear_interpolate([2.0], [7.0], 3.0) == 7.0
    assert linear_interpolate([2.0], [7.0], 1.0) == 7.0


def test_vector_add_sub_round_trip():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_vector_scalar_multiplication():
    a = Vector3(1.0, -2.0, 3.0)
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0


def test_cross_of_unit_axes():
    ex = Vector3(1.0, 0.0, 0.0)
    ey = Vector3(0.0, 1.0, 0.0)
    assert ex.cross(ey) == Vector3(0.0, 0.0, 1.0)


def test_cross_is_orthogonal_and_antisymmetric():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert b.cross(a) == c * -1.0


def test_magnitude_and_dot_consistent():
    a = Vector3(3.0, 4.0, 0.0)
    assert a.magnitude() == pytest.approx(5.0)
    assert a.dot(a) == pytest.approx(a.magnitude() ** 2)


def test_default_vector_is_zero():
    assert Vector3().magnitude() == 0.0