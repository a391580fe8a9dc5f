import pytest

from nseof.assertion import AssertionFailed
from nseof.flow_field import FlowField
from nseof.parameters import Parameters

SIZE_X = 20
SIZE_Y = 25


def test_flow_field_case_from_source():
    field = FlowField(SIZE_X, SIZE_Y)

    assert field.pressure[10, 10] == 0

    field.pressure[10, 10] = 10
    assert field.pressure[10, 10] / 2 == 5

    assert field.flags.nx == 23
    assert field.flags.ny == 28

    field.flags[10, 10] = 7
    assert field.flags[10, 10] // 3 == 2


def test_two_d_sizes():
    field = FlowField(4, 5)
    assert (field.nx, field.ny, field.nz) == (4, 5, 1)
    assert (field.cells_x, field.cells_y, field.cells_z) == (7, 8, 1)
    assert field.velocity.components == 2
    assert field.rhs.nx == 7


def test_three_d_sizes():
    field = FlowField(4, 5, 6)
    assert (field.cells_x, field.cells_y, field.cells_z) == (7, 8, 9)
    assert field.fgh.components == 3
    assert field.pressure.nz == 9


def test_rejects_empty_domain():
    with pytest.raises(AssertionFailed):
        FlowField(0, 5)
    with pytest.raises(AssertionFailed):
        FlowField(3, 5, 0)


def test_from_parameters_two_d():
    params = Parameters()
    params.geometry.dim = 2
    params.parallel.local_size = [6, 7, 1]
    field = FlowField.from_parameters(params)
    assert (field.nx, field.ny, field.nz) == (6, 7, 1)
    assert (field.cells_x, field.cells_y, field.cells_z) == (9, 10, 1)
    assert field.velocity.components == 2


def test_from_parameters_three_d():
    params = Parameters()
    params.geometry.dim = 3
    params.parallel.local_size = [3, 4, 5]
    field = FlowField.from_parameters(params)
    assert (field.cells_x, field.cells_y, field.cells_z) == (6, 7, 8)
    assert field.flags.nz == 8
    assert field.velocity.components == 3


def test_pressure_and_velocity_two_d_averages_faces():
    field = FlowField(4, 4)
    field.velocity.vector(3, 3)[:] = [2.0, 6.0]
    field.velocity.vector(2, 3)[:] = [4.0, 100.0]
    field.velocity.vector(3, 2)[:] = [100.0, 8.0]
    field.pressure[3, 3] = 1.5
    pressure, velocity = field.pressure_and_velocity(3, 3)
    assert pressure == 1.5
    assert velocity == (3.0, 7.0)


def test_pressure_and_velocity_three_d_averages_faces():
    field = FlowField(3, 3, 3)
    field.velocity.vector(2, 2, 2)[:] = [1.0, 2.0, 3.0]
    field.velocity.vector(1, 2, 2)[:] = [3.0, 0.0, 0.0]
    field.velocity.vector(2, 1, 2)[:] = [0.0, 4.0, 0.0]
    field.velocity.vector(2, 2, 1)[:] = [0.0, 0.0, 5.0]
    field.pressure[2, 2, 2] = -2.0
    pressure, velocity = field.pressure_and_velocity(2, 2, 2)
    assert pressure == -2.0
    assert velocity == (2.0, 3.0, 4.0)


def test_fields_are_independent():
    field = FlowField(3, 3)
    field.rhs[1, 1] = 4.0
    assert field.pressure[1, 1] == 0.0
    field.fgh.vector(1, 1)[0] = 9.0
    assert field.velocity.vector(1, 1)[0] == 0.0