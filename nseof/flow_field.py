"""State of the flow domain: pressure, velocity, flags and solver fields."""

from __future__ import annotations

from nseof.assertion import check
from nseof.fields import IntScalarField, ScalarField, VectorField

_GHOST = 3


class FlowField:
    """All fields of a (sub)domain, each padded with ghost layers.

    The pressure field carries the same padding as the velocity so that both
    can be addressed with the same indices.
    """

    def __init__(self, nx, ny, nz=None):
        check(nx > 0, "nx > 0", nx)
        check(ny > 0, "ny > 0", ny)
        if nz is not None:
            check(nz > 0, "nz > 0", nz)
        self._build(nx, ny, 1 if nz is None else nz, nz is not None)

    @classmethod
    def from_parameters(cls, parameters):
        """Build a field sized for this process's part of the domain."""
        nx, ny, nz = parameters.parallel.local_size
        field = cls.__new__(cls)
        field._build(nx, ny, nz, parameters.geometry.dim != 2)
        return field

    def _build(self, nx, ny, nz, three_d):
        self.nx = nx
        self.ny = ny
        self.nz = nz
        self.three_d = three_d
        self.cells_x = nx + _GHOST
        self.cells_y = ny + _GHOST
        self.cells_z = nz + _GHOST if three_d else 1

        shape = (self.cells_x, self.cells_y)
        if three_d:
            shape += (self.cells_z,)
        self.pressure = ScalarField(*shape)
        self.velocity = VectorField(*shape)
        self.flags = IntScalarField(*shape)
        self.fgh = VectorField(*shape)
        self.rhs = ScalarField(*shape)

    def pressure_and_velocity(self, i, j, k=None):
        """Pressure and cell-centred velocity of cell (i, j[, k]).

        Velocities are stored on cell faces; the centre value is the mean of
        the two faces in each direction.
        """
        velocity = self.velocity
        if k is None:
            here = velocity.vector(i, j)
            left = velocity.vector(i - 1, j)
            down = velocity.vector(i, j - 1)
            centre = (
                float(here[0] + left[0]) / 2,
                float(here[1] + down[1]) / 2,
            )
            return self.pressure[i, j], centre

        here = velocity.vector(i, j, k)
        left = velocity.vector(i - 1, j, k)
        down = velocity.vector(i, j - 1, k)
        back = velocity.vector(i, j, k - 1)
        centre = (
            float(here[0] + left[0]) / 2,
            float(here[1] + down[1]) / 2,
            float(here[2] + back[2]) / 2,
        )
        return self.pressure[i, j, k], centre