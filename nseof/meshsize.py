"""Grid spacing: uniform meshes and tanh-stretched meshes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import IntEnum

_MIN_MESHSIZE = 1.0e-12
_DELTA_S = 2.7


class MeshsizeType(IntEnum):
    """Kind of grid spacing selected in the configuration."""

    UNIFORM = 0
    TANH_STRETCHING = 1


class Meshsize(ABC):
    """Cell sizes and corner positions of a structured grid.

    Indices are local and include two ghost layers on the lower side, so
    the first non-ghost cell of a process sits at index 2.
    """

    @abstractmethod
    def dx(self, i, j, k=0):
        """Width in x of cell (i, j, k)."""

    @abstractmethod
    def dy(self, i, j, k=0):
        """Width in y of cell (i, j, k)."""

    @abstractmethod
    def dz(self, i, j, k=0):
        """Width in z of cell (i, j, k)."""

    @abstractmethod
    def pos_x(self, i, j, k=0):
        """Global x position of the lower/left/front corner of cell (i, j, k)."""

    @abstractmethod
    def pos_y(self, i, j, k=0):
        """Global y position of the lower/left/front corner of cell (i, j, k)."""

    @abstractmethod
    def pos_z(self, i, j, k=0):
        """Global z position of the lower/left/front corner of cell (i, j, k)."""

    @property
    @abstractmethod
    def dx_min(self):
        """Smallest cell width in x in the whole simulation."""

    @property
    @abstractmethod
    def dy_min(self):
        """Smallest cell width in y in the whole simulation."""

    @property
    @abstractmethod
    def dz_min(self):
        """Smallest cell width in z in the whole simulation."""


class UniformMeshsize(Meshsize):
    """Equidistant grid spacing."""

    def __init__(self, parameters):
        geometry = parameters.geometry
        corner = parameters.parallel.first_corner
        three_d = geometry.dim == 3

        self._dx = geometry.length_x / geometry.size_x
        self._dy = geometry.length_y / geometry.size_y
        self._dz = geometry.length_z / geometry.size_z if three_d else 0.0
        self._corner_x = corner[0]
        self._corner_y = corner[1]
        self._corner_z = corner[2] if three_d else 0

        if self._dx <= 0.0:
            raise ValueError("dx <= 0.0!")
        if self._dy <= 0.0:
            raise ValueError("dy <= 0.0!")
        if three_d and self._dz <= 0.0:
            raise ValueError("dz <= 0.0!")

    def dx(self, i, j, k=0):
        return self._dx

    def dy(self, i, j, k=0):
        return self._dy

    def dz(self, i, j, k=0):
        return self._dz

    def pos_x(self, i, j, k=0):
        return self._dx * (self._corner_x - 2 + i)

    def pos_y(self, i, j, k=0):
        return self._dy * (self._corner_y - 2 + j)

    def pos_z(self, i, j, k=0):
        return self._dz * (self._corner_z - 2 + k)

    @property
    def dx_min(self):
        return self._dx

    @property
    def dy_min(self):
        return self._dy

    @property
    def dz_min(self):
        return self._dz


class TanhMeshStretching(Meshsize):
    """Grid refined towards the outer boundaries of each stretched direction.

    Inside the domain the node positions follow a tanh law mirrored about
    the centre; outside, the grid continues uniformly with the size of the
    next inner cell. Directions that are not stretched use a uniform mesh.
    """

    def __init__(self, parameters, stretch_x, stretch_y, stretch_z):
        geometry = parameters.geometry
        corner = parameters.parallel.first_corner
        three_d = geometry.dim == 3

        self._uniform = UniformMeshsize(parameters)
        self._length_x = geometry.length_x
        self._length_y = geometry.length_y
        self._length_z = geometry.length_z if three_d else 0.0
        self._size_x = geometry.size_x
        self._size_y = geometry.size_y
        self._size_z = geometry.size_z if three_d else 1
        self._corner_x = corner[0]
        self._corner_y = corner[1]
        self._corner_z = corner[2] if three_d else 0
        self._stretch_x = bool(stretch_x)
        self._stretch_y = bool(stretch_y)
        self._stretch_z = bool(stretch_z)
        self._delta_s = _DELTA_S
        self._tanh_delta_s = math.tanh(_DELTA_S)

        self._dx_min = (
            self._first_width(geometry.length_x, self._size_x)
            if self._stretch_x
            else self._uniform.dx(0, 0)
        )
        self._dy_min = (
            self._first_width(geometry.length_y, self._size_y)
            if self._stretch_y
            else self._uniform.dy(0, 0)
        )
        self._dz_min = (
            self._first_width(geometry.length_z, self._size_z)
            if self._stretch_z
            else self._uniform.dz(0, 0, 0)
        )

    def _first_width(self, length, size):
        return 0.5 * length * (
            1.0 + math.tanh(self._delta_s * (2.0 / size - 1.0)) / self._tanh_delta_s
        )

    def _stretched(self, length, p):
        return 0.5 * length * (
            1.0 + math.tanh(self._delta_s * (2.0 * p - 1.0)) / self._tanh_delta_s
        )

    def _coordinate(self, i, first_corner, size, length, width_min):
        index = i - 2 + first_corner
        if index < 0:
            return width_min * index
        if index > size - 1:
            return length + width_min * (index - size)
        p = index / size
        if p < 0.5:
            return self._stretched(length, p)
        p = (size - index) / size
        return length - self._stretched(length, p)

    def _width(self, i, first_corner, size, length, width_min):
        pos0 = self._coordinate(i, first_corner, size, length, width_min)
        pos1 = self._coordinate(i + 1, first_corner, size, length, width_min)
        if pos1 - pos0 < _MIN_MESHSIZE:
            raise ValueError("Error TanhMeshStretching meshsize: dx < 1.0e-12!")
        return pos1 - pos0

    def dx(self, i, j, k=0):
        if self._stretch_x:
            return self._width(i, self._corner_x, self._size_x, self._length_x, self._dx_min)
        return self._uniform.dx(i, j, k)

    def dy(self, i, j, k=0):
        if self._stretch_y:
            return self._width(j, self._corner_y, self._size_y, self._length_y, self._dy_min)
        return self._uniform.dy(i, j, k)

    def dz(self, i, j, k=0):
        if self._stretch_z:
            return self._width(k, self._corner_z, self._size_z, self._length_z, self._dz_min)
        return self._uniform.dz(i, j, k)

    def pos_x(self, i, j, k=0):
        if self._stretch_x:
            return self._coordinate(i, self._corner_x, self._size_x, self._length_x, self._dx_min)
        return self._uniform.pos_x(i, j, k)

    def pos_y(self, i, j, k=0):
        if self._stretch_y:
            return self._coordinate(j, self._corner_y, self._size_y, self._length_y, self._dy_min)
        return self._uniform.pos_y(i, j, k)

    def pos_z(self, i, j, k=0):
        if self._stretch_z:
            return self._coordinate(k, self._corner_z, self._size_z, self._length_z, self._dz_min)
        return self._uniform.pos_z(i, j, k)

    @property
    def dx_min(self):
        return self._dx_min

    @property
    def dy_min(self):
        return self._dy_min

    @property
    def dz_min(self):
        return self._dz_min


def init_meshsize(parameters):
    """Create the meshsize chosen in ``parameters`` and store it there.

    Must run after the configuration and the parallel decomposition have
    filled in the geometry and the first corner of this process.
    """
    try:
        kind = MeshsizeType(parameters.geometry.meshsize_type)
    except ValueError:
        raise ValueError("Unknown meshsize type!") from None

    geometry = parameters.geometry
    if kind is MeshsizeType.UNIFORM:
        parameters.meshsize = UniformMeshsize(parameters)
    else:
        parameters.meshsize = TanhMeshStretching(
            parameters,
            bool(geometry.stretch_x),
            bool(geometry.stretch_y),
            bool(geometry.stretch_z),
        )
    return parameters.meshsize