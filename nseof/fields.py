"""Scalar, vector and integer fields on a structured grid."""

from __future__ import annotations

import numpy as np

from nseof.assertion import check


class Field:
    """Flat storage of ``components`` values at each of nx*ny*nz positions."""

    _dtype = np.float64

    def __init__(self, nx, ny, nz, components):
        self._nx = nx
        self._ny = ny
        self._nz = nz
        self._components = components
        self._data = np.zeros(components * nx * ny * nz, dtype=self._dtype)

    @property
    def nx(self):
        """Size in x, ghost layers included."""
        return self._nx

    @property
    def ny(self):
        """Size in y, ghost layers included."""
        return self._ny

    @property
    def nz(self):
        """Size in z, ghost layers included."""
        return self._nz

    @property
    def components(self):
        return self._components

    @property
    def data(self):
        """The underlying flat array."""
        return self._data

    def index(self, i, j, k=0):
        """Position in the flat array of the first component at (i, j, k)."""
        check(i < self._nx and j < self._ny and k < self._nz, "index below upper bound", i, j, k)
        check(i >= 0 and j >= 0 and k >= 0, "index not negative", i, j, k)
        return self._components * (i + j * self._nx + k * self._nx * self._ny)

    @staticmethod
    def _split(index):
        if len(index) == 2:
            i, j = index
            return i, j, 0
        i, j, k = index
        return i, j, k

    def _rows(self, component=0):
        for k in range(self._nz):
            for j in reversed(range(self._ny)):
                yield [
                    self._data[self.index(i, j, k) + component] for i in range(self._nx)
                ]
            yield None

    def _print_component(self, component, fmt):
        for row in self._rows(component):
            if row is None:
                print()
            else:
                print("".join(f"{fmt(value)}\t" for value in row))


class ScalarField(Field):
    """One floating-point value per grid position."""

    def __init__(self, nx, ny, nz=None):
        super().__init__(nx, ny, 1 if nz is None else nz, 1)

    def __getitem__(self, index):
        return float(self._data[self.index(*self._split(index))])

    def __setitem__(self, index, value):
        self._data[self.index(*self._split(index))] = value

    def show(self, title=""):
        """Print the field, top row first, to stdout."""
        print()
        print(f"--- {title} ---")
        self._print_component(0, lambda v: f"{v:g}")


class VectorField(Field):
    """Two components per position in 2D, three in 3D."""

    def __init__(self, nx, ny, nz=None):
        if nz is None:
            super().__init__(nx, ny, 1, 2)
        else:
            super().__init__(nx, ny, nz, 3)

    def vector(self, i, j, k=0):
        """A writable view of the components at (i, j, k)."""
        start = self.index(i, j, k)
        return self._data[start:start + self._components]

    def show(self, title=""):
        """Print the first two components to stdout."""
        print()
        print(f"--- {title} ---")
        for component in (0, 1):
            print(f"Component {component + 1}")
            self._print_component(component, lambda v: f"{v:g}")


class IntScalarField(Field):
    """One integer per grid position, used for flags."""

    _dtype = np.int64

    def __init__(self, nx, ny, nz=None):
        super().__init__(nx, ny, 1 if nz is None else nz, 1)

    def __getitem__(self, index):
        return int(self._data[self.index(*self._split(index))])

    def __setitem__(self, index, value):
        self._data[self.index(*self._split(index))] = value

    def show(self, title=""):
        """Print the field, top row first, to stdout."""
        print()
        print(f"--- {title} ---")
        self._print_component(0, lambda v: f"{int(v)}")