# nseof

Core data structures for a finite-difference solver of the incompressible
Navier–Stokes equations on a staggered Cartesian grid.

## Modules

- `nseof.fields` – `ScalarField`, `VectorField` and `IntScalarField`. These are
  dense grids backed by a flat numpy array. Scalar and integer fields are
  indexed as `field[i, j]` or `field[i, j, k]`. `VectorField.vector(i, j, k)`
  returns a writable view of the components at a point. A vector field built
  with two sizes has two components and one built with three sizes has three.
  `show()` prints a field to stdout, top row first.
- `nseof.flow_field` – `FlowField`. It holds the `pressure`, `velocity`,
  `flags`, `fgh` and `rhs` fields, padded by three ghost cells in each active
  dimension. `FlowField.from_parameters(parameters)` sizes a field from the
  local subdomain in `parameters.parallel.local_size`.
  `pressure_and_velocity(i, j)` or `pressure_and_velocity(i, j, k)` returns
  the pressure and the cell-centred velocity, averaged from the faces.
- `nseof.parameters` – the `Parameters` dataclass and its parts: geometry,
  time step, flow, solver, environment, walls, VTK output, stdout interval,
  parallel layout, backward-facing step and turbulence. It also defines the
  `BoundaryType` enum.
- `nseof.meshsize` – `UniformMeshsize` and `TanhMeshStretching`, with cell
  widths (`dx`, `dy`, `dz`), corner positions (`pos_x`, `pos_y`, `pos_z`) and
  minimum widths (`dx_min`, `dy_min`, `dz_min`). `init_meshsize(parameters)`
  builds the spacing selected by `parameters.geometry.meshsize_type`. It stores
  the result in `parameters.meshsize` and returns it.
- `nseof.configuration` – `Configuration(filename).load_parameters(parameters, rank)`
  reads an XML scenario file into a `Parameters` object. Missing sections,
  malformed attributes and inconsistent values raise `ConfigurationError`. For
  turbulence runs, the chosen mixing-length delta (`"turbulence"`,
  `"laminar"` or `"zero"`) is stored as a string in
  `parameters.turbulence.delta_mix_len`.
- `nseof.parallel_configuration` – `ParallelConfiguration(parameters, rank, nproc)`
  splits the global domain into blocks, with x varying fastest. It fills in
  the process grid indices, the neighbour ranks (`None` where there is no
  neighbour), the block sizes, the local size and the first corner. If
  `nproc` does not match the configured process grid it raises `ValueError`.
  `compute_rank_from_indices(i, j, k)` maps a grid position to a rank.
- `nseof.clock` – `Clock`, which provides `elapsed_ns()`, `date()`, and the
  static methods `sleep(msec)` and `format_hms(ns)`. The last one formats a
  duration as `HH:MM:SS`.
- `nseof.assertion` – `check(condition, message, *args)` and
  `fire(message, file, func, line, *args)` raise `AssertionFailed` with the
  location, the parameters and a stack trace.
  `set_throw_exceptions(False)` makes a failure send `SIGTRAP` instead, where
  the platform has that signal.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from nseof.configuration import Configuration
from nseof.parameters import Parameters
from nseof.parallel_configuration import ParallelConfiguration
from nseof.meshsize import init_meshsize
from nseof.flow_field import FlowField

parameters = Parameters()
Configuration("Cavity2D.xml").load_parameters(parameters, 0)
ParallelConfiguration(parameters, 0, 1)
init_meshsize(parameters)

field = FlowField.from_parameters(parameters)
field.pressure[10, 10] = 1.0
pressure, velocity = field.pressure_and_velocity(10, 10)
```

Working directly with fields:

```python
from nseof.fields import ScalarField, VectorField

p = ScalarField(10, 10)
p[3, 4] = 2.5

u = VectorField(10, 10)          # two components
u.vector(3, 4)[:] = (1.0, 0.5)
```

## What this package does not do

The package provides the data structures and the setup steps of a
simulation. It does not include:

- stencils or iterators
- the momentum and pressure equations
- a linear solver
- time stepping
- VTK output
- a command-line program

It passes no messages between processes. Each process reads the configuration
and computes its own part of the decomposition from the `rank` and `nproc`
values it is given.