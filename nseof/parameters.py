"""Simulation parameters, grouped by topic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class BoundaryType(Enum):
    """How a domain boundary behaves."""

    DIRICHLET = 0
    PERIODIC = 1
    NEUMANN = 2


def _triple(value=0.0):
    return field(default_factory=lambda: [value, value, value])


@dataclass
class TimestepParameters:
    dt: float = 0.0
    tau: float = 0.0


@dataclass
class SimulationParameters:
    final_time: float = 0.0
    type: str = ""
    scenario: str = ""
    velocity_profile: str = "uniform"


@dataclass
class EnvironmentalParameters:
    gx: float = 0.0
    gy: float = 0.0
    gz: float = 0.0


@dataclass
class FlowParameters:
    Re: float = 0.0


@dataclass
class TurbulenceParameters:
    delta_mix_len: Optional[Callable[[float, float], float]] = None


@dataclass
class SolverParameters:
    gamma: float = 0.0
    max_iterations: int = -1


@dataclass
class GeometricParameters:
    dim: int = -1
    size_x: int = -1
    size_y: int = -1
    size_z: int = -1
    length_x: float = 0.0
    length_y: float = 0.0
    length_z: float = 0.0
    meshsize_type: int = -1
    stretch_x: int = -1
    stretch_y: int = -1
    stretch_z: int = -1


@dataclass
class WallParameters:
    scalar_left: float = 0.0
    scalar_right: float = 0.0
    scalar_bottom: float = 0.0
    scalar_top: float = 0.0
    scalar_front: float = 0.0
    scalar_back: float = 0.0

    vector_left: list = _triple()
    vector_right: list = _triple()
    vector_bottom: list = _triple()
    vector_top: list = _triple()
    vector_front: list = _triple()
    vector_back: list = _triple()

    type_left: BoundaryType = BoundaryType.DIRICHLET
    type_right: BoundaryType = BoundaryType.DIRICHLET
    type_top: BoundaryType = BoundaryType.DIRICHLET
    type_bottom: BoundaryType = BoundaryType.DIRICHLET
    type_front: BoundaryType = BoundaryType.DIRICHLET
    type_back: BoundaryType = BoundaryType.DIRICHLET


@dataclass
class VTKParameters:
    interval: float = 0.0
    prefix: str = ""


@dataclass
class StdOutParameters:
    interval: float = 0.0


@dataclass
class ParallelParameters:
    """Domain decomposition data; a neighbour of None means there is none."""

    rank: int = -1
    num_processors: list = _triple(0)
    left_nb: Optional[int] = None
    right_nb: Optional[int] = None
    bottom_nb: Optional[int] = None
    top_nb: Optional[int] = None
    front_nb: Optional[int] = None
    back_nb: Optional[int] = None
    indices: list = _triple(0)
    local_size: list = _triple(0)
    first_corner: list = _triple(0)
    sizes: list = field(default_factory=lambda: [[], [], []])


@dataclass
class BFStepParameters:
    x_ratio: float = 0.0
    y_ratio: float = 0.0


@dataclass
class Parameters:
    """All parameters of one simulation run."""

    simulation: SimulationParameters = field(default_factory=SimulationParameters)
    timestep: TimestepParameters = field(default_factory=TimestepParameters)
    environment: EnvironmentalParameters = field(default_factory=EnvironmentalParameters)
    flow: FlowParameters = field(default_factory=FlowParameters)
    solver: SolverParameters = field(default_factory=SolverParameters)
    geometry: GeometricParameters = field(default_factory=GeometricParameters)
    walls: WallParameters = field(default_factory=WallParameters)
    vtk: VTKParameters = field(default_factory=VTKParameters)
    parallel: ParallelParameters = field(default_factory=ParallelParameters)
    std_out: StdOutParameters = field(default_factory=StdOutParameters)
    bf_step: BFStepParameters = field(default_factory=BFStepParameters)
    turbulence: TurbulenceParameters = field(default_factory=TurbulenceParameters)
    meshsize: Optional[Any] = None