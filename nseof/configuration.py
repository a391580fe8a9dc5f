"""Reading simulation parameters from an XML configuration file."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from nseof.meshsize import MeshsizeType

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*0[xX]([0-9a-fA-F]+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_WALLS = ("left", "right", "bottom", "top", "front", "back")
_MIX_LEN_DELTAS = ("turbulence", "laminar", "zero")
_VELOCITY_PROFILES = ("parabolic", "uniform")


class ConfigurationError(RuntimeError):
    """Raised when the configuration file is missing, malformed or inconsistent."""


def _parse_int(raw):
    hex_match = _HEX_PREFIX.match(raw)
    if hex_match:
        return int(hex_match.group(1), 16)
    match = _INT_PREFIX.match(raw)
    return int(match.group(1)) if match else None


def _parse_float(raw):
    match = _FLOAT_PREFIX.match(raw)
    return float(match.group(1)) if match else None


def _parse_bool(raw):
    number = _parse_int(raw)
    if number is not None:
        return number != 0
    if raw in ("true", "True", "TRUE"):
        return True
    if raw in ("false", "False", "FALSE"):
        return False
    return None


def _mandatory(node, tag, parse):
    raw = node.get(tag)
    value = None if raw is None else parse(raw)
    if value is None:
        raise ConfigurationError("Error while reading mandatory argument")
    return value


def _optional(node, tag, parse, default):
    raw = node.get(tag)
    if raw is None:
        return default
    value = parse(raw)
    if value is None:
        raise ConfigurationError("Error while reading optional argument")
    return value


def _mandatory_string(node):
    if node is None:
        raise ConfigurationError("Error while reading mandatory string")
    text = node.text
    if text is None or not text.strip():
        raise ConfigurationError(
            f"Error while reading mandatory string: no string specified for node {node.tag}"
        )
    return text


def _section(root, name, message):
    node = root.find(name)
    if node is None:
        raise ConfigurationError(message)
    return node


def _read_wall(wall, vector, scalar):
    """Return the wall's vector and scalar, falling back to zeros per missing attribute."""
    quantity = wall.find("vector")
    if quantity is not None:
        vector = [_optional(quantity, axis, _parse_float, 0.0) for axis in ("x", "y", "z")]
    quantity = wall.find("scalar")
    if quantity is not None:
        scalar = _optional(quantity, "value", _parse_float, 0.0)
    return vector, scalar


class Configuration:
    """Loads a simulation configuration from an XML file into Parameters."""

    def __init__(self, filename=""):
        self.filename = filename
        self.dim = None

    def load_parameters(self, parameters, rank=0):
        """Fill ``parameters`` from the file and return it."""
        try:
            root = ET.parse(self.filename).getroot()
        except (OSError, ET.ParseError) as error:
            raise ConfigurationError("Error parsing the configuration file") from error

        self._load_geometry(root, parameters)
        self.dim = parameters.geometry.dim

        node = _section(root, "timestep", "Error loading timestep parameters")
        parameters.timestep.dt = _optional(node, "dt", _parse_float, 1.0)
        parameters.timestep.tau = _optional(node, "tau", _parse_float, 0.5)

        node = _section(root, "flow", "Error loading flow parameters")
        parameters.flow.Re = _mandatory(node, "Re", _parse_float)

        node = _section(root, "solver", "Error loading solver parameters")
        parameters.solver.gamma = _mandatory(node, "gamma", _parse_float)
        parameters.solver.max_iterations = _optional(node, "maxIterations", _parse_int, 0)

        node = _section(root, "environment", "Error loading environmental parameters")
        environment = parameters.environment
        environment.gx = _optional(node, "gx", _parse_float, 0.0)
        environment.gy = _optional(node, "gy", _parse_float, 0.0)
        environment.gz = _optional(node, "gz", _parse_float, 0.0)

        self._load_simulation(root, parameters)

        node = _section(root, "vtk", "Error loading VTK parameters")
        parameters.vtk.interval = _optional(node, "interval", _parse_float, 0.0)
        parameters.vtk.prefix = _mandatory_string(node)

        node = _section(root, "stdOut", "Error loading StdOut parameters")
        parameters.std_out.interval = _optional(node, "interval", _parse_float, 1.0)

        self._load_parallel(root, parameters, rank)
        self._load_walls(root, parameters)

        parameters.bf_step.x_ratio = -1.0
        parameters.bf_step.y_ratio = -1.0
        node = root.find("backwardFacingStep")
        if node is not None:
            parameters.bf_step.x_ratio = _mandatory(node, "xRatio", _parse_float)
            parameters.bf_step.y_ratio = _mandatory(node, "yRatio", _parse_float)

        if parameters.simulation.type == "turbulence":
            delta = _mandatory_string(root.find("deltaMixLen"))
            if delta not in _MIX_LEN_DELTAS:
                raise ConfigurationError("Error loading delta for mixing lengths")
            parameters.turbulence.delta_mix_len = delta

        return parameters

    @staticmethod
    def _load_geometry(root, parameters):
        node = _section(root, "geometry", "Error loading geometry properties")
        geometry = parameters.geometry

        geometry.size_x = _mandatory(node, "sizeX", _parse_int)
        geometry.size_y = _mandatory(node, "sizeY", _parse_int)
        geometry.size_z = _optional(node, "sizeZ", _parse_int, 0)

        if geometry.size_x < 2 or geometry.size_y < 2 or geometry.size_z < 0:
            raise ConfigurationError("Invalid size specified in configuration file")

        geometry.dim = 0
        raw_dim = node.get("dim")
        parsed_dim = None if raw_dim is None else _parse_int(raw_dim)
        if raw_dim is None or parsed_dim is not None:
            if parsed_dim is not None:
                geometry.dim = parsed_dim
            if geometry.dim == 0:
                if geometry.size_z == 0:
                    geometry.size_z = 1
                    geometry.dim = 2
                else:
                    geometry.dim = 3

        if geometry.dim == 3 and geometry.size_z == 1:
            raise ConfigurationError("Inconsistent data: 3D geometry specified with Z size zero")
        if geometry.dim == 2 and geometry.size_z != 1:
            geometry.size_z = 1

        geometry.length_x = _mandatory(node, "lengthX", _parse_float)
        geometry.length_y = _mandatory(node, "lengthY", _parse_float)
        geometry.length_z = _mandatory(node, "lengthZ", _parse_float)

        mesh = _mandatory_string(node.find("mesh"))
        if mesh == "uniform":
            geometry.meshsize_type = MeshsizeType.UNIFORM
        elif mesh == "stretched":
            geometry.meshsize_type = MeshsizeType.TANH_STRETCHING
            geometry.stretch_x = int(_mandatory(node, "stretchX", _parse_bool))
            geometry.stretch_y = int(_mandatory(node, "stretchY", _parse_bool))
            if geometry.dim == 3:
                geometry.stretch_z = int(_mandatory(node, "stretchZ", _parse_bool))
            else:
                geometry.stretch_z = 0
        else:
            raise ConfigurationError("Unknown 'mesh'!")

    @staticmethod
    def _load_simulation(root, parameters):
        node = _section(root, "simulation", "Error loading simulation parameters")
        simulation = parameters.simulation
        simulation.final_time = _mandatory(node, "finalTime", _parse_float)

        sub = node.find("type")
        if sub is None:
            raise ConfigurationError("Missing type in simulation parameters")
        simulation.type = _mandatory_string(sub)

        sub = node.find("scenario")
        if sub is None:
            raise ConfigurationError("Missing scenario in simulation parameters")
        simulation.scenario = _mandatory_string(sub)

        sub = node.find("velocityProfile")
        if sub is not None:
            simulation.velocity_profile = _mandatory_string(sub)
            if simulation.velocity_profile not in _VELOCITY_PROFILES:
                raise ConfigurationError("Unsupported velocity profile in simulation parameters")

    @staticmethod
    def _load_parallel(root, parameters, rank):
        node = _section(root, "parallel", "Error loading parallel parameters")
        parallel = parameters.parallel
        geometry = parameters.geometry

        parallel.num_processors = [
            _optional(node, f"numProcessors{axis}", _parse_int, 1) for axis in "XYZ"
        ]
        parallel.left_nb = None
        parallel.right_nb = None
        parallel.bottom_nb = None
        parallel.top_nb = None
        parallel.front_nb = None
        parallel.back_nb = None
        parallel.local_size = [geometry.size_x, geometry.size_y, geometry.size_z]
        parallel.first_corner = [0, 0, 0]
        parallel.rank = rank

    @staticmethod
    def _load_walls(root, parameters):
        node = _section(root, "walls", "Error loading wall parameters")
        walls = parameters.walls

        for name in _WALLS:
            wall = node.find(name)
            if wall is None:
                continue
            vector, scalar = _read_wall(
                wall, getattr(walls, f"vector_{name}"), getattr(walls, f"scalar_{name}")
            )
            setattr(walls, f"vector_{name}", vector)
            setattr(walls, f"scalar_{name}", scalar)

        # A pressure channel keeps its fixed pressure on the left wall.
        for name in _WALLS:
            if name == "left" and parameters.simulation.scenario == "pressure-channel":
                continue
            setattr(walls, f"scalar_{name}", 0.0)