"""Grid fields, mesh spacing, parameters, XML configuration and domain decomposition for a staggered-grid Navier-Stokes solver."""

__version__ = "0.1.0"