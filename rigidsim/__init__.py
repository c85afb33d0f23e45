"""Particle and rigid-body physics: vector math, meshes, colliders, components and a fly camera."""

__version__ = "0.1.0"