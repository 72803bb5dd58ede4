"""
starforge - procedural toy star systems.

Generates a parent star, its habitable zone and a handful of planets with
atmospheres and placeholder geology, and shows them in a pygame viewport.
"""

__version__ = "0.1.0"

from .core import build_universe, generate_orbit, generate_star

__all__ = ["build_universe", "generate_orbit", "generate_star"]
