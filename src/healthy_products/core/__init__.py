"""
Core building blocks shared by the game modules.
"""
from .rng import RNG

__all__ = ["RNG"]
