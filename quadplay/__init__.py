"""Headless game logic: platformer physics, particle emitters and small arcade game simulations."""

__version__ = "0.1.0"