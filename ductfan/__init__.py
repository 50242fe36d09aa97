"""Ducted fan rotor performance: momentum disk and blade element momentum models, with a simple flow field export."""

__version__ = "0.1.0"