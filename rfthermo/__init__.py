"""Thermophysical property functions, polynomial thermo and transport, and equations of state."""

__version__ = "0.1.0"