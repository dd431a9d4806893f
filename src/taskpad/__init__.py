"""taskpad: a local to-do list with a periodic reminder."""

__version__ = "0.1.0"
