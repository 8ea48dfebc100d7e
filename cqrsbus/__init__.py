"""In-process command, query and event buses, with small example handlers."""

__version__ = "0.1.0"
__all__ = ["__version__"]