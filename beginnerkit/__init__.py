"""Small everyday calculations: arithmetic, geometry, conversions and money, with a command line runner."""

__version__ = "0.1.0"