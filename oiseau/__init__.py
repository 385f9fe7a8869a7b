"""Reference cells, mesh topology and geometry containers, triplot drawing and a jagged array."""

__version__ = "0.1.0"