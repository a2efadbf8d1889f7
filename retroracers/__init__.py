"""Stock car and desert runner games on simulated graphic LCD and VGA displays."""

__version__ = "0.1.0"
__all__ = ["__version__"]