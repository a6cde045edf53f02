"""Solutions to classic online-judge problems, with a command for some of them."""

__version__ = "0.1.0"
__all__ = ["__version__"]