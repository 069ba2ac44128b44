"""Dynamic-programming solutions to counting and optimisation problems, with a command line front end."""

__version__ = "0.1.0"
__all__ = ["counting", "optimization", "cli"]