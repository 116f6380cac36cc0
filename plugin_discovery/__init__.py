"""List plugins published as tagged routes in a Kong API gateway, as a Flask service."""

__version__ = "0.1.0"
__all__ = ["__version__"]