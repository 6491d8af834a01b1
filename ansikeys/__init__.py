"""Editor command registry with shortcuts, enable/check states and rebindable key bindings."""

__version__ = "0.1.0"
__all__ = ["commands", "states"]