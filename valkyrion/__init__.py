"""A small game engine core: ECS coordinator, logging, a pygame window and application loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]