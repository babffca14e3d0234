"""A brick breaker game with a small screen-stack engine on top of pygame."""

__version__ = "0.1.0"