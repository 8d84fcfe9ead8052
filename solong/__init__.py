"""A tile puzzle: load and validate .ber maps, play them in a pygame window."""

__version__ = "0.1.0"