"""A tile-based overworld adventure with random encounters, a map viewer and save files."""

__version__ = "0.1.0"