"""Diet assistant: food database, daily food logs, diet profile, target calories and undo."""

__version__ = "0.1.0"