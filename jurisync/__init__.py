"""JuriSync contract lifecycle and notification engine."""

__version__ = "0.4.0"
