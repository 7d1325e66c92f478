"""MVI Scaffold -- Kotlin MVI feature scaffolding generator."""

__version__ = "0.1.0"
