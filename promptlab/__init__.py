"""Client core of the promptlab prompt-engineering assistant."""

__version__ = "0.1.0"
