"""Genesis Alpha - collaboratively assemble a chain's genesis document."""

__version__ = "0.1.0"
