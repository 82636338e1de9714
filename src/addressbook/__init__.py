"""Address record validation and integer GCD utilities."""

__version__ = "0.1.0"
