"""Calculator Hub: financial and health calculators."""

__version__ = "0.1.0"
