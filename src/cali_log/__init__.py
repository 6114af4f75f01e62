"""cali-log: calisthenics workout logger."""

__version__ = "0.2.0"
