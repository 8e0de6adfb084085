"""whichpm - identify which package manager installed a command."""

__version__ = "0.3.0"
