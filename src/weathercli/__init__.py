"""Weather for an address from the command line, via interchangeable providers."""

__version__ = "0.1.0"
