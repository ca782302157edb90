"""hostfetch - system information beside an ASCII logo."""

__version__ = "1.0.0"
