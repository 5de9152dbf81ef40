"""zaidctl — South African ID number validation and decoding."""

__version__ = "0.1.0"
