"""XOR, Beaufort and Twofish-CFB encryption of files and text."""

__version__ = "0.1.0"