"""Read and write WinMerge-style comparison project files."""

__version__ = "0.1.0"
