"""autolinker — turn plain words into [[wiki links]] as you write."""

__version__ = "0.1.0"
