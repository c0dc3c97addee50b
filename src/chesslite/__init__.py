"""chesslite — basic chess move legality with an animated PyQt6 board."""

__version__ = "0.1.0"
