"""Space Salvager: a turn-based text exploration game."""

__version__ = "0.1.0"
