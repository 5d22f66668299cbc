"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when save, load or high-score operations fail."""
