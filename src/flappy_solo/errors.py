"""
errors.py: Exceptions raised by the game.
"""


class FlappyError(Exception):
    """Base class for game errors."""


class AssetMissingError(FlappyError):
    """An image asset could not be found or decoded."""

    def __init__(self, name: str, path, reason: str):
        self.name = name
        self.path = path
        super().__init__(f"Asset missing: '{name}' at {path} ({reason})")
