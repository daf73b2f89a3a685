"""signmotion - gloss resolution and animation timelines for sign language avatars."""

__version__ = "0.1.0"
