"""reelsmith - prompt to styled short video (hype / ad / cinematic)"""

__version__ = "1.0.0"
