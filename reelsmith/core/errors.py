"""Exceptions raised by the generation pipeline"""


class ConfigurationError(RuntimeError):
    """Missing or invalid credentials / settings"""


class VideoGenerationError(RuntimeError):
    """A pipeline step failed and no usable output was produced"""

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.details = details
