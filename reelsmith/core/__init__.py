"""Core system components"""

from .state import VideoState
from .errors import ConfigurationError, VideoGenerationError
# Don't import workflow here to avoid circular imports
# from .workflow import *

__all__ = ['VideoState', 'ConfigurationError', 'VideoGenerationError']
