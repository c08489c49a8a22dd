"""Prompt templates for the routing and style agents"""

from .orchestrator import ORCHESTRATOR_PROMPT_TEMPLATE, ORCHESTRATOR_RETRY_SUFFIX
from .styles import STYLE_PRESETS, get_style_preset, build_style_prompts
from .registry import AGENT_REGISTRY

__all__ = [
    'ORCHESTRATOR_PROMPT_TEMPLATE',
    'ORCHESTRATOR_RETRY_SUFFIX',
    'STYLE_PRESETS',
    'get_style_preset',
    'build_style_prompts',
    'AGENT_REGISTRY'
]
