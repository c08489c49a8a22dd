"""Agent implementations for the reelsmith workflow"""

from .base import emit_event, format_time, clean_json_response, get_agent_info

from .system.orchestrator_agent import orchestrator_agent

from .creative.agent_style import hype_agent, ad_agent, cinematic_agent


__all__ = [
    # Utility functions
    'emit_event',
    'format_time',
    'clean_json_response',
    'get_agent_info',
    # System agents
    'orchestrator_agent',
    # Creative agents
    'hype_agent',
    'ad_agent',
    'cinematic_agent'
]
