"""Creative agents and generation tools"""

from .agent_style import hype_agent, ad_agent, cinematic_agent, create_style_agent, STYLE_AGENTS
from .client_veo_google import GoogleVeoGenerator
from .pipeline import generate_video, VideoResult

__all__ = [
    # Agents
    'hype_agent',
    'ad_agent',
    'cinematic_agent',
    'create_style_agent',
    'STYLE_AGENTS',
    # Clients
    'GoogleVeoGenerator',
    # Pipeline
    'generate_video',
    'VideoResult',
]
