"""
Schema registry for structured output.
"""

import importlib
from typing import Dict, Any

# Available schemas
AVAILABLE_SCHEMAS = [
    "orchestrator_agent",
]


def get_schema(agent_name: str) -> Dict[str, Any]:
    """
    Load the Gemini response schema for an agent.

    Args:
        agent_name: Name of the agent (e.g., "orchestrator_agent")

    Returns:
        Schema dictionary for Gemini structured output

    Raises:
        ValueError: If agent_name is invalid
    """
    if agent_name not in AVAILABLE_SCHEMAS:
        raise ValueError(f"Invalid agent_name: {agent_name}. Must be one of {AVAILABLE_SCHEMAS}")

    module = importlib.import_module(f"{__name__}.{agent_name}")
    return module.GEMINI_SCHEMA
