"""Shared helpers for workflow agents"""

import logging
from datetime import datetime
from typing import Any
from ..core.state import VideoState
from ..prompts import AGENT_REGISTRY, STYLE_PRESETS

logger = logging.getLogger(__name__)


def emit_event(state: VideoState, event_type: str, data: Any = None, agent_name: str = None) -> VideoState:
    """
    Emit a progress event via LangGraph's StreamWriter and record it in state.

    Args:
        state: Current workflow state
        event_type: Type of event to emit
        data: Event data to include
        agent_name: Optional explicit agent name (takes precedence over state)

    Returns:
        Updated state
    """
    event = {
        "type": event_type,
        "timestamp": datetime.now().isoformat(),
        "agent": agent_name or state.get("current_agent", "unknown"),
        "data": data
    }
    state.setdefault("events", []).append(event)

    try:
        from langgraph.config import get_stream_writer
        writer = get_stream_writer()
        writer(event)
    except RuntimeError:
        # Called outside a LangGraph run (direct pipeline use, tests)
        logger.debug(f"[emit_event] No stream writer for event_type={event_type}")

    return state


def format_time(seconds: float) -> str:
    """Format time in seconds to minutes and seconds"""
    minutes = int(seconds // 60)
    remaining_seconds = seconds % 60
    if minutes > 0:
        return f"{minutes}m {remaining_seconds:.1f}s"
    else:
        return f"{remaining_seconds:.1f}s"


def clean_json_response(response_text: str) -> str:
    """
    Clean JSON response from markdown code blocks and extra trailing braces.

    Args:
        response_text: Raw text that might contain markdown-wrapped JSON

    Returns:
        Clean JSON string ready for parsing
    """
    response_text = response_text.strip()
    if response_text.startswith("```json"):
        response_text = response_text[7:]
        if response_text.endswith("```"):
            response_text = response_text[:-3]
        response_text = response_text.strip()
    elif response_text.startswith("```"):
        response_text = response_text[3:]
        if response_text.endswith("```"):
            response_text = response_text[:-3]
        response_text = response_text.strip()

    # Drop up to 3 unbalanced trailing braces
    max_removals = 3
    removals = 0
    while removals < max_removals:
        if response_text.count('}') <= response_text.count('{'):
            break
        if response_text.rstrip().endswith('}'):
            response_text = response_text.rstrip()[:-1]
            removals += 1
        else:
            break

    return response_text.strip()


def get_agent_info(agent_name: str) -> str:
    """Get formatted agent information for orchestrator"""
    if agent_name in AGENT_REGISTRY:
        agent = AGENT_REGISTRY[agent_name]
        return f"{agent_name}: {agent['description']} (Capabilities: {', '.join(agent['capabilities'])})"
    return f"{agent_name}: Unknown agent"


def get_handoff_info(style: str) -> str:
    """Format one handoff option (tool name, style and description) for the triage prompt"""
    preset = STYLE_PRESETS[style]
    return f"- {preset['handoff_tool']} (style: {style}): {preset['handoff_description']} {get_agent_info(preset['agent_name'])}"
