"""Workflow builder and routing for the reelsmith system"""

import logging
import time
from typing import Optional
from langgraph.graph import StateGraph, END
from .state import VideoState
from . import config
from ..agents.system import orchestrator_agent
from ..agents.creative import STYLE_AGENTS
from ..agents.base import format_time

logger = logging.getLogger(__name__)


def route_after_orchestrator(state: VideoState) -> str:
    """Route to the selected style agent, or finish on direct answers and errors"""
    if state.get("error"):
        logger.info(f"[Workflow Router] Orchestrator error, finishing: {state['error']}")
        return END

    selected_agent = state.get("selected_agent")
    if selected_agent in STYLE_AGENTS:
        logger.info(f"[Workflow Router] Routing to: {selected_agent}")
        return selected_agent

    logger.info("[Workflow Router] No style agent selected, finishing with direct answer")
    return END


def build_video_workflow():
    """Build and compile the orchestrator -> style agent graph"""
    logger.info("[Workflow] Building video workflow graph...")

    workflow = StateGraph(VideoState)

    workflow.add_node("orchestrator", orchestrator_agent)
    for agent_name, agent in STYLE_AGENTS.items():
        workflow.add_node(agent_name, agent)

    workflow.set_entry_point("orchestrator")

    workflow.add_conditional_edges(
        "orchestrator",
        route_after_orchestrator,
        {**{name: name for name in STYLE_AGENTS}, END: END}
    )
    for agent_name in STYLE_AGENTS:
        workflow.add_edge(agent_name, END)

    return workflow.compile()


_compiled_workflow = None


def get_workflow():
    """Compiled workflow (built once per process)"""
    global _compiled_workflow
    if _compiled_workflow is None:
        _compiled_workflow = build_video_workflow()
    return _compiled_workflow


def create_initial_state(prompt: str, style: Optional[str] = None, output_dir: Optional[str] = None) -> VideoState:
    return {
        "user_query": prompt,
        "requested_style": style,
        "output_dir": output_dir or config.OUTPUT_DIR,
        "selected_style": None,
        "selected_agent": None,
        "file_paths": [],
        "error": None,
        "error_details": None,
        "events": [],
        "component_timings": {},
    }


def run_workflow(prompt: str, style: Optional[str] = None, output_dir: Optional[str] = None) -> VideoState:
    """
    Route a prompt to a style agent and run the generation pipeline

    Args:
        prompt: User prompt
        style: Optional style that bypasses triage
        output_dir: Optional output directory override

    Returns:
        Final workflow state (check "error" before using outputs)
    """
    start_time = time.time()
    state = get_workflow().invoke(create_initial_state(prompt, style, output_dir))
    logger.info(f"[Workflow] Completed in {format_time(time.time() - start_time)} (style={state.get('selected_style')}, error={state.get('error')})")
    return state
