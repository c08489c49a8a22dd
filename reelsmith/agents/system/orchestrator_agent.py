"""Triage orchestrator - picks a video style and hands off to the matching style agent"""

import json
import time
import logging
from ...core.state import VideoState
from ...core.llm import get_llm
from ...core.config import DEFAULT_MAX_RETRIES, MODEL_CONFIG, VIDEO_STYLES
from ...prompts import ORCHESTRATOR_PROMPT_TEMPLATE, ORCHESTRATOR_RETRY_SUFFIX, STYLE_PRESETS
from ..base import emit_event, clean_json_response, format_time, get_handoff_info

logger = logging.getLogger(__name__)


def _route_to(state: VideoState, style: str, analysis: str) -> VideoState:
    preset = STYLE_PRESETS[style]
    state["selected_style"] = style
    state["selected_agent"] = preset["agent_name"]
    state["routing_analysis"] = analysis
    logger.info(f"[Orchestrator] Handoff via {preset['handoff_tool']} -> {preset['agent_name']}")
    return emit_event(state, "handoff", {
        "style": style,
        "agent": preset["agent_name"],
        "tool": preset["handoff_tool"]
    }, agent_name="orchestrator")



def _triage(state: VideoState) -> VideoState:
    """Ask the orchestrator LLM for a style, retrying on malformed or invalid output"""
    user_query = state["user_query"]
    logger.info(f"[Orchestrator] Processing prompt: {user_query[:100]}")

    handoffs = "\n".join(get_handoff_info(style) for style in VIDEO_STYLES)
    orchestrator_prompt = ORCHESTRATOR_PROMPT_TEMPLATE["template"].format(handoffs=handoffs)

    response = ""
    for attempt in range(DEFAULT_MAX_RETRIES):
        orchestrator_llm = get_llm(
            model=MODEL_CONFIG["orchestrator"],
            gemini_configs={'max_output_tokens': 1024, 'temperature': 0.2},
            system_instruction=orchestrator_prompt
        )
        try:
            logger.info(f"[Orchestrator] Attempt {attempt + 1}/{DEFAULT_MAX_RETRIES}")
            response = orchestrator_llm.invoke(
                user_query,
                response_schema=ORCHESTRATOR_PROMPT_TEMPLATE["schema"]
            )
            orchestrator_data = json.loads(clean_json_response(response))
            if not isinstance(orchestrator_data, dict):
                raise ValueError("Orchestrator response is not a JSON object")

            style = orchestrator_data.get("style")
            analysis = orchestrator_data.get("analysis", "")

            if style == "none":
                final_answer = orchestrator_data.get("final_answer")
                if not final_answer:
                    raise ValueError("Direct answer selected without final_answer")
                logger.info("[Orchestrator] Direct answer path")
                state["selected_style"] = None
                state["selected_agent"] = None
                state["routing_analysis"] = analysis
                state["final_answer"] = final_answer
                return state

            if style not in VIDEO_STYLES:
                raise ValueError(f"Invalid style: {style!r}")

            return _route_to(state, style, analysis)

        except json.JSONDecodeError as e:
            logger.warning(f"[Orchestrator] JSON decode error - {e}; raw response: {response[:500]}")
            error = e
        except ValueError as e:
            logger.warning(f"[Orchestrator] Validation error - {e}")
            error = e

        if attempt < DEFAULT_MAX_RETRIES - 1:
            orchestrator_prompt += ORCHESTRATOR_RETRY_SUFFIX.format(error=error)

    logger.error(f"[Orchestrator] Max retries reached: {error}")
    state["error"] = f"Could not determine a video style after {DEFAULT_MAX_RETRIES} attempts: {error}"
    return state


def orchestrator_agent(state: VideoState) -> VideoState:
    """Decide which style agent handles the prompt, or answer directly when no video fits"""
    logger.info("[Orchestrator] Starting triage...")
    start_time = time.time()

    state["current_agent"] = "orchestrator"
    state = emit_event(state, "agent_started", {"agent": "orchestrator"}, agent_name="orchestrator")

    requested_style = state.get("requested_style")
    if not requested_style:
        state = _triage(state)
    elif requested_style not in VIDEO_STYLES:
        state["error"] = f"Unknown video style: {requested_style}"
        logger.error(f"[Orchestrator] {state['error']}")
    else:
        logger.info(f"[Orchestrator] Style forced by caller: {requested_style}")
        state = _route_to(state, requested_style, "Style requested explicitly")

    execution_time = time.time() - start_time
    state.setdefault("component_timings", {})["orchestrator"] = execution_time
    logger.info(f"[Orchestrator] Completed in {format_time(execution_time)}")
    return emit_event(state, "agent_ended", {"agent": "orchestrator"}, agent_name="orchestrator")
