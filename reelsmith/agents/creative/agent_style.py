"""Per-style video agents (hype, ad, cinematic)

All three share one node implementation; they differ only in the preset
they fill and pass to the generation pipeline.
"""

import time
import logging
from ...core.state import VideoState
from ...prompts import STYLE_PRESETS, build_style_prompts
from ..base import emit_event, format_time
from .pipeline import generate_video

logger = logging.getLogger(__name__)


def create_style_agent(style: str):
    """Build the workflow node for one style preset"""
    preset = STYLE_PRESETS[style]
    agent_name = preset["agent_name"]
    tag = style.upper()

    def style_agent(state: VideoState) -> VideoState:
        start_time = time.time()
        state["current_agent"] = agent_name
        state = emit_event(state, "agent_started", {"agent": agent_name, "tool": preset["tool_name"]}, agent_name=agent_name)

        prompt = state["user_query"]
        logger.info(f"[{tag}] Starting {style} video generation for: {prompt}")
        prompts = build_style_prompts(style, prompt)

        try:
            result = generate_video(
                prompt=prompt,
                style=style,
                narration_prompt=prompts["narration_prompt"],
                visual_prompt=prompts["visual_prompt"],
                instructions=prompts["instructions"],
                output_dir=state.get("output_dir")
            )
        except Exception as e:
            details = getattr(e, "details", None)
            logger.error(f"[{tag}] Error in video generation: {e}")
            if details:
                logger.error(f"[{tag}] Details: {details[-1000:]}")
            state["error"] = str(e)
            state["error_details"] = details
            state = emit_event(state, "agent_failed", {"agent": agent_name, "error": str(e), "details": details}, agent_name=agent_name)
        else:
            state["narration"] = result.narration
            state["image_path"] = result.image_path
            state["file_paths"] = result.file_paths
            state["video_path"] = result.video_path
            state = emit_event(state, "video_ready", result.to_dict(), agent_name=agent_name)

        execution_time = time.time() - start_time
        state.setdefault("component_timings", {})[agent_name] = execution_time
        logger.info(f"[{tag}] Completed in {format_time(execution_time)}")
        return emit_event(state, "agent_ended", {"agent": agent_name}, agent_name=agent_name)

    style_agent.__name__ = agent_name
    style_agent.__doc__ = preset["tool_description"]
    return style_agent


hype_agent = create_style_agent("hype")
ad_agent = create_style_agent("ad")
cinematic_agent = create_style_agent("cinematic")

STYLE_AGENTS = {
    "hype_agent": hype_agent,
    "ad_agent": ad_agent,
    "cinematic_agent": cinematic_agent,
}
