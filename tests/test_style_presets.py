from __future__ import annotations

import pytest

from reelsmith.agents.base import get_agent_info, get_handoff_info
from reelsmith.core.config import VIDEO_STYLES
from reelsmith.prompts import AGENT_REGISTRY, STYLE_PRESETS, build_style_prompts, get_style_preset


def test_every_style_has_a_preset_and_registered_agent() -> None:
    assert sorted(STYLE_PRESETS) == sorted(VIDEO_STYLES)
    for style, preset in STYLE_PRESETS.items():
        assert preset["style"] == style
        assert preset["agent_name"] in AGENT_REGISTRY
        assert AGENT_REGISTRY[preset["agent_name"]]["style"] == style
        assert "{prompt}" in preset["narration_template"]
        assert "{prompt}" in preset["visual_template"]


def test_handoff_and_tool_names_follow_style() -> None:
    assert STYLE_PRESETS["hype"]["handoff_tool"] == "use_hype_tool"
    assert STYLE_PRESETS["ad"]["handoff_tool"] == "use_ad_tool"
    assert STYLE_PRESETS["cinematic"]["handoff_tool"] == "use_cinematic_tool"
    assert STYLE_PRESETS["cinematic"]["tool_name"] == "generate_cinematic_video"


def test_build_style_prompts_fills_templates() -> None:
    prompts = build_style_prompts("ad", "a solar-powered backpack")

    assert prompts["narration_prompt"].startswith("Write a clear, persuasive product ad script for: a solar-powered backpack.")
    assert "a solar-powered backpack" in prompts["visual_prompt"]
    assert prompts["instructions"] == STYLE_PRESETS["ad"]["instructions"]


def test_unknown_style_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown video style: vlog"):
        get_style_preset("vlog")


def test_handoff_info_mentions_tool_and_capabilities() -> None:
    line = get_handoff_info("hype")
    assert line.startswith("- use_hype_tool (style: hype)")
    assert "hype_agent:" in line
    assert "Capabilities:" in line
    assert get_agent_info("missing_agent") == "missing_agent: Unknown agent"
