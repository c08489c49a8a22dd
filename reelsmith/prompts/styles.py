"""Style presets for the per-style video agents

Each preset bundles the handoff metadata the orchestrator sees and the
prompt templates the generation pipeline fills with the user prompt.
"""

HYPE_PRESET = {
    "style": "hype",
    "agent_name": "hype_agent",
    "display_name": "Hype Video Agent",
    "handoff_tool": "use_hype_tool",
    "handoff_description": "Send to hype video agent.",
    "instructions": "You create fast-paced, high-energy hype videos that get people pumped up. Use bold visuals and powerful, energetic narration.",
    "tool_name": "generate_hype_video",
    "tool_description": "Generate a fast-paced, high-energy hype video from a user prompt.",
    "narration_template": "Create a high-octane, adrenaline-pumping voiceover script for: {prompt}. Use short sentences, punchy verbs, and crowd-rallying phrases.",
    "visual_template": "Design energetic, flashy visuals with quick cuts, bold typography, vibrant motion graphics, and fast transitions, all themed around: {prompt}",
}

AD_PRESET = {
    "style": "ad",
    "agent_name": "ad_agent",
    "display_name": "Ad Video Agent",
    "handoff_tool": "use_ad_tool",
    "handoff_description": "Send to ad video agent.",
    "instructions": "You create professional, sleek promotional videos that highlight products, services, or ideas in a clean and marketable way.",
    "tool_name": "generate_ad_video",
    "tool_description": "Generate a clean and polished promotional ad video.",
    "narration_template": "Write a clear, persuasive product ad script for: {prompt}. Focus on key features, benefits, and a strong call to action. Keep it brand-friendly and concise.",
    "visual_template": "Sleek, minimal commercial visuals for: {prompt}. Use clean lighting, product showcases, soft motion effects, and whitespace.",
}

CINEMATIC_PRESET = {
    "style": "cinematic",
    "agent_name": "cinematic_agent",
    "display_name": "Cinematic Video Agent",
    "handoff_tool": "use_cinematic_tool",
    "handoff_description": "Send to cinematic video agent.",
    "instructions": "You create emotional, story-driven cinematic videos with a poetic tone and visually rich atmosphere.",
    "tool_name": "generate_cinematic_video",
    "tool_description": "Generate a visually rich, emotional cinematic video.",
    "narration_template": "Craft a poetic, emotionally resonant script (3-5 lines) that captures the essence of: {prompt}. Use metaphors, vivid imagery, and a soft, reflective tone.",
    "visual_template": "Create visually cinematic, atmospheric visuals for: {prompt}. Use slow motion, natural lighting, deep contrast, and wide shots to evoke emotion.",
}

STYLE_PRESETS = {
    "hype": HYPE_PRESET,
    "ad": AD_PRESET,
    "cinematic": CINEMATIC_PRESET,
}


def get_style_preset(style: str) -> dict:
    """Look up a preset by style name

    Raises:
        ValueError: If the style is unknown
    """
    if style not in STYLE_PRESETS:
        raise ValueError(f"Unknown video style: {style}. Must be one of {list(STYLE_PRESETS)}")
    return STYLE_PRESETS[style]


def build_style_prompts(style: str, prompt: str) -> dict:
    """Fill a preset's narration and visual templates with the user prompt"""
    preset = get_style_preset(style)
    return {
        "narration_prompt": preset["narration_template"].format(prompt=prompt),
        "visual_prompt": preset["visual_template"].format(prompt=prompt),
        "instructions": preset["instructions"],
    }
