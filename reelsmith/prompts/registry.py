"""Agent registry descriptions"""

from .styles import STYLE_PRESETS

# Agent registry for the style agents the orchestrator can hand off to
AGENT_REGISTRY = {
    "hype_agent": {
        "style": "hype",
        "description": "Creates fast-paced, high-energy hype videos with bold visuals and energetic narration",
        "capabilities": ["excitement", "sports", "launch_events", "motivation", "crowd_rallying"],
        "system_prompt": STYLE_PRESETS["hype"]["instructions"],
    },
    "ad_agent": {
        "style": "ad",
        "description": "Creates clean, polished promotional videos for products, services, or ideas",
        "capabilities": ["product_promotion", "feature_highlights", "call_to_action", "brand_messaging"],
        "system_prompt": STYLE_PRESETS["ad"]["instructions"],
    },
    "cinematic_agent": {
        "style": "cinematic",
        "description": "Creates emotional, story-driven cinematic videos with a poetic tone",
        "capabilities": ["storytelling", "emotional_moments", "atmosphere", "poetic_narration"],
        "system_prompt": STYLE_PRESETS["cinematic"]["instructions"],
    },
}
