"""
Schema definition for orchestrator_agent (Gemini structured output).
"""

GEMINI_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "analysis": {"type": "STRING"},
        "style": {
            "type": "STRING",
            "enum": ["hype", "ad", "cinematic", "none"]
        },
        "final_answer": {"type": "STRING"}
    },
    "required": ["analysis", "style"]
}
