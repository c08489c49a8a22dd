"""Narration (voiceover script) generation"""

import logging
from ...core.llm import get_llm
from ...core.config import MODEL_CONFIG
from ...core.errors import VideoGenerationError

logger = logging.getLogger(__name__)


def clean_narration(text: str) -> str:
    """Strip markdown emphasis markers and surrounding whitespace"""
    return (text or "").replace("*", "").strip()


def generate_narration(narration_prompt: str, instructions: str = None, style: str = "video", client=None) -> str:
    """
    Ask the LLM for a narration script

    Args:
        narration_prompt: Style-specific narration request, already filled with the user prompt
        instructions: Style agent instructions, sent as system instruction
        style: Style name used for log tags
        client: Optional google-genai client (shared client when omitted)

    Returns:
        Cleaned narration text
    """
    tag = style.upper()
    logger.info(f"[{tag}] Generating narration...")

    llm = get_llm(
        model=MODEL_CONFIG["narration"],
        system_instruction=instructions,
        client=client
    )
    narration = clean_narration(llm.invoke(narration_prompt))

    if not narration:
        logger.error(f"[{tag}] Failed to generate narration text")
        raise VideoGenerationError("Failed to generate narration text")

    logger.info(f"[{tag}] Narration generated: {narration[:100]}...")
    return narration
