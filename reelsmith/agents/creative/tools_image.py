"""
Still-frame generation with Imagen

The still becomes the first frame Veo animates, and is also kept on disk
next to the generated clips.
"""

import os
import time
import logging
from typing import Dict, Any
from google.genai import types
from ...core.config import MODEL_CONFIG, IMAGE_GENERATION_CONFIG
from ...core.errors import VideoGenerationError

logger = logging.getLogger(__name__)


def image_filename(style: str) -> str:
    """{style}_image_{timestamp_ms}.png"""
    return f"{style}_image_{int(time.time() * 1000)}.png"


def generate_still(visual_prompt: str, style: str, output_dir: str, client=None) -> Dict[str, Any]:
    """
    Generate a single still image and save it as PNG

    Args:
        visual_prompt: Style-specific visual description
        style: Style name (used for filename and log tags)
        output_dir: Directory the PNG is written to
        client: Optional google-genai client (shared client when omitted)

    Returns:
        Dict with image_bytes, mime_type and image_path
    """
    tag = style.upper()
    if client is None:
        from ...core.llm import get_genai_client
        client = get_genai_client()

    logger.info(f"[{tag}] Generating image...")
    response = client.models.generate_images(
        model=MODEL_CONFIG["image"],
        prompt=visual_prompt,
        config=types.GenerateImagesConfig(
            number_of_images=IMAGE_GENERATION_CONFIG["number_of_images"]
        )
    )

    generated = response.generated_images or []
    image = generated[0].image if generated else None
    if image is None or not image.image_bytes:
        logger.error(f"[{tag}] Failed to generate image")
        raise VideoGenerationError("Failed to generate image")
    logger.info(f"[{tag}] Image generated successfully")

    image_path = os.path.join(output_dir, image_filename(style))
    with open(image_path, "wb") as f:
        f.write(image.image_bytes)
    logger.info(f"[{tag}] Image saved to: {image_path}")

    return {
        "image_bytes": image.image_bytes,
        "mime_type": image.mime_type or IMAGE_GENERATION_CONFIG["mime_type"],
        "image_path": image_path
    }
