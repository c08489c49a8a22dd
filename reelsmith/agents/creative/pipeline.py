"""
End-to-end generation pipeline shared by the style agents

narration (LLM) -> still frame (Imagen) -> clips (Veo, polled) -> download -> concat
"""

import os
import time
import logging
from dataclasses import dataclass, field, asdict
from typing import List, Optional
import requests
from ...core import config
from ...core.errors import VideoGenerationError
from .client_veo_google import GoogleVeoGenerator
from .tools_narration import generate_narration
from .tools_image import generate_still
from .tools_video import clip_filename, save_clip
from .tools_video_editor import concatenate_videos
from ..base import format_time

logger = logging.getLogger(__name__)


@dataclass
class VideoResult:
    """Files produced by one pipeline run"""
    style: str
    narration: str
    image_path: str
    file_paths: List[str] = field(default_factory=list)
    video_path: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


def ensure_output_dir(output_dir: str) -> str:
    if not os.path.isdir(output_dir):
        os.makedirs(output_dir, exist_ok=True)
        logger.info(f"Created output directory: {output_dir}")
    return output_dir


def generate_video(
    prompt: str,
    style: str,
    narration_prompt: str,
    visual_prompt: str,
    instructions: str = None,
    output_dir: str = None,
    client=None,
    stitch: bool = None,
) -> VideoResult:
    """
    Run the full generation pipeline for one style

    Args:
        prompt: User prompt
        style: Style name ("hype", "ad", "cinematic")
        narration_prompt: Filled narration template
        visual_prompt: Filled visual template
        instructions: Style agent instructions for the narration LLM
        output_dir: Output directory (config.OUTPUT_DIR when omitted)
        client: Optional google-genai client shared by all steps
        stitch: Concatenate multiple clips (config default when omitted)

    Returns:
        VideoResult with narration, still, clips and final video path

    Raises:
        VideoGenerationError: When a step produces no usable output
    """
    tag = style.upper()
    output_dir = ensure_output_dir(output_dir or config.OUTPUT_DIR)
    if stitch is None:
        stitch = config.VIDEO_GENERATION_CONFIG["stitch_clips"]
    start_time = time.time()

    logger.info(f"[{tag}] Starting video generation for prompt: {prompt}")

    # 1. Narration
    narration = generate_narration(narration_prompt, instructions=instructions, style=style, client=client)

    # 2. Still frame
    still = generate_still(visual_prompt, style=style, output_dir=output_dir, client=client)

    # 3. Submit Veo, narration drives the motion
    logger.info(f"[{tag}] Starting video generation with Veo...")
    veo = GoogleVeoGenerator(client=client, tag=tag)
    submitted = veo.generate_video(
        prompt=narration,
        image_bytes=still["image_bytes"],
        mime_type=still["mime_type"],
        aspect_ratio=config.VIDEO_GENERATION_CONFIG["aspect_ratio"],
        number_of_videos=config.VIDEO_GENERATION_CONFIG["number_of_videos"]
    )
    if submitted.get("code") != 0:
        logger.error(f"[{tag}] {submitted.get('message')}")
        raise VideoGenerationError("Video generation failed", details=submitted.get("message"))

    # 4. Poll
    result = veo.wait_for_completion(
        submitted["data"]["operation"],
        max_wait_time=config.VIDEO_GENERATION_CONFIG["max_wait_time"],
        poll_interval=config.VIDEO_GENERATION_CONFIG["check_interval"]
    )
    if result["data"].get("task_status") != "succeed":
        logger.error(f"[{tag}] Video generation failed - {result.get('message')}")
        raise VideoGenerationError("Video generation failed", details=result.get("message"))

    videos = result["data"]["task_result"]["videos"]

    # 5. Save clips, skipping any that fail
    file_paths = []
    for i, video in enumerate(videos, start=1):
        if video.get("uri"):
            logger.info(f"[{tag}] Video {i} URI generated: {video['uri']}")
        try:
            file_path = save_clip(video, clip_filename(style, i), output_dir)
        except (requests.RequestException, OSError, ValueError) as e:
            logger.error(f"[{tag}] Failed to download video {i}: {e}")
            continue
        file_paths.append(file_path)
        logger.info(f"[{tag}] Video {i} saved to: {file_path}")

    if not file_paths:
        raise VideoGenerationError("Failed to download any videos")

    # 6. Final output
    if len(file_paths) == 1:
        logger.info(f"[{tag}] Only one video downloaded, using as final output")
        video_path = file_paths[0]
    elif stitch:
        video_path = concatenate_videos(file_paths, style=style, output_dir=output_dir)
    else:
        video_path = file_paths[0]

    logger.info(f"[{tag}] Video generation complete - {len(file_paths)} clip(s), final video {video_path} ({format_time(time.time() - start_time)})")
    return VideoResult(
        style=style,
        narration=narration,
        image_path=still["image_path"],
        file_paths=file_paths,
        video_path=video_path
    )
