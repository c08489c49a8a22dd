"""
Clip persistence for generated videos

Veo returns either a download URI (Gemini Developer API) or inline bytes
(Vertex AI without an output bucket). Both end up as local mp4 files.
"""

import os
import time
import logging
from typing import Dict, Any
import requests
from ...core import config

logger = logging.getLogger(__name__)


def clip_filename(style: str, index: int) -> str:
    """{style}_video_{timestamp_ms}_{index}.mp4 (index is 1-based)"""
    return f"{style}_video_{int(time.time() * 1000)}_{index}.mp4"


def download_video(uri: str, filename: str, output_dir: str) -> str:
    """
    Stream a generated video to disk

    Args:
        uri: Video URI returned by Veo
        filename: Target filename inside output_dir
        output_dir: Destination directory

    Returns:
        Local file path

    Raises:
        requests.HTTPError: On a non-2xx response
    """
    logger.info(f"Downloading video from: {uri}")

    params = {"key": config.GEMINI_API_KEY} if config.GEMINI_API_KEY else None
    response = requests.get(
        uri,
        params=params,
        stream=True,
        timeout=config.VIDEO_GENERATION_CONFIG["download_timeout"]
    )
    response.raise_for_status()

    file_path = os.path.join(output_dir, filename)
    try:
        with open(file_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=config.VIDEO_GENERATION_CONFIG["download_chunk_size"]):
                if chunk:
                    f.write(chunk)
    except Exception:
        # Partial file is unusable
        if os.path.exists(file_path):
            os.remove(file_path)
        raise
    finally:
        response.close()

    logger.info(f"Video saved to: {file_path}")
    return file_path


def save_clip(video: Dict[str, Any], filename: str, output_dir: str) -> str:
    """
    Persist one generated clip, preferring inline bytes over a download

    Args:
        video: {"uri": str | None, "video_bytes": bytes | None}
        filename: Target filename inside output_dir
        output_dir: Destination directory

    Returns:
        Local file path
    """
    if video.get("video_bytes"):
        file_path = os.path.join(output_dir, filename)
        with open(file_path, "wb") as f:
            f.write(video["video_bytes"])
        logger.info(f"Video saved to: {file_path}")
        return file_path

    if video.get("uri"):
        return download_video(video["uri"], filename, output_dir)

    raise ValueError("Video has neither bytes nor a URI")
