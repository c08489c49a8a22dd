"""
Video editing tools using ffmpeg-python
Joins generated clips with the concat demuxer (stream copy, no re-encode)
"""

import os
import time
import tempfile
import logging
import ffmpeg
from typing import List
from ...core.errors import VideoGenerationError

logger = logging.getLogger(__name__)


def _quote_concat_path(path: str) -> str:
    # Concat list syntax: single-quoted, embedded quotes written as '\''
    return "'" + path.replace("'", "'\\''") + "'"


def write_concat_list(video_paths: List[str], list_path: str) -> str:
    """
    Write an ffmpeg concat demuxer list file

    Args:
        video_paths: Clips in playback order
        list_path: Where to write the list

    Returns:
        list_path
    """
    lines = [f"file {_quote_concat_path(os.path.abspath(p))}" for p in video_paths]
    with open(list_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
    return list_path


def build_concat_stream(list_path: str, output_path: str):
    """Stream-copy concat of every file named in list_path"""
    return (
        ffmpeg
        .input(list_path, format="concat", safe=0)
        .output(output_path, c="copy")
    )


def concatenate_videos(video_paths: List[str], style: str, output_dir: str) -> str:
    """
    Concatenate clips into {style}_final_{timestamp_ms}.mp4

    Equivalent to: ffmpeg -f concat -safe 0 -i <list> -c copy <output>

    Args:
        video_paths: Clips in playback order (at least one)
        style: Style name (used for filenames and log tags)
        output_dir: Directory for the list file and the output

    Returns:
        Path to the concatenated video
    """
    tag = style.upper()
    if not video_paths:
        raise VideoGenerationError("No videos provided")

    logger.info(f"[{tag}] Concatenating {len(video_paths)} videos...")

    output_path = os.path.join(output_dir, f"{style}_final_{int(time.time() * 1000)}.mp4")

    # One list per run, concurrent requests may share output_dir
    with tempfile.TemporaryDirectory(prefix=f"{style}_concat_", dir=output_dir) as work_dir:
        list_path = write_concat_list(video_paths, os.path.join(work_dir, f"{style}_concat_list.txt"))
        try:
            ffmpeg.run(
                build_concat_stream(list_path, output_path),
                overwrite_output=True,
                capture_stdout=True,
                capture_stderr=True
            )
        except ffmpeg.Error as e:
            stderr = e.stderr.decode("utf-8", errors="replace") if e.stderr else ""
            logger.error(f"[{tag}] ffmpeg concat failed: {stderr[-1000:]}")
            raise VideoGenerationError("Failed to concatenate videos", details=stderr) from e

    logger.info(f"[{tag}] Videos concatenated successfully: {output_path}")
    return output_path
