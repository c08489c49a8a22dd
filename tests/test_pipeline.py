from __future__ import annotations

from pathlib import Path

import pytest
import requests

from reelsmith.agents.creative.pipeline import generate_video
from reelsmith.core import config
from reelsmith.core.errors import VideoGenerationError
from reelsmith.prompts import build_style_prompts


def _run(style: str = "hype", prompt: str = "Marathon finish line", **kwargs):
    prompts = build_style_prompts(style, prompt)
    return generate_video(prompt=prompt, style=style, **prompts, **kwargs)


def test_pipeline_calls_apis_in_order_and_stitches_clips(fake_client, output_dir, fake_concat) -> None:
    fake_client.text_responses = ["**Run.** Push. *Finish.*  "]

    result = _run()

    assert fake_client.call_names() == [
        "generate_content",
        "generate_images",
        "generate_videos",
        "operations.get",
        "operations.get",
    ]
    assert result.narration == "Run. Push. Finish."
    assert result.style == "hype"

    image_path = Path(result.image_path)
    assert image_path.parent == output_dir
    assert image_path.name.startswith("hype_image_") and image_path.suffix == ".png"
    assert image_path.read_bytes() == b"\x89PNG-fake"

    assert len(result.file_paths) == 2
    assert [Path(p).read_bytes() for p in result.file_paths] == [b"clip-one", b"clip-two"]
    assert all(Path(p).name.startswith("hype_video_") for p in result.file_paths)
    assert result.file_paths[0].endswith("_1.mp4") and result.file_paths[1].endswith("_2.mp4")

    assert fake_concat == [{"video_paths": result.file_paths, "style": "hype", "output_dir": str(output_dir)}]
    assert result.video_path.endswith("hype_final_test.mp4")


def test_pipeline_sends_narration_and_still_to_veo(fake_client, output_dir, fake_concat) -> None:
    fake_client.text_responses = ["Feel the rush."]

    _run(style="cinematic")

    _, submit = next(c for c in fake_client.calls if c[0] == "generate_videos")
    assert submit["model"] == config.MODEL_CONFIG["video"]
    assert submit["prompt"] == "Feel the rush."
    assert submit["image"].image_bytes == b"\x89PNG-fake"
    assert submit["image"].mime_type == "image/png"
    assert submit["config"].aspect_ratio == "9:16"
    assert submit["config"].number_of_videos == 2

    _, narration_call = fake_client.calls[0]
    assert "You create emotional, story-driven" in str(narration_call["config"].system_instruction)


def test_single_clip_is_used_as_final_video(fake_client, output_dir, fake_concat) -> None:
    fake_client.text_responses = ["One shot."]
    fake_client.videos = [{"uri": None, "video_bytes": b"only-clip"}]

    result = _run(style="ad")

    assert fake_concat == []
    assert result.video_path == result.file_paths[0]


def test_stitching_can_be_disabled(fake_client, output_dir, fake_concat) -> None:
    fake_client.text_responses = ["Two clips."]

    result = _run(stitch=False)

    assert fake_concat == []
    assert result.video_path == result.file_paths[0]
    assert len(result.file_paths) == 2


def test_failed_download_is_skipped(fake_client, output_dir, fake_concat, monkeypatch) -> None:
    fake_client.text_responses = ["Go."]
    fake_client.videos = [
        {"uri": "https://example.test/broken?alt=media", "video_bytes": None},
        {"uri": None, "video_bytes": b"good-clip"},
    ]

    def fake_get(*args, **kwargs):
        raise requests.ConnectionError("connection reset")

    monkeypatch.setattr("reelsmith.agents.creative.tools_video.requests.get", fake_get)

    result = _run()

    assert len(result.file_paths) == 1
    assert Path(result.file_paths[0]).read_bytes() == b"good-clip"
    assert fake_concat == []


def test_no_downloaded_clips_is_an_error(fake_client, output_dir, fake_concat, monkeypatch) -> None:
    fake_client.text_responses = ["Go."]
    fake_client.videos = [{"uri": "https://example.test/a", "video_bytes": None}]

    def fake_get(*args, **kwargs):
        raise requests.ConnectionError("down")

    monkeypatch.setattr("reelsmith.agents.creative.tools_video.requests.get", fake_get)

    with pytest.raises(VideoGenerationError, match="Failed to download any videos"):
        _run()


def test_empty_narration_stops_pipeline(fake_client, output_dir) -> None:
    fake_client.text_responses = ["  ***  "]

    with pytest.raises(VideoGenerationError, match="Failed to generate narration text"):
        _run()
    assert fake_client.call_names() == ["generate_content"]


def test_missing_image_stops_pipeline(fake_client, output_dir) -> None:
    fake_client.text_responses = ["Narration."]
    fake_client.image_bytes = None

    with pytest.raises(VideoGenerationError, match="Failed to generate image"):
        _run()
    assert "generate_videos" not in fake_client.call_names()


def test_failed_operation_is_an_error(fake_client, output_dir) -> None:
    fake_client.text_responses = ["Narration."]
    fake_client.operation_error = {"code": 3, "message": "prompt blocked"}

    with pytest.raises(VideoGenerationError, match="Video generation failed") as excinfo:
        _run()
    assert "prompt blocked" in excinfo.value.details


def test_submit_failure_is_an_error(fake_client, output_dir) -> None:
    fake_client.text_responses = ["Narration."]
    fake_client.submit_error = "quota exceeded"

    with pytest.raises(VideoGenerationError, match="Video generation failed") as excinfo:
        _run()
    assert "quota exceeded" in excinfo.value.details


def test_output_dir_is_created(fake_client, tmp_path, fake_concat) -> None:
    fake_client.text_responses = ["Narration."]
    target = tmp_path / "nested" / "videos"

    result = _run(output_dir=str(target))

    assert target.is_dir()
    assert Path(result.image_path).parent == target
