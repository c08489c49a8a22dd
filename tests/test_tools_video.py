from __future__ import annotations

import re

import pytest
import requests

from reelsmith.agents.creative import tools_video
from reelsmith.core import config


class _FakeResponse:
    def __init__(self, chunks: list[bytes], status_code: int = 200) -> None:
        self.chunks = chunks
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size: int = 1):
        yield from self.chunks

    def close(self) -> None:
        self.closed = True


def test_clip_filename_pattern() -> None:
    assert re.fullmatch(r"ad_video_\d{13}_2\.mp4", tools_video.clip_filename("ad", 2))


def test_download_video_streams_to_file_with_api_key(tmp_path, monkeypatch) -> None:
    captured: dict = {}
    response = _FakeResponse([b"abc", b"", b"def"])

    def fake_get(url, params=None, stream=False, timeout=None):
        captured.update(url=url, params=params, stream=stream, timeout=timeout)
        return response

    monkeypatch.setattr(config, "GEMINI_API_KEY", "test-key")
    monkeypatch.setattr("reelsmith.agents.creative.tools_video.requests.get", fake_get)

    path = tools_video.download_video("https://example.test/files/v1:download?alt=media", "hype_video_1_1.mp4", str(tmp_path))

    assert path == str(tmp_path / "hype_video_1_1.mp4")
    assert (tmp_path / "hype_video_1_1.mp4").read_bytes() == b"abcdef"
    assert captured["params"] == {"key": "test-key"}
    assert captured["stream"] is True
    assert captured["timeout"] == config.VIDEO_GENERATION_CONFIG["download_timeout"]
    assert response.closed


def test_download_video_raises_on_http_error(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(
        "reelsmith.agents.creative.tools_video.requests.get",
        lambda *args, **kwargs: _FakeResponse([], status_code=403),
    )

    with pytest.raises(requests.HTTPError):
        tools_video.download_video("https://example.test/v", "clip.mp4", str(tmp_path))
    assert not (tmp_path / "clip.mp4").exists()


def test_save_clip_prefers_inline_bytes(tmp_path, monkeypatch) -> None:
    def fail_get(*args, **kwargs):
        raise AssertionError("should not download when bytes are present")

    monkeypatch.setattr("reelsmith.agents.creative.tools_video.requests.get", fail_get)

    path = tools_video.save_clip({"uri": "https://example.test/v", "video_bytes": b"inline"}, "c.mp4", str(tmp_path))

    assert (tmp_path / "c.mp4").read_bytes() == b"inline"
    assert path == str(tmp_path / "c.mp4")


def test_save_clip_without_source_raises(tmp_path) -> None:
    with pytest.raises(ValueError):
        tools_video.save_clip({"uri": None, "video_bytes": None}, "c.mp4", str(tmp_path))


class _BrokenStream(_FakeResponse):
    def iter_content(self, chunk_size: int = 1):
        yield b"partial"
        raise requests.ConnectionError("connection reset mid-stream")


def test_interrupted_download_leaves_no_partial_file(tmp_path, monkeypatch) -> None:
    response = _BrokenStream([])
    monkeypatch.setattr("reelsmith.agents.creative.tools_video.requests.get", lambda *args, **kwargs: response)

    with pytest.raises(requests.ConnectionError):
        tools_video.download_video("https://example.test/v", "clip.mp4", str(tmp_path))

    assert not (tmp_path / "clip.mp4").exists()
    assert response.closed
