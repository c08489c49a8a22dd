from __future__ import annotations

import pytest

from reelsmith.core import config, llm

from fakes import FakeGenaiClient


@pytest.fixture
def fake_client(monkeypatch) -> FakeGenaiClient:
    client = FakeGenaiClient()
    monkeypatch.setattr(llm, "_client", client)
    monkeypatch.setattr("reelsmith.agents.creative.client_veo_google.time.sleep", lambda _seconds: None)
    return client


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    out = tmp_path / "output"
    monkeypatch.setattr(config, "OUTPUT_DIR", str(out))
    return out


@pytest.fixture
def fake_concat(monkeypatch):
    calls: list[dict] = []

    def _concat(video_paths, style, output_dir):
        calls.append({"video_paths": list(video_paths), "style": style, "output_dir": output_dir})
        return f"{output_dir}/{style}_final_test.mp4"

    monkeypatch.setattr("reelsmith.agents.creative.pipeline.concatenate_videos", _concat)
    return calls
