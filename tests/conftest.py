"""Shared test fixtures for the TKB backend."""

import pytest

from tkb.config import Settings

FALCON_TEXT = "Falcon\n\n- Attributes:\n    - Speed: 120\n\n- Behaviors:\n    - Dive\n    - Hunt\n"


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else ""

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


def gemini_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}]}


@pytest.fixture
def settings():
    return Settings(api_key="test-key", endpoint="https://gemini.test/v1beta/models/m:generateContent", model="m")


@pytest.fixture
def fake_post(monkeypatch):
    """Replace requests.post; returns the list of captured calls. Set .response before calling."""
    import requests

    calls = []

    def _post(url, **kwargs):
        calls.append((url, kwargs))
        if isinstance(_post.response, Exception):
            raise _post.response
        return _post.response

    _post.response = FakeResponse(body=gemini_body(FALCON_TEXT))
    monkeypatch.setattr(requests, "post", _post)
    _post.calls = calls
    return _post
