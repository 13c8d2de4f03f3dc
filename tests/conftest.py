import pytest
import requests

from config import Settings

SOURCE_URL = "https://example.test/cities"


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self._text, 0)
        return self._payload


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def settings(tmp_path):
    return Settings(meta_path=tmp_path / "meta-data.json", source_url=SOURCE_URL)


@pytest.fixture
def rows():
    return [
        {"state": "Karnataka", "city": "Mysuru"},
        {"state": " Karnataka ", "city": "Bengaluru "},
        {"state": "Delhi", "city": "New Delhi"},
        {"state": "Karnataka", "city": "Mysuru"},
        {"state": "Tamil Nadu", "city": "Chennai"},
    ]


@pytest.fixture
def make_session():
    def _make(payload=None, status_code=200, text=None, exc=None):
        return FakeSession(FakeResponse(payload, status_code=status_code, text=text), exc=exc)

    return _make
