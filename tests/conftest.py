import sys, pathlib

import pytest

# Ensure project src directory is on path for tests
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session; records every get() call."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def feed_url():
    return "https://docs.google.com/spreadsheets/d/e/TEST/pub?output=csv"


@pytest.fixture
def make_session():
    def _make(text="", status_code=200, error=None):
        return FakeSession(FakeResponse(text, status_code), error=error)

    return _make
