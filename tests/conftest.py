import json

import pytest
from googleapiclient.http import HttpMockSequence

from gapis.access import gcp

@pytest.fixture
def mock_http():
    """
    Factory for an HttpMockSequence.  Each response is (status, body),
    a body that isn't a str is dumped as JSON.
        http = mock_http((200, {"name": "x"}), (404, {"error": {...}}))
    Requests made are in http.request_sequence as (uri, method, body, headers).
    """
    def make(*responses):
        seq = []
        for status, body in responses:
            content = body if isinstance(body, str) else json.dumps(body)
            seq.append(({"status": str(status)}, content))
        return HttpMockSequence(seq)
    return make

@pytest.fixture(autouse=True)
def isolated_session():
    """Keep tests from sharing (or creating) real credentials through the gcp singleton."""
    config = gcp.config
    yield
    gcp.reset()
    gcp.config = config
