"""Shared fixtures: a trimmed emoji-test.txt and a fake requests session."""

import pytest

SAMPLE_TEST_FILE = """\
# emoji-test.txt
# Date: 2023-06-05, 21:39:54 GMT
# © 2023 Unicode®, Inc.

# This file provides data for testing which sequences are emoji.
#
# Format:
#   code points; status # emoji name

# group: Smileys & Emotion

# subgroup: face-smiling
1F600                                                  ; fully-qualified     # 😀 E1.0 grinning face
1F603                                                  ; fully-qualified     # 😃 E0.6 grinning face with big eyes

# subgroup: face-affection
263A FE0F                                              ; fully-qualified     # ☺️ E0.6 smiling face
263A                                                   ; unqualified         # ☺ E0.6 smiling face

# Smileys & Emotion subtotal:		4
# Smileys & Emotion subtotal:		4	w/o modifiers

# group: Symbols

# subgroup: keycap
0023 FE0F 20E3                                         ; fully-qualified     # #️⃣ E0.6 keycap: #
0023 20E3                                              ; unqualified         # #⃣ E0.6 keycap: #

# Symbols subtotal:		2

#EOF
"""


class FakeResponse:
    def __init__(self, status_code=200, body="", reason="OK", headers=None, chunk_size=64):
        self.status_code = status_code
        self.reason = reason
        self.headers = headers or {}
        self.encoding = None
        self._body = body
        self._chunk_size = chunk_size
        self.closed = False

    def iter_content(self, chunk_size=1, decode_unicode=False):
        for start in range(0, len(self._body), self._chunk_size):
            yield self._body[start:start + self._chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True
        return False


class FakeSession:
    """Hands out canned responses keyed by URL and records every request."""

    def __init__(self, responses):
        self.responses = responses
        self.requested = []
        self.closed = False

    def get(self, url, **kwargs):
        self.requested.append((url, kwargs))
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def sample_text():
    return SAMPLE_TEST_FILE


@pytest.fixture
def fake_session():
    def make(responses):
        return FakeSession(responses)
    return make
