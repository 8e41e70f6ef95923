# Copyright The Sentiment UDF Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Tests for the ResponseExtractor
"""
# Third Party
import pytest

# Local
from sentiment_udf.core.exceptions import MalformedResponseError
from sentiment_udf.data_model import InferenceResponse
from sentiment_udf.modules import ResponseExtractor


@pytest.fixture
def extractor():
    return ResponseExtractor()


def test_extract_top_label(extractor):
    body = b'[{"label": ["__label__3"], "prob": [0.91]}]'
    assert extractor.extract(body) == "__label__3"


def test_extract_takes_first_record_and_first_label(extractor):
    body = (
        b'[{"label": ["__label__1", "__label__3"], "prob": [0.57, 0.41]},'
        b' {"label": ["__label__2"], "prob": [0.99]}]'
    )
    assert extractor.extract(body) == "__label__1"


def test_extract_does_not_validate_token(extractor):
    body = b'[{"label": ["__label__99"], "prob": [0.5]}]'
    assert extractor.extract(body) == "__label__99"


def test_extract_accepts_bytearray(extractor):
    body = bytearray(b'[{"label": ["__label__2"], "prob": [0.5]}]')
    assert extractor.extract(body) == "__label__2"


def test_extract_logs_token(extractor, caplog):
    with caplog.at_level("DEBUG"):
        extractor.extract(b'[{"label": ["__label__2"], "prob": [0.5]}]')
    assert any("__label__2" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize(
    "body",
    [
        b'[{"label": ["__label__3"], "prob": null}]',
        b'[{"label": ["__label__3"], "prob": [null]}]',
        b'[{"label": ["__label__3"], "prob": ["0.9"]}]',
    ],
)
def test_extract_ignores_unusable_prob(extractor, body):
    assert extractor.extract(body) == "__label__3"


def test_deserialize_returns_typed_response(extractor):
    response = extractor.deserialize(b'[{"label": ["__label__1"], "prob": [0.6]}]')
    assert isinstance(response, InferenceResponse)
    assert response.top_record.prob == [0.6]


@pytest.mark.parametrize(
    "body",
    [
        b"[]",
        b'[{"prob":[0.5]}]',
        b"this is not json",
        b"",
        b'[{"label": [], "prob": []}]',
        b'{"label": ["__label__1"], "prob": [0.5]}',
        b'["__label__1"]',
        b'[{"label": "__label__1", "prob": [0.5]}]',
        b'[{"label": [null], "prob": [0.5]}]',
        b'[{"label": ["__label__1"]',
    ],
)
def test_extract_malformed(extractor, body):
    with pytest.raises(MalformedResponseError):
        extractor.extract(body)


def test_extract_invalid_utf8(extractor):
    with pytest.raises(MalformedResponseError) as context:
        extractor.extract(b'[{"label": ["\xff\xfe"]}]')
    assert isinstance(context.value.__cause__, UnicodeDecodeError)


def test_extract_invalid_json_keeps_cause(extractor):
    with pytest.raises(MalformedResponseError) as context:
        extractor.extract(b"{not json")
    assert isinstance(context.value.__cause__, ValueError)


def test_decode_rejects_non_bytes(extractor):
    with pytest.raises(MalformedResponseError):
        extractor.decode(12)
