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
"""Data structures for the inference endpoint wire format

Request:

    {"instances": ["<input text>"]}

Response:

    [
        {"label": ["__label__1", ...], "prob": [0.57, ...]},
        ...
    ]
"""

# Standard
from dataclasses import dataclass, field
from typing import Any, List
import json

# First Party
import alog

# Local
from ..core.exceptions import error_handler

log = alog.use_channel("DATAM")
error = error_handler.get(log)


@dataclass(frozen=True)
class InferenceRequest:
    """A request for a single instance. Batching several texts into one request
    is not supported.
    """

    text: str

    @property
    def instances(self) -> List[str]:
        return [self.text]

    def to_dict(self) -> dict:
        return {"instances": self.instances}

    def to_json(self) -> str:
        # Non-ascii text is sent as-is, the body is encoded as utf-8
        return json.dumps(self.to_dict(), ensure_ascii=False)


def _probabilities(prob: Any) -> List[float]:
    """Scores are informational only. Anything other than a list of numbers is
    dropped rather than failing the record.
    """
    if isinstance(prob, list) and all(
        isinstance(p, (int, float)) and not isinstance(p, bool) for p in prob
    ):
        return [float(p) for p in prob]
    if prob is not None:
        log.debug2("<SUD93318042D>", "Ignoring unusable prob of type %s", type(prob))
    return []


@dataclass(frozen=True)
class ClassificationRecord:
    """One ranked set of predictions. `label` and `prob` are parallel and
    ordered best-first.
    """

    label: List[str]
    prob: List[float] = field(default_factory=list)

    @classmethod
    def from_dict(cls, record: Any) -> "ClassificationRecord":
        error.response_check(
            "<SUD58213307E>",
            isinstance(record, dict),
            "record must be an object, got `{}`",
            type(record).__name__,
        )
        error.response_check(
            "<SUD71904526E>", "label" in record, "record has no `label` field"
        )
        label = record["label"]
        error.response_check(
            "<SUD26650381E>",
            isinstance(label, list),
            "`label` must be a sequence, got `{}`",
            type(label).__name__,
        )

        return cls(label=list(label), prob=_probabilities(record.get("prob")))

    @property
    def top_label(self) -> str:
        """The best ranked label token"""
        error.response_check("<SUD40127795E>", len(self.label) > 0, "`label` is empty")
        token = self.label[0]
        error.response_check(
            "<SUD64482910E>",
            isinstance(token, str),
            "label token must be a string, got `{}`",
            type(token).__name__,
        )
        return token


@dataclass(frozen=True)
class InferenceResponse:
    """The ranked classification records returned for one request.

    Only the top record is ever deserialized. Trailing records are kept in
    their decoded form and never inspected.
    """

    records: List[Any]

    @classmethod
    def from_document(cls, document: Any) -> "InferenceResponse":
        error.response_check(
            "<SUD12875064E>",
            isinstance(document, list),
            "expected a sequence of records, got `{}`",
            type(document).__name__,
        )
        return cls(records=document)

    @property
    def top_record(self) -> ClassificationRecord:
        """The record for the first (and only) instance of the request"""
        error.response_check(
            "<SUD30917746E>", len(self.records) > 0, "response holds no records"
        )
        return ClassificationRecord.from_dict(self.records[0])
