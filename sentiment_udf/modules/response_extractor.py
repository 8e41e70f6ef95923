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
The ResponseExtractor turns the raw body returned by the endpoint into the top
ranked label token.

Sample body:

    [
        {
            "label": ["__label__1"],
            "prob": [0.5706868171691895]
        }
    ]

Navigation is fixed: the first record of the response, then the first token of
its `label` sequence. Every step raises a MalformedResponseError when the body
does not have the expected shape. There is no fallback label.
"""
# Standard
from typing import Any
import json

# First Party
import alog

# Local
from ..core.exceptions import MalformedResponseError, error_handler
from ..data_model import InferenceResponse

log = alog.use_channel("EXTRACT")
error = error_handler.get(log)


class ResponseExtractor:
    """Extract the top label token from an endpoint response"""

    encoding = "utf-8"

    def decode(self, body: bytes) -> str:
        """Decode the raw response body as text"""
        if isinstance(body, str):
            return body
        error.response_check(
            "<SUD47108832E>",
            isinstance(body, (bytes, bytearray)),
            "expected a byte payload, got `{}`",
            type(body).__name__,
        )
        try:
            return bytes(body).decode(self.encoding)
        except UnicodeDecodeError as err:
            error(
                "<SUD47108833E>",
                MalformedResponseError(f"response is not valid {self.encoding} text"),
                err,
            )

    def parse(self, text: str) -> Any:
        """Parse the decoded body as a json document"""
        try:
            return json.loads(text)
        except ValueError as err:
            error(
                "<SUD47108834E>",
                MalformedResponseError(f"response is not valid json: {err}"),
                err,
            )

    def deserialize(self, body: bytes) -> InferenceResponse:
        """Decode, parse and type the response body"""
        return InferenceResponse.from_document(self.parse(self.decode(body)))

    def extract(self, body: bytes) -> str:
        """Extract the top ranked label token from a raw response body

        Args:
            body (bytes): The raw body returned by the endpoint

        Returns:
            str: The first label token of the first record
        """
        response = self.deserialize(body)
        top_record = response.top_record
        token = top_record.top_label
        log.debug("<SUD47108835D>", "Label token extracted: %s", token)
        return token
