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
Serializes input text into the request body expected by the endpoint
"""

# First Party
import alog

# Local
from ..core.exceptions import error_handler
from ..data_model import InferenceRequest

log = alog.use_channel("REQBLD")
error = error_handler.get(log)


class RequestBuilder:
    """Builds `{"instances": ["<text>"]}` for a single input. Quotes,
    backslashes and control characters in the text are escaped.
    """

    encoding = "utf-8"

    def build(self, text: str) -> str:
        if not isinstance(text, str):
            error(
                "<SUD83021577E>",
                TypeError(
                    "text must be a str, got `{}`".format(type(text).__name__)
                ),
            )
        payload = InferenceRequest(text).to_json()
        log.debug3("<SUD83021578D>", "Built request payload of length %d", len(payload))
        return payload

    def build_bytes(self, text: str) -> bytes:
        return self.build(text).encode(self.encoding)
