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
"""Sentiment categories returned to the query engine"""

# Standard
from enum import Enum


class SentimentCategory(str, Enum):
    """The closed set of results of the sentiment function. The value of each
    member is the literal string handed back to the caller.
    """

    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"
    POSITIVE = "Positive"
    # Catch-all for any label token outside the known vocabulary
    NOT_FOUND = "NotFound"

    def __str__(self) -> str:
        return self.value
