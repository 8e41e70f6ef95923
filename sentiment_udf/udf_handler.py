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
The handler a query engine's UDF framework dispatches to. Each registered
function is a scalar function evaluated once per row; marshaling rows to and
from the engine's format is left to the framework.
"""
# Standard
from typing import Callable, Dict, Iterable, List, Optional

# First Party
import alog

# Local
from .core.exceptions import error_handler
from .modules import SentimentFunction, get_default_function

log = alog.use_channel("UDFHDL")
error = error_handler.get(log)

SOURCE_TYPE = "athena_sentimentanalytics_udf"


class SentimentUdfHandler:
    """Exposes the sentiment function under the name queries call it by"""

    def __init__(
        self,
        sentiment_function: Optional[SentimentFunction] = None,
        source_type: str = SOURCE_TYPE,
    ):
        self.source_type = source_type
        self._sentiment_function = sentiment_function
        self._functions: Dict[str, Callable[[str], str]] = {
            "detect_bt_sentiment": self.detect_bt_sentiment,
        }

    @property
    def sentiment_function(self) -> SentimentFunction:
        if self._sentiment_function is None:
            self._sentiment_function = get_default_function()
        return self._sentiment_function

    @property
    def function_names(self) -> List[str]:
        return sorted(self._functions)

    def detect_bt_sentiment(self, input: str) -> str:  # pylint: disable=redefined-builtin
        """Return one of "Negative", "Neutral", "Positive" or "NotFound" """
        return self.sentiment_function.classify_sentiment(input).value

    def evaluate(self, function_name: str, values: Iterable[str]) -> List[str]:
        """Evaluate a registered function once per row

        Args:
            function_name (str): The name the query called the function by
            values (Iterable[str]): One input value per row

        Returns:
            List[str]: One result per row, in row order
        """
        if function_name not in self._functions:
            error(
                "<SUD90418275E>",
                ValueError(
                    "Unknown function [{}] for source [{}]".format(
                        function_name, self.source_type
                    )
                ),
            )
        func = self._functions[function_name]
        results = [func(value) for value in values]
        log.debug("<SUD90418276D>", "Evaluated %s on %d rows", function_name, len(results))
        return results
