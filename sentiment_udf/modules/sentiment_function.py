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
The SentimentFunction is the scalar function exposed to the query engine. It
runs a linear pipeline for every input:

    text -> RequestBuilder -> EndpointInvoker -> ResponseExtractor -> LabelMapper

Failures while building, invoking or extracting propagate to the caller with no
partial result. Mapping never fails.
"""
# Standard
from threading import Lock
from typing import Optional

# First Party
import alog

# Local
from ..config import get_config
from ..data_model import SentimentCategory
from .endpoint_invoker import EndpointInvoker
from .label_mapper import LabelMapper
from .request_builder import RequestBuilder
from .response_extractor import ResponseExtractor

log = alog.use_channel("SENTFN")


class SentimentFunction:
    """Classify the sentiment of a single text with a remote model"""

    def __init__(
        self,
        invoker: EndpointInvoker,
        content_type: str = "application/json",
        request_builder: Optional[RequestBuilder] = None,
        response_extractor: Optional[ResponseExtractor] = None,
        label_mapper: Optional[LabelMapper] = None,
    ):
        self.invoker = invoker
        self.content_type = content_type
        self.request_builder = request_builder or RequestBuilder()
        self.response_extractor = response_extractor or ResponseExtractor()
        self.label_mapper = label_mapper or LabelMapper()

    @classmethod
    def from_config(cls, **kwargs) -> "SentimentFunction":
        endpoint_config = get_config().endpoint
        kwargs.setdefault("invoker", EndpointInvoker.from_config(endpoint_config))
        kwargs.setdefault("content_type", endpoint_config.content_type)
        return cls(**kwargs)

    def classify_sentiment(self, text: str) -> SentimentCategory:
        payload = self.request_builder.build_bytes(text)
        body = self.invoker.invoke(payload, self.content_type)
        token = self.response_extractor.extract(body)
        sentiment = self.label_mapper.map(token)
        log.debug2("<SUD11846209D>", "Token [%s] -> %s", token, sentiment.value)
        return sentiment

    __call__ = classify_sentiment


## Default instance ############################################################

_DEFAULT_FUNCTION: Optional[SentimentFunction] = None
_DEFAULT_FUNCTION_LOCK = Lock()


def get_default_function() -> SentimentFunction:
    """Get the process-wide function built from the current configuration. It
    is built on first use.
    """
    # pylint: disable=global-statement
    global _DEFAULT_FUNCTION
    if _DEFAULT_FUNCTION is None:
        with _DEFAULT_FUNCTION_LOCK:
            if _DEFAULT_FUNCTION is None:
                log.info(
                    "<SUD11846210I>",
                    "Building sentiment function for endpoint [%s]",
                    get_config().endpoint.name,
                )
                _DEFAULT_FUNCTION = SentimentFunction.from_config()
    return _DEFAULT_FUNCTION


def reset_default_function():
    """Drop the default function so that the next call picks up a new config"""
    # pylint: disable=global-statement
    global _DEFAULT_FUNCTION
    with _DEFAULT_FUNCTION_LOCK:
        if _DEFAULT_FUNCTION is not None:
            _DEFAULT_FUNCTION.invoker.close()
        _DEFAULT_FUNCTION = None


def classify_sentiment(text: str) -> SentimentCategory:
    """Classify a single text with the default sentiment function"""
    return get_default_function().classify_sentiment(text)
