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
"""The components of the sentiment function, leaves first"""

# Local
from .request_builder import RequestBuilder
from .endpoint_invoker import EndpointInvoker
from .response_extractor import ResponseExtractor
from .label_mapper import DEFAULT_LABEL_MAP, LabelMapper
from .sentiment_function import (
    SentimentFunction,
    classify_sentiment,
    get_default_function,
    reset_default_function,
)
