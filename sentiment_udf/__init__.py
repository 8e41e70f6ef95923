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
sentiment_udf exposes a hosted text-classification model to a query engine as a
scalar function returning one of "Negative", "Neutral", "Positive" or
"NotFound".
"""
# Local
from . import config, core, data_model, modules

# Expose configuration fn and getter at the top level
from .config import configure, get_config

# Expose the sentiment function at the top level
from .core.exceptions import (
    MalformedResponseError,
    SentimentUdfException,
    TransportError,
)
from .data_model import SentimentCategory
from .modules import SentimentFunction, classify_sentiment
from .udf_handler import SentimentUdfHandler
from .version import __version__
