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
Translate the label token returned by the classifier into a sentiment
"""
# Standard
from typing import Dict, Optional

# First Party
import alog

# Local
from ..data_model import SentimentCategory

log = alog.use_channel("LBLMAP")

DEFAULT_LABEL_MAP = {
    "__label__1": SentimentCategory.NEGATIVE,
    "__label__2": SentimentCategory.NEUTRAL,
    "__label__3": SentimentCategory.POSITIVE,
}


class LabelMapper:
    """Exact-match lookup of label tokens. Unknown tokens map to NOT_FOUND rather
    than raising so that vocabulary drift in the model does not fail the query.
    """

    def __init__(self, label_map: Optional[Dict[str, SentimentCategory]] = None):
        self._label_map = dict(DEFAULT_LABEL_MAP if label_map is None else label_map)

    def map(self, token: str) -> SentimentCategory:
        category = self._label_map.get(token)
        if category is None:
            log.debug2("<SUD65520913D>", "Unrecognized label token [%s]", token)
            return SentimentCategory.NOT_FOUND
        return category
