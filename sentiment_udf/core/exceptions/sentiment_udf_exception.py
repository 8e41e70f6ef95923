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
Exceptions raised while classifying text against a remote inference endpoint
"""

# Standard
from enum import Enum
from typing import Optional
import uuid


class SentimentUdfStatusCode(Enum):
    NOT_FOUND = 1
    INVALID_ARGUMENT = 2
    CONNECTION_ERROR = 3
    UNAUTHORIZED = 4
    FORBIDDEN = 5
    DEADLINE_EXCEEDED = 6
    UNAVAILABLE = 7
    MALFORMED_RESPONSE = 8
    UNKNOWN = 9


# Status returned by the endpoint -> status code of the raised TransportError
HTTP_TO_STATUS_CODE = {
    400: SentimentUdfStatusCode.INVALID_ARGUMENT,
    401: SentimentUdfStatusCode.UNAUTHORIZED,
    403: SentimentUdfStatusCode.FORBIDDEN,
    404: SentimentUdfStatusCode.NOT_FOUND,
    408: SentimentUdfStatusCode.DEADLINE_EXCEEDED,
    413: SentimentUdfStatusCode.INVALID_ARGUMENT,
    415: SentimentUdfStatusCode.INVALID_ARGUMENT,
    422: SentimentUdfStatusCode.INVALID_ARGUMENT,
    502: SentimentUdfStatusCode.UNAVAILABLE,
    503: SentimentUdfStatusCode.UNAVAILABLE,
    504: SentimentUdfStatusCode.DEADLINE_EXCEEDED,
}


class SentimentUdfException(Exception):
    """Base for every failure raised by a sentiment function invocation

    Args:
        status_code (SentimentUdfStatusCode): the category of the failure
        message (str): relevant information regarding what went wrong
    """

    status_code: SentimentUdfStatusCode
    message: str

    def __init__(self, status_code: SentimentUdfStatusCode, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.id = uuid.uuid4().hex


class TransportError(SentimentUdfException):
    """The endpoint could not be reached, timed out or rejected the request"""

    def __init__(
        self,
        status_code: SentimentUdfStatusCode,
        message: str,
        http_status: Optional[int] = None,
    ) -> None:
        super().__init__(status_code, message)
        self.http_status = http_status

    @classmethod
    def from_http_status(cls, http_status: int, message: str) -> "TransportError":
        return cls(
            HTTP_TO_STATUS_CODE.get(http_status, SentimentUdfStatusCode.UNKNOWN),
            message,
            http_status=http_status,
        )


class MalformedResponseError(SentimentUdfException):
    """The endpoint response could not be decoded, parsed or navigated to a label"""

    def __init__(self, message: str) -> None:
        super().__init__(SentimentUdfStatusCode.MALFORMED_RESPONSE, message)
