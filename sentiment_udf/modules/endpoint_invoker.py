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
The EndpointInvoker sends a serialized request to a named inference endpoint
and hands back the raw response body. It does not retry and does not fall back:
every transport failure is raised to the caller as a TransportError.
"""
# Standard
from threading import Lock
from typing import Any, Dict, Optional

# Third Party
from requests import ConnectionError as RequestsConnectionError
from requests import HTTPError, RequestException, Session, Timeout

# First Party
import alog

# Local
from ..client import construct_requests_session
from ..config import get_config
from ..core.exceptions import SentimentUdfStatusCode, TransportError, error_handler

log = alog.use_channel("INVOKER")
error = error_handler.get(log)

DEFAULT_PATH_TEMPLATE = "/endpoints/{endpoint_name}/invocations"


class EndpointInvoker:
    """Invoke a single, fixed inference endpoint over HTTP"""

    def __init__(
        self,
        endpoint_name: str,
        base_url: str,
        path_template: str = DEFAULT_PATH_TEMPLATE,
        accept: Optional[str] = "application/json",
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        tls: Optional[Dict[str, Any]] = None,
        session: Optional[Session] = None,
    ):
        error.type_check("<SUD20735168E>", str, endpoint_name=endpoint_name)
        error.type_check("<SUD20735169E>", str, base_url=base_url)
        error.value_check(
            "<SUD20735170E>", endpoint_name.strip(), "endpoint_name must not be empty"
        )

        self._endpoint_name = endpoint_name
        self._url = base_url.rstrip("/") + path_template.format(
            endpoint_name=endpoint_name
        )
        self._accept = accept
        self._timeout = timeout
        self._headers = headers
        self._tls = tls

        # The session is built on first use and shared by all threads
        self._session_lock = Lock()
        self._session = session

    @classmethod
    def from_config(cls, endpoint_config=None, **kwargs) -> "EndpointInvoker":
        """Construct an invoker from the `endpoint` config section

        Args:
            endpoint_config (Optional[aconfig.Config]): The endpoint section.
                Defaults to `get_config().endpoint`.
            **kwargs: Overrides for the constructor arguments (e.g. `session`)

        Returns:
            EndpointInvoker: The configured invoker
        """
        endpoint_config = endpoint_config or get_config().endpoint
        init_kwargs = dict(
            endpoint_name=endpoint_config.name,
            base_url=endpoint_config.base_url,
            path_template=endpoint_config.get("path_template") or DEFAULT_PATH_TEMPLATE,
            accept=endpoint_config.get("accept"),
            timeout=endpoint_config.get("timeout"),
            headers=endpoint_config.get("headers"),
            tls=endpoint_config.get("tls"),
        )
        init_kwargs.update(kwargs)
        return cls(**init_kwargs)

    @property
    def endpoint_name(self) -> str:
        return self._endpoint_name

    @property
    def url(self) -> str:
        return self._url

    @property
    def _http_session(self) -> Session:
        """Helper to construct a requests Session with the configured headers and
        TLS settings"""
        # Short circuit if session has already been set
        if self._session:
            return self._session

        with self._session_lock:
            # Check for the session again in case it was created during lock acquisition
            if self._session:
                return self._session
            self._session = construct_requests_session(self._headers, self._tls)
            return self._session

    @alog.timed_function(log.debug)
    def invoke(self, payload: bytes, content_type: str) -> bytes:
        """Send the payload to the endpoint and wait for its answer

        Args:
            payload (bytes): The serialized request body
            content_type (str): The MIME type of the payload

        Returns:
            bytes: The raw response body
        """
        error.type_check("<SUD20735171E>", bytes, payload=payload)
        headers = {"Content-Type": content_type}
        if self._accept:
            headers["Accept"] = self._accept

        log.debug2(
            "<SUD20735172D>",
            "Invoking endpoint [%s] at %s",
            self._endpoint_name,
            self._url,
        )
        try:
            response = self._http_session.post(
                self._url, data=payload, headers=headers, timeout=self._timeout
            )
        except Timeout as err:
            error(
                "<SUD20735173E>",
                TransportError(
                    SentimentUdfStatusCode.DEADLINE_EXCEEDED,
                    f"Timed out invoking endpoint {self._endpoint_name}",
                ),
                err,
            )
        except RequestsConnectionError as err:
            error(
                "<SUD20735174E>",
                TransportError(
                    SentimentUdfStatusCode.CONNECTION_ERROR,
                    f"Unable to reach endpoint {self._endpoint_name} at {self._url}",
                ),
                err,
            )
        except RequestException as err:
            error(
                "<SUD20735175E>",
                TransportError(
                    SentimentUdfStatusCode.UNKNOWN,
                    f"Unknown exception while invoking endpoint {self._endpoint_name}",
                ),
                err,
            )

        try:
            response.raise_for_status()
        except HTTPError as err:
            error(
                "<SUD20735176E>",
                TransportError.from_http_status(
                    response.status_code,
                    f"Received status {response.status_code} from endpoint "
                    f"{self._endpoint_name}: {response.text}",
                ),
                err,
            )

        return response.content

    def close(self):
        """Close the underlying session, if one was opened"""
        with self._session_lock:
            if self._session:
                self._session.close()
                self._session = None
