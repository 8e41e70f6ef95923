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
Helper utils for HTTP connections to the inference endpoint

The session does no request signing of its own. An endpoint that requires signed
requests (e.g. a SageMaker endpoint, which expects AWS SigV4 signatures built
from ambient credentials) needs the signing supplied by the deployment: either a
gateway that signs on the caller's behalf, or a `requests.Session` with a
signing auth hook passed to `EndpointInvoker`. Static credentials can go in
`endpoint.headers`.
"""
# Standard
from typing import Any, Dict, Optional

# Third Party
from requests import Session


def construct_requests_session(
    headers: Optional[Dict[str, str]] = None,
    tls: Optional[Dict[str, Any]] = None,
) -> Session:
    """Helper function to construct a requests Session object with the given
    headers and TLS config

    No retry adapter is mounted: a failed invocation is reported to the caller
    as-is.

    Args:
        headers (Optional[Dict[str, str]], optional): Headers sent with every
            request made on the session. Defaults to None.
        tls (Optional[Dict[str, Any]], optional): The `endpoint.tls` config
            section. Defaults to None.

    Returns:
        Session: The constructed session
    """
    session = Session()
    session.headers["Content-type"] = "application/json"
    if headers:
        session.headers.update(dict(headers))

    # Gather request SSL configuration
    if tls and tls.get("enabled"):
        # Configure the TLS CA settings
        if tls.get("insecure_verify"):
            session.verify = False
        else:
            session.verify = tls.get("ca_file") or True

        # Configure MTLS if a client cert and key are both given
        if tls.get("cert_file") and tls.get("key_file"):
            session.cert = (
                tls["cert_file"],
                tls["key_file"],
            )

    return session
