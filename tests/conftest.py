"""
This sets up global test configs when pytest starts
"""

# Standard
from contextlib import contextmanager
from typing import Optional
from unittest import mock
import copy
import json
import os
import uuid

# Third Party
import pytest
import requests

# First Party
import alog

# Local
from sentiment_udf import get_config
from sentiment_udf.core.toolkit import logging
from sentiment_udf.modules import (
    EndpointInvoker,
    SentimentFunction,
    reset_default_function,
)
import sentiment_udf

log = alog.use_channel("TEST-CONFTEST")

FIXTURES_DIR = os.path.join(
    os.path.dirname(__file__),
    "fixtures",
)

# Configure logging from the environment
logging.configure()


@pytest.fixture(autouse=True, scope="session")
def test_environment():
    """The most important fixture: This runs sentiment_udf configuration with the base test
    config overrides"""
    test_config_path = os.path.join(FIXTURES_DIR, "config", "config.yml")
    sentiment_udf.configure(test_config_path)
    yield
    reset_default_function()


@contextmanager
def temp_config(config_overrides: dict):
    """Temporarily edit the sentiment_udf config in a mock context"""
    existing_config = copy.deepcopy(getattr(sentiment_udf.config.config, "_CONFIG"))
    # Patch out the internal config, starting with a fresh copy of the current config
    with mock.patch.object(sentiment_udf.config.config, "_CONFIG", existing_config):
        # Patch the immutable view of the config as well
        # This is required otherwise the updated immutable view will persist after the test
        with mock.patch.object(sentiment_udf.config.config, "_IMMUTABLE_CONFIG", None):
            # Run our config overrides inside the patch
            if config_overrides:
                sentiment_udf.configure(config_dict=config_overrides)
            else:
                # or just slap some random uuids in there. We need to call `.configure()`
                sentiment_udf.configure(
                    config_dict={str(uuid.uuid4()): str(uuid.uuid4())}
                )
            # Yield to the test with the new overridden config
            yield get_config()


## Endpoint doubles ############################################################


def make_response(
    body=b"", status_code: int = 200, url: Optional[str] = None
) -> requests.Response:
    """Build a real requests.Response as returned by Session.post"""
    response = requests.Response()
    response.status_code = status_code
    if not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")
    response._content = body
    response.encoding = "utf-8"
    response.url = url or "http://localhost:8089/endpoints/test/invocations"
    return response


def make_session(*responses, side_effect=None) -> mock.MagicMock:
    """Build a mocked requests.Session whose post returns the given responses in
    order, or raises `side_effect`"""
    session = mock.MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.post.side_effect = side_effect
    elif len(responses) == 1:
        session.post.return_value = responses[0]
    else:
        session.post.side_effect = list(responses)
    return session


@pytest.fixture
def endpoint_body():
    """The response body returned by the mocked endpoint, override with
    indirect parametrization or by reassigning in the test"""
    return [{"label": ["__label__3"], "prob": [0.98]}]


@pytest.fixture
def mock_session(endpoint_body):
    return make_session(make_response(endpoint_body))


@pytest.fixture
def invoker(mock_session):
    return EndpointInvoker.from_config(session=mock_session)


@pytest.fixture
def sentiment_function(invoker):
    return SentimentFunction.from_config(invoker=invoker)
