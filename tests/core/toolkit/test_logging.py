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

# Standard
from unittest import mock

# First Party
import alog

# Local
from sentiment_udf.core.toolkit import logging
from tests.conftest import temp_config


def test_configure_uses_log_config():
    with temp_config(
        {"log": {"level": "debug", "filters": "urllib3:off", "formatter": "json"}}
    ):
        with mock.patch("alog.configure") as configure:
            logging.configure()
    configure.assert_called_once_with("debug", "urllib3:off", "json", False)


def test_configure_pretty_formatter():
    with temp_config({"log": {"formatter": "pretty", "channel_width": 20}}):
        with mock.patch("alog.configure") as configure:
            logging.configure()
    formatter = configure.call_args[0][2]
    assert isinstance(formatter, alog.AlogPrettyFormatter)
