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
Classify texts from the command line against the configured endpoint:

    python -m sentiment_udf "This product is amazing"
    cat reviews.txt | python -m sentiment_udf --config my_config.yml
"""
# Standard
from typing import Iterable, List, Optional
import argparse
import sys

# First Party
import alog

# Local
from .config import configure
from .core.exceptions import SentimentUdfException
from .core.toolkit import logging
from .udf_handler import SentimentUdfHandler

log = alog.use_channel("MAIN")


def _read_inputs(texts: List[str], stream) -> Iterable[str]:
    if texts:
        return texts
    return (line.rstrip("\n") for line in stream if line.strip())


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Classify the sentiment of texts with a remote model"
    )
    parser.add_argument(
        "texts",
        nargs="*",
        help="Texts to classify. Lines of stdin are read when none are given",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to a yaml file with configuration overrides",
    )
    args = parser.parse_args(argv)

    if args.config:
        configure(config_yml_path=args.config)

    # Set up logging so users can set LOG_LEVEL etc
    logging.configure()

    handler = SentimentUdfHandler()
    try:
        for text in _read_inputs(args.texts, sys.stdin):
            print(handler.detect_bt_sentiment(text))
    except SentimentUdfException as err:
        log.error("<SUD72206418E>", "Classification failed: %s", err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
