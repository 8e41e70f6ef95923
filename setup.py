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
Setup to be able to build the sentiment_udf library.
"""
# Standard
import os

# Third Party
import setuptools

# get version of library
SENTIMENT_UDF_VERSION = os.getenv("SENTIMENT_UDF_VERSION", "0.1.0")

# base directory containing sentiment_udf (location of this file)
base_dir = os.path.dirname(os.path.realpath(__file__))

# read requirements from file
with open(os.path.join(base_dir, "requirements.txt"), encoding="utf-8") as filehandle:
    requirements = filehandle.read().splitlines()

setuptools.setup(
    name="sentiment-udf",
    author="sentiment-udf",
    version=SENTIMENT_UDF_VERSION,
    python_requires=">=3.8",
    license="Apache-2.0",
    description="Scalar query-engine function that classifies text sentiment "
    "with a hosted text-classification model",
    install_requires=requirements,
    extras_require={
        "dev-test": [
            "pytest>=6.2.5,<8.0",
            "pytest-cov>=2.10.1,<5.0",
            "PyYAML>=6.0,<7.0",
        ],
    },
    packages=setuptools.find_packages(include=("sentiment_udf*",)),
    package_data={"sentiment_udf": [os.path.join("config", "config.yml")]},
    include_package_data=True,
    entry_points={
        "console_scripts": ["sentiment-udf=sentiment_udf.__main__:main"],
    },
)
