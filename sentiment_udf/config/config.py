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


"""Config methods for the `sentiment_udf` library. Mainly interacts with `config.yml`.
"""

# Standard
from typing import Any, Dict, Optional, Union
import os

# First Party
import aconfig
import alog

log = alog.use_channel("CONFIG")

BASE_CONFIG_PATH = os.path.realpath(
    os.path.join(os.path.dirname(__file__), "config.yml")
)

# The core config object that is continually merged into
_CONFIG: aconfig.Config = aconfig.Config({})
# An immutable view into the core config object, to be passed to callers
_IMMUTABLE_CONFIG: aconfig.ImmutableConfig = aconfig.ImmutableConfig({})
# Little helper type for signatures
_CONFIG_TYPE = Union[dict, aconfig.Config]


def get_config() -> aconfig.Config:
    """Get the sentiment_udf configuration"""
    return _IMMUTABLE_CONFIG


def configure(
    config_yml_path: Optional[str] = None, config_dict: Optional[Dict[str, Any]] = None
):
    """Merge overrides into the sentiment_udf configuration.

    Sources, last takes precedence:
        1. The existing configuration from calls to `sentiment_udf.configure()`
        2. The config from `config_yml_path`
        3. The config from `config_dict`
        4. The config files specified in the `config_files` configuration
            (NB: This may be set by the `CONFIG_FILES` environment variable)
        5. Environment variables, in ALL_CAPS_SNAKE_FORMAT

    Args:
        config_yml_path (Optional[str]): The path to a configuration yaml with
            overrides for your usage.
        config_dict (Optional[Dict]): Config overrides in dictionary form

    Returns: None: This only sets the config object that is returned by
        `sentiment_udf.get_config()`
    """
    if not config_yml_path and not config_dict:
        log.error("<SUD43273054E>", "No config_file or config_dict provided")
        raise ValueError("No config_file or config_dict provided")

    cfg = aconfig.Config(_CONFIG)
    if config_yml_path:
        new_config = aconfig.Config.from_yaml(config_yml_path)
    else:
        new_config = aconfig.Config(config_dict)

    cfg = merge_configs(cfg, new_config)

    cfg = _merge_extra_files(cfg)
    _update_global_config(cfg)


def _update_global_config(cfg: aconfig.Config):
    """Replaces the config and creates a new immutable view of it to be shared via
    get_config().
    """
    # pylint: disable=global-statement
    global _IMMUTABLE_CONFIG
    # pylint: disable=global-statement
    global _CONFIG
    _CONFIG = cfg
    # Set override_env_vars=False because we want the immutable config to be an exact copy
    _IMMUTABLE_CONFIG = aconfig.ImmutableConfig(_CONFIG, override_env_vars=False)


def _merge_extra_files(config: aconfig.Config) -> aconfig.Config:
    """Looks at the `config_files` configuration item and merges those files into the config,
    left to right"""
    config_files = config.config_files or os.environ.get("CONFIG_FILES")
    if config_files:
        if isinstance(config_files, str):
            config_files = config_files.split(",")
        for file in (str(s).strip() for s in config_files):
            log.info("<SUD17612094I>", "Loading config file '%s'", file)
            new_overrides = aconfig.Config.from_yaml(file, override_env_vars=True)
            config = merge_configs(config, new_overrides)
    return config


def merge_configs(
    base: Optional[_CONFIG_TYPE], overrides: Optional[_CONFIG_TYPE]
) -> _CONFIG_TYPE:
    """Deep merge the overrides into the base, in place. Nested sections are
    merged key by key, any other value (lists included) replaces the base value.

    Args:
        base (Optional[dict]): The config updated with the overrides
        overrides (Optional[dict]): The override config

    Returns:
        merged: dict
            The merged results of overrides merged onto base
    """
    if base is None:
        return overrides or {}
    if overrides is None:
        return base or {}

    for key, value in overrides.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            base[key] = merge_configs(base[key], value)
        else:
            base[key] = value

    return base


# Run initial configuration with the base config
configure(BASE_CONFIG_PATH)
