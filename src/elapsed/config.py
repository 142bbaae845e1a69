import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from elapsed.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "ELAPSED_CONFIG"


class ByteOrder(Enum):
    """Byte order of the 8-byte start instant, as a `struct` prefix."""

    little = "<"
    big = ">"
    native = "="


@dataclass
class ElapsedConfig:
    # Directory for relative and unnamed timers
    directory: str = "${oc.env:ELAPSED_DIR,/tmp}"
    default_name: str = "timer$tart"
    extension: str = "elapsed"
    byte_order: ByteOrder = ByteOrder.little
    max_name_length: int = 2048
    log_level: str = "WARNING"


def load_config(config_path: Optional[Path | str] = None, **overrides) -> DictConfig:
    """
    Build the runtime configuration.

    Starts from the `ElapsedConfig` defaults, merges the YAML file at
    `config_path` (or `$ELAPSED_CONFIG`) when given, then keyword overrides.
    """
    config = OmegaConf.structured(ElapsedConfig)
    config_path = config_path or os.environ.get(CONFIG_ENV)

    try:
        if config_path:
            logger.debug(f"Loading config from '{config_path}'")
            config = OmegaConf.merge(config, OmegaConf.load(config_path))
        if overrides:
            config = OmegaConf.merge(config, overrides)
        # Resolve interpolations now so a bad value fails here, not mid-command
        OmegaConf.to_container(config, resolve=True)
    except (OmegaConfBaseException, OSError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if not config.directory:
        raise ConfigError("Invalid configuration: 'directory' must not be empty")
    if config.max_name_length < 1:
        raise ConfigError("Invalid configuration: 'max_name_length' must be positive")
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ConfigError(f"Invalid configuration: unknown log level {config.log_level!r}")

    return config
