"""Load the linter configuration from ``.graphql-linter.yml``."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from graphql_lint.kernel.config.models import LinterConfig, get_default_config
from graphql_lint.kernel.exceptions import ConfigurationError
from graphql_lint.kernel.logging import get_logger

logger = get_logger(__name__)


def load_config(path: str | Path, *, explicit: bool = False) -> LinterConfig:
    """Load configuration from a YAML file or return defaults.

    Parameters
    ----------
    path : str | Path
        Path to the YAML configuration file
    explicit : bool, default=False
        True when the path was given by the user; a missing file is then an
        error instead of a fallback to defaults

    Returns
    -------
    LinterConfig
        Parsed configuration, or defaults when the file does not exist

    Raises
    ------
    ConfigurationError
        If the file cannot be read, is not valid YAML, or fails validation
    """
    config_path = Path(path)
    if not config_path.exists():
        if explicit:
            raise ConfigurationError(str(config_path), "file not found")
        logger.debug(f"No configuration file at {config_path}, using defaults")
        return get_default_config()

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(str(config_path), f"invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigurationError(str(config_path), f"cannot read file: {e}") from e

    if data is None:
        return get_default_config()
    if not isinstance(data, dict):
        raise ConfigurationError(
            str(config_path), f"expected a mapping, got {type(data).__name__}"
        )

    try:
        config = LinterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(str(config_path), str(e)) from e

    logger.debug(f"loaded config with {len(config.suppressions)} suppressions")
    return config
