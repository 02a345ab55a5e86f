"""Load filter and vendor configuration from YAML or JSON files.

A filter file is either a bare list of filters or a mapping with a
``filters`` key:

    filters:            # AND between filters
      - query: '"user"."login"'
        operation: =
        values:         # OR between values
          - kaplanelad
"""

import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from .errors import ConfigError
from .models.filter import Filter

GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
GITHUB_HOST_ENV = "WEBQL_GITHUB_HOST"
DEFAULT_GITHUB_HOST = "https://api.github.com"

_FILTER_LIST = TypeAdapter(List[Filter])


class _Loader(yaml.SafeLoader):
    """Safe loader that reads a bare '=' as a string.

    YAML 1.1 tags a lone '=' as a "value" node, which SafeLoader cannot
    construct. A bare '~' is still null and must be quoted.
    """


_Loader.add_constructor(
    "tag:yaml.org,2002:value",
    lambda loader, node: loader.construct_scalar(node),
)


def read_config_file(path: Union[str, Path]) -> Any:
    """Read and decode a YAML or JSON file.

    ``.json`` files go through the json module; everything else is read as
    YAML, which also accepts JSON.

    Raises:
        ConfigError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.load(text, Loader=_Loader)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def parse_filters(data: Any) -> List[Filter]:
    """Validate decoded filter configuration.

    Args:
        data: A list of filter mappings, a mapping with a "filters" key,
            or None (no filters)

    Returns:
        List of filters

    Raises:
        ConfigError: If the data does not describe valid filters
    """
    if data is None:
        return []
    if isinstance(data, dict):
        if "filters" not in data:
            raise ConfigError("Filter config must be a list or have a 'filters' key")
        data = data["filters"] or []

    try:
        return _FILTER_LIST.validate_python(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid filters: {e}") from e


def load_filters(path: Union[str, Path]) -> List[Filter]:
    """Load filters from a YAML or JSON file."""
    return parse_filters(read_config_file(path))


def load_github_config(path: Union[str, Path]):
    """Load GitHub vendor configuration (repositories and their filters)."""
    # Deferred: the vendor package imports this module
    from .vendor.github.data import GitHubConfig

    data = read_config_file(path)
    try:
        return GitHubConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid GitHub config {path}: {e}") from e


def github_host(host: Optional[str] = None) -> str:
    """Resolve the GitHub API host.

    Resolution order:
    1. Explicit argument
    2. $WEBQL_GITHUB_HOST
    3. https://api.github.com
    """
    return (host or os.environ.get(GITHUB_HOST_ENV) or DEFAULT_GITHUB_HOST).rstrip("/")


def github_token(token: Optional[str] = None) -> Optional[str]:
    """Resolve the GitHub token from the argument or $GITHUB_TOKEN."""
    return token or os.environ.get(GITHUB_TOKEN_ENV) or None
