import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, SecretStr
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from zoomphone.core.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from zoomphone.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['zoomphone.yaml', 'zoomphone.yml']

_ENV_VAR_PATTERN = re.compile(r'\$\{([^}:]+)(?::-([^}]*))?\}')


class ClientConfig(BaseSettings):
    """Connection settings for a Zoom Phone client.

    Values come from keyword arguments, a config file, or ``ZOOM_PHONE_*``
    environment variables.
    """

    model_config = SettingsConfigDict(env_prefix='ZOOM_PHONE_', extra='forbid')

    base_url: str = Field(DEFAULT_BASE_URL, description='Base URL of the Zoom API.')

    access_token: SecretStr | None = Field(
        None, description='OAuth access token sent as a bearer token.'
    )

    timeout: float = Field(
        DEFAULT_TIMEOUT, gt=0, description='Default request timeout in seconds.'
    )

    user_agent: str | None = Field(
        None, description='Optional User-Agent header sent with every request.'
    )

    log_level: str = Field('WARNING', description='Log level used by the CLI.')

    def client_kwargs(self) -> dict[str, Any]:
        headers = {'User-Agent': self.user_agent} if self.user_agent else None
        return {
            'base_url': self.base_url,
            'timeout': self.timeout,
            'headers': headers,
            'access_token': (
                self.access_token.get_secret_value() if self.access_token else None
            ),
        }


def _expand_env_vars(value: str) -> str:
    """Replace ``${VAR}`` and ``${VAR:-default}`` references.

    Unset variables take their default, or are left untouched when none is
    given.
    """

    def replace(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        if name in os.environ:
            return os.environ[name]
        return default if default is not None else match.group(0)

    return _ENV_VAR_PATTERN.sub(replace, value)


def _expand_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, str):
        return _expand_env_vars(data)
    if isinstance(data, dict):
        return {key: _expand_env_vars_recursive(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars_recursive(item) for item in data]
    return data


def load_yaml(path: str | Path) -> dict:
    try:
        data = yaml.safe_load(Path(path).read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f'Cannot read configuration: {e}', str(path)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', str(path))
    return _expand_env_vars_recursive(data)


def _validate(data: dict, source: str) -> ClientConfig:
    try:
        return ClientConfig(**data)
    except PydanticValidationError as e:
        field = '.'.join(str(part) for part in e.errors()[0]['loc'])
        raise ConfigurationError('Invalid configuration', source, field) from e


def get_config(path: str | None = None) -> ClientConfig:
    """Load configuration from a file, pyproject.toml or the environment.

    Lookup order: ``path`` if given, ``zoomphone.yaml``/``zoomphone.yml`` in
    the working directory, the ``[tool.zoomphone]`` table of
    ``pyproject.toml``, then environment variables only.
    """
    if path:
        return _validate(load_yaml(path), path)

    cwd = Path(os.getcwd())

    for filename in DEFAULT_FILENAMES:
        candidate = cwd / filename
        if candidate.exists():
            return _validate(load_yaml(candidate), str(candidate))

    pyproject_path = cwd / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        pyproject = tomllib.loads(pyproject_path.read_text())
        tools = pyproject.get('tool', {})

        if 'zoomphone' in tools:
            return _validate(tools['zoomphone'], str(pyproject_path))

    return _validate({}, 'environment')
