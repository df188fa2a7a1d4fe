import json
import os
from pathlib import Path

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from py_import_helper.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['import-helper.yaml', 'import-helper.yml']
PYPROJECT_TOOL_KEY = 'py-import-helper'


class ImportHelperConfig(BaseModel):
    """Classification and formatting settings of an ImportHelper."""

    model_config = ConfigDict(validate_assignment=True, extra='forbid')

    package_name: str = Field(
        '', description='Top-level package whose imports are treated as local.'
    )

    local_package_prefixes: set[str] = Field(
        default_factory=set,
        description='Module prefixes that are treated as local imports.',
    )

    max_line_length: int = Field(
        88, ge=1, description='Longest single-line from-import before wrapping.'
    )

    indent_size: int = Field(
        4, ge=1, description='Spaces per indentation level in wrapped imports.'
    )

    use_trailing_comma: bool = Field(
        True, description='Whether the last wrapped name gets a trailing comma.'
    )

    force_single_line: bool = Field(
        False, description='Never wrap from-imports, whatever their length.'
    )

    force_multiline: bool = Field(
        False, description='Always wrap from-imports, whatever their length.'
    )

    @field_validator('package_name')
    @classmethod
    def _strip_package_name(cls, value: str) -> str:
        value = value.strip()
        if value and not all(part.isidentifier() for part in value.split('.')):
            raise ValueError(f"'{value}' is not a valid package name")
        return value

    @field_validator('local_package_prefixes')
    @classmethod
    def _drop_empty_prefixes(cls, value: set[str]) -> set[str]:
        return {prefix.strip() for prefix in value if prefix.strip()}

    @model_validator(mode='after')
    def _check_wrap_mode(self) -> 'ImportHelperConfig':
        if self.force_single_line and self.force_multiline:
            raise ValueError(
                'force_single_line and force_multiline are mutually exclusive'
            )
        return self

    @classmethod
    def black_compatible(cls, **kwargs) -> 'ImportHelperConfig':
        return cls(max_line_length=88, **kwargs)

    @classmethod
    def ruff_compatible(cls, **kwargs) -> 'ImportHelperConfig':
        return cls(max_line_length=88, **kwargs)

    @classmethod
    def pep8_compatible(cls, **kwargs) -> 'ImportHelperConfig':
        return cls(max_line_length=79, **kwargs)

    @classmethod
    def isort_compatible(cls, **kwargs) -> 'ImportHelperConfig':
        return cls(max_line_length=79, **kwargs)


def load_yaml(path: str | Path) -> dict:
    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _validate(data: dict | None, source: str) -> ImportHelperConfig:
    try:
        return ImportHelperConfig.model_validate(data or {})
    except ValidationError as e:
        errors = e.errors()
        field = '.'.join(str(part) for part in errors[0]['loc']) if errors else None
        raise ConfigurationError(
            f'Invalid configuration: {errors[0]["msg"] if errors else e}',
            config_path=source,
            field=field or None,
        ) from e


def load_config_file(path: str | Path) -> ImportHelperConfig:
    """Load configuration from a YAML, JSON or pyproject.toml file."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError('Configuration file not found', config_path=str(path))

    if path.name == 'pyproject.toml':
        import tomllib

        try:
            pyproject = tomllib.loads(path.read_text())
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(
                f'Cannot read configuration: {e}', str(path)
            ) from e
        return _validate(pyproject.get('tool', {}).get(PYPROJECT_TOOL_KEY), str(path))

    try:
        if path.suffix == '.json':
            data = load_json(path)
        else:
            data = load_yaml(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f'Cannot read configuration: {e}', str(path)) from e

    if data is not None and not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', str(path))
    return _validate(data, str(path))


def get_config(path: str | None = None) -> ImportHelperConfig:
    """Load configuration from a file or return the default config.

    Without an explicit path the working directory is searched for
    ``import-helper.yaml``/``import-helper.yml`` and then for a
    ``[tool.py-import-helper]`` table in ``pyproject.toml``.
    """
    if path:
        return load_config_file(path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return load_config_file(candidate)

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        return load_config_file(candidate)

    return ImportHelperConfig()
