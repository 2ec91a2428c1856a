"""Run settings and document markers.

Settings can be loaded from a YAML file; every key is optional and
falls back to the defaults below, which match the Solana JSON-RPC
reference page.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from rpc_catalog.errors import ConfigError
from rpc_catalog.parser.categories import DEFAULT_RULES, CategoryRule

DEFAULT_SOURCE_URL = "https://docs.solana.com/api/http"


class DocumentMarkers(BaseModel):
    """CSS selectors locating each section of a method block."""

    method_block: str = ".DocBlock_boPv"
    heading: str = "h2"
    description: str = ":scope > p"
    deprecation: str = ".theme-admonition-warning"
    params_section: str = ".CodeParams_B82f"
    param: str = ".Parameter_p8dk"
    param_header: str = ".ParameterHeader_UUsJ"
    type_label: str = "code"
    field: str = ".Field_MIDZ"
    field_name: str = ".ParameterName_c9Z4"
    flag: str = ".FlagItem_qZK_"
    code_samples: str = ".CodeSnippets_vVvq"
    code_block: str = ".codeBlockLines_e6Vv"


class Settings(BaseModel):
    source_url: str = DEFAULT_SOURCE_URL
    timeout: float = 30.0
    output_dir: Path = Path(".rpc")
    capture_details: bool = False  # descriptions, responses, name index
    date_suffix: bool = True
    markers: DocumentMarkers = Field(default_factory=DocumentMarkers)
    category_rules: tuple[CategoryRule, ...] = DEFAULT_RULES


def load_settings(file_path: Path) -> Settings:
    """Load settings from a YAML file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {file_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {file_path} must contain a mapping")

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {file_path}: {e}") from e
