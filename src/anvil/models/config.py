"""CLI settings for the Anvil tool itself.

Controls which external binaries are invoked and the RSA key size.
Settings come from an optional YAML file, then environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# Environment variable -> settings field
ENV_OVERRIDES: dict[str, str] = {
    "ANVIL_GIT": "git_command",
    "ANVIL_OPENSSL": "openssl_command",
    "ANVIL_KEY_BITS": "key_bits",
}


class CLISettings(BaseModel):
    """Tool-level settings used by `nv init`."""

    model_config = {"extra": "forbid"}

    git_command: str = "git"
    openssl_command: str = "openssl"
    key_bits: int = Field(default=2048, ge=1024)


def load_settings(path: Path | None = None) -> CLISettings:
    """Load CLISettings from a YAML file and the environment.

    Args:
        path: Optional YAML settings file. A missing or empty file
            yields defaults.

    Returns:
        Validated CLISettings instance. Environment variables listed
        in ENV_OVERRIDES take precedence over the file.
    """
    raw: dict = {}
    if path is not None and path.exists():
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError(f"{path}: expected a mapping of settings")
        if loaded:
            raw.update(loaded)

    for env_name, field in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            raw[field] = value

    return CLISettings.model_validate(raw)
