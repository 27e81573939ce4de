from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel

DEFAULT_CONFIG_FILE = "pemfinder.yaml"


class PemfinderConfig(BaseModel):
    """Names and locations consulted while resolving a private key."""

    private_key_env: str = "PRIVATE_KEY"
    private_key_path_env: str = "PRIVATE_KEY_PATH"
    extension: str = ".pem"
    search_dir: Optional[str] = None


def load_config(path: Optional[str] = None) -> PemfinderConfig:
    """Build a :class:`PemfinderConfig` for the CLI.

    Settings are read from the YAML mapping at ``path``, ``$PEMFINDER_CONFIG``
    or ``pemfinder.yaml``, whichever is given first. When that file does not
    exist the defaults apply. ``$PEMFINDER_SEARCH_DIR`` takes precedence over
    ``search_dir`` from the file.
    """

    config_file = Path(path or os.getenv("PEMFINDER_CONFIG") or DEFAULT_CONFIG_FILE)
    settings = {}
    if config_file.is_file():
        settings = yaml.safe_load(config_file.read_text()) or {}

    search_dir = os.getenv("PEMFINDER_SEARCH_DIR")
    if search_dir:
        settings["search_dir"] = search_dir
    return PemfinderConfig.model_validate(settings)
