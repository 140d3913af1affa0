from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import SettingsError
from .logger import get_logger

log = get_logger(__name__)

DEFAULT_SETTINGS_FILE = "uxml-bindgen.json"
OUTPUT_PATH_ENV = "UXML_BINDGEN_OUTPUT_PATH"


class BindingSettings(BaseModel):
    enabled: bool = True

    # Empty means "write next to the source .uxml"
    binding_output_path: str = ""

    # Fully qualified names of user controls, e.g. "Game.UI.HealthBar"
    custom_element_types: List[str] = Field(default_factory=list)


class SettingsFile:
    def __init__(self, path: Path):
        self.path = path
        self.model: Optional[BindingSettings] = None

    def load(self) -> BindingSettings:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(f"Cannot read settings file {self.path}: {e}") from e
        try:
            self.model = BindingSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings in {self.path}: {e}") from e
        return self.model


def load_settings(path: Optional[Path] = None) -> BindingSettings:
    """
    Resolve generator settings.

    An explicit path must exist. Without one, ``uxml-bindgen.json`` in the
    working directory is used when present, otherwise defaults apply. The
    UXML_BINDGEN_OUTPUT_PATH environment variable overrides the output path.
    """
    if path is not None:
        settings = SettingsFile(path).load()
    else:
        candidate = Path.cwd() / DEFAULT_SETTINGS_FILE
        if candidate.exists():
            log.debug(f"Using settings file: {candidate}")
            settings = SettingsFile(candidate).load()
        else:
            settings = BindingSettings()

    env_output = os.environ.get(OUTPUT_PATH_ENV)
    if env_output is not None:
        log.debug(f"Using binding output path from {OUTPUT_PATH_ENV}: {env_output}")
        settings = settings.model_copy(update={"binding_output_path": env_output})

    return settings
