"""Settings for the Gradio UI, validated with pydantic."""
from __future__ import annotations

import json
import logging
from logging import getLogger
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

logger = getLogger(__name__)

DEFAULT_SETTINGS_FILE = 'typed_records.json'


class AppSettings(BaseModel):
    """UI server and display settings"""

    server_name: str = Field('127.0.0.1', description="Interface the UI binds to")
    server_port: int = Field(7860, ge=1, le=65535, description="Port the UI listens on")
    share: bool = Field(False, description="Create a public Gradio share link")
    log_level: str = Field('INFO', description="Root logging level")
    sample_path: Optional[str] = Field(None, description="JSON users file loaded at startup")
    preview_limit: int = Field(50, gt=0, description="Maximum rows shown in the table")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {v!r}")
        return level

    @classmethod
    def load(cls, settings_path: Union[Path, str, None] = None) -> 'AppSettings':
        """Load settings from a JSON file, or defaults when none is found."""
        if isinstance(settings_path, str):
            settings_path = Path(settings_path)

        if settings_path is None:
            settings_path = Path(DEFAULT_SETTINGS_FILE)
            if not settings_path.exists():
                return cls()

        with open(settings_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger.debug("Loaded settings from %s", settings_path)
        return cls.model_validate(data)

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=self.log_level,
            format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        )
