"""Application configuration model.

Locates the contacts file and the preferences file. Directories left unset
resolve to the per-user ``platformdirs`` locations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import platformdirs
from pydantic import BaseModel, Field

APP_NAME = "contact_manager"


class AppConfig(BaseModel):
    """Root configuration, optionally loaded from a JSON file."""

    data_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding the contacts file.",
    )
    config_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding the preferences file.",
    )
    contacts_filename: str = Field(
        default="contacts.json",
        min_length=1,
        description="Contacts file name inside data_dir.",
    )
    settings_filename: str = Field(
        default="preferences.json",
        min_length=1,
        description="Preferences file name inside config_dir.",
    )

    @property
    def resolved_data_dir(self) -> Path:
        return self.data_dir or Path(platformdirs.user_data_dir(APP_NAME))

    @property
    def resolved_config_dir(self) -> Path:
        return self.config_dir or Path(platformdirs.user_config_dir(APP_NAME))

    @property
    def contacts_path(self) -> Path:
        """Absolute path of the contacts JSON file."""
        return self.resolved_data_dir / self.contacts_filename
