from pathlib import Path
from typing import Annotated

from pydantic_settings import BaseSettings, SettingsConfigDict

from .validation import WithVariables


class Settings(BaseSettings):
    vendor_dir: Annotated[Path, WithVariables] = Path("vendor")

    model_config = SettingsConfigDict(
        env_prefix="PPpackage_versions_",
        env_nested_delimiter="__",
        case_sensitive=True,
    )
