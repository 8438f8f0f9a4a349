from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .validation import WithVariables


@pydantic_dataclass(frozen=True)
class Reference:
    reference: str | None = None


@pydantic_dataclass(frozen=True)
class LockedPackage:
    name: str
    version: str
    source: Reference | None = None
    dist: Reference | None = None


class LockData(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    packages: list[LockedPackage]
    packages_dev: list[LockedPackage] = Field(
        default_factory=list, alias="packages-dev"
    )

    @field_validator("packages_dev", mode="before")
    @classmethod
    def missing_dev_packages_are_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class RootPackage(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    pretty_version: str
    source_reference: str | None = None
    alias_of: "RootPackage | None" = None


class Config(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    vendor_dir: Annotated[Path, WithVariables] = Field(alias="vendor-dir")


class EventName(StrEnum):
    POST_INSTALL_CMD = "post-install-cmd"
    POST_UPDATE_CMD = "post-update-cmd"
