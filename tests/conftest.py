"""Shared test fixtures."""

from io import StringIO
from pathlib import Path
from typing import Any

import pytest

from PPpackage.versions.installer import Event
from PPpackage.versions.schemes import Config, EventName, RootPackage


@pytest.fixture
def lock_data() -> dict[str, Any]:
    return {
        "packages": [
            {
                "name": "PPpackage/versions",
                "version": "1.4.0",
                "source": {"type": "git", "reference": "aaa111"},
                "dist": {"type": "zip", "reference": "bbb222"},
            },
            {
                "name": "acme/http",
                "version": "2.0.1",
                "dist": {"type": "zip", "reference": "ccc333"},
            },
        ],
        "packages-dev": [
            {
                "name": "acme/testing",
                "version": "0.9.0",
                "source": {"type": "git", "reference": "ddd444"},
            },
        ],
    }


@pytest.fixture
def root_package() -> RootPackage:
    return RootPackage(
        name="acme/application",
        pretty_version="dev-main",
        source_reference="eee555",
    )


@pytest.fixture
def make_event(tmp_path: Path):
    def make_event(
        lock_data: dict[str, Any],
        root_package: RootPackage,
        name: EventName = EventName.POST_INSTALL_CMD,
    ) -> Event:
        return Event(
            name=name,
            lock_data=lock_data,
            root_package=root_package,
            config=Config(vendor_dir=tmp_path / "vendor"),
            output=StringIO(),
        )

    return make_event


@pytest.fixture
def execute_versions_module():
    def execute_versions_module(source: str) -> dict[str, Any]:
        namespace: dict[str, Any] = {}

        exec(compile(source, "Versions.py", "exec"), namespace)

        return namespace

    return execute_versions_module
