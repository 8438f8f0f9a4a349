from collections.abc import Mapping
from dataclasses import dataclass
from logging import getLogger
from typing import IO, Any

from . import COORDINATOR_PACKAGE_NAME
from .generate import generate_versions_module
from .install_path import locate_root_package_install_path
from .lock import read_lock
from .schemes import Config, EventName, RootPackage
from .versions import get_versions
from .write import write_versions_module

logger = getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Event:
    name: EventName
    lock_data: Mapping[str, Any]
    root_package: RootPackage
    config: Config
    output: IO[str]


def dump_versions_module(event: Event) -> None:
    root_package = event.root_package

    packages, dev_packages = read_lock(event.lock_data)

    versions = dict(get_versions(packages, dev_packages, root_package))

    if COORDINATOR_PACKAGE_NAME not in versions:
        # installed globally or transitively, the project does not require us
        logger.debug(
            f"{root_package.name} does not require {COORDINATOR_PACKAGE_NAME}, "
            f"skipping {event.name}."
        )

        return

    source = generate_versions_module(root_package.name, versions)

    install_path = locate_root_package_install_path(
        event.config.vendor_dir, root_package
    )

    write_versions_module(source, install_path, event.output)
