from pathlib import Path

from . import (
    COORDINATOR_PACKAGE_NAME,
    NAMESPACE_PATH,
    TOOL_NAME,
    TOOL_VENDOR,
    VERSIONS_MODULE_FILE_NAME,
)
from .schemes import RootPackage


def get_root_package_alias(root_package: RootPackage) -> RootPackage:
    package = root_package

    while package.alias_of is not None:
        package = package.alias_of

    return package


def locate_root_package_install_path(
    vendor_dir: Path, root_package: RootPackage
) -> Path:
    if get_root_package_alias(root_package).name == COORDINATOR_PACKAGE_NAME:
        return vendor_dir.parent

    return vendor_dir / TOOL_VENDOR / TOOL_NAME


def get_versions_module_path(install_path: Path) -> Path:
    return install_path / "src" / NAMESPACE_PATH / VERSIONS_MODULE_FILE_NAME
