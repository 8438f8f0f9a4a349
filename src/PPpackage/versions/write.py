from logging import getLogger
from pathlib import Path
from typing import IO

from . import COORDINATOR_PACKAGE_NAME
from .install_path import get_versions_module_path

logger = getLogger(__name__)

VERSIONS_MODULE_MODE = 0o664


def write_versions_module(source: str, install_path: Path, output: IO[str]) -> bool:
    versions_module_path = get_versions_module_path(install_path)

    if not versions_module_path.parent.exists():
        output.write(
            f"{COORDINATOR_PACKAGE_NAME}: Package not found (probably scheduled for "
            "removal); generation of versions module skipped.\n"
        )

        return False

    output.write(f"{COORDINATOR_PACKAGE_NAME}: Generating versions module...\n")

    versions_module_path.write_text(source, encoding="utf-8")
    versions_module_path.chmod(VERSIONS_MODULE_MODE)

    logger.debug(f"Wrote {versions_module_path}.")

    output.write(f"{COORDINATOR_PACKAGE_NAME}: ...done generating versions module\n")

    return True
