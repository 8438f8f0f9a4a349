from pathlib import Path
from sys import stderr

from pydantic import ValidationError

from .exceptions import MalformedRootPackageException
from .installer import Event
from .interface import interface
from .lock import load_lock_data
from .schemes import Config, EventName, RootPackage
from .settings import Settings


def load_root_package(root_package_path: Path) -> RootPackage:
    try:
        return RootPackage.model_validate_json(root_package_path.read_bytes())
    except ValidationError as exception:
        raise MalformedRootPackageException(
            str(root_package_path), exception
        ) from exception


def main(
    settings: Settings,
    lock_path: Path,
    root_package_path: Path,
    vendor_dir: Path | None,
    event_name: EventName,
) -> None:
    lock_data = load_lock_data(lock_path)
    root_package = load_root_package(root_package_path)

    config = Config(
        vendor_dir=vendor_dir if vendor_dir is not None else settings.vendor_dir
    )

    interface.activate(stderr)

    interface.dispatch(
        Event(
            name=event_name,
            lock_data=lock_data,
            root_package=root_package,
            config=config,
            output=stderr,
        )
    )
