from collections.abc import Mapping
from json import JSONDecodeError
from json import loads as json_loads
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .exceptions import MalformedLockException
from .schemes import LockData, LockedPackage


def read_lock(
    lock_data: Mapping[str, Any], source: str = "lock data"
) -> tuple[list[LockedPackage], list[LockedPackage]]:
    try:
        lock = LockData.model_validate(lock_data)
    except ValidationError as exception:
        raise MalformedLockException(source, exception) from exception

    return lock.packages, lock.packages_dev


def load_lock_data(lock_path: Path) -> Mapping[str, Any]:
    with lock_path.open("rb") as lock_file:
        try:
            lock_data = json_loads(lock_file.read())
        except JSONDecodeError as exception:
            raise MalformedLockException(str(lock_path), exception) from exception

    if not isinstance(lock_data, Mapping):
        raise MalformedLockException(
            str(lock_path), ValueError("The lock file must contain a JSON object.")
        )

    return lock_data
