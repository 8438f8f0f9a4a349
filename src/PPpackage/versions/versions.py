from collections.abc import Iterable, Iterator

from .schemes import LockedPackage, RootPackage


def get_package_version(package: LockedPackage) -> str:
    reference = None

    if package.source is not None:
        reference = package.source.reference

    if reference is None and package.dist is not None:
        reference = package.dist.reference

    return f"{package.version}@{reference or ''}"


def get_root_package_version(root_package: RootPackage) -> str:
    return f"{root_package.pretty_version}@{root_package.source_reference or ''}"


def get_versions(
    packages: Iterable[LockedPackage],
    dev_packages: Iterable[LockedPackage],
    root_package: RootPackage,
) -> Iterator[tuple[str, str]]:
    for package in packages:
        yield package.name, get_package_version(package)

    for package in dev_packages:
        yield package.name, get_package_version(package)

    # consumed into a dict, so the root package overrides a dependency of the same name
    yield root_package.name, get_root_package_version(root_package)
