from pathlib import Path

from PPpackage.versions.install_path import (
    get_root_package_alias,
    get_versions_module_path,
    locate_root_package_install_path,
)
from PPpackage.versions.schemes import RootPackage


def test_alias_chain_is_unwrapped_to_canonical_package() -> None:
    canonical = RootPackage(name="PPpackage/versions", pretty_version="1.4.0")
    root_package = RootPackage(
        name="acme/alias-outer",
        pretty_version="2.x-dev",
        alias_of=RootPackage(
            name="acme/alias-inner", pretty_version="1.x-dev", alias_of=canonical
        ),
    )

    assert get_root_package_alias(root_package) == canonical


def test_self_hosted_package_installs_next_to_vendor_dir() -> None:
    root_package = RootPackage(
        name="acme/alias-outer",
        pretty_version="2.x-dev",
        alias_of=RootPackage(
            name="acme/alias-inner",
            pretty_version="1.x-dev",
            alias_of=RootPackage(name="PPpackage/versions", pretty_version="1.4.0"),
        ),
    )

    install_path = locate_root_package_install_path(
        Path("/project/vendor"), root_package
    )

    assert install_path == Path("/project")


def test_consuming_project_installs_into_vendor_copy(root_package) -> None:
    install_path = locate_root_package_install_path(
        Path("/project/vendor"), root_package
    )

    assert install_path == Path("/project/vendor/PPpackage/versions")


def test_alias_name_alone_does_not_make_package_self_hosted() -> None:
    root_package = RootPackage(
        name="PPpackage/versions",
        pretty_version="1.4.0",
        alias_of=RootPackage(name="acme/fork", pretty_version="1.4.0"),
    )

    install_path = locate_root_package_install_path(
        Path("/project/vendor"), root_package
    )

    assert install_path == Path("/project/vendor/PPpackage/versions")


def test_versions_module_path() -> None:
    assert get_versions_module_path(Path("/project")) == Path(
        "/project/src/PPpackage/versions/Versions.py"
    )
