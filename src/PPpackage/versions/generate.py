from collections.abc import Mapping
from pathlib import Path

from jinja2 import Environment as Jinja2Environment
from jinja2 import FileSystemLoader as Jinja2FileSystemLoader
from jinja2 import StrictUndefined as Jinja2StrictUndefined
from jinja2 import select_autoescape as jinja2_select_autoescape

from . import COORDINATOR_PACKAGE_NAME

TEMPLATES_PATH = Path(__file__).parent / "templates"

VERSIONS_MODULE_TEMPLATE_NAME = "Versions.py.jinja"


def create_jinja_environment() -> Jinja2Environment:
    environment = Jinja2Environment(
        loader=Jinja2FileSystemLoader(TEMPLATES_PATH),
        autoescape=jinja2_select_autoescape(),
        undefined=Jinja2StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )

    environment.filters["literal"] = repr

    return environment


def generate_versions_module(
    root_package_name: str, versions: Mapping[str, str]
) -> str:
    template = create_jinja_environment().get_template(VERSIONS_MODULE_TEMPLATE_NAME)

    return template.render(
        coordinator_package_name=COORDINATOR_PACKAGE_NAME,
        root_package_name=root_package_name,
        versions=versions,
    )
