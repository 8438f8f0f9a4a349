from setuptools import setup

setup(
    name="PPpackage-versions",
    packages=["PPpackage.versions"],
    package_dir={"": "src"},
    package_data={"PPpackage.versions": ["templates/*.jinja"]},
    version="0.1.0",
    python_requires=">=3.11",
    install_requires=[
        "typer",
        "typing-extensions",
        "frozendict",
        "pydantic",
        "pydantic-settings",
        "Jinja2",
    ],
    extras_require={"test": ["pytest"]},
)
