from pathlib import Path
from sys import stderr
from traceback import print_exc
from typing import IO, Optional

from typer import Option as TyperOption
from typer import Typer
from typing_extensions import Annotated

from .exceptions import PrintableException
from .main import main
from .schemes import EventName
from .settings import Settings

app = Typer()


@app.command()
def main_command(
    lock_path: Path,
    root_package_path: Annotated[Path, TyperOption("--root-package")],
    vendor_dir: Annotated[Optional[Path], TyperOption("--vendor-dir")] = None,
    event_name: Annotated[EventName, TyperOption("--event")] = EventName.POST_INSTALL_CMD,
) -> None:
    main(Settings(), lock_path, root_package_path, vendor_dir, event_name)


def run(app: Typer, program_name: str, output: IO[str] = stderr) -> None:
    try:
        app()
    except PrintableException as exception:
        print(f"{program_name}:", file=output)
        exception.print(output)

        exit(1)
    except Exception:
        print(f"{program_name}:", file=output)
        print_exc(file=output)

        exit(1)
