from typing import IO

from pydantic import ValidationError


class PrintableException(Exception):
    def print(self, output: IO[str]) -> None:
        print(self, file=output)


class MalformedInputException(PrintableException):
    kind = "input"

    def __init__(self, source: str, error: ValueError):
        super().__init__(f"Malformed {self.kind} in {source}.")

        self.source = source
        self.error = error

    def print(self, output: IO[str]) -> None:
        output.write(f"Malformed {self.kind} in {self.source}:\n")

        if isinstance(self.error, ValidationError):
            for detail in self.error.errors():
                location = ".".join(str(part) for part in detail["loc"])

                output.write(f"\t{location}: {detail['msg']}\n")
        else:
            output.write(f"\t{self.error}\n")


class MalformedLockException(MalformedInputException):
    kind = "lock data"


class MalformedRootPackageException(MalformedInputException):
    kind = "root package"
