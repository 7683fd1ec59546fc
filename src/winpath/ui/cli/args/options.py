"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from winpath.features.filepath import FilePathType, Scheme


@final
@dataclass(slots=True)
class ClassifyArgs:
    """Command line arguments for the ``classify`` subcommand."""

    command: Literal["classify"]
    path: str


@final
@dataclass(slots=True)
class ValidateArgs:
    """Command line arguments for the ``validate`` subcommand."""

    command: Literal["validate"]
    path: str
    fragment: bool


@final
@dataclass(slots=True)
class ParseArgs:
    """Command line arguments for the ``parse`` subcommand."""

    command: Literal["parse"]
    path: str
    output_format: str


@final
@dataclass(slots=True)
class FormatArgs:
    """Command line arguments for the ``format`` subcommand."""

    command: Literal["format"]
    file_path_type: FilePathType
    scheme: Scheme | None
    drive_letter: str | None
    domain_name: str | None
    delimiter: str | None
    trailing_slash: bool
    segments: list[str]


@final
@dataclass(slots=True)
class ReformatArgs:
    """Command line arguments for the ``reformat`` subcommand."""

    command: Literal["reformat"]
    path: str
    file_path_type: FilePathType | None
    scheme: Scheme | None
    delimiter: str | None


@final
@dataclass(slots=True)
class JoinArgs:
    """Command line arguments for the ``join`` subcommand."""

    command: Literal["join"]
    fragments: list[str]
    default_delimiter: str


@final
@dataclass(slots=True)
class ResolveArgs:
    """Command line arguments for the ``resolve`` subcommand.

    Exactly one of ``path`` and ``segments`` is set.
    """

    command: Literal["resolve"]
    path: str | None
    segments: list[str] | None
    default_delimiter: str


CLIArgs = (
    ClassifyArgs
    | ValidateArgs
    | ParseArgs
    | FormatArgs
    | ReformatArgs
    | JoinArgs
    | ResolveArgs
)

__all__ = [
    "CLIArgs",
    "ClassifyArgs",
    "FormatArgs",
    "JoinArgs",
    "ParseArgs",
    "ReformatArgs",
    "ResolveArgs",
    "ValidateArgs",
]
