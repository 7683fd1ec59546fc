"""Command line argument handling package."""

from winpath.ui.cli.args.options import (
    CLIArgs,
    ClassifyArgs,
    FormatArgs,
    JoinArgs,
    ParseArgs,
    ReformatArgs,
    ResolveArgs,
    ValidateArgs,
)
from winpath.ui.cli.args.parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "ClassifyArgs",
    "FormatArgs",
    "JoinArgs",
    "ParseArgs",
    "ReformatArgs",
    "ResolveArgs",
    "ValidateArgs",
]
