"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from winpath.config.config import Config
from winpath.config.settings import RuntimeSettings, resolve_settings
from winpath.features.filepath import FilePathType, Scheme
from winpath.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
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

_TYPE_CHOICES: tuple[str, ...] = tuple(
    t.value for t in FilePathType if t is not FilePathType.AMBIGUOUS
)
_SCHEME_CHOICES: tuple[str, ...] = tuple(s.value for s in Scheme)
_DELIMITER_CHOICES: tuple[str, ...] = ("\\", "/")


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        verbosity = argparse.ArgumentParser(add_help=False)
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output for every path operation",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        parser = argparse.ArgumentParser(
            description="winpath - Parse, validate and convert Windows and UNC paths.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        classify_parser = subparsers.add_parser(
            "classify",
            parents=[verbosity],
            help="Report the type and scheme of a path",
        )
        _ = classify_parser.add_argument("path", type=str, metavar="PATH")

        validate_parser = subparsers.add_parser(
            "validate",
            parents=[verbosity],
            help="Check whether a path is a valid Windows or UNC path",
        )
        _ = validate_parser.add_argument("path", type=str, metavar="PATH")
        _ = validate_parser.add_argument(
            "--fragment",
            action="store_true",
            help="Validate PATH as a relative fragment instead of a rooted path",
        )

        parse_parser = subparsers.add_parser(
            "parse",
            parents=[verbosity],
            help="Show the structured fields of a path",
        )
        _ = parse_parser.add_argument("path", type=str, metavar="PATH")
        _ = parse_parser.add_argument(
            "--json",
            action="store_true",
            help="Print the fields as JSON regardless of the configured output format",
        )

        format_parser = subparsers.add_parser(
            "format",
            parents=[verbosity],
            help="Render a path from its fields",
        )
        _ = format_parser.add_argument(
            "--type",
            dest="file_path_type",
            choices=_TYPE_CHOICES,
            required=True,
            help="Path type to render",
        )
        _ = format_parser.add_argument(
            "--scheme",
            choices=_SCHEME_CHOICES,
            help="Notation for windows and unc paths (default: plain)",
        )
        _ = format_parser.add_argument("--drive", dest="drive_letter", metavar="LETTER")
        _ = format_parser.add_argument("--domain", dest="domain_name", metavar="HOST")
        _ = format_parser.add_argument(
            "--delimiter",
            choices=_DELIMITER_CHOICES,
            help="Slash for paths of unknown type",
        )
        _ = format_parser.add_argument(
            "--trailing-slash",
            action="store_true",
            help="End the rendered path with a slash",
        )
        _ = format_parser.add_argument("segments", nargs="*", metavar="SEGMENT")

        reformat_parser = subparsers.add_parser(
            "reformat",
            parents=[verbosity],
            help="Convert a path to another type or scheme",
        )
        _ = reformat_parser.add_argument("path", type=str, metavar="PATH")
        _ = reformat_parser.add_argument(
            "--type",
            dest="file_path_type",
            choices=_TYPE_CHOICES,
            help="Target path type (default: the parsed type)",
        )
        _ = reformat_parser.add_argument(
            "--scheme",
            choices=_SCHEME_CHOICES,
            help="Target scheme (default: the parsed scheme)",
        )
        _ = reformat_parser.add_argument(
            "--delimiter",
            choices=_DELIMITER_CHOICES,
            help="Slash when converting to a path of unknown type",
        )

        join_parser = subparsers.add_parser(
            "join",
            parents=[verbosity],
            help="Join path fragments under the first fragment's type and scheme",
        )
        _ = join_parser.add_argument("fragments", nargs="+", metavar="FRAGMENT")

        resolve_parser = subparsers.add_parser(
            "resolve",
            parents=[verbosity],
            help="Collapse '.' and '..' segments",
        )
        _ = resolve_parser.add_argument("path", nargs="?", metavar="PATH")
        _ = resolve_parser.add_argument(
            "--segments",
            nargs="+",
            metavar="SEGMENT",
            help="Resolve a bare segment list instead of a path",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the arguments are inconsistent.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)
        settings = resolve_settings(configuration)

        command: str = parsed_args.command

        if command == "classify":
            return ClassifyArgs(command="classify", path=parsed_args.path)

        if command == "validate":
            return ValidateArgs(
                command="validate",
                path=parsed_args.path,
                fragment=bool(parsed_args.fragment),
            )

        if command == "parse":
            return ParseArgs(
                command="parse",
                path=parsed_args.path,
                output_format="json" if parsed_args.json else settings.output_format,
            )

        if command == "format":
            return ArgumentParser._process_format(parsed_args)

        if command == "reformat":
            return ReformatArgs(
                command="reformat",
                path=parsed_args.path,
                file_path_type=ArgumentParser._optional_type(parsed_args.file_path_type),
                scheme=ArgumentParser._optional_scheme(parsed_args.scheme),
                delimiter=parsed_args.delimiter,
            )

        if command == "join":
            return JoinArgs(
                command="join",
                fragments=list(parsed_args.fragments),
                default_delimiter=settings.default_delimiter,
            )

        if command == "resolve":
            return ArgumentParser._process_resolve(parser, parsed_args, settings)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _optional_type(value: str | None) -> FilePathType | None:
        return FilePathType.from_user_input(value) if value else None

    @staticmethod
    def _optional_scheme(value: str | None) -> Scheme | None:
        return Scheme.from_user_input(value) if value else None

    @staticmethod
    def _process_format(parsed_args: argparse.Namespace) -> FormatArgs:
        """Convert ``format`` arguments into typed options."""

        return FormatArgs(
            command="format",
            file_path_type=FilePathType.from_user_input(parsed_args.file_path_type),
            scheme=ArgumentParser._optional_scheme(parsed_args.scheme),
            drive_letter=parsed_args.drive_letter,
            domain_name=parsed_args.domain_name,
            delimiter=parsed_args.delimiter,
            trailing_slash=bool(parsed_args.trailing_slash),
            segments=list(parsed_args.segments),
        )

    @staticmethod
    def _process_resolve(
        parser: argparse.ArgumentParser,
        parsed_args: argparse.Namespace,
        settings: RuntimeSettings,
    ) -> ResolveArgs:
        """Convert ``resolve`` arguments, requiring a path or a segment list."""

        has_path = parsed_args.path is not None
        has_segments = parsed_args.segments is not None
        if has_path == has_segments:
            parser.error("resolve needs either PATH or --segments, but not both")

        return ResolveArgs(
            command="resolve",
            path=parsed_args.path,
            segments=list(parsed_args.segments) if has_segments else None,
            default_delimiter=settings.default_delimiter,
        )
