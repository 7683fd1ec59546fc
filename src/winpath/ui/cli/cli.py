"""Command line interface for winpath."""

import sys
from typing import final

from winpath.features.filepath import (
    FilePathError,
    classify_scheme,
    classify_type,
    diagnose_fragment,
    diagnose_unc,
    diagnose_windows,
    format_path,
    join_path,
    parse_path,
    reformat_path,
    resolve_path,
    resolve_segments,
)
from winpath.features.filepath.domain.extraction import extract_unc_parts
from winpath.features.filepath.domain.models import FilePathType, ValidationOutcome
from winpath.platform.logging import logger
from winpath.ui.cli.args import ArgumentParser
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
from winpath.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            display = ResultDisplay()
            succeeded = CommandProcessor._execute(args, display)
            if not succeeded:
                sys.exit(1)

        except FilePathError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _execute(args: CLIArgs, display: ResultDisplay) -> bool:
        """Run one parsed command and report whether it succeeded."""

        if isinstance(args, ClassifyArgs):
            display.show_classification(classify_type(args.path), classify_scheme(args.path))
            return True

        if isinstance(args, ValidateArgs):
            outcome = CommandProcessor._validate(args)
            display.show_validation(outcome)
            return outcome.valid

        if isinstance(args, ParseArgs):
            display.show_path_object(parse_path(args.path), args.output_format)
            return True

        if isinstance(args, FormatArgs):
            display.show_path(
                format_path(
                    args.file_path_type,
                    args.scheme,
                    drive_letter=args.drive_letter,
                    domain_name=args.domain_name,
                    segments=args.segments,
                    trailing_slash=args.trailing_slash,
                    delimiter=args.delimiter,
                )
            )
            return True

        if isinstance(args, ReformatArgs):
            display.show_path(
                reformat_path(
                    args.path,
                    args.file_path_type,
                    args.scheme,
                    delimiter=args.delimiter,
                )
            )
            return True

        if isinstance(args, JoinArgs):
            display.show_path(join_path(args.fragments, default_delimiter=args.default_delimiter))
            return True

        assert isinstance(args, ResolveArgs)
        if args.segments is not None:
            display.show_segments(resolve_segments(args.segments))
            return True
        assert args.path is not None
        display.show_path(resolve_path(args.path, default_delimiter=args.default_delimiter))
        return True

    @staticmethod
    def _validate(args: ValidateArgs) -> ValidationOutcome:
        """Validate a fragment, or a rooted path against both path families."""

        if args.fragment:
            return diagnose_fragment(args.path)

        windows = diagnose_windows(args.path)
        unc = diagnose_unc(args.path)
        if windows.valid and unc.valid:
            return ValidationOutcome.fail(
                f"path is {FilePathType.AMBIGUOUS.value}: valid as both windows and unc"
            )
        if windows.valid or unc.valid:
            return ValidationOutcome.ok()

        # A leading double slash means the text was meant as a UNC path.
        looks_unc = extract_unc_parts(args.path).domain_name is not None
        return unc if looks_unc else windows


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
