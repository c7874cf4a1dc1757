"""The cmd-doc command line tool."""

import argparse
import logging
import sys
from pathlib import Path

from jinja2 import TemplateError

from cmd_doc import __version__
from cmd_doc.errors import CmdDocError
from cmd_doc.urfave import new_command
from cmd_doc.writer import Config

logger = logging.getLogger("cmd_doc")

APP_NAME = "cmd-doc"
APP_USAGE = "generates markdown from commands"
APP_DESCRIPTION = """\
This command is a utility to allow automated documentation of binaries.

Output will be printed to stdout in markdown format, and may be processed
further, from there."""

URFAVE_DESCRIPTION = """\
This command can be used to generate documentation from commands using
the golang github.com/urfave/cli package.

Note that the command may be from anything runnable in the require format,
including a dockerised binary."""


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_USAGE}\n\n{APP_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} v{__version__}"
    )
    parser.add_argument("--header", type=str, default="",
                        help="prepends to output as-is (no extra newline)")
    parser.add_argument("--footer", type=str, default="",
                        help="appends to output as-is (no extra newline)")
    parser.add_argument("--output", type=Path, default=None,
                        help="File to write the markdown to. Defaults to stdout.")
    parser.add_argument("--template-dir", type=Path, default=None,
                        help="Directory containing a Jinja2 page template.")
    parser.add_argument("--template-name", type=str, default=None,
                        help="Jinja2 template to render the markdown into.")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every command that is run.")

    subparsers = parser.add_subparsers(dest="action", metavar="COMMAND")
    urfave = subparsers.add_parser(
        "urfave",
        help="outputs markdown from a golang command based on the urfave/cli package",
        description=URFAVE_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        usage="%(prog)s [--] COMMAND [...ARGS]",
    )
    urfave.add_argument("args", nargs=argparse.REMAINDER,
                        help="Command to document, plus any leading arguments.")
    return parser, parser.parse_args(argv)


def setup_logging(verbose=False):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def run_urfave(args, config):
    command_args = list(args.args)
    if command_args and command_args[0] == "--":
        command_args = command_args[1:]
    if not command_args:
        logger.error("command argument required")
        return 1

    try:
        command = new_command(command_args[0], *command_args[1:])
        document = config.render(command)
    except (CmdDocError, TemplateError) as e:
        logger.error(str(e))
        return 1

    try:
        if args.output is None:
            sys.stdout.write(document)
        else:
            args.output.write_text(document)
            logger.info(f"Wrote: {args.output}")
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        return 1
    return 0


def main(argv=None):
    parser, args = parse_args(argv)
    setup_logging(args.verbose)

    if args.action != "urfave":
        parser.print_help(sys.stderr)
        return 1

    if args.template_dir is not None and args.template_name is None:
        logger.error("--template-dir requires --template-name")
        return 1

    config = Config(
        header=args.header,
        footer=args.footer,
        template_dir=args.template_dir,
        template_name=args.template_name,
    )
    return run_urfave(args, config)


if __name__ == "__main__":
    sys.exit(main())
