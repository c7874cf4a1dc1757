"""Generate markdown documentation from the --help output of commands."""

from cmd_doc.docgen import Command, generate_markdown, get_command_output
from cmd_doc.errors import BuildError, CmdDocError, InvocationError
from cmd_doc.urfave import CommandHelp, Help, build_tree, new_command, parse_help

__version__ = "0.0.0"

__all__ = [
    "BuildError",
    "CmdDocError",
    "Command",
    "CommandHelp",
    "Help",
    "InvocationError",
    "build_tree",
    "generate_markdown",
    "get_command_output",
    "new_command",
    "parse_help",
]
