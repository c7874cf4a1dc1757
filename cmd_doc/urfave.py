"""Parse urfave/cli style help output into a tree of commands.

Help produced by urfave/cli programs is split into sections by all-caps
headers such as ``NAME:``, ``USAGE:`` or ``GLOBAL OPTIONS:``. Each section is
stored under its title-cased label (``Global Options``), and the fields of a
command are read from the relevant sections. Sub-commands found under
``COMMANDS:`` are documented by running the program again with the
sub-command appended.
"""

import logging
import re

from cmd_doc.docgen import Command, get_command_output
from cmd_doc.errors import BuildError, InvocationError

logger = logging.getLogger(__name__)

HEADER_REGEX = re.compile(r"^([A-Z]+[A-Z\s]*):\s*$")
COMMAND_REGEX = re.compile(r"^\s+([A-Za-z][^\s]*?)[\s,]")
LINES_REGEX = re.compile(r"\r\n|[\n\r]")

HELP_ARG = "--help"


class Help(dict):
    """Help output parsed by heading, label -> section text."""

    def section(self, label: str) -> str:
        return self.get(label, "")

    def name(self) -> str:
        name, _ = parse_name(self.section("Name"))
        return name

    def usage(self) -> str:
        _, usage = parse_name(self.section("Name"))
        return usage

    def version(self) -> str:
        return parse_version(self.section("Version"))

    def description(self) -> str:
        return self.section("Description")

    def commands(self) -> list[str]:
        return parse_commands(self.section("Commands"))


def split_lines(text: str) -> list[str]:
    """Split on \\n, \\r or \\r\\n only, without a trailing empty line."""
    lines = LINES_REGEX.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_help(help_text: str | None) -> Help:
    """Split help output on its section headers.

    Header lines like ``GLOBAL OPTIONS:`` become the key ``Global Options``
    and are not included in any section. Lines before the first header are
    stored under the empty key.
    """
    result = Help()
    if not help_text:
        return result

    header = ""
    for line in split_lines(help_text):
        match = HEADER_REGEX.match(line)
        if match:
            header = match.group(1).strip().lower().title()
            continue
        result.setdefault(header, "")
        result[header] += line + "\n"
    return result


def parse_name(name_help: str) -> tuple[str, str]:
    """Return ``(name, usage)`` from the first line with a name on it."""
    for line in split_lines(name_help):
        split = line.split(" - ", 1)
        name = split[0].strip()
        if not name:
            continue
        usage = split[1].strip() if len(split) > 1 else ""
        return name, usage
    return "", ""


def parse_version(version_help: str) -> str:
    for line in split_lines(version_help):
        line = line.strip()
        if line:
            return line
    return ""


def parse_description(description_help: str) -> str:
    result = "\n".join(line.strip() for line in split_lines(description_help))
    result = result.strip()
    if not result:
        return ""
    return result + "\n"


def parse_commands(commands_help: str) -> list[str]:
    """List sub-command names, in order, skipping ``help``."""
    result = []
    for line in split_lines(commands_help):
        match = COMMAND_REGEX.match(line)
        if match and match.group(1) != "help":
            result.append(match.group(1))
    return result


class CommandHelp(Command):
    """A command documented from its own help output."""

    def __init__(
        self,
        base,
        name="",
        version="",
        usage="",
        build_version="",
        build_date="",
        build_user="",
        description="",
        help_text="",
        commands=None,
    ):
        self.base = tuple(base)
        self._name = name
        self.version = version
        self.usage = usage
        self.build_version = build_version
        self.build_date = build_date
        self.build_user = build_user
        self._description = description
        self._help = help_text
        self._commands = list(commands or [])

    def __repr__(self):
        return f"CommandHelp(base={self.base!r}, name={self._name!r})"

    def name(self) -> str:
        return self._name

    def info(self) -> str:
        result = ""
        for label, value in (
            ("name", self._name),
            ("version", self.version),
            ("build_version", self.build_version),
            ("build_date", self.build_date),
            ("build_user", self.build_user),
        ):
            value = value.strip()
            if value:
                result += f"{label}: {value}\n"

        usage = self.usage.strip()
        if usage:
            result = usage + "\n" + ("\n" + result if result else "")
        return result

    def description(self) -> str:
        return self._description

    def help(self) -> str:
        return self._help

    def commands(self) -> list[Command]:
        return list(self._commands)


def build_tree(base, invoke=get_command_output) -> CommandHelp:
    """Document the command at ``base`` and, recursively, its sub-commands.

    ``invoke`` runs a command and returns its combined output; it raises
    InvocationError on failure, which aborts the whole tree.
    """
    base = tuple(base)
    help_text = invoke(*base, HELP_ARG)
    help = parse_help(help_text)

    fields = dict(
        name=help.name(),
        version=help.version(),
        usage=help.usage(),
        build_version=help.section("Build Version").strip(),
        build_date=help.section("Build Date").strip(),
        build_user=help.section("Build User").strip(),
        description=parse_description(help.description()),
        help_text=help_text,
    )

    sub_commands = help.commands()
    if sub_commands:
        logger.debug(
            "found %d subcommand(s) for %s: %s",
            len(sub_commands),
            " ".join(base),
            ", ".join(sub_commands),
        )
    commands = [
        build_tree(base + (sub_command,), invoke) for sub_command in sub_commands
    ]

    return CommandHelp(base, commands=commands, **fields)


def new_command(command: str, *args: str, invoke=get_command_output) -> CommandHelp:
    """Generate a command tree from urfave/cli help, e.g. ``new_command("app")``."""
    base = (command, *args)
    try:
        return build_tree(base, invoke)
    except InvocationError as e:
        raise BuildError(base, str(e)) from e
