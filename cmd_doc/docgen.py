"""Command model, help invocation, and markdown generation."""

import abc
import logging
import subprocess

from cmd_doc.errors import InvocationError

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = "COMMAND"


class Command(abc.ABC):
    """A command, possibly with nested sub-commands."""

    @abc.abstractmethod
    def name(self) -> str:
        """A single line like ``some-command-name``."""

    @abc.abstractmethod
    def info(self) -> str:
        """Descriptive info about the command, each line will be block quoted."""

    @abc.abstractmethod
    def description(self) -> str:
        """Text description, possibly with markdown formatting, copied in as-is."""

    @abc.abstractmethod
    def help(self) -> str:
        """The command help, copied in as pre-formatted text."""

    @abc.abstractmethod
    def commands(self) -> list["Command"]:
        """Nested sub-commands."""


def get_command_output(*args: str) -> str:
    """Run ``args`` and return stdout and stderr combined as one string.

    Raises InvocationError if the program cannot be started or exits with a
    non-zero status; the captured output is kept on the exception.
    """
    if len(args) < 1:
        raise ValueError("get_command_output requires at least one arg")

    logger.debug("running %s", " ".join(args))
    try:
        result = subprocess.run(
            list(args),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise InvocationError(args, _decode(e.output), str(e)) from e
    except OSError as e:
        raise InvocationError(args, "", str(e)) from e
    return _decode(result.stdout)


def _decode(output):
    # invalid UTF-8 is replaced, line endings are left untouched
    return (output or b"").decode("utf-8", errors="replace")


def _quote(info):
    info = info.removesuffix("\n")
    if info == "":
        return ""
    return "".join(f"> {line}\n" for line in info.split("\n"))


def generate_markdown(command: Command) -> str:
    """Build a markdown document from a command and all of its sub-commands."""

    def generate(command, depth):
        name = command.name() or PLACEHOLDER_NAME
        info = _quote(command.info())
        description = command.description()

        # newlines for optional segments
        if info:
            info += "\n"
        if description:
            description += "\n"

        body = (
            f"{'#' * (depth + 1)} {name}\n"
            "\n"
            f"{info}"
            f"{description}"
            "```\n"
            f"{command.help()}\n"
            "```\n"
        )
        for sub_command in command.commands() or ():
            body += "\n" + generate(sub_command, depth + 1)
        return body

    return generate(command, 0)
