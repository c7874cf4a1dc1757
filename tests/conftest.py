"""Shared fixtures for cmd-doc tests."""

import pytest

from cmd_doc.errors import InvocationError

APP_HELP = """\
NAME:
   app - demo

COMMANDS:
   run\t\truns it
   help\t\tshow help
"""

RUN_HELP = "NAME:\n   run - executes\n"


class FakeInvoker:
    """Stands in for get_command_output, answering from a fixed table."""

    def __init__(self, outputs):
        self.outputs = {tuple(k): v for k, v in outputs.items()}
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        if args not in self.outputs:
            raise InvocationError(args, "No help topic", "exit status 3")
        return self.outputs[args]


@pytest.fixture
def fake_invoker():
    def make(outputs):
        return FakeInvoker(outputs)

    return make


@pytest.fixture
def app_invoker(fake_invoker):
    return fake_invoker(
        {
            ("app", "--help"): APP_HELP,
            ("app", "run", "--help"): RUN_HELP,
        }
    )


@pytest.fixture
def app_help():
    return APP_HELP


@pytest.fixture
def run_help():
    return RUN_HELP
