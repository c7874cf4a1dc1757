"""Exceptions raised while building command documentation."""


class CmdDocError(Exception):
    """Base class for cmd-doc errors."""


class InvocationError(CmdDocError):
    """A help command could not be run, or exited with a failure status.

    ``output`` holds whatever combined stdout/stderr text was captured.
    """

    def __init__(self, args, output="", reason=""):
        self.args_list = list(args)
        self.output = output
        self.reason = reason
        super().__init__(
            f"exec error for args ({', '.join(self.args_list)}): {reason}"
        )


class BuildError(CmdDocError):
    """Building a command tree failed somewhere below ``path``."""

    def __init__(self, path, reason):
        self.path = list(path)
        self.reason = reason
        super().__init__(f"generate error for {' '.join(self.path)}: {reason}")
