"""Errors raised while validating arguments and running the formatter."""


class PrintableError(Exception):
    """Base error; ``exit_code`` is the status the CLI terminates with."""

    exit_code = 1


class UsageError(PrintableError):
    def __init__(self, prog: str = "printable"):
        super().__init__(f"usage: {prog} CODE OUTPUT")


class InputNotFoundError(PrintableError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"error: file '{path}' not found")


class InputNotReadableError(PrintableError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"error: file '{path}' is not readable")


class FormatterNotFoundError(PrintableError):
    # Same status a shell reports for a missing command.
    exit_code = 127

    def __init__(self, path):
        self.path = path
        super().__init__(f"error: formatter '{path}' not found")


class FormatterNotExecutableError(PrintableError):
    # Same status a shell reports for a command it cannot execute.
    exit_code = 126

    def __init__(self, path, reason: OSError):
        self.path = path
        detail = reason.strerror or str(reason)
        super().__init__(f"error: formatter '{path}' cannot be executed: {detail}")
