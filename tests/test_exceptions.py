"""Tests for the exception hierarchy."""

import errno

from lsh_shell.exceptions import (
    AllocationError,
    CommandError,
    ConfigurationError,
    ExecError,
    FatalError,
    ForkError,
    LaunchError,
    MissingArgumentError,
    ShellError,
    translate_os_error,
)
from lsh_shell.exit_codes import EXIT_USAGE


class TestHierarchy:
    """Every error derives from ShellError."""

    def test_fatal_errors(self):
        error = AllocationError()
        assert isinstance(error, FatalError)
        assert isinstance(error, ShellError)
        assert error.exit_code == 1

    def test_launch_errors(self):
        assert issubclass(ForkError, LaunchError)
        assert issubclass(ExecError, LaunchError)
        assert not issubclass(LaunchError, FatalError)

    def test_command_errors(self):
        error = MissingArgumentError("cd")
        assert isinstance(error, CommandError)
        assert error.command == "cd"
        assert str(error) == 'expected argument to "cd"'

    def test_configuration_error(self):
        error = ConfigurationError("prompt", "too long")
        assert str(error) == "invalid prompt: too long"
        assert error.exit_code == EXIT_USAGE == 2


class TestLaunchErrorMessages:
    """Messages used in launcher reports."""

    def test_fork_error(self):
        error = ForkError("Resource temporarily unavailable")
        assert str(error) == "fork: Resource temporarily unavailable"
        assert error.strerror == "Resource temporarily unavailable"

    def test_exec_error(self):
        error = ExecError("nosuch", "No such file or directory")
        assert str(error) == "nosuch: No such file or directory"
        assert error.program == "nosuch"


class TestTranslateOsError:
    """Tests for translate_os_error()."""

    def test_uses_strerror(self):
        error = OSError(errno.ENOENT, "No such file or directory")
        assert translate_os_error(error) == "No such file or directory"

    def test_falls_back_to_message(self):
        assert translate_os_error(ValueError("embedded null byte")) == "embedded null byte"

    def test_falls_back_to_class_name(self):
        assert translate_os_error(RuntimeError()) == "RuntimeError"
