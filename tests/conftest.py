"""
Pytest configuration and shared fixtures for lsh-shell tests.

This module provides reusable test fixtures for:
- In-memory stdout/stderr capture
- Shells wired to in-memory streams
- Builtin processes
- A scratch working directory that is restored after each test
"""

import io
import os
import shutil

import pytest
from unittest.mock import Mock

from lsh_shell.builtins import default_registry
from lsh_shell.context import CommandContext
from lsh_shell.exit_codes import LoopStatus
from lsh_shell.launcher import ProcessLauncher
from lsh_shell.process import Process
from lsh_shell.shell import Shell


# ============================================================================
# Wait status helpers (Linux encoding)
# ============================================================================

def exited_status(code: int) -> int:
    """Wait status of a child that called exit(code)."""
    return (code & 0xff) << 8


def signaled_status(signum: int) -> int:
    """Wait status of a child killed by signum."""
    return signum & 0x7f


def stopped_status(signum: int) -> int:
    """Wait status of a child stopped by signum."""
    return ((signum & 0xff) << 8) | 0x7f


requires_fork = pytest.mark.skipif(
    not hasattr(os, 'fork'),
    reason="os.fork is not available on this platform",
)


def requires_program(name: str):
    """Skip a test when an external program is not on PATH."""
    return pytest.mark.skipif(shutil.which(name) is None, reason=f"{name} not on PATH")


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provide stdout/stderr buffers.

    Returns:
        Tuple of (stdout, stderr) StringIO objects
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def registry():
    """Provide the standard builtin registry."""
    return default_registry()


@pytest.fixture
def context(registry):
    """Provide a CommandContext listing the standard builtins."""
    return CommandContext(builtin_names=registry.names())


@pytest.fixture
def make_process(capture_output, context, registry):
    """
    Factory for builtin processes.

    Usage:
        process = make_process('cd', ['/tmp'])
        status = process.execute()
    """
    stdout, stderr = capture_output

    def _make(command: str, args=None, executor=None):
        if executor is None:
            executor = registry.lookup(command)
        return Process(
            command=command,
            args=args or [],
            stdout=stdout,
            stderr=stderr,
            executor=executor,
            context=context,
        )

    return _make


@pytest.fixture
def mock_launcher():
    """Launcher double that records calls and never forks."""
    launcher = Mock(spec=ProcessLauncher)
    launcher.launch.return_value = LoopStatus.CONTINUE
    return launcher


@pytest.fixture
def make_shell(capture_output, registry):
    """
    Factory for shells reading from a string.

    Usage:
        shell = make_shell("help\\nexit\\n")
        shell.run()
        stdout, stderr = shell.stdout.getvalue(), shell.stderr.getvalue()
    """
    stdout, stderr = capture_output

    def _make(input_text: str = "", **kwargs):
        kwargs.setdefault('stdout', stdout)
        kwargs.setdefault('stderr', stderr)
        kwargs.setdefault('registry', registry)
        return Shell(stdin=io.StringIO(input_text), **kwargs)

    return _make


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run the test inside tmp_path; the original directory is restored afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
