"""
ShellConfig - runtime settings for the interpreter.

Settings come from defaults, then environment variables, then command-line
flags (applied by the caller through ``with_overrides``).
"""

from dataclasses import dataclass, replace
from typing import Mapping, Optional
import logging
import os

from .exceptions import ConfigurationError


DEFAULT_PROMPT = "> "
DEFAULT_ERROR_PREFIX = "lsh"
DEFAULT_LINE_BUFSIZE = 1024
DEFAULT_TOKEN_BUFSIZE = 64
DEFAULT_LOG_LEVEL = "WARNING"

ENV_PROMPT = "LSH_PROMPT"
ENV_LOG_LEVEL = "LSH_LOG_LEVEL"


@dataclass(frozen=True)
class ShellConfig:
    """
    Immutable interpreter settings.

    Example:
        >>> config = ShellConfig.from_env({'LSH_PROMPT': '$ '})
        >>> config.prompt
        '$ '
    """

    prompt: str = DEFAULT_PROMPT
    error_prefix: str = DEFAULT_ERROR_PREFIX
    line_bufsize: int = DEFAULT_LINE_BUFSIZE
    token_bufsize: int = DEFAULT_TOKEN_BUFSIZE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.line_bufsize <= 0:
            raise ConfigurationError("line_bufsize", "must be positive")
        if self.token_bufsize <= 0:
            raise ConfigurationError("token_bufsize", "must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError("log_level", f"unknown level '{self.log_level}'")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """
        Build a config from environment variables.

        Args:
            env: Mapping to read from (defaults to os.environ)

        Returns:
            ShellConfig with LSH_PROMPT and LSH_LOG_LEVEL applied
        """
        if env is None:
            env = os.environ

        kwargs = {}
        if ENV_PROMPT in env:
            kwargs['prompt'] = env[ENV_PROMPT]
        if env.get(ENV_LOG_LEVEL):
            kwargs['log_level'] = env[ENV_LOG_LEVEL]
        return cls(**kwargs)

    def with_overrides(self, **overrides) -> 'ShellConfig':
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())
