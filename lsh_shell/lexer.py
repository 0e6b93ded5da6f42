"""
Whitespace tokenizer for command lines.

A token is a maximal run of characters outside TOKEN_DELIMITERS. There is no
quoting or escaping: ``echo "a b"`` yields the tokens ``echo``, ``"a`` and
``b"``.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .config import DEFAULT_TOKEN_BUFSIZE
from .utils.buffers import GrowableBuffer

logger = logging.getLogger(__name__)

# space, tab, carriage return, newline, bell
TOKEN_DELIMITERS = " \t\r\n\a"


class TokenList:
    """
    Ordered, immutable sequence of tokens from one command line.

    The list owns its strings; it does not reference the line it came from.
    An empty list has no command name.
    """

    __slots__ = ('_tokens',)

    def __init__(self, tokens=()):
        self._tokens: Tuple[str, ...] = tuple(tokens)

    @property
    def command(self) -> Optional[str]:
        """First token, or None when the line held no tokens."""
        return self._tokens[0] if self._tokens else None

    @property
    def args(self) -> Tuple[str, ...]:
        """Tokens after the command name."""
        return self._tokens[1:]

    def argv(self) -> List[str]:
        """Argument vector for exec, argument zero being the program name."""
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __eq__(self, other):
        if isinstance(other, TokenList):
            return self._tokens == other._tokens
        if isinstance(other, (list, tuple)):
            return self._tokens == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._tokens)

    def __repr__(self):
        return f"TokenList({list(self._tokens)!r})"


class ShellLexer:
    """
    Split a command line into a TokenList.

    Example:
        >>> ShellLexer("ls   -l\\t/tmp").tokenize().argv()
        ['ls', '-l', '/tmp']
    """

    def __init__(self, line: str, delimiters: str = TOKEN_DELIMITERS,
                 bufsize: int = DEFAULT_TOKEN_BUFSIZE):
        self.line = line
        self.delimiters = frozenset(delimiters)
        self.bufsize = bufsize

    def tokenize(self) -> TokenList:
        """
        Scan the line once, collecting maximal runs of non-delimiters.

        Returns:
            TokenList; empty for a blank or whitespace-only line

        Raises:
            AllocationError: If the token buffer cannot grow
        """
        tokens = GrowableBuffer(self.bufsize)
        start = None

        for position, char in enumerate(self.line):
            if char in self.delimiters:
                if start is not None:
                    tokens.append(self.line[start:position])
                    start = None
            elif start is None:
                start = position

        if start is not None:
            tokens.append(self.line[start:])

        logger.debug("tokenized %d token(s)", len(tokens))
        return TokenList(tokens.items())


def split_line(line: str, bufsize: int = DEFAULT_TOKEN_BUFSIZE) -> TokenList:
    """Tokenize a line using the standard delimiter set."""
    return ShellLexer(line, bufsize=bufsize).tokenize()
