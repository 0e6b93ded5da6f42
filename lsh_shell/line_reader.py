"""Line reader: pulls one command line at a time from an input stream."""

import logging
from typing import Optional, TextIO

from .config import DEFAULT_LINE_BUFSIZE
from .utils.buffers import GrowableBuffer

logger = logging.getLogger(__name__)


class LineReader:
    """
    Read newline-terminated lines of unbounded length.

    Characters are consumed one at a time so nothing past the newline is
    taken from the stream.

    Example:
        >>> reader = LineReader(io.StringIO("ls -l\\n"))
        >>> reader.read_line()
        'ls -l'
        >>> reader.read_line() is None
        True
    """

    def __init__(self, stream: TextIO, bufsize: int = DEFAULT_LINE_BUFSIZE):
        self.stream = stream
        self.bufsize = bufsize

    def read_line(self) -> Optional[str]:
        """
        Read the next line.

        Returns:
            The line without its trailing newline, or None at end of input
            when no characters were read

        Raises:
            AllocationError: If the line buffer cannot grow
        """
        buffer = GrowableBuffer(self.bufsize)

        while True:
            char = self.stream.read(1)
            if not char:
                if not buffer:
                    logger.debug("end of input")
                    return None
                return buffer.join()
            if char == '\n':
                return buffer.join()
            buffer.append(char)
