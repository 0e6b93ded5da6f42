"""lsh-shell: a minimal interactive command interpreter."""

__version__ = "0.1.0"
