"""logaudit – static detection of logging anti-patterns in Java sources."""

__version__ = "0.1.0"
