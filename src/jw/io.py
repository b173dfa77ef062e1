"""Console output helpers for data meant to be consumed by the shell."""

from __future__ import annotations


def say(message: str) -> None:
    """Print a plain line to stdout.

    Unlike ``jw.log`` output this is never styled or filtered by log level, so
    it is safe to capture, e.g. ``cd "$(jw go feature)"``.

    Args:
        message: Text to print.

    Returns:
        None.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)
