"""Confirmation prompt built on InquirerPy."""

from __future__ import annotations

import sys

from InquirerPy import inquirer

from .exceptions import UserAbort

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


def is_affirmative(answer: str | None) -> bool:
    return (answer or "").strip().lower() in AFFIRMATIVE_ANSWERS


def confirm(message: str) -> bool:
    """Ask a yes/no question; anything but an explicit yes means no.

    On a TTY the InquirerPy prompt is used. Otherwise a single line is read
    from stdin so answers can be piped in; the question goes to stderr to keep
    stdout free for machine-readable output.
    """

    try:
        if sys.stdin.isatty():
            return bool(inquirer.confirm(message=message, default=False).execute())
        sys.stderr.write(f"{message} [y/N]: ")
        sys.stderr.flush()
        answer = sys.stdin.readline()
    except KeyboardInterrupt as exc:
        raise UserAbort("User cancelled the prompt.") from exc
    return is_affirmative(answer)


__all__ = ["confirm", "is_affirmative", "AFFIRMATIVE_ANSWERS"]
