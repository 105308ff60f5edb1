"""Reading and updating the stored login record, and picking the first window."""

from __future__ import annotations

import enum
import logging
import os
import re

logger = logging.getLogger(__name__)

LOGIN_FILE = "login_data.txt"

USERNAME_PREFIX = "Username: "
REMEMBER_PREFIX = "Remember: "
REMEMBER_KEEP = 2

_REMEMBER_PATTERN = re.compile(r"Remember:\s*\d")
_RESET_REMEMBER = "Remember: 0"
_INTEGER = re.compile(r"[+-]?\d+")


class LoginFileError(OSError):
    """The login record is missing or cannot be read."""


class StartWindow(enum.Enum):
    """The window shown when the application starts."""

    LOGIN = "login"
    WELCOME = "welcome"
    NONE = "none"


def _to_int(text: str) -> int:
    """Parse a decimal integer, giving 0 when the text is not one."""
    text = text.strip()
    return int(text) if _INTEGER.fullmatch(text) else 0


def _read_lines(path: str) -> list[str]:
    if not os.path.exists(path):
        raise LoginFileError("File not found.")
    try:
        with open(path, encoding="utf-8") as handle:
            return [line.rstrip("\n") for line in handle]
    except OSError as exc:
        raise LoginFileError("Failed to open file for reading.") from exc


def read_remember(path: str = LOGIN_FILE) -> int:
    """Return the number on the first "Remember: " line, or 0 if there is none."""
    for line in _read_lines(path):
        if line.startswith(REMEMBER_PREFIX):
            value = _to_int(line[len(REMEMBER_PREFIX):])
            logger.debug("found remember value %d", value)
            return value
    return 0


def account_state(path: str = LOGIN_FILE) -> int:
    """Return 2 when the record says to keep the user signed in, else 0.

    Lines are examined in order: the first line that is not a
    "Remember: " line ends the scan with 0, and a "Remember: " line
    holding 2 ends it with 2.
    """
    for line in _read_lines(path):
        if line.startswith(USERNAME_PREFIX) and line[len(USERNAME_PREFIX):]:
            logger.debug("username: %s", line[len(USERNAME_PREFIX):])
        if not line.startswith(REMEMBER_PREFIX):
            return 0
        if _to_int(line[len(REMEMBER_PREFIX):]) == REMEMBER_KEEP:
            return REMEMBER_KEEP
    return 0


def read_username(path: str = LOGIN_FILE) -> str:
    """Return the text after the first "Username: ", or "" if there is none."""
    for line in _read_lines(path):
        if line.startswith(USERNAME_PREFIX):
            return line[len(USERNAME_PREFIX):]
    return ""


def reset_remember(path: str = LOGIN_FILE) -> None:
    """Set every remember flag in the record to 0, adding one if absent.

    A missing file is created.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except FileNotFoundError:
        content = ""
    except OSError as exc:
        raise LoginFileError("Failed to open file for reading and writing.") from exc

    if _REMEMBER_PATTERN.search(content):
        content = _REMEMBER_PATTERN.sub(_RESET_REMEMBER, content)
    else:
        content += "\n" + _RESET_REMEMBER

    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(content)
    except OSError as exc:
        raise LoginFileError("Failed to open file for reading and writing.") from exc


def _safe(reader, path: str) -> int:
    try:
        return reader(path)
    except LoginFileError as exc:
        logger.error("%s: %s", path, exc)
        return 0


def choose_start_window(path: str = LOGIN_FILE) -> StartWindow:
    """Decide which window opens first from the login record."""
    remember = _safe(read_remember, path)
    if remember == 0 or _safe(account_state, path) == 1:
        return StartWindow.LOGIN
    if remember == REMEMBER_KEEP or _safe(account_state, path) == REMEMBER_KEEP:
        return StartWindow.WELCOME
    return StartWindow.NONE


def welcome_text(path: str = LOGIN_FILE) -> str:
    """Return the greeting shown to the remembered user."""
    try:
        user = read_username(path)
    except LoginFileError as exc:
        logger.error("%s: %s", path, exc)
        user = ""
    return f"Welcome {user}!"