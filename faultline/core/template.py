# faultline/core/template.py
# Placeholder message templates: tokenised once, rendered per error record (pure string formatting, no I/O)

from __future__ import annotations

import re

from .error_chain import ErrorRecord

PLACEHOLDERS = ("className", "message", "code", "file", "line", "stack", "previous")

# longest names first so no placeholder shadows a longer one
_PLACEHOLDER_RE = re.compile(
    ":(" + "|".join(sorted(PLACEHOLDERS, key=len, reverse=True)) + ")"
)

_RULE = "=" * 70

DEFAULT_TEMPLATE = (
    f"{_RULE}\n"
    "   The application has thrown an exception!\n"
    f"{_RULE}\n"
    "\n"
    " :className\n"
    " :message\n"
    "\n"
    f"{'-' * 70}\n"
    ":file::line\n"
    ":stack\n"
    "\n"
    f"{_RULE}\n"
    "   Previous Exception(s):\n"
    ":previous\n"
)


# * Template split into literal & placeholder segments
class MessageTemplate:
    def __init__(self, text: str):
        self.text = text
        # re.split w/ one group alternates literal, name, literal, ... (names at odd indexes)
        self._segments = _PLACEHOLDER_RE.split(text)

    @property
    def placeholders(self) -> set[str]:
        return set(self._segments[1::2])

    def render(self, record: ErrorRecord, previous: str = "") -> str:
        values = {
            "className": record.class_name,
            "message": record.message,
            "code": str(record.code),
            "file": record.file,
            "line": str(record.line),
            "stack": record.stack,
            "previous": previous,
        }
        return "".join(
            values[segment] if index % 2 else segment
            for index, segment in enumerate(self._segments)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.text!r})"
