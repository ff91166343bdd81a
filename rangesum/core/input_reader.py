"""Prompted integer input from a text stream.

Tokens are whitespace-delimited, so ``1 4`` on one line and ``1`` / ``4`` on
separate lines are read the same way.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TextIO

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when an integer cannot be read for a named input field."""

    def __init__(self, field: str, token: str | None) -> None:
        self.field = field
        self.token = token
        if token is None:
            message = f"missing value for {field}: input ended"
        else:
            message = f"invalid integer for {field}: {token!r}"
        super().__init__(message)


class IntegerReader:
    """Reads integers one token at a time, prompting before each read."""

    def __init__(self, stream: TextIO, prompt_stream: TextIO | None = None) -> None:
        self._stream = stream
        self._prompt_stream = prompt_stream
        self._pending: deque[str] = deque()

    def _next_token(self) -> str | None:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self, field: str, prompt: str | None = None) -> int:
        if prompt and self._prompt_stream is not None:
            self._prompt_stream.write(prompt)
            self._prompt_stream.flush()

        token = self._next_token()
        if token is None:
            raise InvalidInputError(field, None)
        try:
            value = int(token)
        except ValueError as e:
            raise InvalidInputError(field, token) from e
        logger.debug("Read %s = %d", field, value)
        return value


def read_bounds(reader: IntegerReader, show_prompts: bool = True) -> tuple[int, int]:
    """Read ``n`` then ``m`` using the ``"n = "`` / ``"m = "`` prompts."""
    n = reader.read_int("n", "n = " if show_prompts else None)
    m = reader.read_int("m", "m = " if show_prompts else None)
    return n, m


__all__ = ["IntegerReader", "InvalidInputError", "read_bounds"]
