"""
  Kappa Reader

- Recursive descent over a byte buffer, one top-level list at a time
- Emits the runtime value model directly:

    - lists   -> LispList
    - numerals -> int, or BigInt when the digits overflow the fixed width
    - '...' / "..." -> str (no escapes; the opening quote closes the text)
    - anything else -> Symbol

Whitespace and commas separate atoms. Only ASCII source is accepted.
"""

from __future__ import annotations

from typing import Iterator

from kappa import SExpression
from kappa.errors import KappaParseError
from kappa.types.lisp_list import LispList, ListBuilder
from kappa.types.numbers import make_integer
from kappa.types.symbol import Symbol


SEPARATORS = frozenset(" \t\r\n,")
SYMBOL_TERMINATORS = frozenset(")") | SEPARATORS
QUOTES = frozenset("'\"")
DIGITS = frozenset("0123456789")


class Reader:
    """Cursor over a source buffer."""

    __slots__ = ("data", "index")

    def __init__(self, data: bytes | str):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.data: bytes = bytes(data)
        self.index: int = 0

    @property
    def position(self) -> int:
        return self.index

    # --- character access ---
    def _current(self, skip_space: bool) -> str | None:
        """Return the character under the cursor, or None at end of input."""
        data = self.data
        while self.index < len(data):
            c = data[self.index]
            if c > 127:
                raise KappaParseError(
                    f"not an ASCII character (byte 0x{c:02x})", self.index
                )
            ch = chr(c)
            if skip_space and ch in SEPARATORS:
                self.index += 1
                continue
            return ch
        return None

    def at_end(self) -> bool:
        """True when only insignificant characters remain."""
        return self._current(True) is None

    def skip_insignificant(self) -> int:
        """Advance past separators and return the new offset."""
        self._current(True)
        return self.index

    def _premature_end(self) -> KappaParseError:
        return KappaParseError("premature end of file", self.index)

    # --- grammar ---
    def parse_list(self) -> LispList:
        """Parse the next top-level list."""
        try:
            return self._parse_list()
        except RecursionError:
            raise KappaParseError("nesting too deep", self.index) from None

    def _parse_list(self) -> LispList:
        c = self._current(True)
        if c != "(":
            if c is None:
                raise self._premature_end()
            raise KappaParseError(f"waiting for ( but found {c}", self.index)
        self.index += 1
        builder = ListBuilder()
        while True:
            c = self._current(True)
            if c == ")":
                break
            if c is None:
                raise self._premature_end()
            builder.append(self._parse_atom(c))
        self.index += 1
        return builder.to_list()

    def _parse_atom(self, c: str) -> SExpression:
        if c == "(":
            return self._parse_list()
        if c in DIGITS:
            return self._parse_number()
        if c in QUOTES:
            return self._parse_text(c)
        return self._parse_symbol()

    def _parse_number(self) -> int:
        start = self.index
        while (c := self._current(False)) is not None and c in DIGITS:
            self.index += 1
        return make_integer(int(self.data[start:self.index]))

    def _parse_text(self, quote: str) -> str:
        self.index += 1
        start = self.index
        while (c := self._current(False)) != quote:
            if c is None:
                raise self._premature_end()
            self.index += 1
        text = self.data[start:self.index].decode("ascii")
        self.index += 1
        return text

    def _parse_symbol(self) -> Symbol:
        start = self.index
        self.index += 1
        while (c := self._current(False)) is not None and c not in SYMBOL_TERMINATORS:
            self.index += 1
        return Symbol(self.data[start:self.index].decode("ascii"))

    def parse_all(self) -> Iterator[LispList]:
        while not self.at_end():
            yield self.parse_list()


def read_all(source: bytes | str) -> list[LispList]:
    """Parse every top-level list of ``source``."""
    return list(Reader(source).parse_all())
