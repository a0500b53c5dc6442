from __future__ import annotations

"""
Lightweight indexer and checker for Kappa files that never evaluates code.

- build_index: a tolerant token scan for definitions, (def name (params) body)
  and (var name value), plus paren balance and unmatched quote detection.
  It never raises, so it works on half-typed buffers.
- check_document: runs the real Reader and AstBuilder over each top-level
  form (no evaluation) and reports parse and build errors with positions.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import re

from kappa.compiler.builder import AstBuilder
from kappa.compiler.scope import Scope
from kappa.compiler.special_forms import SIGNATURES
from kappa.errors import KappaEvalError, KappaParseError
from kappa.reader.parser import Reader

# Quoted text has no escapes; whitespace and commas separate atoms
TOKEN_REGEX = re.compile(r"\"[^\"]*\"|'[^']*'|\(|\)|[^\s(),]+")

WORD_BREAKS = " \t\r\n(),"


@dataclass
class SymbolDef:
    name: str
    kind: str  # "function" | "var"
    line: int
    col: int
    params: List[str] = field(default_factory=list)

    @property
    def signature(self) -> str:
        if self.kind == "function":
            return f"({self.name} {' '.join(self.params)})".replace(" )", ")")
        return self.name


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    has_unmatched_quote: bool = False


@dataclass
class Problem:
    message: str
    line: int
    col: int
    severity: str = "error"  # "error" | "warning"


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        yield m.group(0), m.start(), m.end()


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _is_atom(tok: str) -> bool:
    return tok not in ("(", ")") and not tok.startswith(("'", '"'))


def _collect_params(tokens, j: int) -> List[str]:
    # tokens[j] is expected to be the '(' opening the parameter list
    params: List[str] = []
    if j >= len(tokens) or tokens[j][0] != "(":
        return params
    j += 1
    while j < len(tokens) and tokens[j][0] != ")":
        if _is_atom(tokens[j][0]):
            params.append(tokens[j][0])
        j += 1
    return params


def has_unmatched_quote(text: str) -> bool:
    open_quote: Optional[str] = None
    for ch in text:
        if open_quote is None:
            if ch in "'\"":
                open_quote = ch
        elif ch == open_quote:
            open_quote = None
    return open_quote is not None


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, start, end) in enumerate(tokens):
        if tok == ')':
            idx.paren_balance -= 1
            continue
        if tok != '(':
            continue
        idx.paren_balance += 1
        if i + 2 >= len(tokens):
            continue
        head = tokens[i + 1][0]
        if head not in ("def", "var"):
            continue
        name_tok, name_start, _ = tokens[i + 2]
        if not _is_atom(name_tok):
            continue
        line, col = position_from_offset(text, name_start)
        if head == "def":
            params = _collect_params(tokens, i + 3)
            idx.symbols[name_tok] = SymbolDef(name_tok, "function", line, col, params)
        else:
            # a function of the same name wins for hover purposes
            existing = idx.symbols.get(name_tok)
            if existing is None or existing.kind != "function":
                idx.symbols[name_tok] = SymbolDef(name_tok, "var", line, col)

    idx.has_unmatched_quote = has_unmatched_quote(text)
    return idx


def check_document(text: str) -> List[Problem]:
    """Parse and build every top-level form; report what fails."""
    problems: List[Problem] = []
    reader = Reader(text)
    builder = AstBuilder()
    try:
        while not reader.at_end():
            start = reader.skip_insignificant()
            form = reader.parse_list()
            try:
                builder.build(form, Scope())
            except KappaEvalError as exc:
                line, col = position_from_offset(text, start)
                problems.append(Problem(str(exc), line, col))
    except KappaParseError as exc:
        offset = exc.offset if exc.offset is not None else len(text)
        line, col = position_from_offset(text, offset)
        problems.append(Problem(exc.message, line, col))
    return problems


def diagnose(text: str) -> List[Problem]:
    """check_document plus the index-level warnings."""
    idx = build_index(text)
    problems = check_document(text)
    if idx.paren_balance != 0:
        problems.append(Problem("Unmatched parentheses detected", 0, 0, "warning"))
    if idx.has_unmatched_quote:
        problems.append(Problem("Unmatched quote detected", 0, 0, "warning"))
    return problems


# --- Cursor helpers ---

def line_prefix(text: str, line: int, character: int) -> str:
    # Return the text from start of line up to the cursor
    lines = text.splitlines(True)
    if line >= len(lines):
        return ""
    return lines[line][:character]


def word_at(text: str, line: int, character: int) -> Tuple[Optional[str], int]:
    """Word under the cursor and the column where it starts."""
    lines = text.splitlines(True)
    if line >= len(lines):
        return None, character
    row = lines[line]
    start = min(character, len(row))
    while start > 0 and row[start - 1] not in WORD_BREAKS:
        start -= 1
    end = start
    while end < len(row) and row[end] not in WORD_BREAKS:
        end += 1
    word = row[start:end]
    return (word if word else None), start


def callee_at(prefix: str) -> Optional[str]:
    # head symbol of the innermost open list before the cursor
    lp = prefix.rfind('(')
    if lp == -1:
        return None
    tail = prefix[lp + 1:].lstrip()
    if not tail:
        return None
    for i, ch in enumerate(tail):
        if ch in WORD_BREAKS:
            return tail[:i] or None
    return tail


def describe(word: str, idx: DocumentIndex) -> Optional[str]:
    """Hover text for a word: special form usage or an indexed definition."""
    if word in SIGNATURES:
        return SIGNATURES[word]
    sdef = idx.symbols.get(word)
    if sdef is None:
        return None
    return f"{sdef.signature} : {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"
