from __future__ import annotations

"""
A minimal pygls-based Language Server for Kappa.

Features:
- Text synchronization and document store
- Diagnostics: parse and build errors from the real reader/builder,
  unmatched parens, unmatched quotes
- Hover: special form usage and definitions found in the document
- Completion: special forms, defined functions and variables
- Signature Help: special forms and defined functions
- Document Symbols: from the indexer

Note: buffers are never evaluated; everything is static.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_SIGNATURE_HELP,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    ParameterInformation,
    Position,
    Range,
    SignatureHelp,
    SignatureHelpOptions,
    SignatureHelpParams,
    SignatureInformation,
    SymbolKind,
)

from kappa import __version__
from kappa.compiler.special_forms import SIGNATURES
from kappa_lsp.indexer import (
    DocumentIndex,
    Problem,
    build_index,
    callee_at,
    describe,
    diagnose,
    line_prefix,
    word_at,
)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class KappaLanguageServer(LanguageServer):
    CMD_NAME = "kappa-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}


ls = KappaLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # Incremental sync: let pygls apply the edits, then re-read the full text
    text = ls.workspace.get_text_document(uri).source
    _update(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    ls.publish_diagnostics(uri, [to_diagnostic(p) for p in diagnose(text)])


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def to_diagnostic(problem: Problem) -> Diagnostic:
    severity = DiagnosticSeverity.Error if problem.severity == "error" else DiagnosticSeverity.Warning
    return Diagnostic(
        range=_mk_range(problem.line, problem.col),
        message=problem.message,
        severity=severity,
        source=KappaLanguageServer.CMD_NAME,
    )


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word, _ = word_at(state.text, params.position.line, params.position.character)
    if not word:
        return None
    contents = describe(word, state.index)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = [
        CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig)
        for name, sig in SIGNATURES.items()
    ]
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind, detail=sdef.signature))
    return CompletionList(is_incomplete=False, items=items)


# --- Signature Help ---
@ls.feature(TEXT_DOCUMENT_SIGNATURE_HELP, SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(params: SignatureHelpParams) -> Optional[SignatureHelp]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    prefix = line_prefix(state.text, params.position.line, params.position.character)
    callee = callee_at(prefix)
    if not callee:
        return None

    if callee in SIGNATURES:
        label = SIGNATURES[callee]
    elif callee in state.index.symbols and state.index.symbols[callee].kind == "function":
        label = state.index.symbols[callee].signature
    else:
        return None

    # parameters are the words after the head inside the outer parens
    params_list = label[1:-1].split()[1:]
    parameters = [ParameterInformation(label=p) for p in params_list]
    return SignatureHelp(
        signatures=[SignatureInformation(label=label, parameters=parameters)],
        active_signature=0,
        active_parameter=0,
    )


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
                detail=sdef.signature,
            )
        )
    return symbols


def main() -> None:
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
