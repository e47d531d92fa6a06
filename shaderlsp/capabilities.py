"""The capabilities this server announces to the client."""

from __future__ import annotations

_TEXT_DOCUMENT_SYNC_INCREMENTAL = 2


def server_capabilities() -> dict:
    """The ``ServerCapabilities`` object in its JSON form."""
    return {
        "textDocumentSync": _TEXT_DOCUMENT_SYNC_INCREMENTAL,
        "definitionProvider": True,
        "completionProvider": {"triggerCharacters": ["."]},
        "documentFormattingProvider": True,
        "hoverProvider": True,
        "inlayHintProvider": True,
        "experimental": {"inlayHints": True},
    }