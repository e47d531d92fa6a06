"""Conversion of internal values into their protocol JSON forms."""

from __future__ import annotations

import re
from pathlib import PurePosixPath, PureWindowsPath
from typing import Iterable, Optional

from shaderlsp.completion import CompletionItem, CompletionItemKind, CompletionRelevance
from shaderlsp.line_index import LineEndings, LineIndex
from shaderlsp.syntax_tree import TextRange
from shaderlsp.text_edit import Indel, TextEdit

_WINDOWS_DISK = re.compile(r"^(?:\\\\\?\\)?([A-Za-z]:[\\/].*)$", re.DOTALL)

_INSERT_TEXT_FORMAT_SNIPPET = 2

_COMPLETION_KINDS = {
    CompletionItemKind.FIELD: 5,
    CompletionItemKind.FUNCTION: 3,
    CompletionItemKind.VARIABLE: 6,
    CompletionItemKind.KEYWORD: 14,
    CompletionItemKind.SNIPPET: 15,
    CompletionItemKind.CONSTANT: 21,
    CompletionItemKind.STRUCT: 22,
    CompletionItemKind.MODULE: 9,
    CompletionItemKind.TYPE_ALIAS: 22,
}


def url_from_abs_path(path: str) -> str:
    """A ``file`` URL for an absolute path; Windows drive letters are lower-cased."""
    disk = _WINDOWS_DISK.match(path)
    if disk is not None:
        url = PureWindowsPath(disk.group(1)).as_uri()
        scheme, drive, rest = url.split(":", 2)
        return f"{scheme}:{drive.lower()}:{rest}"
    posix = PurePosixPath(path)
    if not posix.is_absolute():
        raise ValueError(f"path is not absolute: {path}")
    return posix.as_uri()


def lsp_position(line_index: LineIndex, offset: int) -> dict:
    line, col = line_index.line_col(offset)
    return {"line": line, "character": col}


def lsp_range(line_index: LineIndex, text_range: TextRange) -> dict:
    return {
        "start": lsp_position(line_index, text_range.start),
        "end": lsp_position(line_index, text_range.end),
    }


def completion_item_kind(kind: CompletionItemKind) -> int:
    return _COMPLETION_KINDS[kind]


def text_edit(line_index: LineIndex, indel: Indel) -> dict:
    new_text = indel.insert
    if line_index.endings is LineEndings.DOS:
        new_text = new_text.replace("\n", "\r\n")
    return {"range": lsp_range(line_index, indel.delete), "newText": new_text}


def text_edit_vec(line_index: LineIndex, edit: TextEdit) -> list[dict]:
    return [text_edit(line_index, indel) for indel in edit]


def completion_text_edit(
    line_index: LineIndex, insert_replace_support: Optional[dict], indel: Indel
) -> dict:
    """A plain edit, or an insert/replace edit ending at the cursor if one is given."""
    edit = text_edit(line_index, indel)
    if insert_replace_support is None:
        return edit
    return {
        "newText": edit["newText"],
        "insert": {"start": edit["range"]["start"], "end": dict(insert_replace_support)},
        "replace": edit["range"],
    }


def _split_edits(line_index: LineIndex, item: CompletionItem) -> tuple[dict, list[dict]]:
    # The protocol only allows edits at the completion range, so other indels
    # become additional edits.
    main: Optional[dict] = None
    additional: list[dict] = []
    source_range = item.source_range
    for indel in item.text_edit:
        if indel.delete.contains_range(source_range):
            if indel.delete == source_range:
                main = completion_text_edit(line_index, None, indel)
            else:
                if source_range.end != indel.delete.end:
                    raise ValueError(
                        f"edit {indel.delete} does not end with the completion range {source_range}"
                    )
                before = Indel.replace(TextRange(indel.delete.start, source_range.start), "")
                at = Indel.replace(source_range, indel.insert)
                additional.append(text_edit(line_index, before))
                main = completion_text_edit(line_index, None, at)
        else:
            if source_range.intersect(indel.delete) is not None:
                raise ValueError(
                    f"edit {indel.delete} overlaps the completion range {source_range}"
                )
            additional.append(text_edit(line_index, indel))
    if main is None:
        raise ValueError(f"no edit covers the completion range {source_range}")
    return main, additional


def _set_score(lsp_item: dict, max_relevance: int, relevance: CompletionRelevance) -> None:
    score = relevance.score()
    if score == max_relevance:
        lsp_item["preselect"] = True
    # Zero-padded hex so the client can sort the strings.
    lsp_item["sortText"] = f"{score:08x}"


def _completion_item(line_index: LineIndex, max_relevance: int, item: CompletionItem) -> dict:
    main, additional = _split_edits(line_index, item)
    lsp_item: dict = {"label": item.label}
    if item.detail is not None:
        lsp_item["detail"] = item.detail
    lsp_item.update(
        {
            "filterText": item.lookup(),
            "kind": completion_item_kind(item.kind),
            "textEdit": main,
            "additionalTextEdits": additional,
            "deprecated": False,
        }
    )
    _set_score(lsp_item, max_relevance, item.relevance)
    if item.is_snippet:
        lsp_item["insertTextFormat"] = _INSERT_TEXT_FORMAT_SNIPPET
    return lsp_item


def completion_items(line_index: LineIndex, items: Iterable[CompletionItem]) -> list[dict]:
    """Protocol completion items; the most relevant ones are preselected."""
    items = list(items)
    max_relevance = min((item.relevance.score() for item in items), default=0)
    return [_completion_item(line_index, max_relevance, item) for item in items]