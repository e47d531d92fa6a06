# shaderlsp

Building blocks for a language server for a shader language, written in pure
Python with no runtime dependencies.

## What is inside

- **Lexing and parsing** — `shaderlsp.lexer.ParserDefinition` describes a
  language (token patterns as regular expressions, an error kind, trivia kinds,
  token-to-syntax kind mapping). `shaderlsp.lexer.Lexer` yields `Token`s by
  longest match; characters no pattern matches become error tokens.
  `shaderlsp.parser.Parser` records events (`shaderlsp.events`) through
  `Marker` / `CompletedMarker` (including `precede` for wrapping a finished
  node), with `at`, `eat`, `expect`, `expect_recover`, `bump_compound` and the
  `error_*` family for recovery. `shaderlsp.sink.Sink` replays the events into
  a lossless tree, re-attaching trivia. `shaderlsp.parser.parse(definition,
  text, entry)` runs the whole pipeline and returns a `Parse` with `syntax()`,
  `debug_tree()`, `into_parts()` and its `errors` (`ParseError`, with
  `message()` and an `error at start..end: expected ...` string form).
- **Syntax trees** — `shaderlsp.syntax_tree` provides `TextRange`,
  `GreenNodeBuilder`, `GreenNode`, `GreenToken`, `SyntaxNode` and
  `SyntaxToken` with navigation: ancestors, children, siblings in a
  `Direction`, next/previous token, `token_at_offset`, `covering_element` and
  `debug_string`.
- **Typed views and searches** — `shaderlsp.ast_node.AstNode` casts syntax
  nodes by kind, with helpers `child`, `children`, `child_syntax`, `token`,
  `cast_first` and `text_of_first_token`. `shaderlsp.algo` has
  `ancestors_at_offset`, `find_node_at_offset`, `find_node_at_range`,
  `skip_trivia_token`, `skip_whitespace_token`, `non_trivia_sibling`,
  `least_common_ancestor`, `neighbor` and `has_errors`. `shaderlsp.ptr` has
  `SyntaxNodePtr` and `AstPtr`, which find a node again by kind and range.
- **Operators** — `shaderlsp.operators` models `UnaryOp`, `LogicOp`,
  `ArithOp`, `EqualityOp`, `OrderingOp` and `CompoundOp` with their symbols.
- **Edits and completions** — `shaderlsp.text_edit` offers `Indel`,
  `TextEdit` (disjoint indels, `apply`), `TextEditBuilder` and
  `diff(left, right)`. `shaderlsp.completion` has `CompletionItem`, its
  `CompletionItemBuilder`, `CompletionRelevance.score()` and the
  `Completions` accumulator.
- **Protocol helpers** — `shaderlsp.line_index` (`LineIndex` for
  offset/line-column conversion in UTF-8 or UTF-16 units,
  `LineEndings.normalize`), `shaderlsp.diagnostics` (`Diagnostic`,
  `DiagnosticCollection` tracking which files changed),
  `shaderlsp.capabilities.server_capabilities()`, `shaderlsp.task_pool.TaskPool`
  (a thread pool that puts task results on a queue), and `shaderlsp.to_proto`
  for converting positions, ranges, text edits and completion items to their
  protocol JSON shapes.

## Examples

```python
from shaderlsp.lexer import ParserDefinition
from shaderlsp.parser import parse

definition = ParserDefinition(
    token_patterns=[("ident", r"[a-z]+"), ("ws", r"\s+")],
    error_kind="error",
    trivia=["ws"],
)

def entry(p):
    root = p.start()
    while not p.at_end():
        p.expect("ident")
    root.complete(p, "file")

result = parse(definition, "ab cd", entry)
assert result.syntax().text() == "ab cd"
assert result.errors == []
```

```python
from shaderlsp.text_edit import diff

edit = diff("let x = 1;", "let y = 1;")
assert edit.apply("let x = 1;") == "let y = 1;"
```

```python
from shaderlsp.line_index import LineEndings

text, endings = LineEndings.normalize("a\r\nb\r\n")
assert text == "a\nb\n" and endings is LineEndings.DOS
```

## What it does not do

This is a library, not a running server. It has no command to start, no
JSON-RPC transport over standard input and output, no request or notification
routing, no loading of client configuration, and no grammar for a particular
shader language: you supply the `ParserDefinition` and the parse entry
function yourself.

## Running the tests

```
pip install -e .[test]
pytest
```