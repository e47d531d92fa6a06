import json

from shaderlsp.capabilities import server_capabilities


def test_completion_triggers_on_dot():
    assert server_capabilities()["completionProvider"]["triggerCharacters"] == ["."]


def test_providers_enabled():
    caps = server_capabilities()
    assert caps["definitionProvider"] is True
    assert caps["hoverProvider"] is True
    assert caps["documentFormattingProvider"] is True
    assert caps["inlayHintProvider"] is True


def test_experimental_inlay_hints():
    assert server_capabilities()["experimental"] == {"inlayHints": True}


def test_incremental_sync():
    assert server_capabilities()["textDocumentSync"] == 2


def test_capabilities_survive_json_round_trip():
    caps = server_capabilities()
    assert json.loads(json.dumps(caps)) == caps


def test_each_call_returns_fresh_object():
    first = server_capabilities()
    first["hoverProvider"] = False
    assert server_capabilities()["hoverProvider"] is True