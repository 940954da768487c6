import json
from guide_engine.infrastructure import catalogue_loader as cl
from guide_engine.core.consts import PatternName, PatternFamily


def _entry(**overrides):
    data = {
        "id": "factory",
        "pattern": "Factory",
        "problem": "Créer des ennemis par type.",
        "narrative": ["Un", "Deux"],
    }
    data.update(overrides)
    return data


def test_load_missing_file_logs_and_returns_none(tmp_path, monkeypatch):
    path = tmp_path / "nope.json"

    logged = {}

    def fake_log(msg):
        logged['msg'] = msg

    monkeypatch.setattr(cl, "log_error", fake_log)

    res = cl.CatalogueLoader.load_from_json(str(path))
    assert res is None
    assert "Fichier introuvable" in logged.get('msg', "")


def test_load_invalid_json_logs_and_returns_none(tmp_path, monkeypatch):
    path = tmp_path / "guide.json"
    path.write_text("[1, 2,", encoding="utf-8")

    logs = []
    monkeypatch.setattr(cl, "log_error", lambda m: logs.append(m))

    assert cl.CatalogueLoader.load_from_json(str(path)) is None
    assert any("parsing JSON" in m for m in logs)


def test_load_non_object_root_returns_none(tmp_path, monkeypatch):
    path = tmp_path / "guide.json"
    path.write_text(json.dumps([_entry()]), encoding="utf-8")
    monkeypatch.setattr(cl, "log_error", lambda m: None)

    assert cl.CatalogueLoader.load_from_json(str(path)) is None


def test_load_valid_catalogue(tmp_path):
    path = tmp_path / "guide.json"
    data = {
        "title": "Mon guide",
        "introduction": "Bonjour",
        "entries": [_entry()],
        "comparisons": [{"id": "c1", "patterns": ["Factory", "Abstract Factory"]}],
    }
    path.write_text(json.dumps(data), encoding="utf-8")

    guide = cl.CatalogueLoader.load_from_json(str(path))

    assert guide.title == "Mon guide"
    assert len(guide.entries) == 1
    entry = guide.entries[0]
    assert entry.pattern == PatternName.FACTORY
    assert entry.family == PatternFamily.CREATION
    assert entry.sample == "factory"
    assert entry.title == "Factory"
    assert guide.comparisons[0].title == "Factory vs Abstract Factory"


def test_unknown_pattern_is_logged_and_skipped(tmp_path, monkeypatch):
    path = tmp_path / "guide.json"
    data = {"entries": [_entry(), _entry(id="x", pattern="Visitor")]}
    path.write_text(json.dumps(data), encoding="utf-8")

    logs = []
    monkeypatch.setattr(cl, "log_error", lambda m: logs.append(m))

    guide = cl.CatalogueLoader.load_from_json(str(path))
    assert [e.id for e in guide.entries] == ["factory"]
    assert [r["id"] for r in guide.rejected] == ["x"]
    assert any("Erreur instanciation fiche x" in m for m in logs)


def test_missing_field_is_logged_and_skipped(tmp_path, monkeypatch):
    path = tmp_path / "guide.json"
    broken = _entry()
    del broken["problem"]
    data = {"entries": [broken], "comparisons": [{"id": "c1"}]}
    path.write_text(json.dumps(data), encoding="utf-8")

    logs = []
    monkeypatch.setattr(cl, "log_error", lambda m: logs.append(m))

    guide = cl.CatalogueLoader.load_from_json(str(path))
    assert guide.entries == []
    assert guide.comparisons == []
    assert len(logs) == 2
