import pytest

from guide_engine.core.consts import PatternName
from guide_engine.infrastructure.sample_registry import SampleRegistry


@pytest.fixture
def registry():
    return SampleRegistry()


def test_every_pattern_has_a_sample(registry):
    for pattern in PatternName:
        module = registry.get_module(pattern)
        assert callable(getattr(module, "main", None)), pattern


def test_module_name_accepts_identifiers(registry):
    assert registry.module_name("abstract_factory") == "guide_engine.samples.abstract_factory"
    assert registry.module_name(PatternName.STATE) == "guide_engine.samples.state"


def test_unknown_pattern_raises(registry):
    with pytest.raises(ValueError):
        registry.get_source("Visitor")


def test_unregistered_pattern_raises():
    registry = SampleRegistry({PatternName.SINGLETON: "singleton"})
    with pytest.raises(ValueError, match="Aucun exemple"):
        registry.run(PatternName.FACADE)


def test_get_source_returns_full_module(registry):
    source = registry.get_source(PatternName.FACTORY)
    assert "class EnemyFactory" in source
    assert "def main():" in source
    assert source.endswith("\n")


def test_run_captures_stdout(registry, capsys):
    output = registry.run(PatternName.SINGLETON)

    assert "Même instance partout ? True" in output
    # Rien ne fuit dans la vraie console
    assert capsys.readouterr().out == ""


def test_samples_are_self_contained(registry):
    for pattern in PatternName:
        assert registry.imports_of(pattern) == [], pattern


def test_imports_of_detects_other_sample(registry, monkeypatch):
    source = (
        "import os\n"
        "from guide_engine.samples.factory import EnemyFactory\n"
        "from guide_engine.samples import observer\n"
        "from .decorator import Weapon\n"
        "import guide_engine.samples.state\n"
    )
    monkeypatch.setattr(registry, "get_source", lambda pattern: source)

    found = registry.imports_of(PatternName.STATE)
    assert found == [
        "guide_engine.samples.factory",
        "guide_engine.samples.observer",
        "guide_engine.samples.decorator",
    ]
