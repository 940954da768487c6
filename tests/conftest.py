import os
import sys

import pytest

# Ajout du dossier racine au path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from guide_engine.core.config import ConfigurationService
from guide_engine.core.consts import PatternName
from guide_engine.core.models import Guide, PatternEntry, ComparisonEntry
from guide_engine.guide import PatternGuide


class MockConfig:
    """Simulation de la configuration pour les tests."""

    def __init__(self):
        self.output_path = "GUIDE.md"
        self.include_console_output = True
        self.debug_mode = False
        self.resolution = (1280, 720)
        self.fullscreen = False

    def save(self):
        pass


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Aucun test ne lit ni n'écrit le settings.json réel."""
    monkeypatch.setattr(ConfigurationService, "FILE_PATH", str(tmp_path / "settings.json"))


@pytest.fixture
def config():
    return MockConfig()


@pytest.fixture
def guide(config):
    """Fixture STANDARD : le vrai catalogue du dépôt."""
    return PatternGuide(config=config)


@pytest.fixture
def create_entry():
    """Factory Helper pour créer des fiches."""

    def _builder(pattern=PatternName.SINGLETON, id=None, title=None, sample=None, narrative=None):
        pattern = PatternName.parse(pattern)
        default_id = pattern.name.lower()
        return PatternEntry(
            id=id or default_id,
            title=title or pattern.value,
            problem=f"Problème de test pour {pattern.value}",
            pattern=pattern,
            sample=sample or default_id,
            narrative=narrative if narrative is not None else ["Étape 1", "Étape 2"]
        )

    return _builder


@pytest.fixture
def create_comparison():
    def _builder(patterns, id="cmp", title=None):
        return ComparisonEntry(
            id=id,
            title=title or " vs ".join(patterns),
            patterns=list(patterns),
            similarities=["Point commun"],
            differences=["Différence"],
            confusion_risks=["Risque"],
            guidance=["Conseil"]
        )

    return _builder


@pytest.fixture
def full_guide(create_entry, create_comparison):
    """Guide minimal mais complet : les dix patterns et une comparaison."""
    return Guide(
        title="Guide de test",
        introduction="Introduction.",
        entries=[create_entry(p) for p in PatternName],
        comparisons=[create_comparison(["Strategy", "State"], id="strategy_vs_state")]
    )
