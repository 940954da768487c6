import os
from typing import Optional, Union

from constants import PATH_DATA
from guide_engine.core.consts import PatternName
from guide_engine.core.models import Guide, PatternEntry, ComparisonEntry, ValidationReport
from guide_engine.infrastructure.catalogue_loader import CatalogueLoader
from guide_engine.infrastructure.sample_registry import SampleRegistry
from guide_engine.managers.render_manager import MarkdownRenderer
from guide_engine.managers.validation_manager import ValidationManager
from guide_engine.utils.logger import log_info, log_error


class PatternGuide:
    """
    Façade du guide.
    Charge le catalogue puis délègue aux managers (rendu, validation, exemples).
    """

    def __init__(self, config=None, data_path: str = PATH_DATA, guide: Optional[Guide] = None):
        self.config = config

        # 1. Catalogue
        self.guide = guide or CatalogueLoader.load_from_json(data_path)
        if self.guide is None:
            raise ValueError(f"❌ Catalogue illisible : {data_path}")

        # 2. Managers (le registre suit les modules déclarés par les fiches)
        modules = {e.pattern: e.sample for e in self.guide.entries}
        self.registry = SampleRegistry(modules or None)

        include_output = getattr(config, "include_console_output", True)
        self.renderer = MarkdownRenderer(self.registry, include_console_output=include_output)
        self.validator = ValidationManager(self.registry)

    # --- CONSULTATION ---

    @property
    def entries(self):
        return self.guide.entries

    @property
    def comparisons(self):
        return self.guide.comparisons

    def find_entry(self, key: Union[str, PatternName]) -> Optional[PatternEntry]:
        """Recherche une fiche par identifiant ("abstract_factory") ou par nom de pattern."""
        for entry in self.guide.entries:
            if entry.id == key:
                return entry
        try:
            pattern = PatternName.parse(key)
        except ValueError:
            return None
        return next((e for e in self.guide.entries if e.pattern == pattern), None)

    def find_comparison(self, key: str) -> Optional[ComparisonEntry]:
        return next((c for c in self.guide.comparisons if c.id == key), None)

    # --- ACTIONS ---

    def render(self) -> str:
        return self.renderer.render(self.guide)

    def write(self, path: Optional[str] = None) -> str:
        """Écrit le document sur disque et retourne le chemin utilisé."""
        target = path or getattr(self.config, "output_path", None) or "GUIDE.md"
        content = self.render()

        folder = os.path.dirname(target)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            f.write(content)

        log_info(f"📄 Guide écrit dans {target}")
        return target

    def validate(self) -> ValidationReport:
        return self.validator.validate(self.guide, self.render())

    def run_sample(self, key: Union[str, PatternName]) -> str:
        entry = self.find_entry(key)
        if entry is None:
            log_error(f"Aucune fiche pour : {key}")
            raise ValueError(f"❌ Pattern inconnu : {key}")
        return self.registry.run(entry.pattern)
