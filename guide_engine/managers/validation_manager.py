from typing import Optional

from guide_engine.core.consts import PatternName, IssueCode
from guide_engine.core.models import Guide, ValidationReport
from guide_engine.infrastructure.sample_registry import SampleRegistry
from guide_engine.utils.anchors import iter_headings, iter_anchor_links
from guide_engine.utils.logger import log_info, log_error


class ValidationManager:
    """
    Vérifie les propriétés documentaires du guide :
    - chaque fiche traite un pattern du catalogue canonique (une seule fois) ;
    - chaque comparaison ne cite que des patterns traités en Partie 1 ;
    - chaque lien du sommaire pointe vers un titre existant ;
    - chaque exemple existe et est autonome (aucun import d'un autre exemple).
    """

    MIN_COMPARED = 2
    MAX_COMPARED = 3

    def __init__(self, registry: Optional[SampleRegistry] = None):
        self.registry = registry or SampleRegistry()

    def validate(self, guide: Guide, markdown: Optional[str] = None) -> ValidationReport:
        report = ValidationReport()
        self.check_entries(guide, report)
        self.check_comparisons(guide, report)
        self.check_samples(guide, report)
        if markdown is not None:
            self.check_anchors(markdown, report)

        if report.ok:
            log_info("✅ Guide valide")
        else:
            for issue in report.issues:
                log_error(f"[{issue.code.value}] {issue.message}")
        return report

    def check_entries(self, guide: Guide, report: ValidationReport):
        # Fiches écartées par le loader : elles ne doivent pas disparaître en silence
        for raw in guide.rejected:
            entry_id = raw.get("id", "?")
            try:
                PatternName.parse(raw.get("pattern"))
            except ValueError:
                report.add(IssueCode.UNKNOWN_PATTERN,
                           f"Fiche '{entry_id}' : pattern hors catalogue ({raw.get('pattern')})")
                continue
            report.add(IssueCode.INVALID_ENTRY, f"Fiche '{entry_id}' : fiche incomplète ou invalide")

        seen = set()
        for entry in guide.entries:
            try:
                pattern = PatternName.parse(entry.pattern)
            except ValueError:
                report.add(IssueCode.UNKNOWN_PATTERN,
                           f"Fiche '{entry.id}' : pattern hors catalogue ({entry.pattern})")
                continue

            if pattern in seen:
                report.add(IssueCode.DUPLICATE_PATTERN,
                           f"Fiche '{entry.id}' : {pattern.value} est déjà traité")
            seen.add(pattern)

        for pattern in PatternName:
            if pattern not in seen:
                report.add(IssueCode.MISSING_PATTERN, f"Aucune fiche pour {pattern.value}")

    def check_comparisons(self, guide: Guide, report: ValidationReport):
        defined = set(guide.defined_patterns)
        for comparison in guide.comparisons:
            count = len(comparison.patterns)
            if not self.MIN_COMPARED <= count <= self.MAX_COMPARED:
                report.add(IssueCode.BAD_COMPARISON_SIZE,
                           f"Comparaison '{comparison.id}' : {count} patterns (2 ou 3 attendus)")

            for name in comparison.patterns:
                if name not in defined:
                    report.add(IssueCode.UNDEFINED_REFERENCE,
                               f"Comparaison '{comparison.id}' : '{name}' n'est défini par aucune fiche")

    def check_samples(self, guide: Guide, report: ValidationReport):
        for entry in guide.entries:
            try:
                foreign = self.registry.imports_of(entry.pattern)
            except (ImportError, ValueError, SyntaxError) as e:
                report.add(IssueCode.MISSING_SAMPLE,
                           f"Fiche '{entry.id}' : exemple '{entry.sample}' introuvable ou illisible ({e})")
                continue
            for module in foreign:
                report.add(IssueCode.CROSS_ENTRY_IMPORT,
                           f"Fiche '{entry.id}' : l'exemple dépend de {module}")

    def check_anchors(self, markdown: str, report: ValidationReport):
        headings = {anchor: text for _, text, anchor in iter_headings(markdown)}
        for text, anchor in iter_anchor_links(markdown):
            if anchor not in headings:
                report.add(IssueCode.BROKEN_ANCHOR, f"Lien '{text}' : ancre #{anchor} introuvable")
            elif headings[anchor] != text:
                report.add(IssueCode.MISMATCHED_ANCHOR,
                           f"Lien '{text}' : #{anchor} mène à la section '{headings[anchor]}'")
