from typing import List, Optional

from constants import TOC_TITLE, PART_PATTERNS_TITLE, PART_COMPARISONS_TITLE
from guide_engine.core.consts import FAMILY_LABELS
from guide_engine.core.models import Guide, PatternEntry, ComparisonEntry
from guide_engine.infrastructure.sample_registry import SampleRegistry
from guide_engine.utils.anchors import AnchorRegistry
from guide_engine.utils.logger import log_debug, log_error


class MarkdownRenderer:
    """
    Produit le document Markdown complet :
    titre, table des matières, Partie 1 (fiches) et Partie 2 (comparaisons).
    Les ancres sont attribuées dans l'ordre d'apparition des titres.
    """

    COMPARISON_SECTIONS = [
        ("Similitudes", "similarities"),
        ("Différences", "differences"),
        ("Risques de confusion", "confusion_risks"),
        ("Quand choisir lequel ?", "guidance"),
    ]

    def __init__(self, registry: Optional[SampleRegistry] = None, include_console_output: bool = True):
        self.registry = registry or SampleRegistry()
        self.include_console_output = include_console_output

    def render(self, guide: Guide) -> str:
        anchors = AnchorRegistry()
        anchors.anchor_for(guide.title)
        anchors.anchor_for(TOC_TITLE)

        # (niveau d'indentation, texte, ancre)
        toc = []
        body: List[str] = []

        # --- PARTIE 1 ---
        toc.append((0, PART_PATTERNS_TITLE, anchors.anchor_for(PART_PATTERNS_TITLE)))
        body += [f"## {PART_PATTERNS_TITLE}", ""]
        for index, entry in enumerate(guide.entries, start=1):
            heading = f"{index}. {entry.title}"
            toc.append((1, heading, anchors.anchor_for(heading)))
            body += self._render_entry(heading, entry)

        # --- PARTIE 2 ---
        toc.append((0, PART_COMPARISONS_TITLE, anchors.anchor_for(PART_COMPARISONS_TITLE)))
        body += [f"## {PART_COMPARISONS_TITLE}", ""]
        for comparison in guide.comparisons:
            toc.append((1, comparison.title, anchors.anchor_for(comparison.title)))
            body += self._render_comparison(comparison, anchors)

        lines = [f"# {guide.title}", ""]
        if guide.introduction:
            lines += [guide.introduction, ""]
        lines += [f"## {TOC_TITLE}", ""]
        lines += [f"{'  ' * level}- [{text}](#{anchor})" for level, text, anchor in toc]
        lines.append("")
        lines += body

        log_debug(f"Document rendu : {len(toc)} entrées de sommaire")
        return "\n".join(lines).rstrip() + "\n"

    def _render_entry(self, heading: str, entry: PatternEntry) -> List[str]:
        family = FAMILY_LABELS.get(entry.family, "")
        lines = [
            f"### {heading}",
            "",
            f"**Problème :** {entry.problem}",
            "",
            f"**Pattern :** {entry.pattern.value}" + (f" (famille : {family})" if family else ""),
            "",
        ]

        source = self._read_source(entry)
        if source:
            lines += ["```python", source.rstrip(), "```", ""]

        if entry.narrative:
            lines += ["**Déroulement :**", ""]
            lines += [f"{i}. {step}" for i, step in enumerate(entry.narrative, start=1)]
            lines.append("")

        if self.include_console_output:
            output = self._capture_output(entry)
            if output:
                lines += ["**Sortie console :**", "", "```text", output.rstrip(), "```", ""]
        return lines

    def _render_comparison(self, comparison: ComparisonEntry, anchors: AnchorRegistry) -> List[str]:
        lines = [
            f"### {comparison.title}",
            "",
            "**Patterns comparés :** " + ", ".join(comparison.patterns),
            "",
        ]
        for label, attr in self.COMPARISON_SECTIONS:
            items = getattr(comparison, attr)
            if not items:
                continue
            # Les sous-titres comptent aussi dans l'attribution des ancres
            anchors.anchor_for(label)
            lines += [f"#### {label}", ""]
            lines += [f"- {item}" for item in items]
            lines.append("")
        return lines

    def _read_source(self, entry: PatternEntry) -> str:
        try:
            return self.registry.get_source(entry.pattern)
        except (ImportError, ValueError, SyntaxError) as e:
            log_error(f"Exemple introuvable pour {entry.id} : {e}")
            return ""

    def _capture_output(self, entry: PatternEntry) -> str:
        try:
            return self.registry.run(entry.pattern)
        except Exception as e:
            log_error(f"Échec de l'exemple {entry.id} : {e}")
            return ""
