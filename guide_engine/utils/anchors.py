import re
from typing import Dict, List, Tuple

# Tout ce qui n'est ni lettre/chiffre (unicode), ni espace, ni tiret, ni underscore
_PUNCTUATION = re.compile(r"[^\w\- ]", re.UNICODE)
_HEADING = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
_LINK = re.compile(r"\[([^\]]+)\]\(#([^)\s]+)\)")
_FENCE = re.compile(r"^\s*(```|~~~)")


def slugify(heading: str) -> str:
    """
    Ancre d'un titre Markdown selon les règles de GitHub :
    minuscules, ponctuation retirée, chaque espace devient un tiret.
    "Partie 1 : Les patterns" -> "partie-1--les-patterns"
    """
    text = heading.strip().lower()
    text = _PUNCTUATION.sub("", text)
    return text.replace(" ", "-")


class AnchorRegistry:
    """Attribue des ancres uniques (suffixes -1, -2... pour les doublons)."""

    def __init__(self):
        # ancre déjà attribuée -> dernier suffixe essayé à partir d'elle
        self._seen: Dict[str, int] = {}

    def anchor_for(self, heading: str) -> str:
        base = slugify(heading)
        slug = base
        # Un suffixe peut lui-même entrer en collision ("A", "A", "A-1")
        while slug in self._seen:
            self._seen[base] += 1
            slug = f"{base}-{self._seen[base]}"
        self._seen[slug] = 0
        return slug


def iter_headings(markdown: str) -> List[Tuple[int, str, str]]:
    """
    Liste (niveau, texte, ancre) des titres du document.
    Les lignes à l'intérieur des blocs de code sont ignorées
    (un commentaire Python commence aussi par '#').
    """
    registry = AnchorRegistry()
    headings = []
    in_fence = False
    for line in markdown.splitlines():
        if _FENCE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = _HEADING.match(line)
        if match:
            text = match.group(2)
            headings.append((len(match.group(1)), text, registry.anchor_for(text)))
    return headings


def iter_anchor_links(markdown: str) -> List[Tuple[str, str]]:
    """Liste (texte, ancre) des liens internes hors blocs de code."""
    links = []
    in_fence = False
    for line in markdown.splitlines():
        if _FENCE.match(line):
            in_fence = not in_fence
            continue
        if not in_fence:
            links.extend(_LINK.findall(line))
    return links
