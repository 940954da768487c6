from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field

from guide_engine.core.consts import PatternName, PatternFamily, PATTERN_FAMILIES, IssueCode


# =============================================================================
#  OBJETS DE DONNÉES (MODELS)
# =============================================================================

@dataclass(frozen=True)
class PatternEntry:
    """
    Une fiche de la Partie 1 : un problème, le pattern qui le résout,
    un exemple de code et le déroulé commenté de son exécution.
    """
    id: str
    title: str
    problem: str
    pattern: PatternName
    sample: str  # Module sous guide_engine.samples
    narrative: List[str] = field(default_factory=list)
    family: Optional[PatternFamily] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PatternEntry":
        """Construction depuis le JSON. Lève KeyError / ValueError si la fiche est invalide."""
        pattern = PatternName.parse(data["pattern"])

        raw_family = data.get("family")
        family = PatternFamily(raw_family) if raw_family else PATTERN_FAMILIES[pattern]

        return cls(
            id=data["id"],
            title=data.get("title", pattern.value),
            problem=data["problem"],
            pattern=pattern,
            sample=data.get("sample", data["id"]),
            narrative=list(data.get("narrative", [])),
            family=family
        )

    def __repr__(self):
        return f"PatternEntry({self.id}, {self.pattern.value})"


@dataclass(frozen=True)
class ComparisonEntry:
    """
    Une fiche de la Partie 2 : deux ou trois patterns mis en regard.
    Les noms référencés doivent exister parmi les fiches de la Partie 1.
    """
    id: str
    title: str
    patterns: List[str]
    similarities: List[str] = field(default_factory=list)
    differences: List[str] = field(default_factory=list)
    confusion_risks: List[str] = field(default_factory=list)
    guidance: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComparisonEntry":
        # Les noms restent bruts : leur existence est vérifiée par le validateur
        patterns = list(data["patterns"])
        return cls(
            id=data["id"],
            title=data.get("title", " vs ".join(patterns)),
            patterns=patterns,
            similarities=list(data.get("similarities", [])),
            differences=list(data.get("differences", [])),
            confusion_risks=list(data.get("confusion_risks", [])),
            guidance=list(data.get("guidance", []))
        )

    def __repr__(self):
        return f"ComparisonEntry({self.id}, {self.patterns})"


@dataclass
class Guide:
    """Le catalogue complet tel que chargé depuis le disque."""
    title: str
    introduction: str
    entries: List[PatternEntry] = field(default_factory=list)
    comparisons: List[ComparisonEntry] = field(default_factory=list)
    # Fiches brutes refusées au chargement (pattern hors catalogue, champ manquant...)
    rejected: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def defined_patterns(self) -> List[str]:
        """Noms des patterns réellement traités en Partie 1."""
        return [getattr(e.pattern, "value", e.pattern) for e in self.entries]

    def __repr__(self):
        return f"<Guide '{self.title}' | {len(self.entries)} fiches | {len(self.comparisons)} comparaisons>"


@dataclass(frozen=True)
class Issue:
    code: IssueCode
    message: str


@dataclass
class ValidationReport:
    """Accumulateur des anomalies trouvées par le ValidationManager."""
    issues: List[Issue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def add(self, code: IssueCode, message: str):
        self.issues.append(Issue(code, message))

    def codes(self) -> List[IssueCode]:
        return [i.code for i in self.issues]

    def __repr__(self):
        return f"ValidationReport(ok={self.ok}, issues={len(self.issues)})"
