from enum import Enum


class PatternName(str, Enum):
    """
    Catalogue canonique des patterns enseignés par le guide.
    La valeur est le nom affiché dans le document (et utilisé dans le JSON).
    """
    SINGLETON = "Singleton"
    OBSERVER = "Observer"
    FACTORY = "Factory"
    ABSTRACT_FACTORY = "Abstract Factory"
    ADAPTER = "Adapter"
    DECORATOR = "Decorator"
    FACADE = "Facade"
    COMPOSITE = "Composite"
    STRATEGY = "Strategy"
    STATE = "State"

    @classmethod
    def parse(cls, raw: str) -> "PatternName":
        """
        Accepte le nom affiché ("Abstract Factory"), le nom d'enum
        ("ABSTRACT_FACTORY") ou un identifiant ("abstract_factory", "abstract-factory").
        Lève ValueError si le nom n'est pas au catalogue.
        """
        if isinstance(raw, cls):
            return raw
        text = str(raw).strip()
        try:
            return cls(text)
        except ValueError:
            pass
        key = text.upper().replace("-", "_").replace(" ", "_")
        if key in cls.__members__:
            return cls.__members__[key]
        raise ValueError(f"❌ Pattern inconnu : {raw}")


class PatternFamily(str, Enum):
    """Familles du Gang of Four, affichées sur chaque fiche."""
    CREATION = "CREATION"
    STRUCTURE = "STRUCTURE"
    COMPORTEMENT = "COMPORTEMENT"


# Libellés affichés dans le document
FAMILY_LABELS = {
    PatternFamily.CREATION: "Création",
    PatternFamily.STRUCTURE: "Structure",
    PatternFamily.COMPORTEMENT: "Comportement",
}


# Famille de référence de chaque pattern
PATTERN_FAMILIES = {
    PatternName.SINGLETON: PatternFamily.CREATION,
    PatternName.FACTORY: PatternFamily.CREATION,
    PatternName.ABSTRACT_FACTORY: PatternFamily.CREATION,
    PatternName.ADAPTER: PatternFamily.STRUCTURE,
    PatternName.DECORATOR: PatternFamily.STRUCTURE,
    PatternName.FACADE: PatternFamily.STRUCTURE,
    PatternName.COMPOSITE: PatternFamily.STRUCTURE,
    PatternName.OBSERVER: PatternFamily.COMPORTEMENT,
    PatternName.STRATEGY: PatternFamily.COMPORTEMENT,
    PatternName.STATE: PatternFamily.COMPORTEMENT,
}


class IssueCode(str, Enum):
    """Codes des anomalies remontées par le validateur."""
    UNKNOWN_PATTERN = "UNKNOWN_PATTERN"
    INVALID_ENTRY = "INVALID_ENTRY"
    MISSING_SAMPLE = "MISSING_SAMPLE"
    DUPLICATE_PATTERN = "DUPLICATE_PATTERN"
    MISSING_PATTERN = "MISSING_PATTERN"
    BAD_COMPARISON_SIZE = "BAD_COMPARISON_SIZE"
    UNDEFINED_REFERENCE = "UNDEFINED_REFERENCE"
    BROKEN_ANCHOR = "BROKEN_ANCHOR"
    MISMATCHED_ANCHOR = "MISMATCHED_ANCHOR"
    CROSS_ENTRY_IMPORT = "CROSS_ENTRY_IMPORT"
