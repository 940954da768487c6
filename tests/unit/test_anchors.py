from guide_engine.utils.anchors import slugify, AnchorRegistry, iter_headings, iter_anchor_links


def test_slugify_github_rules():
    assert slugify("1. Singleton") == "1-singleton"
    assert slugify("Partie 1 : Les patterns par l'exemple") == "partie-1--les-patterns-par-lexemple"
    assert slugify("Quand choisir lequel ?") == "quand-choisir-lequel-"


def test_slugify_keeps_accents():
    assert slugify("Table des matières") == "table-des-matières"
    assert slugify("Différences") == "différences"


def test_registry_suffixes_duplicates():
    registry = AnchorRegistry()
    assert registry.anchor_for("Similitudes") == "similitudes"
    assert registry.anchor_for("Similitudes") == "similitudes-1"
    assert registry.anchor_for("Similitudes") == "similitudes-2"


def test_registry_skips_suffix_already_taken():
    registry = AnchorRegistry()
    anchors = [registry.anchor_for(h) for h in ("A", "A", "A-1")]
    assert anchors == ["a", "a-1", "a-1-1"]


def test_registry_suffix_after_literal_heading():
    registry = AnchorRegistry()
    anchors = [registry.anchor_for(h) for h in ("A-1", "A", "A", "A")]
    assert anchors == ["a-1", "a", "a-2", "a-3"]


def test_headings_inside_code_fences_are_ignored():
    markdown = "\n".join([
        "# Titre",
        "```python",
        "# un commentaire Python",
        "```",
        "## Section",
    ])
    headings = iter_headings(markdown)
    assert [(level, text) for level, text, _ in headings] == [(1, "Titre"), (2, "Section")]


def test_anchor_links_outside_fences_only():
    markdown = "\n".join([
        "- [Section](#section)",
        "```text",
        "[pas un lien](#ignore)",
        "```",
        "Voir [Titre](#titre) et [externe](https://example.org).",
    ])
    assert iter_anchor_links(markdown) == [("Section", "section"), ("Titre", "titre")]
