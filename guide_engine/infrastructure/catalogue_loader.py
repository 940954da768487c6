import json
import os
from typing import Optional

from guide_engine.core.models import Guide, PatternEntry, ComparisonEntry
from guide_engine.utils.logger import log_error, log_debug


class CatalogueLoader:
    """
    Infrastructure : Charge le catalogue du guide depuis le disque (JSON).
    Une fiche invalide est signalée puis ignorée, les autres sont conservées.
    """

    @staticmethod
    def load_from_json(file_path: str) -> Optional[Guide]:
        if not os.path.exists(file_path):
            log_error(f"Fichier introuvable : {file_path}")
            return None

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log_error(f"Erreur globale parsing JSON {file_path} : {e}")
            return None

        if not isinstance(data, dict):
            log_error(f"Format inattendu dans {file_path} : un objet JSON est requis")
            return None

        entries, rejected = [], []
        for item in data.get("entries", []):
            try:
                entries.append(PatternEntry.from_dict(item))
            except (KeyError, ValueError, TypeError) as e:
                log_error(f"Erreur instanciation fiche {item.get('id', '?')} : {e}")
                # Conservée pour que le validateur puisse la signaler
                rejected.append(dict(item))

        comparisons = []
        for item in data.get("comparisons", []):
            try:
                comparisons.append(ComparisonEntry.from_dict(item))
            except (KeyError, ValueError, TypeError) as e:
                log_error(f"Erreur instanciation comparaison {item.get('id', '?')} : {e}")

        guide = Guide(
            title=data.get("title", "Guide des Design Patterns"),
            introduction=data.get("introduction", ""),
            entries=entries,
            comparisons=comparisons,
            rejected=rejected
        )
        log_debug(f"Catalogue chargé : {guide}")
        return guide
