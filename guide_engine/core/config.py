import json
import os
from typing import Tuple

from constants import DEFAULT_OUTPUT, DEFAULT_WIDTH, DEFAULT_HEIGHT, PATH_SETTINGS


class ConfigurationService:
    """
    Service unique gérant la persistance et la validation des paramètres
    (génération du document + fenêtre du visualiseur).
    """
    FILE_PATH = PATH_SETTINGS

    def __init__(self):
        # Valeurs par défaut
        self.output_path: str = DEFAULT_OUTPUT
        self.include_console_output: bool = True
        self.debug_mode: bool = False
        self.resolution: Tuple[int, int] = (DEFAULT_WIDTH, DEFAULT_HEIGHT)
        self.fullscreen: bool = False

        self.load()

    def load(self):
        """Charge et valide les paramètres depuis le disque."""
        if not os.path.exists(self.FILE_PATH):
            return

        try:
            with open(self.FILE_PATH, "r", encoding="utf-8") as f:
                data = json.load(f)

            # Booléens : toute autre valeur ("false", 0...) garde le défaut
            self.debug_mode = self._read_bool(data, "debug_mode", False)
            self.fullscreen = self._read_bool(data, "fullscreen", False)
            self.include_console_output = self._read_bool(data, "include_console_output", True)

            # Validation du chemin de sortie
            raw_output = data.get("output_path", DEFAULT_OUTPUT)
            if isinstance(raw_output, str) and raw_output.strip():
                self.output_path = raw_output

            # Validation de la résolution
            raw_res = data.get("resolution", (DEFAULT_WIDTH, DEFAULT_HEIGHT))
            try:
                w, h = (int(v) for v in raw_res)
                if w > 0 and h > 0:
                    self.resolution = (w, h)
            except (TypeError, ValueError):
                self.resolution = (DEFAULT_WIDTH, DEFAULT_HEIGHT)
        except Exception as e:
            print(f"⚠️ Erreur lors du chargement des paramètres : {e}")

    @staticmethod
    def _read_bool(data: dict, key: str, default: bool) -> bool:
        value = data.get(key, default)
        return value if isinstance(value, bool) else default

    def save(self):
        """Persiste les paramètres actuels sur le disque."""
        data = {
            "output_path": self.output_path,
            "include_console_output": self.include_console_output,
            "debug_mode": self.debug_mode,
            "resolution": self.resolution,
            "fullscreen": self.fullscreen
        }
        try:
            with open(self.FILE_PATH, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except Exception as e:
            print(f"❌ Erreur lors de la sauvegarde : {e}")
