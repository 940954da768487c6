import os
import sys

# --- CHEMIN DE BASE ---
# Détection automatique de l'environnement (Dev vs Exe)
if getattr(sys, 'frozen', False):
    # Mode EXE : settings.json et GUIDE.md sont créés à côté de l'exécutable
    BASE_DIR = os.path.dirname(sys.executable)
else:
    # Mode DEV : On prend le dossier du script python actuel
    BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def resource_path(relative_path):
    """
    Permet de trouver les ressources internes (json)
    aussi bien en dev qu'en .exe (PyInstaller).
    """
    try:
        # PyInstaller stocke les données embarquées dans _MEIPASS
        base_path = sys._MEIPASS
    except AttributeError:
        base_path = os.path.dirname(os.path.abspath(__file__))

    return os.path.join(base_path, relative_path)


# --- FENÊTRE DU VISUALISEUR ---
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
WINDOW_TITLE = "Design Patterns & Jeu Vidéo - Guide"
FPS_CAP = 60

# --- DOCUMENT ---
DEFAULT_OUTPUT = "GUIDE.md"
TOC_TITLE = "Table des matières"
PART_PATTERNS_TITLE = "Partie 1 : Les patterns par l'exemple"
PART_COMPARISONS_TITLE = "Partie 2 : Patterns souvent confondus"

# --- CHEMINS ---

# Catalogue du guide (Interne -> resource_path)
PATH_DATA = resource_path(os.path.join("data", "guide.json"))

# Fichier de paramètres (Externe -> BASE_DIR)
PATH_SETTINGS = os.path.join(BASE_DIR, "settings.json")
