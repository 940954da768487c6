"""
Visualiseur du guide (pygame)
Architecture : App -> Screens -> Widgets
"""

# On expose l'App pour faciliter l'accès depuis main.py
from .core.app import GuideApp
