from typing import List, Optional
import pygame


class BaseScreen:
    """
    Interface commune pour tous les écrans (Menu, Fiche, Comparaison).
    """

    def __init__(self, app):
        self.app = app  # Référence vers GuideApp (pour changer d'écran)
        self.width = app.screen.get_width()
        self.height = app.screen.get_height()
        self.widgets = []

    def handle_events(self, events: List[pygame.event.Event]) -> Optional[str]:
        """
        Gère les événements (clics, touches).
        Retourne une action string pour le contrôleur, ou None.
        """
        for event in events:
            for widget in self.widgets:
                action = widget.handle_event(event)
                if action:
                    return action
        return None

    def update(self, dt):
        mouse_pos = pygame.mouse.get_pos()
        for w in self.widgets:
            w.update(dt, mouse_pos)

    def draw(self, surface):
        """Dessin sur l'écran."""
        pass

    def on_resize(self, w, h):
        """Appelé quand la fenêtre change de taille."""
        self.width = w
        self.height = h
