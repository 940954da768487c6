import pygame
import sys

from constants import WINDOW_TITLE, FPS_CAP
from guide_engine.core.config import ConfigurationService
from guide_engine.guide import PatternGuide
from guide_engine.utils.logger import log_info, log_error
from .colors import BG_COLOR
from .resource_manager import ResourceManager


class GuideApp:
    """
    Classe principale du visualiseur (Contrôleur racine).
    Gère la fenêtre, la boucle principale, la configuration et la navigation.
    """

    def __init__(self, config=None, guide=None):
        pygame.display.init()
        pygame.font.init()

        self.config = config or ConfigurationService()

        # Données du guide (catalogue + exemples)
        self.guide = guide or PatternGuide(config=self.config)
        log_info(f"Visualiseur : {len(self.guide.entries)} fiches, {len(self.guide.comparisons)} comparaisons")

        # Configuration Fenêtre
        w, h = getattr(self.config, "resolution", (1280, 720))
        flags = pygame.RESIZABLE
        if getattr(self.config, "fullscreen", False):
            flags |= pygame.FULLSCREEN

        self.screen = pygame.display.set_mode((w, h), flags)
        pygame.display.set_caption(WINDOW_TITLE)

        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = FPS_CAP
        self.res_manager = ResourceManager()

        self.current_screen = None

    def set_screen(self, screen_instance):
        """Change l'écran actif."""
        self.current_screen = screen_instance
        if hasattr(self.current_screen, "on_enter"):
            self.current_screen.on_enter()

    def run(self):
        """Boucle principale."""
        while self.running:
            dt = self.clock.tick(self.fps)

            # 1. Gestion des événements système
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self._shutdown()
                    return
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)

            # 2. Gestion de l'écran courant
            if self.current_screen:
                action = self.current_screen.handle_events(events)
                if action:
                    self._handle_global_action(action)

                if self.running:
                    self.current_screen.update(dt)
                    self.screen.fill(BG_COLOR)
                    self.current_screen.draw(self.screen)

            pygame.display.flip()

        self._shutdown()

    def _handle_global_action(self, action):
        """
        Routeur de navigation centralisé (Controller).
        Reçoit des intentions textuelles ("OPEN_ENTRY:singleton", "MENU"...).
        Utilise des imports locaux pour éviter les cycles de dépendances.
        """
        if not action:
            return

        if action.startswith("OPEN_ENTRY:"):
            entry = self.guide.find_entry(action.split(":", 1)[1])
            if entry is None:
                log_error(f"Fiche introuvable : {action}")
                return
            from guide_gui.screens.entry_screen import EntryScreen
            self.set_screen(EntryScreen(self, entry))

        elif action.startswith("OPEN_COMPARISON:"):
            comparison = self.guide.find_comparison(action.split(":", 1)[1])
            if comparison is None:
                log_error(f"Comparaison introuvable : {action}")
                return
            from guide_gui.screens.entry_screen import ComparisonScreen
            self.set_screen(ComparisonScreen(self, comparison))

        elif action == "MENU":
            from guide_gui.screens.menu_screen import MenuScreen
            self.set_screen(MenuScreen(self))

        elif action == "QUIT_APP":
            self.running = False

    def _handle_resize(self, w, h):
        if not self.config.fullscreen:
            self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
            if self.current_screen:
                self.current_screen.on_resize(w, h)

    def _shutdown(self):
        log_info("Fermeture du visualiseur...")
        pygame.quit()
        sys.exit()
