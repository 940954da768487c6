import pygame
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from guide_gui.core.colors import BTN_SURFACE, BTN_HOVER, BTN_BORDER, TEXT_PRIMARY


class UIWidget(ABC):
    """
    Classe de base abstraite pour tous les éléments interactifs.
    Garantit que chaque widget respecte le contrat d'interface.
    """

    def __init__(self, x: int, y: int, width: int, height: int, action: Optional[str] = None):
        self.rect = pygame.Rect(x, y, width, height)
        self.action = action  # L'identifiant renvoyé lors d'une interaction (ex: "MENU")
        self.is_hovered = False

    @abstractmethod
    def update(self, dt: float, mouse_pos: Tuple[int, int]):
        """Met à jour l'état interne (survol, animation)."""
        pass

    @abstractmethod
    def draw(self, surface: pygame.Surface):
        """Dessine le widget sur la surface donnée."""
        pass

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Gère les entrées. Retourne self.action si déclenché, sinon None."""
        pass


class Button(UIWidget):
    """
    Bouton rectangulaire standard avec texte et gestion de survol.
    Un liseré coloré optionnel (à gauche) indique la famille du pattern.
    """

    def __init__(self,
                 x: int, y: int, width: int, height: int,
                 text: str,
                 font: pygame.font.Font,
                 action: str,
                 bg_color: Tuple[int, int, int] = BTN_SURFACE,
                 text_color: Tuple[int, int, int] = TEXT_PRIMARY,
                 hover_color: Tuple[int, int, int] = BTN_HOVER,
                 stripe_color: Optional[Tuple[int, int, int]] = None):

        super().__init__(x, y, width, height, action)
        self.text = text
        self.font = font

        # Style
        self.bg_color = bg_color
        self.text_color = text_color
        self.hover_color = hover_color
        self.stripe_color = stripe_color
        self.border_radius = 8

    def update(self, dt: float, mouse_pos: Tuple[int, int]):
        if mouse_pos:
            self.is_hovered = self.rect.collidepoint(mouse_pos)
        else:
            self.is_hovered = False

    def draw(self, surface: pygame.Surface):
        # 1. Couleur de fond dynamique
        color = self.hover_color if self.is_hovered else self.bg_color
        pygame.draw.rect(surface, color, self.rect, border_radius=self.border_radius)

        # 2. Liseré de famille
        if self.stripe_color:
            stripe = pygame.Rect(self.rect.left, self.rect.top, 6, self.rect.height)
            pygame.draw.rect(surface, self.stripe_color, stripe,
                             border_top_left_radius=self.border_radius,
                             border_bottom_left_radius=self.border_radius)

        # 3. Bordure (blanche si survolée, sinon standard)
        border_col = (255, 255, 255) if self.is_hovered else BTN_BORDER
        pygame.draw.rect(surface, border_col, self.rect, 2, border_radius=self.border_radius)

        # 4. Texte centré
        if self.text:
            txt_surf = self.font.render(self.text, True, self.text_color)
            txt_rect = txt_surf.get_rect(center=self.rect.center)
            surface.blit(txt_surf, txt_rect)

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.is_hovered:
                return self.action
        return None
