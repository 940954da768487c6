import pygame
from guide_gui.screens.base_screen import BaseScreen
from guide_gui.widgets.buttons import Button

from constants import PART_PATTERNS_TITLE, PART_COMPARISONS_TITLE
from guide_gui.core.colors import (
    BG_COLOR, TEXT_PRIMARY, TEXT_SECONDARY, ACCENT,
    BTN_COMPARE, BTN_DANGER, BTN_HOVER, FAMILY_COLORS
)


class MenuScreen(BaseScreen):
    """Sommaire : une colonne de fiches, une colonne de comparaisons."""

    def __init__(self, app):
        super().__init__(app)
        self.res = app.res_manager
        self._init_ui()

    def on_resize(self, w, h):
        super().on_resize(w, h)
        self._init_ui()

    def _init_ui(self):
        self.widgets.clear()
        guide = self.app.guide

        # --- TITRE ---
        font_title = self.res.get_font(40, bold=True)
        font_part = self.res.get_font(22, bold=True)
        self.title_surf = font_title.render("DESIGN PATTERNS & JEU VIDÉO", True, TEXT_PRIMARY)
        self.title_rect = self.title_surf.get_rect(center=(self.width // 2, 50))

        col_w = min(420, self.width // 2 - 60)
        left_x = self.width // 4 - col_w // 2
        right_x = 3 * self.width // 4 - col_w // 2
        top = 140
        h_btn, spacing = 42, 8

        self.part_labels = [
            (font_part.render(PART_PATTERNS_TITLE, True, ACCENT), (left_x, top - 40)),
            (font_part.render(PART_COMPARISONS_TITLE, True, ACCENT), (right_x, top - 40)),
        ]

        font_btn = self.res.get_font(20, bold=True)

        # 1. Fiches (Partie 1)
        for i, entry in enumerate(guide.entries):
            family = getattr(entry.family, "value", None)
            self.widgets.append(Button(
                x=left_x, y=top + i * (h_btn + spacing),
                width=col_w, height=h_btn,
                text=f"{i + 1}. {entry.title}",
                font=font_btn,
                action=f"OPEN_ENTRY:{entry.id}",
                hover_color=BTN_HOVER,
                stripe_color=FAMILY_COLORS.get(family)
            ))

        # 2. Comparaisons (Partie 2)
        for i, comparison in enumerate(guide.comparisons):
            self.widgets.append(Button(
                x=right_x, y=top + i * (h_btn + spacing),
                width=col_w, height=h_btn,
                text=comparison.title,
                font=font_btn,
                action=f"OPEN_COMPARISON:{comparison.id}",
                bg_color=BTN_COMPARE, hover_color=BTN_HOVER
            ))

        # 3. Quitter
        self.widgets.append(Button(
            x=right_x, y=self.height - 90,
            width=col_w, height=h_btn,
            text="QUITTER",
            font=font_btn,
            action="QUIT_APP",
            bg_color=BTN_DANGER, hover_color=BTN_HOVER
        ))

    def handle_events(self, events):
        for event in events:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return "QUIT_APP"
        return super().handle_events(events)

    def draw(self, surface):
        surface.fill(BG_COLOR)
        surface.blit(self.title_surf, self.title_rect)
        for surf, pos in self.part_labels:
            surface.blit(surf, pos)

        for w in self.widgets:
            w.draw(surface)

        hint = self.res.get_font(16).render("Cliquez sur une fiche pour l'ouvrir - ÉCHAP pour quitter",
                                            True, TEXT_SECONDARY)
        surface.blit(hint, (15, self.height - 25))
