import pygame
from typing import List, Optional, Tuple

from guide_engine.core.consts import FAMILY_LABELS
from guide_engine.utils.logger import log_error
from guide_gui.screens.base_screen import BaseScreen
from guide_gui.widgets.buttons import Button
from guide_gui.widgets.text_block import TextBlock
from guide_gui.core.colors import (
    BG_COLOR, TEXT_PRIMARY, TEXT_SECONDARY, ACCENT, CONSOLE_BG, CONSOLE_TEXT,
    BTN_SUCCESS, BTN_DANGER, BTN_HOVER
)


class ScrollableScreen(BaseScreen):
    """
    Écran de lecture : une pile de blocs de texte qui défile à la molette,
    et une barre de boutons fixe en bas.
    """
    MARGIN = 60
    TOP = 30
    FOOTER = 80
    SCROLL_STEP = 40

    def __init__(self, app):
        super().__init__(app)
        self.res = app.res_manager
        self.scroll = 0
        self.blocks: List[Tuple[TextBlock, int]] = []  # (bloc, y relatif)

    # --- CONSTRUCTION ---

    def _layout(self, sections: List[Tuple[str, str, dict]]):
        """sections : liste de (texte, style, options) empilés verticalement."""
        self.blocks = []
        y = self.TOP
        width = self.width - 2 * self.MARGIN
        for text, style, opts in sections:
            font, color = self._style(style)
            block = TextBlock(self.MARGIN, y, width, text, font, color, **opts)
            self.blocks.append(block)
            y += block.height + (24 if style in ("body", "console") else 10)
        self.content_height = y

    def _style(self, style: str):
        if style == "title":
            return self.res.get_font(36, bold=True), TEXT_PRIMARY
        if style == "heading":
            return self.res.get_font(22, bold=True), ACCENT
        if style == "console":
            return self.res.get_mono_font(18), CONSOLE_TEXT
        if style == "hint":
            return self.res.get_font(16), TEXT_SECONDARY
        return self.res.get_font(19), TEXT_PRIMARY

    def _init_footer(self, extra: Optional[List[Button]] = None):
        self.widgets.clear()
        font_btn = self.res.get_font(20, bold=True)
        self.widgets.append(Button(
            x=self.MARGIN, y=self.height - self.FOOTER + 15,
            width=200, height=45, text="RETOUR", font=font_btn,
            action="MENU", bg_color=BTN_DANGER, hover_color=BTN_HOVER
        ))
        for btn in extra or []:
            self.widgets.append(btn)

    # --- BOUCLE ---

    def handle_events(self, events):
        for event in events:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return "MENU"
            if event.type == pygame.MOUSEWHEEL:
                self.scroll_by(-event.y * self.SCROLL_STEP)
        return super().handle_events(events)

    def scroll_by(self, delta: int):
        visible = self.height - self.FOOTER - self.TOP
        max_scroll = max(0, self.content_height - visible)
        self.scroll = max(0, min(max_scroll, self.scroll + delta))

    def draw(self, surface):
        surface.fill(BG_COLOR)
        for block in self.blocks:
            block.draw(surface, offset_y=-self.scroll)

        # Le pied de page masque le texte qui défile dessous
        pygame.draw.rect(surface, BG_COLOR,
                         pygame.Rect(0, self.height - self.FOOTER, self.width, self.FOOTER))
        for w in self.widgets:
            w.draw(surface)


class EntryScreen(ScrollableScreen):
    """Fiche d'un pattern : problème, déroulé, et exécution de l'exemple."""

    def __init__(self, app, entry):
        super().__init__(app)
        self.entry = entry
        self.console_output: Optional[str] = None
        self._init_ui()

    def on_resize(self, w, h):
        super().on_resize(w, h)
        self._init_ui()

    def _init_ui(self):
        font_btn = self.res.get_font(20, bold=True)
        self._init_footer([Button(
            x=self.MARGIN + 220, y=self.height - self.FOOTER + 15,
            width=300, height=45, text="EXÉCUTER L'EXEMPLE", font=font_btn,
            action="RUN_SAMPLE", bg_color=BTN_SUCCESS, hover_color=BTN_HOVER
        )])

        family = FAMILY_LABELS.get(self.entry.family, "")
        sections = [
            (self.entry.title, "title", {}),
            (f"Pattern : {self.entry.pattern.value}  |  Famille : {family}", "hint", {}),
            ("Problème", "heading", {}),
            (self.entry.problem, "body", {}),
            ("Déroulement", "heading", {}),
            ("\n".join(f"{i}. {step}" for i, step in enumerate(self.entry.narrative, start=1)), "body", {}),
        ]
        if self.console_output is not None:
            sections.append(("Sortie console", "heading", {}))
            sections.append((self.console_output.rstrip() or "(aucune sortie)", "console",
                             {"background": CONSOLE_BG}))
        self._layout(sections)

    def run_sample(self):
        try:
            self.console_output = self.app.guide.run_sample(self.entry.id)
        except Exception as e:
            log_error(f"Échec de l'exemple {self.entry.id} : {e}")
            self.console_output = f"Erreur : {e}"
        self._init_ui()
        # On fait défiler jusqu'à la sortie console
        self.scroll_by(self.content_height)

    def handle_events(self, events):
        action = super().handle_events(events)
        if action == "RUN_SAMPLE":
            self.run_sample()
            return None
        return action


class ComparisonScreen(ScrollableScreen):
    """Fiche de comparaison (Partie 2) : texte seul."""

    SECTIONS = [
        ("Similitudes", "similarities"),
        ("Différences", "differences"),
        ("Risques de confusion", "confusion_risks"),
        ("Quand choisir lequel ?", "guidance"),
    ]

    def __init__(self, app, comparison):
        super().__init__(app)
        self.comparison = comparison
        self._init_ui()

    def on_resize(self, w, h):
        super().on_resize(w, h)
        self._init_ui()

    def _init_ui(self):
        self._init_footer()
        sections = [
            (self.comparison.title, "title", {}),
            ("Patterns comparés : " + ", ".join(self.comparison.patterns), "hint", {}),
        ]
        for label, attr in self.SECTIONS:
            items = getattr(self.comparison, attr)
            if items:
                sections.append((label, "heading", {}))
                sections.append(("\n".join(f"- {item}" for item in items), "body", {}))
        self._layout(sections)
