from typing import List, Tuple

import pygame


def wrap_text(text: str, font, max_width: int) -> List[str]:
    """Découpe un paragraphe en lignes qui tiennent dans max_width pixels."""
    lines = []
    for paragraph in text.split("\n"):
        words = paragraph.split(" ")
        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if font.size(candidate)[0] <= max_width or not current:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
    return lines


class TextBlock:
    """
    Bloc de texte multi-lignes (non interactif).
    Les lignes sont pré-découpées à la construction.
    """

    def __init__(self, x: int, y: int, width: int, text: str, font,
                 color: Tuple[int, int, int], line_spacing: int = 4, background=None):
        self.x = x
        self.y = y
        self.width = width
        self.font = font
        self.color = color
        self.background = background
        self.line_height = font.get_linesize() + line_spacing
        self.lines = wrap_text(text, font, width)

    @property
    def height(self) -> int:
        return len(self.lines) * self.line_height

    def draw(self, surface: pygame.Surface, offset_y: int = 0):
        top = self.y + offset_y
        if self.background:
            pygame.draw.rect(surface, self.background,
                             pygame.Rect(self.x - 10, top - 6, self.width + 20, self.height + 12),
                             border_radius=6)
        for i, line in enumerate(self.lines):
            surf = self.font.render(line, True, self.color)
            surface.blit(surf, (self.x, top + i * self.line_height))
