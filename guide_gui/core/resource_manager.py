import pygame

from guide_engine.utils.logger import log_error


class ResourceManager:
    """
    Singleton responsable du chargement et du cache des fontes.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ResourceManager, cls).__new__(cls)
            cls._instance._init_manager()
        return cls._instance

    def _init_manager(self):
        self.fonts_cache = {}

        if not pygame.font.get_init():
            pygame.font.init()

    def get_font(self, size: int, bold: bool = False, name: str = "Arial") -> pygame.font.Font:
        key = (name, size, bold)
        if key in self.fonts_cache:
            return self.fonts_cache[key]

        try:
            font = pygame.font.SysFont(name, size, bold=bold)
        except (pygame.error, OSError) as e:
            log_error(f"Fonte '{name}' indisponible : {e}")
            font = pygame.font.Font(None, size)

        self.fonts_cache[key] = font
        return font

    def get_mono_font(self, size: int) -> pygame.font.Font:
        """Fonte à chasse fixe pour la sortie console des exemples."""
        return self.get_font(size, name="Courier New")
