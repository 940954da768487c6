class AudioSystem:
    def init(self):
        print("  Audio : initialisation du mixeur")

    def play_music(self, track: str):
        print(f"  Audio : lecture de '{track}'")

    def shutdown(self):
        print("  Audio : arrêt")


class GraphicsSystem:
    def init(self, width: int, height: int):
        print(f"  Graphismes : fenêtre {width}x{height}")

    def load_textures(self, level: str):
        print(f"  Graphismes : textures du niveau '{level}' chargées")

    def shutdown(self):
        print("  Graphismes : fermeture de la fenêtre")


class PhysicsSystem:
    def init(self, gravity: float):
        print(f"  Physique : gravité = {gravity}")

    def shutdown(self):
        print("  Physique : arrêt de la simulation")


class SaveSystem:
    def load(self, slot: int) -> str:
        print(f"  Sauvegarde : lecture de l'emplacement {slot}")
        return "Forêt maudite"

    def save(self, slot: int):
        print(f"  Sauvegarde : écriture de l'emplacement {slot}")


class GameEngineFacade:
    """
    Facade : un point d'entrée simple devant plusieurs sous-systèmes.
    Le menu principal n'appelle que start_game() et quit_game().
    """

    def __init__(self):
        self.audio = AudioSystem()
        self.graphics = GraphicsSystem()
        self.physics = PhysicsSystem()
        self.saves = SaveSystem()

    def start_game(self, slot: int = 1):
        print("Démarrage de la partie...")
        self.graphics.init(1280, 720)
        self.audio.init()
        self.physics.init(gravity=9.81)
        level = self.saves.load(slot)
        self.graphics.load_textures(level)
        self.audio.play_music(f"Thème - {level}")

    def quit_game(self, slot: int = 1):
        print("Fermeture de la partie...")
        self.saves.save(slot)
        self.physics.shutdown()
        self.audio.shutdown()
        self.graphics.shutdown()


def main():
    engine = GameEngineFacade()
    engine.start_game()
    engine.quit_game()


if __name__ == "__main__":
    main()
