class GameManager:
    """
    Gestionnaire global de la partie (Pattern Singleton).
    Une seule instance existe : tous les systèmes partagent le même score.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(GameManager, cls).__new__(cls)
            cls._instance._init_manager()
        return cls._instance

    def _init_manager(self):
        self.score = 0
        self.level = 1
        print("GameManager : création de l'unique instance")

    def add_score(self, points: int):
        self.score += points
        print(f"GameManager : +{points} points (total = {self.score})")

    def next_level(self):
        self.level += 1
        print(f"GameManager : passage au niveau {self.level}")

    @classmethod
    def reset_instance(cls):
        """Utile entre deux parties (et dans les tests)."""
        cls._instance = None


class EnemySystem:
    def on_enemy_killed(self):
        GameManager().add_score(100)


class QuestSystem:
    def on_quest_completed(self):
        manager = GameManager()
        manager.add_score(500)
        manager.next_level()


def main():
    GameManager.reset_instance()

    enemies = EnemySystem()
    quests = QuestSystem()

    enemies.on_enemy_killed()
    enemies.on_enemy_killed()
    quests.on_quest_completed()

    a = GameManager()
    b = GameManager()
    print(f"Même instance partout ? {a is b}")
    print(f"Score final : {a.score} | Niveau : {a.level}")


if __name__ == "__main__":
    main()
