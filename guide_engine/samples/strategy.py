from abc import ABC, abstractmethod


class BehaviorStrategy(ABC):
    """Une stratégie = un algorithme de décision interchangeable."""

    @abstractmethod
    def decide(self, enemy: "Enemy", distance_to_player: int) -> str:
        pass


class AggressiveStrategy(BehaviorStrategy):
    def decide(self, enemy, distance_to_player):
        if distance_to_player <= 1:
            return "attaque au corps à corps"
        return "charge vers le joueur"


class DefensiveStrategy(BehaviorStrategy):
    def decide(self, enemy, distance_to_player):
        if distance_to_player <= 3:
            return "lève son bouclier"
        return "garde sa position"


class FleeStrategy(BehaviorStrategy):
    def decide(self, enemy, distance_to_player):
        return "s'enfuit vers la sortie"


class Enemy:
    def __init__(self, name: str, strategy: BehaviorStrategy):
        self.name = name
        self.hp = 100
        self.strategy = strategy

    def set_strategy(self, strategy: BehaviorStrategy):
        # C'est le code client (le directeur de l'IA) qui choisit la stratégie
        self.strategy = strategy

    def act(self, distance_to_player: int):
        action = self.strategy.decide(self, distance_to_player)
        print(f"{self.name} ({type(self.strategy).__name__}) : {action}")


def main():
    orc = Enemy("Orc", AggressiveStrategy())
    orc.act(distance_to_player=5)
    orc.act(distance_to_player=1)

    # Le niveau de difficulté change : on remplace l'algorithme à chaud
    orc.set_strategy(DefensiveStrategy())
    orc.act(distance_to_player=2)

    orc.set_strategy(FleeStrategy())
    orc.act(distance_to_player=2)


if __name__ == "__main__":
    main()
