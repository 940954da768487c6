from abc import ABC, abstractmethod


class Enemy(ABC):
    def __init__(self, hp: int, damage: int):
        self.hp = hp
        self.damage = damage

    @abstractmethod
    def attack(self) -> str:
        pass


class Goblin(Enemy):
    def __init__(self):
        super().__init__(hp=30, damage=5)

    def attack(self):
        return f"Le gobelin frappe avec sa dague ({self.damage} dégâts)"


class Orc(Enemy):
    def __init__(self):
        super().__init__(hp=80, damage=12)

    def attack(self):
        return f"L'orc abat sa hache ({self.damage} dégâts)"


class Dragon(Enemy):
    def __init__(self):
        super().__init__(hp=500, damage=40)

    def attack(self):
        return f"Le dragon crache du feu ({self.damage} dégâts)"


class EnemyFactory:
    """
    Factory Pattern.
    Le code du niveau demande un ennemi par son type, sans connaître les classes concrètes.
    """
    _registry = {
        "goblin": Goblin,
        "orc": Orc,
        "dragon": Dragon,
    }

    @staticmethod
    def create_enemy(enemy_type: str) -> Enemy:
        enemy_class = EnemyFactory._registry.get(enemy_type)
        if enemy_class is None:
            raise ValueError(f"Type d'ennemi non supporté : {enemy_type}")
        return enemy_class()


def main():
    wave = ["goblin", "goblin", "orc", "dragon"]

    for enemy_type in wave:
        enemy = EnemyFactory.create_enemy(enemy_type)
        print(f"{enemy_type:<7} (PV {enemy.hp:>3}) -> {enemy.attack()}")

    try:
        EnemyFactory.create_enemy("licorne")
    except ValueError as e:
        print(f"Erreur : {e}")


if __name__ == "__main__":
    main()
