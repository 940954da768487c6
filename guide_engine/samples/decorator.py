from abc import ABC, abstractmethod


class Weapon(ABC):
    @abstractmethod
    def damage(self) -> int:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class BasicSword(Weapon):
    def damage(self):
        return 10

    def description(self):
        return "Épée"


class WeaponDecorator(Weapon):
    """
    Decorator : enveloppe une arme et respecte la même interface.
    Chaque enchantement ajoute son effet à celui de l'arme décorée.
    """

    def __init__(self, weapon: Weapon):
        self._weapon = weapon

    def damage(self):
        return self._weapon.damage()

    def description(self):
        return self._weapon.description()


class FireEnchantment(WeaponDecorator):
    def damage(self):
        return super().damage() + 5

    def description(self):
        return super().description() + " enflammée"


class PoisonEnchantment(WeaponDecorator):
    def damage(self):
        return super().damage() + 3

    def description(self):
        return super().description() + " empoisonnée"


class SharpenedBlade(WeaponDecorator):
    def damage(self):
        return int(super().damage() * 1.5)

    def description(self):
        return super().description() + " aiguisée"


def show(weapon: Weapon):
    print(f"{weapon.description()} -> {weapon.damage()} dégâts")


def main():
    sword = BasicSword()
    show(sword)

    sword = FireEnchantment(sword)
    show(sword)

    sword = PoisonEnchantment(sword)
    show(sword)

    # L'ordre des décorateurs compte : l'aiguisage multiplie tout le reste
    show(SharpenedBlade(sword))
    show(FireEnchantment(SharpenedBlade(BasicSword())))


if __name__ == "__main__":
    main()
