from abc import ABC, abstractmethod
from typing import List


class InventoryComponent(ABC):
    """Interface commune aux objets simples et aux contenants."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def weight(self) -> float:
        pass

    @abstractmethod
    def value(self) -> int:
        pass

    @abstractmethod
    def display(self, indent: int = 0):
        pass


class Item(InventoryComponent):
    """Feuille : un objet simple."""

    def __init__(self, name: str, weight: float, value: int):
        super().__init__(name)
        self._weight = weight
        self._value = value

    def weight(self):
        return self._weight

    def value(self):
        return self._value

    def display(self, indent=0):
        print(f"{'  ' * indent}- {self.name} ({self._weight} kg, {self._value} po)")


class Bag(InventoryComponent):
    """Composite : un sac peut contenir des objets... et d'autres sacs."""

    def __init__(self, name: str, own_weight: float = 0.5):
        super().__init__(name)
        self.own_weight = own_weight
        self.children: List[InventoryComponent] = []

    def add(self, component: InventoryComponent):
        self.children.append(component)
        return self

    def remove(self, component: InventoryComponent):
        self.children.remove(component)

    def weight(self):
        return self.own_weight + sum(c.weight() for c in self.children)

    def value(self):
        return sum(c.value() for c in self.children)

    def display(self, indent=0):
        print(f"{'  ' * indent}+ {self.name} [{self.weight():.1f} kg, {self.value()} po]")
        for child in self.children:
            child.display(indent + 1)


def main():
    potions = Bag("Sacoche de potions", own_weight=0.2)
    potions.add(Item("Potion de soin", 0.3, 25)).add(Item("Potion de mana", 0.3, 30))

    backpack = Bag("Sac à dos", own_weight=1.0)
    backpack.add(Item("Épée", 3.0, 150))
    backpack.add(potions)
    backpack.add(Item("Corde", 1.5, 5))

    backpack.display()

    # Le client traite le sac entier comme un seul objet
    print(f"Poids total : {backpack.weight():.1f} kg")
    print(f"Valeur totale : {backpack.value()} po")


if __name__ == "__main__":
    main()
