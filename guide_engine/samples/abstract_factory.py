from abc import ABC, abstractmethod


# --- PRODUITS ABSTRAITS ---

class Weapon(ABC):
    @abstractmethod
    def describe(self) -> str:
        pass


class Armor(ABC):
    @abstractmethod
    def describe(self) -> str:
        pass


# --- FAMILLE MÉDIÉVALE ---

class Sword(Weapon):
    def describe(self):
        return "Épée en acier"


class PlateArmor(Armor):
    def describe(self):
        return "Armure de plates"


# --- FAMILLE SCIENCE-FICTION ---

class LaserRifle(Weapon):
    def describe(self):
        return "Fusil laser"


class EnergyShield(Armor):
    def describe(self):
        return "Bouclier énergétique"


# --- FABRIQUES ---

class EquipmentFactory(ABC):
    """
    Abstract Factory : une fabrique par univers.
    Garantit que l'arme et l'armure d'un même niveau vont ensemble.
    """

    @abstractmethod
    def create_weapon(self) -> Weapon:
        pass

    @abstractmethod
    def create_armor(self) -> Armor:
        pass


class MedievalFactory(EquipmentFactory):
    def create_weapon(self):
        return Sword()

    def create_armor(self):
        return PlateArmor()


class SciFiFactory(EquipmentFactory):
    def create_weapon(self):
        return LaserRifle()

    def create_armor(self):
        return EnergyShield()


def equip_hero(factory: EquipmentFactory):
    # Le code client ne connaît que les interfaces abstraites
    weapon = factory.create_weapon()
    armor = factory.create_armor()
    print(f"  Arme : {weapon.describe()} | Armure : {armor.describe()}")


def main():
    levels = {
        "Château hanté": MedievalFactory(),
        "Station orbitale": SciFiFactory(),
    }

    for level_name, factory in levels.items():
        print(f"Niveau '{level_name}' :")
        equip_hero(factory)


if __name__ == "__main__":
    main()
