from abc import ABC, abstractmethod


class Observer(ABC):
    """Toute classe qui veut suivre la vie du joueur implémente update()."""

    @abstractmethod
    def update(self, event: str, value: int):
        pass


class Subject:
    """
    Sujet (Subject) dans le pattern Observer.
    Peut enregistrer, désenregistrer et notifier des observateurs.
    """

    def __init__(self):
        self._observers = []

    def attach(self, observer: Observer):
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: str, value: int):
        for observer in self._observers:
            observer.update(event, value)


class Player(Subject):
    def __init__(self, name: str, hp: int = 100):
        super().__init__()
        self.name = name
        self.hp = hp

    def take_damage(self, amount: int):
        self.hp = max(0, self.hp - amount)
        print(f"{self.name} subit {amount} dégâts")
        self.notify("HP_CHANGED", self.hp)
        if self.hp == 0:
            self.notify("DEATH", 0)


class HealthBar(Observer):
    def update(self, event, value):
        if event == "HP_CHANGED":
            print(f"  [HUD] Barre de vie : {value}/100")


class SoundManager(Observer):
    def update(self, event, value):
        if event == "HP_CHANGED":
            print("  [Son] Bruit d'impact")
        elif event == "DEATH":
            print("  [Son] Musique de game over")


class AchievementSystem(Observer):
    def __init__(self):
        self.unlocked = []

    def update(self, event, value):
        if event == "DEATH" and "Première chute" not in self.unlocked:
            self.unlocked.append("Première chute")
            print("  [Succès] Débloqué : Première chute")


def main():
    hero = Player("Héros")
    hud = HealthBar()
    sound = SoundManager()
    achievements = AchievementSystem()

    hero.attach(hud)
    hero.attach(sound)
    hero.attach(achievements)

    hero.take_damage(30)

    # Le son est coupé : on retire simplement l'observateur
    hero.detach(sound)
    hero.take_damage(80)


if __name__ == "__main__":
    main()
