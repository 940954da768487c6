from abc import ABC, abstractmethod


class CharacterState(ABC):
    """
    State : chaque état décide lui-même de la transition suivante.
    Le personnage délègue tout à son état courant.
    """
    name = "?"

    @abstractmethod
    def handle_input(self, character: "Character", key: str):
        pass

    def update(self, character: "Character"):
        pass


class IdleState(CharacterState):
    name = "Immobile"

    def handle_input(self, character, key):
        if key in ("LEFT", "RIGHT"):
            character.change_state(RunningState())
        elif key == "SPACE":
            character.change_state(JumpingState())


class RunningState(CharacterState):
    name = "Course"

    def handle_input(self, character, key):
        if key == "SPACE":
            character.change_state(JumpingState())
        elif key == "NONE":
            character.change_state(IdleState())


class JumpingState(CharacterState):
    name = "Saut"

    def __init__(self):
        self.frames_in_air = 0

    def handle_input(self, character, key):
        # Pas de double saut : l'entrée est ignorée en l'air
        if key == "SPACE":
            print("  (double saut impossible)")

    def update(self, character):
        self.frames_in_air += 1
        if self.frames_in_air >= 2:
            character.change_state(IdleState())


class Character:
    def __init__(self, name: str):
        self.name = name
        self.state: CharacterState = IdleState()

    def change_state(self, new_state: CharacterState):
        print(f"  {self.name} : {self.state.name} -> {new_state.name}")
        self.state = new_state

    def press(self, key: str):
        print(f"Touche {key} (état : {self.state.name})")
        self.state.handle_input(self, key)

    def tick(self):
        self.state.update(self)


def main():
    hero = Character("Héros")
    hero.press("RIGHT")
    hero.press("SPACE")
    hero.press("SPACE")
    hero.tick()
    hero.tick()
    hero.press("NONE")
    print(f"État final : {hero.state.name}")


if __name__ == "__main__":
    main()
