from abc import ABC, abstractmethod


class InputDevice(ABC):
    """Interface attendue par le moteur du jeu."""

    @abstractmethod
    def get_direction(self) -> tuple:
        pass

    @abstractmethod
    def is_jump_pressed(self) -> bool:
        pass


class Keyboard(InputDevice):
    def __init__(self, keys):
        self.keys = set(keys)

    def get_direction(self):
        dx = (1 if "RIGHT" in self.keys else 0) - (1 if "LEFT" in self.keys else 0)
        return (dx, 0)

    def is_jump_pressed(self):
        return "SPACE" in self.keys


class ThirdPartyGamepad:
    """
    SDK d'une manette tierce : on ne peut pas le modifier.
    Axes en flottants [-1.0, 1.0] et boutons numérotés.
    """

    def __init__(self, axis_x: float, buttons):
        self._axis_x = axis_x
        self._buttons = set(buttons)

    def read_axis(self, axis_id: int) -> float:
        return self._axis_x if axis_id == 0 else 0.0

    def button_state(self, button_id: int) -> int:
        return 1 if button_id in self._buttons else 0


class GamepadAdapter(InputDevice):
    """Adapter : traduit l'API de la manette vers l'interface InputDevice."""

    DEAD_ZONE = 0.2
    BUTTON_A = 0

    def __init__(self, gamepad: ThirdPartyGamepad):
        self.gamepad = gamepad

    def get_direction(self):
        x = self.gamepad.read_axis(0)
        if abs(x) < self.DEAD_ZONE:
            return (0, 0)
        return (1 if x > 0 else -1, 0)

    def is_jump_pressed(self):
        return self.gamepad.button_state(self.BUTTON_A) == 1


def move_hero(device: InputDevice, label: str):
    direction = device.get_direction()
    action = "saute" if device.is_jump_pressed() else "reste au sol"
    print(f"[{label}] Direction {direction}, le héros {action}")


def main():
    move_hero(Keyboard(["RIGHT", "SPACE"]), "Clavier")
    move_hero(GamepadAdapter(ThirdPartyGamepad(-0.8, [0])), "Manette")
    move_hero(GamepadAdapter(ThirdPartyGamepad(0.1, [])), "Manette")


if __name__ == "__main__":
    main()
