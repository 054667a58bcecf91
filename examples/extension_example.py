# examples/extension_example.py
"""
Extending the examples without modifying them.

Each class below plugs into existing code through an abstraction: the
calculator, the computer and the bird check never change.
"""

from solid_principles import (
    AreaCalculator,
    BirdBase,
    Circle,
    Computer,
    Flyable,
    Keyboard,
    NonFlyingOstrich,
    Rectangle,
    Shape,
    can_fly,
)


class Triangle(Shape):
    """A new shape: AreaCalculator handles it as-is (Open/Closed)."""

    def __init__(self, base, height):
        self.base = base
        self.height = height

    def area(self):
        return 0.5 * self.base * self.height


class OnScreenKeyboard(Keyboard):
    """A new keyboard: Computer accepts it as-is (Dependency Inversion)."""

    def type(self):
        print("Typing on on-screen keyboard")


class Penguin(BirdBase):
    """A new flightless bird: never asked to fly (Liskov Substitution)."""

    pass


class Swallow(BirdBase, Flyable):
    def fly(self):
        print("Swallow flying")


def main():
    print("Open/Closed:")
    shapes = [Rectangle(5, 10), Circle(7), Triangle(4, 3)]
    print(f"  Total area: {AreaCalculator().total_area(shapes):.2f}")

    print("\nDependency Inversion:")
    Computer(OnScreenKeyboard()).type_on_keyboard()

    print("\nLiskov Substitution:")
    for bird in [Swallow(), Penguin(), NonFlyingOstrich()]:
        if can_fly(bird):
            bird.fly()
        else:
            print(f"{bird.species} stays on the ground")


if __name__ == "__main__":
    main()
