# examples/basic_example.py
"""
Basic example of running the SOLID principles walkthrough from Python
"""

from solid_principles import DemoConfig, PRINCIPLES, Principle, run_demo


def main():
    # Full walkthrough, same as running `solid-demo`
    run_demo()

    # Only the Liskov section, including the Ostrich failure
    print("\n" + "=" * 60)
    print("Liskov Substitution with the violation shown")
    print("=" * 60)
    run_demo(DemoConfig(principles=(Principle.LSP,), show_violation=True))

    # Reference card for one principle
    info = PRINCIPLES[Principle.DIP]
    print(f"\n{info.acronym}: {info.definition}")


if __name__ == "__main__":
    main()
