# src/solid_principles/demo.py
"""
Demonstration routine that walks through each SOLID principle in turn.
"""

import logging
from typing import Callable, Dict, Optional

from .config import DemoConfig
from .enums import Principle
from .exceptions import FlightNotSupportedError
from .single_responsibility import Invoice, InvoicePrinter
from .open_closed import AreaCalculator, Circle, Rectangle
from .liskov_substitution import FlyingSparrow, NonFlyingOstrich, Ostrich, Sparrow, can_fly
from .interface_segregation import HumanWorker, RobotWorker
from .dependency_inversion import Computer, WiredKeyboard, WirelessKeyboard


# Set up logging
logger = logging.getLogger(__name__)


def demonstrate_single_responsibility(config: DemoConfig) -> None:
    invoice = Invoice(100)
    printer = InvoicePrinter()
    printer.print_invoice(invoice)


def demonstrate_open_closed(config: DemoConfig) -> None:
    shapes = [Rectangle(5, 10), Circle(7)]
    calculator = AreaCalculator()
    print(f"Total area: {calculator.total_area(shapes)}")


def demonstrate_liskov_substitution(config: DemoConfig) -> None:
    sparrow = Sparrow()
    sparrow.fly()

    if config.show_violation:
        # Substituting Ostrich for Bird breaks callers of fly()
        ostrich = Ostrich()
        try:
            ostrich.fly()
        except FlightNotSupportedError as e:
            logger.warning(f"LSP violation: {ostrich!r} is a Bird but {e}")
            print(f"Ostrich.fly() raised: {e}")

    flying_sparrow = FlyingSparrow()
    flying_sparrow.fly()
    ostrich = NonFlyingOstrich()
    logger.info(f"{ostrich!r} is Flyable: {can_fly(ostrich)}")
    print("Ostrich cannot fly, so no fly method called.")


def demonstrate_interface_segregation(config: DemoConfig) -> None:
    human = HumanWorker()
    human.work()
    human.eat()
    robot = RobotWorker()
    robot.work()


def demonstrate_dependency_inversion(config: DemoConfig) -> None:
    wired = WiredKeyboard()
    computer = Computer(wired)
    computer.type_on_keyboard()

    wireless = WirelessKeyboard()
    laptop = Computer(wireless)
    laptop.type_on_keyboard()


DEMONSTRATIONS: Dict[Principle, Callable[[DemoConfig], None]] = {
    Principle.SRP: demonstrate_single_responsibility,
    Principle.OCP: demonstrate_open_closed,
    Principle.LSP: demonstrate_liskov_substitution,
    Principle.ISP: demonstrate_interface_segregation,
    Principle.DIP: demonstrate_dependency_inversion,
}


def run_demo(config: Optional[DemoConfig] = None) -> None:
    """Print the demonstration for every configured principle."""
    config = config or DemoConfig()

    # Set up logging based on config
    package_logger = logging.getLogger(__package__)
    if config.verbose:
        package_logger.setLevel(logging.INFO)
    else:
        package_logger.setLevel(logging.WARNING)

    for index, principle in enumerate(config.principles):
        heading = f"{principle.number}. {principle.title}:"
        print(heading if index == 0 else "\n" + heading)
        logger.info(f"Running {principle.name} demonstration")
        DEMONSTRATIONS[principle](config)
