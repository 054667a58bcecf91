# src/solid_principles/cli.py
"""
Command-line interface for the SOLID principles demo
"""

import argparse
import logging
import sys

from .config import PRINCIPLES, DemoConfig
from .demo import run_demo
from .enums import Principle
from . import __version__


def print_principle_list():
    """Print a short reference card for every principle."""
    print(f"SOLID Principles v{__version__}")
    print("=" * 50)

    for principle, info in PRINCIPLES.items():
        print(f"\n{principle.number}. {info.acronym} - {info.title}")
        print(f"  {info.definition}")
        print(f"  Examples: {', '.join(info.examples)}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="SOLID Principles: the five object-oriented design principles by example",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  solid-demo                      # Run every demonstration
  solid-demo -p lsp -p dip        # Run only the LSP and DIP sections
  solid-demo --show-violation     # Also show the Ostrich LSP failure
  solid-demo --list               # Describe each principle
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'SOLID Principles v{__version__}'
    )

    parser.add_argument(
        '-p', '--principle',
        action='append',
        type=str.lower,
        choices=[p.value for p in Principle],
        metavar='ACRONYM',
        help='Run only this principle (srp, ocp, lsp, isp, dip); may be repeated'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List the principles with their definitions and exit'
    )

    parser.add_argument(
        '--show-violation',
        action='store_true',
        help='Call Ostrich.fly() to show the Liskov Substitution failure'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log what each demonstration is doing to stderr'
    )

    args = parser.parse_args(argv)

    if args.list:
        print_principle_list()
        return 0

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S',
            stream=sys.stderr,
        )

    config = DemoConfig(
        principles=tuple(args.principle) if args.principle else tuple(Principle),
        show_violation=args.show_violation,
        verbose=args.verbose,
    )
    run_demo(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
