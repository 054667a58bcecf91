# tests/test_liskov_substitution.py
"""
Unit tests for the Liskov Substitution examples.
"""

import pytest
from solid_principles import (
    Bird,
    BirdBase,
    Flyable,
    FlyingSparrow,
    FlightNotSupportedError,
    NonFlyingOstrich,
    Ostrich,
    SolidPrinciplesError,
    Sparrow,
    can_fly,
)


class TestViolatingHierarchy:
    """Test the Bird hierarchy that breaks substitutability."""

    def test_bird_flies(self, capsys):
        """Test base behaviour."""
        Bird().fly()

        assert capsys.readouterr().out == "Flying\n"

    def test_sparrow_substitutes_for_bird(self, capsys):
        """Test that Sparrow behaves like a Bird."""
        sparrow = Sparrow()
        sparrow.fly()

        assert isinstance(sparrow, Bird)
        assert capsys.readouterr().out == "Flying\n"

    def test_ostrich_breaks_substitution(self):
        """Test that Ostrich raises where a Bird would fly."""
        ostrich = Ostrich()

        assert isinstance(ostrich, Bird)
        with pytest.raises(FlightNotSupportedError, match="Ostrich can't fly"):
            ostrich.fly()

    def test_violation_error_hierarchy(self):
        """Test that the violation error is catchable several ways."""
        with pytest.raises(NotImplementedError):
            Ostrich().fly()
        with pytest.raises(SolidPrinciplesError):
            Ostrich().fly()

    def test_client_code_fails_on_substitution(self, capsys):
        """Test that code written for Bird breaks on Ostrich."""

        def let_fly(birds):
            for bird in birds:
                bird.fly()

        with pytest.raises(FlightNotSupportedError):
            let_fly([Sparrow(), Ostrich()])

        assert capsys.readouterr().out == "Flying\n"


class TestCorrectedHierarchy:
    """Test the hierarchy with flight split into Flyable."""

    def test_flying_sparrow(self, capsys):
        """Test that FlyingSparrow implements Flyable."""
        sparrow = FlyingSparrow()
        sparrow.fly()

        assert isinstance(sparrow, Flyable)
        assert isinstance(sparrow, BirdBase)
        assert capsys.readouterr().out == "Flying\n"

    def test_non_flying_ostrich_has_no_fly(self):
        """Test that the corrected ostrich exposes no fly method."""
        ostrich = NonFlyingOstrich()

        assert isinstance(ostrich, BirdBase)
        assert not isinstance(ostrich, Flyable)
        assert not isinstance(ostrich, Bird)
        assert not hasattr(ostrich, 'fly')

    def test_can_fly(self):
        """Test the capability check."""
        assert can_fly(FlyingSparrow())
        assert not can_fly(NonFlyingOstrich())
        # The violating hierarchy never declared the capability
        assert not can_fly(Sparrow())

    def test_every_flyable_can_substitute(self, capsys):
        """Test that all Flyable birds fly without error."""
        birds = [FlyingSparrow(), NonFlyingOstrich(), FlyingSparrow()]
        for bird in birds:
            if can_fly(bird):
                bird.fly()

        assert capsys.readouterr().out == "Flying\nFlying\n"

    def test_flyable_is_abstract(self):
        """Test that Flyable cannot be instantiated."""
        with pytest.raises(TypeError):
            Flyable()

    def test_species(self):
        """Test species naming and repr."""
        assert NonFlyingOstrich().species == "NonFlyingOstrich"
        assert repr(FlyingSparrow()) == "FlyingSparrow()"
