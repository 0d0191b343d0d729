"""
Tests for the preamble enums and dataclasses.
"""
from eipv.models.enums import Category, EipType, Status
from eipv.models.preamble import Author, Preamble


class TestEnums:
    """Tests for enum lookups."""

    def test_status_choices(self):
        assert Status.choices() == [
            "Draft",
            "Last Call",
            "Accepted",
            "Final",
            "Active",
            "Abandoned",
            "Superseded",
            "Rejected",
        ]

    def test_lookup_is_exact(self):
        assert Status.lookup("Last Call") is Status.LAST_CALL
        assert Status.lookup("last call") is None
        assert Category.lookup("ERC") is Category.ERC

    def test_requires_category(self):
        assert EipType.STANDARDS.requires_category
        assert not EipType.META.requires_category
        assert not EipType.INFORMATIONAL.requires_category


class TestAuthor:
    """Tests for Author."""

    def test_contact(self):
        assert Author("A", email="a@b.org").contact == "a@b.org"
        assert Author("A", handle="@a").contact == "@a"

    def test_str(self):
        assert str(Author("A", handle="@a")) == "A (@a)"


class TestPreamble:
    """Tests for the absent/parsed/invalid field states."""

    def test_absent(self):
        preamble = Preamble()
        assert not preamble.is_present("eip")
        assert not preamble.is_invalid("eip")

    def test_set_valid(self):
        preamble = Preamble()
        preamble.set_valid("eip", 1)
        assert preamble.is_present("eip")
        assert preamble.is_valid("eip")

    def test_set_invalid_then_valid(self):
        preamble = Preamble()
        preamble.set_invalid("title")
        assert preamble.is_present("title")
        assert preamble.is_invalid("title")

        preamble.set_valid("title", "ok")
        assert not preamble.is_invalid("title")

    def test_field_names(self):
        names = Preamble.field_names()
        assert "discussions_to" in names
        assert "invalid_fields" not in names
        assert "type_" in names
        assert "type" not in names
        assert len(names) == 16
