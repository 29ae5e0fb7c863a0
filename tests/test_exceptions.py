"""Unit tests for the `exceptions` module."""

import pytest

from gs1_lint.exceptions import InvalidLookup, UnsortedReferenceTable


class TestUnsortedReferenceTable:
    """Unit tests for the UnsortedReferenceTable exception class."""

    @pytest.fixture(scope="class")
    def exception(self):
        yield UnsortedReferenceTable(index=2, previous="010", current="008")

    def test_unsorted_reference_table_is_an_exception(self, exception):
        with pytest.raises(UnsortedReferenceTable):
            raise exception

    def test_attributes_correspond_to_arguments(self, exception):
        assert exception.index == 2
        assert exception.previous == "010"
        assert exception.current == "008"

    def test_message(self, exception):
        assert exception.message == (
            "The reference table must be strictly ascending, but the entry "
            "'008' at index 2 does not come after '010'."
        )


class TestInvalidLookup:
    """Unit tests for the InvalidLookup exception class."""

    @pytest.fixture(scope="class")
    def message(self):
        yield "Test message."

    @pytest.fixture(scope="class")
    def exception(self):
        yield InvalidLookup(lookup=42)

    @pytest.fixture(scope="class")
    def exception_with_message(self, message):
        yield InvalidLookup(lookup=42, message=message)

    def test_invalid_lookup_is_an_exception(self, exception):
        with pytest.raises(InvalidLookup):
            raise exception

    def test_lookup_is_stored(self, exception):
        assert exception.lookup == 42

    def test_default_message(self, exception):
        assert exception.message == (
            "The lookup 42 is not supported. A lookup must either have a `contains` "
            "method or be a callable, taking the candidate code and returning "
            "whether it is valid."
        )

    def test_custom_message_is_stored(self, exception_with_message, message):
        assert exception_with_message.message == message
        assert str(exception_with_message) == message
