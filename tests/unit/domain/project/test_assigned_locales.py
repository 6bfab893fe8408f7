"""Tests for the stored assigned-locales format."""

import pytest

from glossa.domain.project.model.value import parse_assigned_locales, serialize_assigned_locales


class TestParseAssignedLocales:
    @pytest.mark.parametrize("raw", [None, "", "[]"])
    def test_empty_means_unrestricted(self, raw: str | None) -> None:
        assert parse_assigned_locales(raw) is None

    def test_list_parsed(self) -> None:
        assert parse_assigned_locales('["en_US", "de_DE"]') == frozenset({"en_US", "de_DE"})

    @pytest.mark.parametrize("raw", ["{not json", '{"en_US": true}', "[1, 2]"])
    def test_malformed_matches_nothing(self, raw: str) -> None:
        assert parse_assigned_locales(raw) == frozenset()


class TestSerializeAssignedLocales:
    def test_empty_stored_as_null(self) -> None:
        assert serialize_assigned_locales([]) is None
        assert serialize_assigned_locales(None) is None

    def test_list_stored_as_json(self) -> None:
        assert parse_assigned_locales(serialize_assigned_locales(["es_ES"])) == frozenset({"es_ES"})
