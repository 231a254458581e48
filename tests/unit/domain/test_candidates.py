"""Tests for ordered candidate evaluation."""

from tunebridge.domain.value_objects import dig, first_non_empty


class TestFirstNonEmpty:
    """Tests for first_non_empty()."""

    def test_skips_none_and_blank_strings(self) -> None:
        assert first_non_empty(None, "", "   ", "Rick Astley") == "Rick Astley"

    def test_returns_first_in_priority_order(self) -> None:
        assert first_non_empty("name", "title", "track") == "name"

    def test_all_missing_returns_none(self) -> None:
        assert first_non_empty(None, "", None) is None
        assert first_non_empty() is None

    def test_non_string_values_are_stringified(self) -> None:
        assert first_non_empty(None, 1987) == "1987"

    def test_keeps_string_unstripped(self) -> None:
        """Only blankness is checked, the value itself is returned as-is."""
        assert first_non_empty(" Song ") == " Song "


class TestDig:
    """Tests for dig()."""

    def test_nested_dicts(self) -> None:
        data = {"visualIdentity": {"backgroundBase": {"backgroundImageUrl": "img"}}}
        assert (
            dig(data, "visualIdentity", "backgroundBase", "backgroundImageUrl")
            == "img"
        )

    def test_list_index(self) -> None:
        data = {"artists": [{"name": "Rick Astley"}, {"name": "Other"}]}
        assert dig(data, "artists", 0, "name") == "Rick Astley"
        assert dig(data, "artists", 1, "name") == "Other"

    def test_missing_key_returns_none(self) -> None:
        assert dig({"a": {}}, "a", "b", "c") is None

    def test_index_out_of_range_returns_none(self) -> None:
        assert dig({"artists": []}, "artists", 0, "name") is None

    def test_wrong_container_type_returns_none(self) -> None:
        assert dig({"artists": "Rick"}, "artists", 0) is None
        assert dig({"a": [1, 2]}, "a", "b") is None
        assert dig(None, "a") is None
