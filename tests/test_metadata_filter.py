import pytest

from contrast_mcp.tools.validation import parse_metadata_filter


@pytest.mark.parametrize("value", [None, "", "   ", "{}"])
def test_blank_or_empty_means_no_filter(value) -> None:
    assert parse_metadata_filter(value, "metadataFilters") == (None, None)


def test_parses_strings_numbers_and_arrays() -> None:
    result, error = parse_metadata_filter(
        '{"branch": "main", "build": 42, "ratio": 1.5, "round": 3.0, "devs": ["Ellen", 7, null]}', "metadataFilters"
    )

    assert error is None
    assert result == {"branch": "main", "build": "42", "ratio": "1.5", "round": "3", "devs": ["Ellen", "7"]}


def test_malformed_json() -> None:
    result, error = parse_metadata_filter('{"branch": ', "metadataFilters")

    assert result is None
    assert error is not None
    assert error.startswith("Invalid JSON for metadataFilters:")


def test_non_object_json() -> None:
    result, error = parse_metadata_filter('["main"]', "metadataFilters")

    assert result is None
    assert "expected an object" in error


def test_invalid_values_are_reported_together() -> None:
    result, error = parse_metadata_filter(
        '{"ok": "x", "nested": {"a": 1}, "flag": true, "mixed": ["a", {"b": 2}]}', "metadataFilters"
    )

    assert result is None
    assert "'nested'" in error
    assert "'flag'" in error
    assert "'mixed' (array contains non-string values)" in error
    assert "'ok'" not in error
    assert error.endswith("Values must be strings or arrays of strings.")
