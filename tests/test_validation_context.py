import inspect

from contrast_mcp.tools.validation import ValidationContext, has_text


def test_require_records_missing_and_blank_values() -> None:
    ctx = ValidationContext()
    ctx.require(None, "appId")
    ctx.require("   ", "projectName")
    ctx.require("value", "other")

    assert not ctx.is_valid()
    assert ctx.errors() == ["appId is required", "projectName is required"]
    assert ctx.warnings() == []


def test_error_and_warning_conditions() -> None:
    ctx = ValidationContext()
    ctx.error_if(False, "never")
    ctx.warn_if(True, "heads up")
    ctx.warn_if(False, "not this one")

    assert ctx.is_valid()
    assert ctx.warnings() == ["heads up"]

    ctx.error_if(True, "broken")
    assert ctx.errors() == ["broken"]


def test_require_if_present() -> None:
    ctx = ValidationContext()
    ctx.require_if_present("main", "metadataValue", None, "metadataName")
    ctx.require_if_present(None, "metadataValue", None, "metadataName")

    assert ctx.errors() == ["metadataValue requires metadataName to be specified"]


def test_int_param_defaults_and_clamps() -> None:
    ctx = ValidationContext()

    assert ctx.int_param(None, "pageSize", default=50) == 50
    assert ctx.int_param(None, "limit", default=10, default_reason="limit defaulted to 10") == 10
    assert ctx.int_param(0, "page", minimum=1) == 1
    assert ctx.int_param(500, "pageSize", minimum=1, maximum=100) == 100
    assert ctx.int_param(20, "pageSize", minimum=1, maximum=100) == 20

    assert ctx.is_valid()
    assert ctx.warnings() == [
        "limit defaulted to 10",
        "page clamped from 0 to minimum 1",
        "pageSize clamped from 500 to maximum 100",
    ]


def test_metadata_filter_errors_land_on_context() -> None:
    ctx = ValidationContext()
    assert ctx.metadata_filter("{not json", "metadataFilters") is None
    assert not ctx.is_valid()
    assert ctx.errors()[0].startswith("Invalid JSON for metadataFilters")


def test_returned_lists_are_copies() -> None:
    ctx = ValidationContext()
    ctx.add_error("e")
    ctx.add_warning("w")

    ctx.errors().append("mutated")
    ctx.warnings().clear()

    assert ctx.errors() == ["e"]
    assert ctx.warnings() == ["w"]


def test_has_text() -> None:
    assert has_text("x")
    assert not has_text("")
    assert not has_text(" \t")
    assert not has_text(None)


def test_public_methods_are_documented() -> None:
    public = [
        member
        for name, member in inspect.getmembers(ValidationContext, inspect.isfunction)
        if not name.startswith("_")
    ]

    assert public
    assert all(inspect.getdoc(member) for member in public)
