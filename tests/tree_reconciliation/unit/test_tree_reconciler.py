"""Tree reconciler tests."""

from __future__ import annotations

import pytest
from component_docgen.field_schema import FieldSpec
from component_docgen.tree_reconciliation import (
    SchemaMismatchError,
    reconcile,
    require_reconciled,
)

_FIELDS = (
    FieldSpec(name="url", description="Target URL."),
    FieldSpec(name="tls").with_children(
        FieldSpec(name="enabled"),
        FieldSpec(name="client_auth").with_children(
            FieldSpec(name="cert_file"),
            FieldSpec(name="key_file"),
        ),
    ),
    FieldSpec(name="timeout"),
)


def _example() -> dict:
    return {
        "url": "http://localhost",
        "tls": {
            "enabled": True,
            "client_auth": {"cert_file": "c.pem", "key_file": "k.pem"},
        },
        "timeout": "5s",
    }


def test_matching_example_yields_no_missing_paths() -> None:
    result = reconcile(_FIELDS, _example())

    assert result.missing_paths == ()
    assert result.is_reconciled


def test_fields_are_flattened_depth_first_in_declaration_order() -> None:
    result = reconcile(_FIELDS, _example())

    assert [flattened.path for flattened in result.fields] == [
        "url",
        "tls",
        "tls.enabled",
        "tls.client_auth",
        "tls.client_auth.cert_file",
        "tls.client_auth.key_file",
        "timeout",
    ]
    assert all(flattened.field.children == () for flattened in result.fields)
    assert result.fields[0].field.description == "Target URL."


@pytest.mark.parametrize(
    ("location", "expected_path"),
    [
        ((), "extra"),
        (("tls",), "tls.extra"),
        (("tls", "client_auth"), "tls.client_auth.extra"),
    ],
)
def test_extra_key_is_reported_with_its_qualified_path(
    location: tuple[str, ...], expected_path: str
) -> None:
    example = _example()
    node = example
    for key in location:
        node = node[key]
    node["extra"] = 1

    result = reconcile(_FIELDS, example)

    assert result.missing_paths == (expected_path,)


def test_declared_field_absent_from_example_is_not_reported() -> None:
    example = _example()
    del example["timeout"]
    del example["tls"]["client_auth"]

    result = reconcile(_FIELDS, example)

    assert result.missing_paths == ()
    assert "tls.client_auth.cert_file" in [flattened.path for flattened in result.fields]


def test_leaf_field_with_structured_value_is_not_recursed_into() -> None:
    fields = (FieldSpec(name="headers"),)

    result = reconcile(fields, {"headers": {"Content-Type": "application/json"}})

    assert result.missing_paths == ()
    assert [flattened.path for flattened in result.fields] == ["headers"]


def test_deprecated_fields_account_for_their_example_keys() -> None:
    fields = (FieldSpec(name="url"), FieldSpec(name="verb", deprecated=True))

    result = reconcile(fields, {"url": "http://x", "verb": "POST"})

    assert result.missing_paths == ()
    assert result.fields[1].field.deprecated is True


def test_require_reconciled_raises_with_every_offending_path() -> None:
    example = _example()
    example["extra"] = 1
    example["tls"]["unknown"] = True

    with pytest.raises(SchemaMismatchError) as exc_info:
        require_reconciled(_FIELDS, example)

    assert set(exc_info.value.paths) == {"extra", "tls.unknown"}
    assert "tls.unknown" in str(exc_info.value)


def test_children_of_deprecated_field_are_flattened_as_deprecated() -> None:
    fields = (
        FieldSpec(name="url"),
        FieldSpec(name="legacy", deprecated=True).with_children(
            FieldSpec(name="verb"),
            FieldSpec(name="auth").with_children(FieldSpec(name="user")),
        ),
    )

    result = reconcile(fields, {"url": "x", "legacy": {"verb": "GET", "auth": {"user": "a"}}})

    assert result.missing_paths == ()
    deprecated_by_path = {flattened.path: flattened.field.deprecated for flattened in result.fields}
    assert deprecated_by_path == {
        "url": False,
        "legacy": True,
        "legacy.verb": True,
        "legacy.auth": True,
        "legacy.auth.user": True,
    }


def test_undeclared_key_under_deprecated_field_is_still_reported() -> None:
    fields = (FieldSpec(name="legacy", deprecated=True).with_children(FieldSpec(name="verb")),)

    result = reconcile(fields, {"legacy": {"verb": "GET", "extra": 1}})

    assert result.missing_paths == ("legacy.extra",)


def test_non_string_example_keys_are_not_matched_to_field_names() -> None:
    result = reconcile((FieldSpec(name="1"),), {1: "x"})

    assert result.missing_paths == ("1",)
