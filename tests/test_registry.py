from __future__ import annotations

import pickle

import pytest

import httperrors
from httperrors import (
    ClientError,
    HttpError,
    ServerError,
    StatusTable,
    UnknownVariantError,
    build_registry,
    default_registry,
    statuses,
)


def test_every_error_code_has_a_variant():
    expected = sorted(code for code in statuses.codes if 400 <= code < 600)

    assert default_registry.codes() == expected


def test_variant_reachable_by_code_identifier_and_class_name():
    variant = default_registry[404]

    assert default_registry["NotFound"] is variant
    assert default_registry["NotFoundError"] is variant
    assert httperrors.NotFound is variant
    assert httperrors.NotFoundError is variant
    assert variant.__name__ == "NotFoundError"


def test_non_error_codes_are_skipped():
    assert 200 not in default_registry
    assert 302 not in default_registry
    assert "OK" not in default_registry


def test_unknown_key_raises_key_error():
    with pytest.raises(UnknownVariantError) as exc_info:
        default_registry["NoSuchThing"]

    assert isinstance(exc_info.value, KeyError)
    assert "NoSuchThing" in str(exc_info.value)


def test_unknown_module_attribute_raises_attribute_error():
    with pytest.raises(AttributeError):
        httperrors.NoSuchThing  # noqa: B018


def test_client_variant_defaults():
    err = default_registry[404]()

    assert isinstance(err, ClientError)
    assert isinstance(err, HttpError)
    assert isinstance(err, Exception)
    assert err.status == err.status_code == 404
    assert err.expose is True
    assert err.message == "Not Found"
    assert str(err) == "Not Found"
    assert err.name == "NotFoundError"


def test_server_variant_defaults():
    err = httperrors.ServiceUnavailable("try later")

    assert isinstance(err, ServerError)
    assert err.status == err.status_code == 503
    assert err.expose is False
    assert err.message == "try later"
    assert err.name == "ServiceUnavailableError"


def test_explicit_empty_message_is_kept():
    err = default_registry[400]("")

    assert err.message == ""


def test_message_is_writable():
    err = default_registry[409]("first")
    err.message = "second"

    assert str(err) == "second"


def test_teapot_identifier():
    err = httperrors.ImATeapot()

    assert err.status == 418
    assert err.name == "ImATeapotError"


@pytest.mark.parametrize("cls", [HttpError, ClientError, ServerError])
def test_abstract_bases_cannot_be_constructed(cls):
    with pytest.raises(TypeError, match="cannot construct abstract class"):
        cls("boom")


def test_variants_can_be_raised_and_caught_by_base():
    with pytest.raises(HttpError) as exc_info:
        raise httperrors.Forbidden("nope")

    assert exc_info.value.status == 403


def test_named_constructor_returns_independent_instances():
    first = httperrors.BadRequest("same")
    second = httperrors.BadRequest("same")

    assert first is not second
    assert first.status == second.status
    assert first.expose == second.expose
    assert first.message == second.message


def test_variants_pickle_by_name():
    err = httperrors.NotFound("missing")
    err.code = "ENOENT"

    restored = pickle.loads(pickle.dumps(err))

    assert type(restored) is httperrors.NotFoundError
    assert restored.message == "missing"
    assert restored.code == "ENOENT"


def test_descriptor_metadata():
    descriptor = default_registry.descriptor("InternalServerError")

    assert descriptor.status == 500
    assert descriptor.phrase == "Internal Server Error"
    assert descriptor.identifier == "InternalServerError"
    assert descriptor.class_name == "InternalServerError"
    assert descriptor.expose is False
    assert descriptor.code_class == 500


def test_build_registry_from_custom_table():
    table = StatusTable({200: "OK", 404: "Not Found", 599: "Custom Failure"})

    registry = build_registry(table)

    assert registry.codes() == [404, 599]
    assert registry.names() == ["NotFound", "CustomFailure"]
    assert registry[599].expose is False
    assert registry.table is table
    assert registry.aliases() == ["NotFoundError", "CustomFailureError"]
    assert len(registry) == 6
    assert list(registry) == [
        404,
        599,
        "NotFound",
        "CustomFailure",
        "NotFoundError",
        "CustomFailureError",
    ]


def test_match_falls_back_to_status_class():
    assert default_registry.match(404) is default_registry[404]
    assert default_registry.match(499) is default_registry[400]
    assert default_registry.match(599) is default_registry[500]
    assert default_registry.match(200) is None


def test_class_name_aliases_are_mapping_keys():
    keys = list(default_registry.keys())

    assert "NotFoundError" in keys
    assert "NotFound" in keys
    assert 404 in keys
    assert len(keys) == len(default_registry) == len(set(keys))
    assert all(key in default_registry for key in keys)


def test_identifier_ending_in_error_is_not_duplicated():
    keys = list(default_registry.keys())

    assert keys.count("InternalServerError") == 1
    assert "InternalServerError" not in default_registry.aliases()
