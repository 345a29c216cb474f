"""
Tests for ResponseEnvelope serialization.

Covers:
- Defaults and always-present keys
- Conditional presence of data / errors / meta / headers
- Key order
- ABSENT vs None
- Status predicates and status vocabularies
"""
from __future__ import annotations

import json

from responder import ABSENT, ResponseEnvelope, ResponseStatus, StatusCode, StatusMessage


class TestDefaults:
    def test_default_serialization(self):
        assert ResponseEnvelope().to_dict() == {"status": "success", "code": 200, "message": ""}

    def test_mutable_defaults_not_shared(self):
        a, b = ResponseEnvelope(), ResponseEnvelope()
        a.errors.append({"code": "x"})
        a.meta["page"] = 1
        assert b.errors == []
        assert b.meta == {}

    def test_absent_is_falsy_singleton(self):
        assert not ABSENT
        assert ABSENT is type(ABSENT)()
        assert repr(ABSENT) == "ABSENT"


class TestFieldPresence:
    def test_data_omitted_when_absent(self):
        assert "data" not in ResponseEnvelope().to_dict()

    def test_data_none_is_included(self):
        body = ResponseEnvelope(data=None).to_dict()
        assert "data" in body
        assert body["data"] is None

    def test_falsy_data_is_included(self):
        for value in (0, "", [], {}, False):
            assert ResponseEnvelope(data=value).to_dict()["data"] == value

    def test_empty_errors_omitted(self):
        assert "errors" not in ResponseEnvelope(errors=[]).to_dict()

    def test_errors_kept_in_order(self):
        errors = [{"code": "a"}, {"code": "b"}, {"message": "c"}]
        assert ResponseEnvelope(errors=errors).to_dict()["errors"] == errors

    def test_empty_meta_and_headers_omitted(self):
        body = ResponseEnvelope(meta={}, headers={}).to_dict()
        assert "meta" not in body
        assert "headers" not in body

    def test_meta_and_headers_verbatim(self):
        headers = {"X-Request-Id": "abc", "Set-Cookie": ["a=1", "b=2"]}
        body = ResponseEnvelope(meta={"page": 2}, headers=headers).to_dict()
        assert body["meta"] == {"page": 2}
        assert body["headers"] == headers


class TestOrdering:
    def test_full_key_order(self):
        env = ResponseEnvelope(
            headers={"X": "1"}, meta={"m": 1}, errors=[{"e": 1}], data={"d": 1}, message="hi",
        )
        assert list(env.to_dict()) == ["status", "code", "message", "data", "errors", "meta", "headers"]

    def test_enum_values_serialize_plainly(self):
        env = ResponseEnvelope(status=ResponseStatus.PENDING, code=StatusCode.ACCEPTED)
        assert json.loads(json.dumps(env.to_dict())) == {"status": "pending", "code": 202, "message": ""}
        assert type(env.to_dict()["code"]) is int

    def test_arbitrary_status_is_not_validated(self):
        assert ResponseEnvelope(status="weird").to_dict()["status"] == "weird"


class TestPredicates:
    def test_each_predicate_matches_its_status(self):
        checks = {
            "success": "is_success",
            "error": "is_error",
            "pending": "is_pending",
            "rejected": "is_rejected",
            "failed": "is_failed",
        }
        for status, predicate in checks.items():
            env = ResponseEnvelope(status=status)
            for other in checks.values():
                assert getattr(env, other)() is (other == predicate)

    def test_predicates_accept_enum_members(self):
        assert ResponseEnvelope(status=ResponseStatus.REJECTED).is_rejected()


class TestStatusVocabulary:
    def test_response_status_values(self):
        assert [s.value for s in ResponseStatus] == ["success", "error", "pending", "rejected", "failed"]

    def test_status_code_members(self):
        assert StatusCode.OK == 200
        assert StatusCode.INTERNAL_SERVER_ERROR == 500

    def test_status_message_lookup(self):
        assert StatusMessage.for_code(404) == "Not Found"
        assert StatusMessage.for_code(StatusCode.OK) == "OK"
        assert StatusMessage.for_code(299) == ""

    def test_every_code_has_a_message(self):
        for member in StatusCode:
            assert StatusMessage.for_code(member)
