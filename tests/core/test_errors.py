"""Error Hierarchy — verifies codes, statuses and the REST error envelope.

Tests:
    - Each domain error carries its code, category and HTTP status
    - to_response() exposes code, message and only the context ids that are set
    - log_fields() feeds the structured error log line
"""

from dating_api.core.errors import (
    BusinessRuleError, DatingError, DuplicateLikeError, ErrorCategory,
    ErrorContext, ForbiddenError, PersistenceError, ResourceNotFoundError,
    UnknownRecipientError,
)


def test_not_found_is_404_with_resource_id():
    err = ResourceNotFoundError("User", 7)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.context.resource_id == 7
    assert "User '7' not found" == err.message


def test_forbidden_is_403():
    err = ForbiddenError("nope")
    assert err.http_status == 403
    assert err.category is ErrorCategory.PERMISSION


def test_duplicate_like_message():
    err = DuplicateLikeError(1, 2)
    assert err.http_status == 400
    assert err.code == "DUPLICATE_LIKE"
    assert err.message == "You already like this user"
    assert (err.liker_id, err.likee_id) == (1, 2)


def test_unknown_recipient_is_404():
    err = UnknownRecipientError(99)
    assert err.http_status == 404
    assert err.code == "UNKNOWN_RECIPIENT"
    assert err.recipient_id == 99


def test_business_rule_keeps_custom_code():
    err = BusinessRuleError("You cannot delete the main photo", "MAIN_PHOTO_DELETE")
    assert err.code == "MAIN_PHOTO_DELETE"
    assert err.http_status == 400


def test_persistence_error_names_operation():
    err = PersistenceError("no rows changed", "like")
    assert err.http_status == 503
    assert err.message == "Saving like failed: no rows changed"
    assert err.category is ErrorCategory.DATABASE


def test_all_errors_share_base():
    for err in (
        ResourceNotFoundError("User", 1), ForbiddenError("x"),
        DuplicateLikeError(1, 2), UnknownRecipientError(3),
        BusinessRuleError("x", "X"), PersistenceError("x", "y"),
    ):
        assert isinstance(err, DatingError)


def test_to_response_envelope():
    err = ForbiddenError("nope", ErrorContext(user_id=1, resource_id=2))
    body = err.to_response()["error"]
    assert body["code"] == "FORBIDDEN"
    assert body["message"] == "nope"
    assert body["category"] == "permission"
    assert body["severity"] == "warning"
    assert body["context"] == {"user_id": 1, "resource_id": 2}
    assert "timestamp" in body


def test_to_response_omits_unset_context():
    body = ForbiddenError("nope").to_response()["error"]
    assert "context" not in body


def test_log_fields_carry_code_and_ids():
    err = UnknownRecipientError(99, ErrorContext(user_id=4))
    assert err.log_fields() == {
        "error_code": "UNKNOWN_RECIPIENT", "user_id": 4, "resource_id": 99,
    }


def test_business_rule_code_is_per_instance():
    BusinessRuleError("x", "MAIN_PHOTO_DELETE")
    assert BusinessRuleError("y", "MAIN_PHOTO_ALREADY").code == "MAIN_PHOTO_ALREADY"
