"""
Tests for the error taxonomy and its translation to external kinds.
"""

import pytest

from app.domain.aggregation.errors import (
    DownstreamMalformedError,
    DownstreamStatusError,
    DownstreamUnavailableError,
)
from app.domain.resources.errors import (
    InvalidRequestError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from app.shared.errors.taxonomy import ErrorKind, ServiceError
from app.shared.errors.translator import (
    ExternalKind,
    kind_for_downstream_status,
    translate,
)


class TestTranslate:
    """Tests for translate."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ErrorKind.INVALID, ExternalKind.BAD_REQUEST),
            (ErrorKind.NOT_FOUND, ExternalKind.NOT_FOUND),
            (ErrorKind.ALREADY_EXISTS, ExternalKind.SERVER_ERROR),
            (ErrorKind.DOWNSTREAM_UNAVAILABLE, ExternalKind.BAD_GATEWAY),
            (ErrorKind.DOWNSTREAM_NOT_FOUND, ExternalKind.NOT_FOUND),
            (ErrorKind.DOWNSTREAM_BAD_REQUEST, ExternalKind.BAD_REQUEST),
            (ErrorKind.DOWNSTREAM_FAILURE, ExternalKind.SERVER_ERROR),
            (ErrorKind.DOWNSTREAM_MALFORMED, ExternalKind.SERVER_ERROR),
            (ErrorKind.INTERNAL, ExternalKind.SERVER_ERROR),
        ],
    )
    def test_table(self, kind, expected):
        assert translate(kind) is expected

    def test_every_kind_is_mapped(self):
        for kind in ErrorKind:
            assert isinstance(translate(kind), ExternalKind)

    def test_unknown_defaults_to_server_error(self):
        assert translate(None) is ExternalKind.SERVER_ERROR

    def test_status_codes(self):
        assert ExternalKind.BAD_REQUEST.status_code == 400
        assert ExternalKind.NOT_FOUND.status_code == 404
        assert ExternalKind.SERVER_ERROR.status_code == 500
        assert ExternalKind.BAD_GATEWAY.status_code == 502


class TestDownstreamStatus:
    """Tests for kind_for_downstream_status."""

    @pytest.mark.parametrize(
        "status, kind",
        [
            (404, ErrorKind.DOWNSTREAM_NOT_FOUND),
            (400, ErrorKind.DOWNSTREAM_BAD_REQUEST),
            (401, ErrorKind.DOWNSTREAM_FAILURE),
            (500, ErrorKind.DOWNSTREAM_FAILURE),
            (503, ErrorKind.DOWNSTREAM_FAILURE),
        ],
    )
    def test_classification(self, status, kind):
        assert kind_for_downstream_status(status) is kind


class TestErrorKinds:
    """Each concrete error carries its kind."""

    def test_resource_errors(self):
        assert ResourceNotFoundError(1).kind is ErrorKind.NOT_FOUND
        assert ResourceAlreadyExistsError(1).kind is ErrorKind.ALREADY_EXISTS
        assert InvalidRequestError("bad").kind is ErrorKind.INVALID

    def test_downstream_errors(self):
        assert DownstreamUnavailableError("http://x", 3).kind is (
            ErrorKind.DOWNSTREAM_UNAVAILABLE
        )
        assert DownstreamStatusError("http://x", 404).kind is (
            ErrorKind.DOWNSTREAM_NOT_FOUND
        )
        assert DownstreamMalformedError("http://x", "no brand").kind is (
            ErrorKind.DOWNSTREAM_MALFORMED
        )

    def test_service_error_defaults_to_internal(self):
        assert ServiceError("boom").kind is ErrorKind.INTERNAL
        assert ServiceError("boom", ErrorKind.INVALID).kind is ErrorKind.INVALID

    def test_message_contains_id(self):
        assert "17" in str(ResourceNotFoundError(17))
