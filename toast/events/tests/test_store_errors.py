import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from toast.errors import ConflictError, EventNotFoundError, StoreUnavailableError
from toast.events.repository.store_errors import translate_store_errors


def test_integrity_error_becomes_conflict():
    with pytest.raises(ConflictError):
        with translate_store_errors("test"):
            raise IntegrityError("INSERT", {}, Exception("duplicate key"))


def test_other_store_errors_become_unavailable():
    with pytest.raises(StoreUnavailableError) as exc_info:
        with translate_store_errors("test"):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    assert "connection refused" not in exc_info.value.message


def test_domain_errors_pass_through():
    with pytest.raises(EventNotFoundError):
        with translate_store_errors("test"):
            raise EventNotFoundError()
