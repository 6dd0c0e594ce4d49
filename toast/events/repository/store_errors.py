import contextlib
import logging
from collections.abc import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from toast.errors import ConflictError, StoreUnavailableError

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Replace driver exceptions with ConflictError / StoreUnavailableError."""
    try:
        yield
    except IntegrityError as e:
        logger.warning("Concurrent write rejected during %s: %s", operation, e.orig)
        raise ConflictError() from e
    except SQLAlchemyError as e:
        logger.exception("Store failure during %s", operation)
        raise StoreUnavailableError() from e
