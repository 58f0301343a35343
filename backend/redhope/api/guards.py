"""Request Guards: bearer-token presence check and per-operation failure wrapping.

Invariants:
    - require_token only checks that a non-empty bearer token is present; it never verifies it
    - require_token is a no-op unless settings.require_auth_token is enabled
    - operation_guard lets 4xx RedHopeErrors through unchanged and turns every other
      failure into OperationFailedError carrying the operation's fixed message
    - Store failures are classified as DatabaseError first; the log record and the
      error context carry its code and operation
"""

import logging
from contextlib import contextmanager

from fastapi import Depends, Header
from sqlalchemy.exc import SQLAlchemyError

from redhope.config import Settings, get_settings
from redhope.core.errors import (
    ErrorContext, MissingTokenError, OperationFailedError, RedHopeError,
)
from redhope.infrastructure.database import classify_database_error

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "bearer "


async def require_token(
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> str | None:
    if not settings.require_auth_token:
        return None
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        raise MissingTokenError()
    token = authorization[len(_BEARER_PREFIX):].strip()
    if not token:
        raise MissingTokenError()
    return token


@contextmanager
def operation_guard(message: str):
    """Run one route operation; collaborator failures surface as `message`."""
    try:
        yield
    except RedHopeError as e:
        if e.http_status < 500:
            raise
        logger.error(
            f"{message}: {e.message}",
            extra={"error_code": e.code, "operation": message},
        )
        raise OperationFailedError(message, ErrorContext(operation=message))
    except SQLAlchemyError as e:
        db_error = classify_database_error(e)
        logger.error(
            f"{message}: {db_error.message}",
            exc_info=True,
            extra={"error_code": db_error.code, "operation": message},
        )
        raise OperationFailedError(
            message,
            ErrorContext(
                operation=message,
                debug_info={
                    "cause": db_error.code,
                    "db_operation": db_error.operation,
                },
            ),
        ) from e
    except Exception as e:
        logger.error(
            f"{message}: {e}", exc_info=True, extra={"operation": message},
        )
        raise OperationFailedError(message, ErrorContext(operation=message))
