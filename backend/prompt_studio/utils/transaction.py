from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from prompt_studio.extensions import db


@contextmanager
def transactional(error_cls=None, message="Database operation failed"):
    """
    Context manager for database transactions.

    When ``error_cls`` is given, SQLAlchemy errors are rolled back and
    re-raised as that error type so callers only ever see domain errors.
    """
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        if error_cls is None:
            raise
        raise error_cls(message) from exc
    except Exception:
        db.session.rollback()
        raise
