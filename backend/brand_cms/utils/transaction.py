from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from brand_cms.extensions import db
from brand_cms.domain.exceptions import TransientIOFailure

@contextmanager
def transactional():
    """Context manager for database transactions."""
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise TransientIOFailure("Storage is unavailable, please retry.") from exc
    except Exception:
        db.session.rollback()
        raise
