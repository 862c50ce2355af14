# ranttrack/models/__init__.py
from ranttrack.db.session import Base, engine

# Import model modules so SQLAlchemy registers all mappers.
from . import custom_lemma  # noqa: F401
from .custom_lemma import CustomLemma


def init_db() -> None:
    """Create tables if they don't exist."""
    Base.metadata.create_all(bind=engine)


__all__ = ["CustomLemma", "init_db"]
