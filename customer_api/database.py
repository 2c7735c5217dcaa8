# database.py
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, SQLModel

# Registers the customer table on SQLModel.metadata
from customer_api.models import CustomerSQL  # noqa: F401


def make_engine(database_url: str, echo: bool = False):
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # An in-memory SQLite database lives only as long as its connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_db_and_tables(engine):
    SQLModel.metadata.create_all(engine)
