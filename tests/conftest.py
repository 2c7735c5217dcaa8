import os

# Must be set before customer_api.main is imported so the module-level app
# does not create a database file
os.environ.setdefault("CUSTOMER_API_REPOSITORY", "memory")

import pytest
from fastapi.testclient import TestClient

from customer_api.database import make_engine, create_db_and_tables
from customer_api.main import create_app
from customer_api.repository import InMemoryCustomerRepository, SQLModelCustomerRepository


@pytest.fixture
def memory_repo():
    return InMemoryCustomerRepository()


@pytest.fixture
def sql_repo():
    engine = make_engine("sqlite://")
    create_db_and_tables(engine)
    yield SQLModelCustomerRepository(engine)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def repo(request, memory_repo, sql_repo):
    return memory_repo if request.param == "memory" else sql_repo


@pytest.fixture
def client(memory_repo):
    return TestClient(create_app(memory_repo))
