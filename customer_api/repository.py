# repository.py
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlmodel import Session, select

from customer_api.database import make_engine, create_db_and_tables
from customer_api.models import Customer, CustomerSQL

log = logging.getLogger(__name__)

# ==============================================================================
# --- REPOSITORY INTERFACE ---
# ==============================================================================

class BaseCustomerRepository(ABC):
    @abstractmethod
    def find_all(self) -> List[Customer]:
        """Return every stored customer ordered by id."""

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        """Return the customer with this id, or None."""

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """
        Insert or update a customer.

        A customer without an id, or with an id the store does not know, is
        inserted; otherwise name and email of the stored record are
        overwritten. The returned record carries the persisted id.
        """

    @abstractmethod
    def delete_by_id(self, customer_id: int) -> None:
        """Remove the customer with this id. Unknown ids are ignored."""

# ==============================================================================
# --- CUSTOMER REPOSITORIES ---
# ==============================================================================

## In-Memory Customer Repository
class InMemoryCustomerRepository(BaseCustomerRepository):
    def __init__(self):
        self.customers: Dict[int, Customer] = {}
        self.next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> List[Customer]:
        with self._lock:
            return [self.customers[cid].model_copy() for cid in sorted(self.customers)]

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        with self._lock:
            customer = self.customers.get(customer_id)
            return customer.model_copy() if customer else None

    def save(self, customer: Customer) -> Customer:
        with self._lock:
            stored = customer.model_copy()
            if stored.id is None:
                stored.id = self.next_id
            # Keep the counter ahead of explicitly supplied ids
            self.next_id = max(self.next_id, stored.id + 1)
            self.customers[stored.id] = stored
            return stored.model_copy()

    def delete_by_id(self, customer_id: int) -> None:
        with self._lock:
            self.customers.pop(customer_id, None)

## SQLModel Customer Repository
class SQLModelCustomerRepository(BaseCustomerRepository):
    def __init__(self, engine):
        self.engine = engine

    def find_all(self) -> List[Customer]:
        with Session(self.engine) as session:
            results = session.exec(select(CustomerSQL).order_by(CustomerSQL.id)).all()
            return [Customer.from_sql(c) for c in results]

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        with Session(self.engine) as session:
            customer_sql = session.get(CustomerSQL, customer_id)
            if customer_sql:
                return Customer.from_sql(customer_sql)
        return None

    def save(self, customer: Customer) -> Customer:
        with Session(self.engine) as session:
            customer_sql = None
            if customer.id is not None:
                customer_sql = session.get(CustomerSQL, customer.id)
            if customer_sql is None:
                customer_sql = customer.to_sql()
            else:
                customer_sql.name = customer.name
                customer_sql.email = customer.email
            session.add(customer_sql)
            session.commit()
            session.refresh(customer_sql)
            return Customer.from_sql(customer_sql)

    def delete_by_id(self, customer_id: int) -> None:
        with Session(self.engine) as session:
            customer_sql = session.get(CustomerSQL, customer_id)
            if not customer_sql:
                return
            session.delete(customer_sql)
            session.commit()


def build_repository(backend: str, database_url: Optional[str] = None, echo: bool = False) -> BaseCustomerRepository:
    if backend == "memory":
        log.info("Using in-memory customer repository")
        return InMemoryCustomerRepository()
    if backend == "sql":
        if not database_url:
            raise ValueError("A database URL is required for the sql repository")
        engine = make_engine(database_url, echo=echo)
        create_db_and_tables(engine)
        log.info("Using SQL customer repository at %s", engine.url.render_as_string(hide_password=True))
        return SQLModelCustomerRepository(engine)
    raise ValueError(f"Unknown repository backend: {backend!r}")
