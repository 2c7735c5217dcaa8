# endpoint.py
import logging
from typing import List, Union

from pydantic import BaseModel

from customer_api.models import Customer
from customer_api.repository import BaseCustomerRepository

log = logging.getLogger(__name__)


class CustomerNotFound(BaseModel):
    """Lookup result for an id the repository does not hold."""
    customer_id: int

    @property
    def message(self) -> str:
        return f"Customer not found with id: {self.customer_id}"


GetCustomerResult = Union[Customer, CustomerNotFound]


class CustomerEndpoint:
    """
    Customer operations behind the HTTP routes.

    Every operation is a single repository call. Lookups report a missing
    customer as a CustomerNotFound value instead of raising, leaving the
    choice of status code to the caller.
    """

    def __init__(self, repository: BaseCustomerRepository):
        self.repository = repository

    def list_customers(self) -> List[Customer]:
        customers = self.repository.find_all()
        log.debug("Listing %d customers", len(customers))
        return customers

    def get_customer(self, customer_id: int) -> GetCustomerResult:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            log.info("Customer %s not found", customer_id)
            return CustomerNotFound(customer_id=customer_id)
        return customer

    def create_customer(self, customer: Customer) -> Customer:
        saved = self.repository.save(customer)
        log.debug("Saved customer %s", saved.id)
        return saved

    def delete_customer(self, customer_id: int) -> None:
        self.repository.delete_by_id(customer_id)
        log.debug("Deleted customer %s (if present)", customer_id)
