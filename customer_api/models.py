# models.py
from typing import Optional

from pydantic import BaseModel, Field
from sqlmodel import SQLModel
from sqlmodel import Field as SQLField


# --- CUSTOMER ---
class Customer(BaseModel):
    """
    API-facing customer record.

    Identity is the storage-assigned id: two customers are equal only when
    both have been persisted and carry the same id. Name and email play no
    part in equality.
    """
    id: Optional[int] = Field(None, description="Identifier assigned by the repository on first save")
    name: Optional[str] = Field(None, description="Customer name")
    email: Optional[str] = Field(None, description="Customer email address")

    def __eq__(self, other):
        if not isinstance(other, Customer):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        if self.id is None:
            return object.__hash__(self)
        return hash(self.id)

    def __str__(self):
        return f"Customer(id={self.id}, name={self.name}, email={self.email})"

    @classmethod
    def from_sql(cls, row: "CustomerSQL") -> "Customer":
        return cls(id=row.id, name=row.name, email=row.email)

    def to_sql(self) -> "CustomerSQL":
        return CustomerSQL(id=self.id, name=self.name, email=self.email)


class CustomerSQL(SQLModel, table=True):
    __tablename__ = "customer"

    id: Optional[int] = SQLField(default=None, primary_key=True)
    name: Optional[str] = None
    email: Optional[str] = None
