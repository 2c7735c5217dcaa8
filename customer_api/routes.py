# routes.py
from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response
from fastapi.responses import PlainTextResponse

from customer_api.endpoint import CustomerEndpoint, CustomerNotFound
from customer_api.models import Customer

router = APIRouter(prefix="/customers", tags=["Customers"])

# Ids are stored as signed 64-bit integers
MIN_CUSTOMER_ID = -(2**63)
MAX_CUSTOMER_ID = 2**63 - 1


# The endpoint is wired once in create_app and shared by every request
def get_customer_endpoint(request: Request) -> CustomerEndpoint:
    return request.app.state.customer_endpoint

# ==============================================================================
# --- CUSTOMER ENDPOINTS ---
# ==============================================================================

@router.get("", response_model=List[Customer])
def list_customers(endpoint: CustomerEndpoint = Depends(get_customer_endpoint)):
    return endpoint.list_customers()

@router.get(
    "/{customer_id}",
    response_model=Customer,
    responses={404: {"description": "Customer not found", "content": {"text/plain": {}}}},
)
def get_customer(
    customer_id: int = Path(..., ge=MIN_CUSTOMER_ID, le=MAX_CUSTOMER_ID),
    endpoint: CustomerEndpoint = Depends(get_customer_endpoint),
):
    result = endpoint.get_customer(customer_id)
    if isinstance(result, CustomerNotFound):
        return PlainTextResponse(result.message, status_code=404)
    return result

@router.post("", response_model=Customer)
def create_customer(customer: Customer, endpoint: CustomerEndpoint = Depends(get_customer_endpoint)):
    return endpoint.create_customer(customer)

@router.delete("/{customer_id}")
def delete_customer(
    customer_id: int = Path(..., ge=MIN_CUSTOMER_ID, le=MAX_CUSTOMER_ID),
    endpoint: CustomerEndpoint = Depends(get_customer_endpoint),
):
    endpoint.delete_customer(customer_id)
    return Response(status_code=200)
