# main.py
import logging
from typing import Optional

from fastapi import FastAPI

from customer_api import config, routes
from customer_api.endpoint import CustomerEndpoint
from customer_api.repository import BaseCustomerRepository, build_repository

log = logging.getLogger(__name__)


def create_app(repository: Optional[BaseCustomerRepository] = None) -> FastAPI:
    """
    Build the application around a customer repository.

    Without an explicit repository one is built from the CUSTOMER_API_*
    settings in config.py. With the default "sql" backend that opens (and
    creates, if missing) the configured database and its tables. Importing
    this module runs create_app() for the module-level `app`, so a plain
    import creates customers.db in the working directory unless
    CUSTOMER_API_REPOSITORY or CUSTOMER_API_DATABASE_URL say otherwise.
    """
    config.configure_logging()
    if repository is None:
        repository = build_repository(
            config.REPOSITORY_BACKEND,
            database_url=config.DATABASE_URL,
            echo=config.SQL_ECHO,
        )

    app = FastAPI(title="Customer API")
    app.state.customer_endpoint = CustomerEndpoint(repository)
    app.include_router(routes.router)

    @app.get("/")
    def read_root():
        return {"message": "Customer API is running"}

    log.info("Customer API ready with %s", type(repository).__name__)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
