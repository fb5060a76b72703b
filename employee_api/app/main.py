"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application, sets up logging,
builds the employee store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn employee_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.employee_store import EmployeeStore


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[EmployeeStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use.  Defaults to the module level settings read
        from the environment.
    store : Optional[EmployeeStore]
        Store to serve.  When omitted a new store is seeded according
        to ``app_settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    # Initialise logging before anything else so that the store can
    # log its seeding.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    if store is None:
        store = EmployeeStore.seeded(app_settings.seed_count, app_settings.seed_department)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.employee_store = store

    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
