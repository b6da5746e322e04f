import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import API_TITLE, API_VERSION, HOST, PORT
from context import AppContext, create_context
from exceptions import InvalidStateError, UnknownSectionError, ValidationFailedError
from logging_config import configure_logging
from routers import auth_router, dashboard_router, patients_router, users_router

logger = logging.getLogger(__name__)


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    configure_logging()
    app = FastAPI(title=API_TITLE, version=API_VERSION)

    # One context per process: stores, session and navigation shell
    app.state.context = context or create_context()

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(UnknownSectionError)
    async def unknown_section_handler(request: Request, exc: UnknownSectionError):
        return JSONResponse(status_code=404, content={"detail": str(exc), "available": exc.available})

    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(request: Request, exc: ValidationFailedError):
        return JSONResponse(status_code=422, content={"detail": exc.messages})

    # Include routers
    app.include_router(auth_router.router)
    app.include_router(users_router.router)
    app.include_router(patients_router.router)
    app.include_router(dashboard_router.router)

    # Root endpoint
    @app.get("/")
    def root():
        return {
            "message": "Hospital Dashboards API",
            "docs": "/docs",
            "endpoints": {
                "login": "POST /auth/login",
                "signup": "POST /auth/signup",
                "logout": "POST /auth/logout",
                "dashboard": "GET /dashboard",
                "show_section": "POST /dashboard/sections/{name}",
                "patients": "GET /patients?q=",
                "add_record": "POST /patients/{patient_id}/records",
                "export": "POST /patients/{patient_id}/export",
                "users": "GET /users",
                "current_user": "GET /users/me"
            },
            "default_users": {
                "admin": "admin123",
                "doctor1": "doctor123",
                "patient1": "patient123",
                "lab1": "lab123",
                "visitor": "visitor123"
            }
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
