import logging
from fastapi import FastAPI

from app.core.logging import setup_logging
from app.core.config import Settings, settings
from app.diagnosis.handler import DiagnosisHandler

log = logging.getLogger("api")

CATCH_ALL_PATH = "/{path:path}"

def create_app(config: Settings = settings) -> FastAPI:
    app = FastAPI(title="Equipment Diagnosis Server", version="0.1")
    handler = DiagnosisHandler(require_auth=config.require_auth)

    @app.on_event("startup")
    def startup():
        setup_logging(config.log_level)
        log.info("Diagnosis require_auth=%s rules=%d", config.require_auth, len(handler.rules))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Registered last: every other path and method goes to the handler.
    # No `methods` and an ASGI endpoint, so Starlette never answers 405 itself.
    app.add_route(CATCH_ALL_PATH, handler, include_in_schema=False)

    app.state.diagnosis_handler = handler
    return app

app = create_app(settings)
