import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api import feedback
from .config.log_config import configure_logging
from .config.settings import settings
from .models.database import engine, Base
from .schemas.feedback import ErrorResponse

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Feedback Service",
    description="CRUD API for feedback records with a text and a rating",
    version="1.0.0",
)

@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("Feedback service started, tables ensured")

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    body = ErrorResponse(status="fail", message=message or "Invalid request")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

app.include_router(
    feedback.router,
    prefix=settings.API_PREFIX,
    tags=["Feedback"],
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
