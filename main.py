from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from config import settings
from firebase_client import lifespan
from routes import admin_routes, auth_routes, customer_routes, director_routes
import logging

logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return JSONResponse(status_code=400, content={"error": f"{loc}: {first.get('msg', 'Invalid request')}"})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(store=None) -> FastAPI:
    """Build the application.

    Pass ``store`` to use it instead of connecting to Firestore at startup.
    """
    app = FastAPI(
        title="Sri Travels API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    # Include routers
    app.include_router(auth_routes.router, tags=["Authentication"])
    app.include_router(customer_routes.router, tags=["Customer"])
    app.include_router(admin_routes.router, tags=["Admin"])
    app.include_router(director_routes.router, tags=["Director"])

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    print(f"PORT {settings.PORT}")
    print(f"DATABASE_URL {settings.DATABASE_URL}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
