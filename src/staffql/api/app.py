"""
Main FastAPI application for the staffql service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth.passwords import PasswordHasher
from ..auth.tokens import TokenIssuer
from ..config import Settings, get_settings
from ..database.base import Repository
from ..database.factory import create_repository
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, repository: Repository | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted
        repository: Storage backend; built from ``settings`` when omitted

    Raises:
        ConfigurationError: If required settings (such as the signing secret) are missing
    """
    settings = settings or get_settings()
    configure_logging(debug=settings.debug, level=settings.log_level)

    # Fail before anything is mounted if the server cannot run
    settings.validate_startup()

    repository = repository or create_repository(settings)
    password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    token_issuer = TokenIssuer(
        secret_key=settings.jwt_secret or "",
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expiry_seconds=settings.token_expiry_seconds,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting staffql API...", database_backend=settings.database_backend)
        await repository.connect()
        logger.info("Database initialized")

        yield

        logger.info("Shutting down staffql API...")
        await repository.close()

    app = FastAPI(
        title="staffql API",
        description="GraphQL API for user accounts and employee records",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.repository = repository
    app.state.password_hasher = password_hasher
    app.state.token_issuer = token_issuer

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        database_ok = await repository.ping()
        return {
            "status": "healthy" if database_ok else "degraded",
            "version": __version__,
            "database": "ok" if database_ok else "unreachable",
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized", endpoint="/graphql", graphiql=settings.graphiql)

    return app
