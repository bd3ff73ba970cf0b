"""
FastAPI application for the Hacker News GraphQL service.

This module initializes and configures the FastAPI application that serves
the GraphQL endpoint and a health check.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from hn_graphql.config.settings import settings
from hn_graphql.core.fetcher import ItemFetcher
from hn_graphql.core.hn_client import HackerNewsClient
from hn_graphql.schema import HNContext, schema
from hn_graphql.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


async def get_context(request: Request) -> HNContext:
    """Build the GraphQL context from the fetcher opened during app startup."""
    return HNContext(fetcher=request.app.state.fetcher)


def create_app(fetcher: Optional[ItemFetcher] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        fetcher: Item fetcher to serve from. When omitted, a
            ``HackerNewsClient`` is opened for the lifetime of the app.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Open the item fetcher on startup and close it on shutdown."""
        setup_logging()
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

        if fetcher is not None:
            app.state.fetcher = fetcher
            yield
        else:
            async with HackerNewsClient() as client:
                app.state.fetcher = client
                yield

        logger.info("Shutting down application")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Read-only GraphQL API over the Hacker News v0 API.",
        debug=settings.DEBUG,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "graphql",
                "description": "GraphQL queries over Hacker News items and users"
            },
            {
                "name": "health",
                "description": "Health check and monitoring"
            }
        ]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    graphql_app = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.GRAPHIQL_ENABLED else None,
    )
    app.include_router(graphql_app, prefix=settings.GRAPHQL_PATH, tags=["graphql"])

    @app.get("/health", tags=["health"], summary="Health Check")
    async def health_check():
        """
        Health check endpoint.

        Returns:
            dict: Service status, version and current timestamp.
        """
        return {
            "status": "healthy",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "hn_api_base_url": settings.HN_API_BASE_URL,
        }

    return app


# Create the application instance
app = create_app()
