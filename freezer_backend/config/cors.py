"""CORS for the inventory frontend, which is served from its own origin."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .settings import settings

# Methods the /api routes answer to
ALLOWED_METHODS = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]


def cors_options(debug: bool, origins: list[str]) -> dict:
    """Any origin in debug mode, otherwise the CORS_ORIGINS list. No credentials: the API has no sessions."""
    return {
        "allow_origins": ["*"] if debug else list(origins),
        "allow_credentials": False,
        "allow_methods": ALLOWED_METHODS,
        "allow_headers": ["Content-Type"],
    }


def setup_cors(app: FastAPI) -> None:
    app.add_middleware(CORSMiddleware, **cors_options(settings.debug, settings.cors_origin_list))
