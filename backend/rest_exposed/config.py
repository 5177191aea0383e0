"""Application settings and configuration helpers."""
from __future__ import annotations

import os
from functools import lru_cache
from typing import List
from dotenv import load_dotenv, find_dotenv


class Settings:
    """Runtime configuration loaded from environment variables.

    Defaults are suitable for local development: options live in memory and
    nothing is exposed until preferences are stored.
    """

    APP_NAME: str = "REST API Exposed"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # CORS
    CORS_ORIGINS: List[str]

    # Option store
    OPTIONS_BACKEND: str
    OPTIONS_COLLECTION: str
    OPTION_NAMESPACE: str

    # GCP
    GCP_PROJECT: str
    FIRESTORE_DATABASE_ID: str

    # Exposure
    INIT_PRIORITY: int
    REST_CONTROLLER_CLASS: str
    CUSTOM_TYPES: List[str]

    # Logging
    LOG_LEVEL: str

    def __init__(self) -> None:
        # Load .env once (supports parent directories)
        load_dotenv(find_dotenv(), override=False)
        self.CORS_ORIGINS = self._get_list("CORS_ORIGINS", default="*") or ["*"]

        self.OPTIONS_BACKEND = os.getenv("OPTIONS_BACKEND", "memory").strip().lower()
        self.OPTIONS_COLLECTION = os.getenv("OPTIONS_COLLECTION", "options")
        self.OPTION_NAMESPACE = os.getenv("OPTION_NAMESPACE", "rest_api_exposed_post_types")

        self.GCP_PROJECT = os.getenv("GCP_PROJECT", os.getenv("GOOGLE_CLOUD_PROJECT", ""))
        self.FIRESTORE_DATABASE_ID = os.getenv("FIRESTORE_DATABASE_ID", "(default)")

        # Late enough that every type registration on init has completed
        self.INIT_PRIORITY = int(os.getenv("INIT_PRIORITY", "30"))
        self.REST_CONTROLLER_CLASS = os.getenv("REST_CONTROLLER_CLASS", "WP_REST_Posts_Controller")
        self.CUSTOM_TYPES = self._get_list("CUSTOM_TYPES", default="")

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def _get_list(name: str, default: str = "") -> List[str]:
        raw = os.getenv(name, default)
        return [item.strip() for item in raw.split(",") if item.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
