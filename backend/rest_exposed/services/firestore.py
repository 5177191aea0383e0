"""Firestore-backed option store (one document per option key)."""
from __future__ import annotations

import logging
from typing import Any, Optional

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from ..config import get_settings
from ..exceptions import OptionStoreError

logger = logging.getLogger(__name__)


class FirestoreOptionStore:
    """Thin wrapper around a Firestore collection of option documents.

    Each option is stored as `{collection}/{key}` with its payload under the
    `value` field, so list and numeric options keep their native types.
    """

    def __init__(self, collection: Optional[str] = None, client: Any = None) -> None:
        settings = get_settings()
        if client is not None:
            self.client = client
        # Use explicit database if provided in env, else default
        elif settings.FIRESTORE_DATABASE_ID:
            self.client = firestore.Client(
                project=settings.GCP_PROJECT or None,
                database=settings.FIRESTORE_DATABASE_ID,
            )
        else:
            self.client = firestore.Client()
        self._options = self.client.collection(collection or settings.OPTIONS_COLLECTION)

    def get(self, key: str, default: Any = None) -> Any:
        try:
            data = self._read(key)
        except RetryError as exc:
            logger.warning("Option read failed for %s: %s", key, exc.last_attempt.exception())
            raise OptionStoreError(f"Could not read option '{key}'") from exc
        if data is None or "value" not in data:
            return default
        return data["value"]

    def update_option(self, key: str, value: Any) -> None:
        self._options.document(key).set(
            {"value": value, "updatedAt": firestore.SERVER_TIMESTAMP},
            merge=True,
        )

    def delete_option(self, key: str) -> None:
        self._options.document(key).delete()

    @retry(
        retry=retry_if_exception_type(GoogleAPIError),
        stop=stop_after_attempt(3),
        wait=wait_random_exponential(multiplier=0.2, max=2),
    )
    def _read(self, key: str) -> Optional[dict]:
        snap = self._options.document(key).get()
        return (snap.to_dict() or {}) if snap.exists else None
