"""Credential lookup from AWS Systems Manager Parameter Store."""
from __future__ import annotations

import logging
from typing import Any

import boto3

logger = logging.getLogger(__name__)


class ParameterStore:
    """Reads decrypted SSM parameters, caching each value for the life of the store."""

    def __init__(self, client: Any = None) -> None:
        self._client = client
        self._cache: dict[str, str] = {}

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = boto3.client("ssm")
        return self._client

    def get(self, name: str) -> str:
        if not name:
            raise ValueError("Parameter name cannot be empty")
        if name not in self._cache:
            try:
                response = self.client.get_parameter(Name=name, WithDecryption=True)
            except Exception:
                logger.exception("Failed to read SSM parameter %s", name)
                raise
            self._cache[name] = response["Parameter"]["Value"]
        return self._cache[name]
