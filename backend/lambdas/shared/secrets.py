"""
Resolve the Exa API key from the inline environment value or Secrets Manager.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import ExaSettings
from .exceptions import ExternalServiceError


LOGGER = logging.getLogger(__name__)

_SECRET_KEYS = ("api_key", "EXA_API_KEY", "token")


def _parse_secret_string(secret_string: str) -> str:
    secret_string = secret_string.strip()
    if secret_string.startswith("{"):
        try:
            parsed = json.loads(secret_string)
        except json.JSONDecodeError:
            parsed = {}
        for key in _SECRET_KEYS:
            candidate = parsed.get(key)
            if isinstance(candidate, str) and candidate.strip():
                return candidate.strip()
        return ""
    return secret_string


def resolve_api_key(settings: ExaSettings, *, secrets_manager_client=None) -> Optional[str]:
    """
    Return the Exa API key, or ``None`` when nothing is configured.

    The inline ``EXA_API_KEY`` value wins; otherwise the secret named by
    ``EXA_API_KEY_SECRET_NAME`` is read. An empty secret counts as missing.
    """
    token = (settings.api_key or "").strip()
    if token:
        return token

    if not settings.api_key_secret_name:
        return None

    client = secrets_manager_client or boto3.client("secretsmanager", region_name=settings.region)
    try:
        response = client.get_secret_value(SecretId=settings.api_key_secret_name)
    except (ClientError, BotoCoreError) as exc:
        raise ExternalServiceError(f"Failed to load Exa API key secret: {exc}") from exc

    api_key = _parse_secret_string(response.get("SecretString") or "")
    if not api_key:
        LOGGER.warning("Secret %s did not contain an Exa API key", settings.api_key_secret_name)
        return None
    return api_key
