"""Process-wide cache for the reCAPTCHA API key stored in Secrets Manager."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from exceptions import SecretUnavailable

logger = logging.getLogger(__name__)


class ApiKeyCache:
  """Lazily fetches a secret once and keeps it for the life of the instance.

  There is no lock: two cold invocations racing on an empty cache both fetch
  and store the same value.
  """

  def __init__(self, secrets_client: Any, secret_id: str) -> None:
    self._client = secrets_client
    self._secret_id = secret_id
    self._value: str | None = None

  @property
  def cached(self) -> bool:
    return bool(self._value)

  def get(self) -> str:
    """Return the cached key, fetching it from Secrets Manager if needed."""
    if self._value:
      return self._value

    try:
      response = self._client.get_secret_value(SecretId=self._secret_id)
    except (BotoCoreError, ClientError) as e:
      raise SecretUnavailable(f"Could not read secret {self._secret_id}: {e}") from e

    value = response.get("SecretString")
    if not value:
      raise SecretUnavailable(f"Secret {self._secret_id} has no string value")

    logger.info("Fetched reCAPTCHA API key from %s", self._secret_id)
    self._value = value
    return value
