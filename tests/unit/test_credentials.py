"""Tests for the reCAPTCHA API key cache."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from credentials import ApiKeyCache
from exceptions import SecretUnavailable


def _client_error() -> ClientError:
  return ClientError(
    {"Error": {"Code": "ResourceNotFoundException", "Message": "not found"}},
    "GetSecretValue",
  )


class TestApiKeyCache:
  """Tests for ApiKeyCache."""

  def test_fetches_on_first_use(self, secrets_client: MagicMock) -> None:
    """The first call reads the secret."""
    cache = ApiKeyCache(secrets_client, "my-secret")

    assert cache.get() == "api-key-123"
    secrets_client.get_secret_value.assert_called_once_with(SecretId="my-secret")

  def test_reuses_cached_value(self, secrets_client: MagicMock) -> None:
    """Later calls do not hit Secrets Manager."""
    cache = ApiKeyCache(secrets_client, "my-secret")

    for _ in range(5):
      cache.get()

    assert secrets_client.get_secret_value.call_count == 1
    assert cache.cached

  def test_failure_not_cached(self, secrets_client: MagicMock) -> None:
    """A failed fetch is retried on the next call."""
    secrets_client.get_secret_value.side_effect = [
      _client_error(),
      {"SecretString": "api-key-123"},
    ]
    cache = ApiKeyCache(secrets_client, "my-secret")

    with pytest.raises(SecretUnavailable):
      cache.get()
    assert not cache.cached

    assert cache.get() == "api-key-123"
    assert secrets_client.get_secret_value.call_count == 2

  def test_connection_error(self) -> None:
    """Transport errors are reported as an unavailable secret."""
    client = MagicMock()
    client.get_secret_value.side_effect = EndpointConnectionError(
      endpoint_url="https://secretsmanager.us-east-1.amazonaws.com"
    )

    with pytest.raises(SecretUnavailable) as exc_info:
      ApiKeyCache(client, "my-secret").get()

    assert exc_info.value.status_code == 500
    assert exc_info.value.reason == "reCAPTCHA service error"

  def test_binary_secret_rejected(self) -> None:
    """A secret without a string value is not usable."""
    client = MagicMock()
    client.get_secret_value.return_value = {"SecretBinary": b"\x00"}
    cache = ApiKeyCache(client, "my-secret")

    with pytest.raises(SecretUnavailable):
      cache.get()
    assert not cache.cached
