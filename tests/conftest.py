"""Pytest fixtures for contact form tests."""

import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import aws_cdk as cdk
import pytest

# Lambda modules import each other as top-level modules
sys.path.insert(0, str(Path(__file__).parent.parent / "contact_form"))

from infrastructure.config import ContactFormConfig  # noqa: E402
from settings import ContactFormSettings  # noqa: E402


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App that skips Docker bundling."""
  return cdk.App(context={"aws:cdk:bundling-stacks": []})


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(
    app,
    "TestStack",
    env=cdk.Environment(account="123456789012", region="us-east-1"),
  )


@pytest.fixture
def form_config() -> ContactFormConfig:
  """Deployment configuration for example.com."""
  return ContactFormConfig(
    domain="example.com",
    owner="Test Owner",
    email="owner@example.com",
    sender_email="noreply@example.com",
    receiver_email="inbox@example.com",
    recaptcha_site_key="site-key",
    recaptcha_project_id="test-project",
    recaptcha_api_key_secret_name="example-com/recaptcha-api-key",
  )


@pytest.fixture
def settings() -> ContactFormSettings:
  """Function settings as the Lambda would read them."""
  return ContactFormSettings(
    sender_email="noreply@example.com",
    receiver_email="inbox@example.com",
    recaptcha_site_key="site-key",
    recaptcha_project_id="test-project",
    recaptcha_api_key_secret_name="example-com/recaptcha-api-key",
  )


@pytest.fixture
def secrets_client() -> MagicMock:
  """Secrets Manager client returning a fixed API key."""
  client = MagicMock()
  client.get_secret_value.return_value = {"SecretString": "api-key-123"}
  return client


@pytest.fixture
def ses_client() -> MagicMock:
  """SES client accepting every message."""
  client = MagicMock()
  client.send_email.return_value = {"MessageId": "message-123"}
  return client


def _assessment(
  valid: bool = True, action: str = "contact_submit", score: float | None = 0.9
) -> dict[str, Any]:
  data: dict[str, Any] = {"tokenProperties": {"valid": valid, "action": action}}
  if score is not None:
    data["riskAnalysis"] = {"score": score}
  return data


@pytest.fixture
def make_assessment() -> Any:
  """Factory for a reCAPTCHA Enterprise assessment response."""
  return _assessment


@pytest.fixture
def make_session() -> Any:
  """Factory for an HTTP session whose POST returns the given JSON."""

  def factory(data: Any = None, exc: Exception | None = None) -> MagicMock:
    session = MagicMock()
    if exc is not None:
      session.post.side_effect = exc
    else:
      session.post.return_value.json.return_value = (
        _assessment() if data is None else data
      )
    return session

  return factory
