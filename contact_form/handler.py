"""Lambda entry point relaying contact form submissions to email.

Each invocation runs three stages in order: resolve the reCAPTCHA API key,
verify the submitted token, send the email. Any failure ends the invocation
with a JSON response; nothing is retried.
"""

import base64
import json
import logging
from typing import Any

import boto3
import requests

import recaptcha
from credentials import ApiKeyCache
from exceptions import ContactFormError
from mailer import send_submission
from models import RelayResponse, Submission
from settings import ContactFormSettings

settings = ContactFormSettings.from_env()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

# Created once per instance and reused while the instance stays warm
secrets_client = boto3.client("secretsmanager", region_name=settings.secrets_region)
ses = boto3.client("ses", region_name=settings.ses_region)
api_key_cache = ApiKeyCache(secrets_client, settings.recaptcha_api_key_secret_name)


def parse_event(event: dict[str, Any]) -> Submission:
  """Extract the submission from a Function URL, API Gateway or direct event.

  Raises:
    ValueError: If a string body is not valid JSON.
  """
  body = event.get("body")

  if isinstance(body, str):
    if event.get("isBase64Encoded"):
      body = base64.b64decode(body).decode("utf-8")
    payload = json.loads(body)
  elif body is not None:
    payload = body
  else:
    payload = event

  if not isinstance(payload, dict):
    raise ValueError("Request body must be a JSON object")

  return Submission.from_payload(payload)


def relay(
  submission: Submission,
  *,
  config: ContactFormSettings,
  key_cache: ApiKeyCache,
  ses_client: Any,
  session: requests.Session | None = None,
) -> RelayResponse:
  """Verify a submission and forward it by email."""
  try:
    api_key = key_cache.get()
    assessment = recaptcha.create_assessment(
      submission.verification_token,
      site_key=config.recaptcha_site_key,
      project_id=config.recaptcha_project_id,
      api_key=api_key,
      timeout=config.recaptcha_timeout_seconds,
      session=session,
    )
    result = recaptcha.interpret_assessment(assessment)
    recaptcha.enforce(result, config.score_threshold)

    send_submission(
      ses_client,
      submission,
      sender=config.sender_email,
      receiver=config.receiver_email,
      subject=config.email_subject,
    )
  except ContactFormError as e:
    if e.status_code >= 500:
      logger.exception("Contact form relay failed: %s", e.reason)
    else:
      logger.info("Contact form submission rejected: %s", e)
    return RelayResponse.failed(e.status_code, e.reason)

  return RelayResponse.ok()


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
  """Handle a contact form POST."""
  logger.info("Received event: %s", json.dumps(event, default=str))

  submission = parse_event(event)
  response = relay(
    submission,
    config=settings,
    key_cache=api_key_cache,
    ses_client=ses,
  )
  return response.to_lambda()
