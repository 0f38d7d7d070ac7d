"""Environment configuration for the contact form function."""

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_SUBJECT = "Contact Form Submission"
DEFAULT_SCORE_THRESHOLD = 0.5
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class ContactFormSettings:
  """Settings read from the Lambda environment."""

  sender_email: str
  receiver_email: str
  recaptcha_site_key: str
  recaptcha_project_id: str
  recaptcha_api_key_secret_name: str
  email_subject: str = DEFAULT_SUBJECT
  score_threshold: float = DEFAULT_SCORE_THRESHOLD
  recaptcha_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
  ses_region: str = DEFAULT_REGION
  secrets_region: str = DEFAULT_REGION
  log_level: str = "INFO"

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> "ContactFormSettings":
    """Load settings from environment variables.

    Required values that are missing are read as empty strings; the AWS or
    reCAPTCHA call that needs them fails later and is reported as a service
    error for that invocation.
    """
    env = os.environ if environ is None else environ

    return cls(
      sender_email=env.get("SENDER_EMAIL", ""),
      receiver_email=env.get("RECEIVER_EMAIL", ""),
      recaptcha_site_key=env.get("RECAPTCHA_SITE_KEY", ""),
      recaptcha_project_id=env.get("RECAPTCHA_PROJECT_ID", ""),
      recaptcha_api_key_secret_name=env.get("RECAPTCHA_API_KEY_SECRET_NAME", ""),
      email_subject=env.get("EMAIL_SUBJECT") or DEFAULT_SUBJECT,
      score_threshold=float(
        env.get("RECAPTCHA_SCORE_THRESHOLD") or DEFAULT_SCORE_THRESHOLD
      ),
      recaptcha_timeout_seconds=float(
        env.get("RECAPTCHA_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS
      ),
      ses_region=env.get("AWS_SES_REGION") or DEFAULT_REGION,
      secrets_region=env.get("AWS_REGION") or DEFAULT_REGION,
      log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )
