"""reCAPTCHA Enterprise token verification."""

import json
import logging
from typing import Any

import requests

from exceptions import VerificationRejected, VerificationServiceError
from models import VerificationResult

logger = logging.getLogger(__name__)

RECAPTCHA_HOST = "recaptchaenterprise.googleapis.com"
EXPECTED_ACTION = "contact_submit"


def assessment_url(project_id: str) -> str:
  """URL of the CreateAssessment endpoint for a Google Cloud project."""
  return f"https://{RECAPTCHA_HOST}/v1/projects/{project_id}/assessments"


def create_assessment(
  token: str | None,
  *,
  site_key: str,
  project_id: str,
  api_key: str,
  expected_action: str = EXPECTED_ACTION,
  timeout: float = 10.0,
  session: requests.Session | None = None,
) -> dict[str, Any]:
  """Send the token to reCAPTCHA Enterprise and return the decoded response.

  The body is decoded regardless of HTTP status since error responses carry
  an ``error`` object that is interpreted like any other assessment.

  Raises:
    VerificationServiceError: If the request fails or the body is not JSON.
  """
  http = session or requests
  payload = {
    "event": {
      "token": token,
      "siteKey": site_key,
      "expectedAction": expected_action,
    }
  }

  try:
    response = http.post(
      assessment_url(project_id),
      params={"key": api_key},
      json=payload,
      timeout=timeout,
    )
    data = response.json()
  except requests.RequestException as e:
    raise VerificationServiceError(f"Assessment request failed: {e}") from e
  except ValueError as e:
    raise VerificationServiceError(f"Assessment response is not JSON: {e}") from e

  if not isinstance(data, dict):
    raise VerificationServiceError(f"Unexpected assessment response: {data!r}")

  logger.info("reCAPTCHA response: %s", json.dumps(data))
  return data


def interpret_assessment(
  data: dict[str, Any], expected_action: str = EXPECTED_ACTION
) -> VerificationResult:
  """Turn an assessment response into a verification result.

  Raises:
    VerificationServiceError: If the response does not have the assessment
      shape.
  """
  error = data.get("error")
  if error:
    message = error.get("message") if isinstance(error, dict) else str(error)
    return VerificationResult(
      token_valid=False, action_matches=False, reason=message or "Unknown error"
    )

  token_properties = data.get("tokenProperties") or {}
  risk_analysis = data.get("riskAnalysis") or {}
  if not isinstance(token_properties, dict) or not isinstance(risk_analysis, dict):
    raise VerificationServiceError(f"Malformed assessment response: {data!r}")

  token_valid = token_properties.get("valid") is True
  action_matches = token_properties.get("action") == expected_action
  try:
    score = float(risk_analysis.get("score") or 0)
  except (TypeError, ValueError) as e:
    raise VerificationServiceError(f"Malformed assessment score: {e}") from e

  if not token_valid:
    return VerificationResult(
      token_valid=False,
      action_matches=action_matches,
      score=0.0,
      reason="Invalid token",
    )
  if not action_matches:
    return VerificationResult(
      token_valid=True, action_matches=False, score=score, reason="Action mismatch"
    )
  return VerificationResult(token_valid=True, action_matches=True, score=score)


def enforce(result: VerificationResult, threshold: float) -> None:
  """Raise if the submission should not be relayed.

  Every unsuccessful assessment collapses into the same public reason; the
  specific cause is only logged.
  """
  if not result.success:
    logger.warning("reCAPTCHA verification failed: %s", result.reason)
    raise VerificationRejected(result.reason or "")

  if result.score < threshold:
    logger.warning("reCAPTCHA score too low: %s", result.score)
    raise VerificationRejected(
      f"Score {result.score} below {threshold}", reason="Submission blocked"
    )

  logger.info("reCAPTCHA passed with score: %s", result.score)
