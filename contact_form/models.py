"""Request-scoped values passed between the relay stages."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Submission:
  """A contact form submission as posted by the website."""

  name: str = ""
  email: str = ""
  subject: str = ""
  message: str = ""
  verification_token: str | None = None

  @classmethod
  def from_payload(cls, payload: dict[str, Any]) -> "Submission":
    """Build a submission from the decoded request body."""
    return cls(
      name=_text(payload.get("name")),
      email=_text(payload.get("email")),
      subject=_text(payload.get("subject")),
      message=_text(payload.get("message")),
      verification_token=payload.get("recaptchaToken"),
    )

  def email_body(self) -> str:
    """Render the plaintext email body."""
    return (
      f"From: {self.name}\n\n"
      f"Email: {self.email}\n\n"
      f"Subject: {self.subject}\n\n"
      f"Message: {self.message}"
    )


def _text(value: Any) -> str:
  return "" if value is None else str(value)


@dataclass(frozen=True)
class VerificationResult:
  """Outcome of a reCAPTCHA Enterprise assessment."""

  token_valid: bool
  action_matches: bool
  score: float = 0.0
  reason: str | None = None

  @property
  def success(self) -> bool:
    return self.token_valid and self.action_matches


@dataclass(frozen=True)
class RelayResponse:
  """The response returned to the Function URL caller."""

  status_code: int
  result: str
  reason: str | None = None

  @classmethod
  def ok(cls) -> "RelayResponse":
    return cls(status_code=200, result="Success")

  @classmethod
  def failed(cls, status_code: int, reason: str) -> "RelayResponse":
    return cls(status_code=status_code, result="Failed", reason=reason)

  def to_lambda(self) -> dict[str, Any]:
    """Render as a Lambda proxy integration response."""
    body: dict[str, str] = {"result": self.result}
    if self.reason is not None:
      body["reason"] = self.reason

    return {
      "statusCode": self.status_code,
      "headers": {"Content-Type": "application/json"},
      "body": json.dumps(body),
    }
