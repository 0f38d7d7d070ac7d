"""Errors raised while relaying a contact form submission.

Each error class corresponds to one failed response shape. ``reason`` is the
text returned to the caller; details stay in the log.
"""


class ContactFormError(Exception):
  """Base class for errors that end an invocation with a failed response."""

  status_code: int = 500
  reason: str = "Internal error"

  def __init__(self, detail: str = "", *, reason: str | None = None) -> None:
    super().__init__(detail or reason or self.reason)
    if reason is not None:
      self.reason = reason


class SecretUnavailable(ContactFormError):
  """The reCAPTCHA API key could not be read from Secrets Manager."""

  status_code = 500
  reason = "reCAPTCHA service error"


class VerificationServiceError(ContactFormError):
  """The assessment request failed or returned something other than JSON."""

  status_code = 500
  reason = "reCAPTCHA service error"


class VerificationRejected(ContactFormError):
  """The token was invalid, for the wrong action, or scored too low."""

  status_code = 400
  reason = "reCAPTCHA verification failed"


class EmailServiceError(ContactFormError):
  """SES refused or failed to send the message."""

  status_code = 500
  reason = "Email service error"
