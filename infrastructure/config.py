"""Configuration loader for contact form deployments."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class ContactFormConfig:
  """Configuration for one site's contact form function."""

  domain: str
  owner: str
  email: str
  sender_email: str
  receiver_email: str
  recaptcha_site_key: str
  recaptcha_project_id: str
  recaptcha_api_key_secret_name: str
  email_subject: str = "Contact Form Submission"
  score_threshold: float = 0.5
  include_www: bool = True
  log_level: str = "INFO"
  region: str = "us-east-1"

  @property
  def allowed_origins(self) -> list[str]:
    """Origins allowed to POST to the function URL."""
    origins = [f"https://{self.domain}"]
    if self.include_www:
      origins.append(f"https://www.{self.domain}")
    return origins


@dataclass
class Config:
  """Multi-site contact form configuration."""

  contact_forms: list[ContactFormConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "contact_forms.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    contact_forms: list[ContactFormConfig] = []

    for form_data in data.get("contact_forms", []):
      # Merge defaults with site-specific config
      merged = {**defaults, **form_data}

      contact_forms.append(
        ContactFormConfig(
          domain=merged["domain"],
          owner=merged["owner"],
          email=merged["email"],
          sender_email=merged["sender_email"],
          receiver_email=merged.get("receiver_email", merged["email"]),
          recaptcha_site_key=merged["recaptcha_site_key"],
          recaptcha_project_id=merged["recaptcha_project_id"],
          recaptcha_api_key_secret_name=merged["recaptcha_api_key_secret_name"],
          email_subject=merged.get("email_subject", "Contact Form Submission"),
          score_threshold=float(merged.get("score_threshold", 0.5)),
          include_www=merged.get("include_www", True),
          log_level=str(merged.get("log_level", "INFO")).upper(),
          region=merged.get("region", "us-east-1"),
        )
      )

    return cls(contact_forms=contact_forms)
