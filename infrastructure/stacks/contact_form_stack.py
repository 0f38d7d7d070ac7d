"""CDK stack deploying one site's contact form relay."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import ContactFormFunction
from infrastructure.config import ContactFormConfig


def stack_name_for(form_config: ContactFormConfig) -> str:
  """CloudFormation stack name for a site's contact form."""
  return f"ContactForm-{form_config.domain.replace('.', '-')}"


class ContactFormStack(cdk.Stack):
  """Contact form function tagged with the site it serves."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    form_config: ContactFormConfig,
    **kwargs: Any,
  ) -> None:
    kwargs.setdefault("description", f"Contact form relay for {form_config.domain}")
    super().__init__(scope, id, **kwargs)

    self.contact_form = ContactFormFunction(self, "ContactForm", form_config=form_config)

    tags = {
      "Owner": form_config.owner,
      "OwnerEmail": form_config.email,
      "Project": "contact-forms",
      "Domain": form_config.domain,
    }
    for key, value in tags.items():
      cdk.Tags.of(self).add(key, value)
