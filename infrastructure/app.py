#!/usr/bin/env python3
"""CDK app deploying a contact form relay per configured site."""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from infrastructure.config import Config
from infrastructure.stacks import ContactFormStack, stack_name_for


def build_app(config: Config, app: cdk.App | None = None) -> cdk.App:
  """Add one stack per contact form to the app."""
  app = app or cdk.App()
  # Resolved by the CDK CLI from the active AWS profile
  account = os.environ.get("CDK_DEFAULT_ACCOUNT")

  for form in config.contact_forms:
    ContactFormStack(
      app,
      stack_name_for(form),
      form_config=form,
      env=cdk.Environment(account=account, region=form.region),
    )
  return app


def main() -> None:
  app = cdk.App()
  config_path = app.node.try_get_context("config") or "contact_forms.yaml"
  build_app(Config.from_yaml(Path(config_path)), app).synth()


if __name__ == "__main__":
  main()
