"""Lambda function relaying contact form submissions through SES."""

from pathlib import Path

from aws_cdk import BundlingOptions, CfnOutput, Duration, Stack
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from ..config import ContactFormConfig

# Lambda source lives at the repository root
FUNCTION_SOURCE_DIR = Path(__file__).parent.parent.parent / "contact_form"


class ContactFormFunction(Construct):
  """Contact form relay exposed through a Lambda Function URL.

  Creates:
  - Python Lambda bundled with its requirements
  - Read access to the reCAPTCHA API key secret
  - Permission to send email as the configured sender
  - Function URL with CORS limited to the site's origins
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    form_config: ContactFormConfig,
  ) -> None:
    super().__init__(scope, id)

    self.handler = lambda_.Function(
      self,
      "Handler",
      runtime=lambda_.Runtime.PYTHON_3_12,
      handler="handler.handler",
      code=lambda_.Code.from_asset(
        str(FUNCTION_SOURCE_DIR),
        exclude=["__pycache__", "*.pyc"],
        bundling=BundlingOptions(
          image=lambda_.Runtime.PYTHON_3_12.bundling_image,
          command=[
            "bash",
            "-c",
            "pip install -r requirements.txt -t /asset-output && cp -au . /asset-output",
          ],
        ),
      ),
      environment={
        "SENDER_EMAIL": form_config.sender_email,
        "RECEIVER_EMAIL": form_config.receiver_email,
        "EMAIL_SUBJECT": form_config.email_subject,
        "RECAPTCHA_SITE_KEY": form_config.recaptcha_site_key,
        "RECAPTCHA_PROJECT_ID": form_config.recaptcha_project_id,
        "RECAPTCHA_API_KEY_SECRET_NAME": form_config.recaptcha_api_key_secret_name,
        "RECAPTCHA_SCORE_THRESHOLD": str(form_config.score_threshold),
        "AWS_SES_REGION": form_config.region,
        "LOG_LEVEL": form_config.log_level,
      },
      timeout=Duration.seconds(30),
    )

    # The secret is created out of band; only its name is known here
    secret = secretsmanager.Secret.from_secret_name_v2(
      self,
      "RecaptchaSecret",
      form_config.recaptcha_api_key_secret_name,
    )
    secret.grant_read(self.handler)

    stack = Stack.of(self)
    self.handler.add_to_role_policy(
      iam.PolicyStatement(
        actions=["ses:SendEmail"],
        resources=[
          stack.format_arn(
            service="ses",
            region=form_config.region,
            resource="identity",
            resource_name="*",
          )
        ],
        conditions={"StringEquals": {"ses:FromAddress": form_config.sender_email}},
      )
    )

    self.function_url = self.handler.add_function_url(
      auth_type=lambda_.FunctionUrlAuthType.NONE,
      cors=lambda_.FunctionUrlCorsOptions(
        allowed_origins=form_config.allowed_origins,
        allowed_methods=[lambda_.HttpMethod.POST],
        allowed_headers=["Content-Type"],
      ),
    )

    CfnOutput(
      self,
      "FunctionUrl",
      value=self.function_url.url,
      description="Contact form endpoint",
    )
