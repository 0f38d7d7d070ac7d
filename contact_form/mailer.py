"""Send contact form submissions through Amazon SES."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from exceptions import EmailServiceError
from models import Submission

logger = logging.getLogger(__name__)


def send_submission(
  ses_client: Any,
  submission: Submission,
  *,
  sender: str,
  receiver: str,
  subject: str,
) -> str:
  """Email a submission to the site owner and return the SES message ID.

  Raises:
    EmailServiceError: If SES rejects the message or cannot be reached.
  """
  try:
    response = ses_client.send_email(
      Source=sender,
      Destination={"ToAddresses": [receiver]},
      Message={
        "Subject": {"Data": subject, "Charset": "UTF-8"},
        "Body": {"Text": {"Data": submission.email_body(), "Charset": "UTF-8"}},
      },
    )
  except (BotoCoreError, ClientError) as e:
    raise EmailServiceError(f"SES send_email failed: {e}") from e

  message_id: str = response.get("MessageId", "")
  logger.info("Email sent successfully: %s", message_id)
  return message_id
