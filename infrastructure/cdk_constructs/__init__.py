"""CDK constructs for contact form infrastructure."""

from .contact_form import ContactFormFunction

__all__ = ["ContactFormFunction"]
