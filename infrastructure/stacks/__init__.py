"""CDK stacks for contact form infrastructure."""

from .contact_form_stack import ContactFormStack, stack_name_for

__all__ = ["ContactFormStack", "stack_name_for"]
