"""Use cases de envio de email."""

from .send_email import SendEmailUseCase

__all__ = ["SendEmailUseCase"]
