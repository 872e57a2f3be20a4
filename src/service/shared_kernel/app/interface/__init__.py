"""Shared Kernel Interfaces"""

from src.service.shared_kernel.app.interface.i_email_sender import IEmailSender

__all__ = ['IEmailSender']
