"""
Application Subdomain Entities
"""

from .application_payload import ApplicationPayload

__all__ = ["ApplicationPayload"]
