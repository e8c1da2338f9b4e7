"""
Services package for domain business logic.
"""

from .document_lifecycle_service import DocumentLifecycleService
from .configuration_service import ConfigurationService

__all__ = [
    "DocumentLifecycleService",
    "ConfigurationService",
]
