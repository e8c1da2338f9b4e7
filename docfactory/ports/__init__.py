"""
Ports package - interfaces for external systems.
These define the contracts that adapters must implement.
"""

from .output_port import OutputPort
from .document_factory_port import DocumentFactoryPort

__all__ = [
    "OutputPort",
    "DocumentFactoryPort",
]
