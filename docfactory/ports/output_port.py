"""
Port for document output.
Documents describe what they do through this interface instead of touching files.
"""
from abc import ABC, abstractmethod


class OutputPort(ABC):
    """Interface for emitting document messages."""
    
    @abstractmethod
    def write(self, message: str) -> None:
        """
        Emit a single message line.
        
        Args:
            message: The message to emit
        """
        pass
