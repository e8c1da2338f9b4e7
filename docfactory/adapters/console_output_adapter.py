import sys
from typing import Optional, TextIO

from docfactory.ports.output_port import OutputPort


class ConsoleOutputAdapter(OutputPort):
    """Adapter writing document messages to the console."""
    
    def __init__(self, stream: Optional[TextIO] = None, prefix: str = ""):
        """
        Initialize the console adapter.
        
        Args:
            stream: Stream to write to (default: sys.stdout at write time)
            prefix: Text put in front of every message
        """
        self._stream = stream
        self.prefix = prefix
    
    def write(self, message: str) -> None:
        """
        Print a message line.
        
        Args:
            message: The message to print
        """
        print(f"{self.prefix}{message}", file=self._stream or sys.stdout)
