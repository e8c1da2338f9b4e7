from typing import List

from docfactory.ports.output_port import OutputPort


class MemoryOutputAdapter(OutputPort):
    """Adapter collecting document messages in memory."""
    
    def __init__(self):
        """Initialize with no messages."""
        self._messages: List[str] = []
    
    def write(self, message: str) -> None:
        """
        Record a message.
        
        Args:
            message: The message to record
        """
        self._messages.append(message)
    
    @property
    def messages(self) -> List[str]:
        """Recorded messages in emission order."""
        return self._messages.copy()
    
    def clear(self) -> None:
        """Forget all recorded messages."""
        self._messages.clear()
