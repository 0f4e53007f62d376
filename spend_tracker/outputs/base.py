# spend_tracker/outputs/base.py
from abc import ABC, abstractmethod

class BaseOutput(ABC):
    @abstractmethod
    def write(self, transactions):
        """Write already-ordered transactions to the chosen sink."""
        pass
