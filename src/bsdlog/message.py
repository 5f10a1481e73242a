"""
Message value handed to consumers registered with Logger.split().
"""

from dataclasses import dataclass, field
from datetime import datetime

from .levels import level_name


@dataclass(frozen=True)
class Message:
    """A single dispatched log message.

    One instance is built per dispatch and the same frozen object is
    put on every consumer queue for that call.

    Attributes:
        level: Severity of the message (EMERG..DEBUG)
        text: Message content, already formatted
        timestamp: When the dispatch started
    """
    level: int
    text: str
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def level_name(self) -> str:
        return level_name(self.level)

    def __str__(self) -> str:
        return f"{self.level_name} {self.text}"
