"""Session data model.

``Participant`` is the mutable record owned by ``SessionState``. The view
classes are immutable projections handed to readers; they never alias the
participant records, so a snapshot stays valid after the lock is released.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Room capacity; the session refuses joins beyond this
MAX_PLAYERS = 10


@dataclass
class Participant:
    """One connected player, keyed by the transport's connection id."""
    connection_id: str
    name: str
    answer: Optional[str] = None
    has_answered: bool = False

    def clear_answer(self) -> None:
        self.answer = None
        self.has_answered = False


@dataclass(frozen=True)
class PlayerView:
    id: str
    name: str
    has_answered: bool
    answer: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'has_answered': self.has_answered,
            'answer': self.answer,
        }


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time view of the session, safe to broadcast.

    ``answer`` on every player is ``None`` unless ``all_answered`` is true.
    """
    players: Tuple[PlayerView, ...] = field(default_factory=tuple)
    admin_id: Optional[str] = None
    all_answered: bool = False
    capacity: int = MAX_PLAYERS
    version: int = 0

    def player_ids(self) -> List[str]:
        return [p.id for p in self.players]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'players': [p.to_dict() for p in self.players],
            'admin_id': self.admin_id,
            'all_answered': self.all_answered,
            'max_players': self.capacity,
            'version': self.version,
        }
