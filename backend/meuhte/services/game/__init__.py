"""Game session services.

The session state manager and the broadcaster that publishes its snapshots.
Socket handlers and HTTP routes import from here, keeping transport concerns
separated from the session rules.
"""

from .state import MAX_PLAYERS, SessionState
from .broadcast import SnapshotBroadcaster

__all__ = ['MAX_PLAYERS', 'SessionState', 'SnapshotBroadcaster']
