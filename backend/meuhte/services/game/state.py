import logging
import threading
from typing import List, Optional

from meuhte.exceptions import (
    AmbiguityError,
    CapacityError,
    NotFoundError,
    PermissionDenied,
    PreconditionError,
    ValidationError,
)
from meuhte.models import MAX_PLAYERS, Participant, PlayerView, SessionSnapshot

logger = logging.getLogger(__name__)


def _clean(value) -> str:
    """Trim client-supplied text; anything that is not a string reads as empty."""
    if not isinstance(value, str):
        return ''
    return value.strip()


def _rejected(error):
    logger.debug("Rejected: %s (%s)", error.message, type(error).__name__)
    return error


class SessionState:
    """The single shared game session.

    All reads and writes go through one lock covering the whole session, so a
    mutation is never observed half-applied and a snapshot always reflects one
    point in time. Operations raise a ``GameError`` subclass on rejection and
    leave the state untouched in that case.

    Participants are kept in join order; admin is the first joiner and, when
    the admin leaves, the earliest-joined remaining participant.
    """

    capacity = MAX_PLAYERS

    def __init__(self):
        self._lock = threading.Lock()
        self._participants: List[Participant] = []
        self._admin_id: Optional[str] = None
        self._version = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._participants)

    @property
    def admin_id(self) -> Optional[str]:
        with self._lock:
            return self._admin_id

    # ---- membership ----

    def join(self, connection_id: str, raw_name) -> bool:
        """Add a participant. Returns False when the connection already joined."""
        name = _clean(raw_name)
        if not name:
            raise _rejected(ValidationError("Name is required."))

        with self._lock:
            if self._find(connection_id) is not None:
                logger.debug("Connection %s re-joined, ignoring", connection_id)
                return False

            if len(self._participants) >= self.capacity:
                raise _rejected(CapacityError("Room is full."))

            self._participants.append(Participant(connection_id=connection_id, name=name))
            if self._admin_id is None:
                self._admin_id = connection_id
            self._version += 1

            logger.info(
                "Player %s (%s) joined, %d/%d, admin=%s",
                connection_id, name, len(self._participants), self.capacity, self._admin_id,
            )
            return True

    def leave(self, connection_id: str) -> bool:
        """Remove a participant if present. Returns True when someone was removed."""
        with self._lock:
            player = self._find(connection_id)
            if player is None:
                return False

            self._participants.remove(player)
            if self._admin_id == connection_id:
                self._admin_id = self._participants[0].connection_id if self._participants else None
                logger.info("Admin %s left, admin is now %s", connection_id, self._admin_id)
            self._version += 1

            logger.info("Player %s (%s) left, %d remaining", connection_id, player.name, len(self._participants))
            return True

    # ---- answers ----

    def submit_answer(self, connection_id: str, raw_answer) -> None:
        answer = _clean(raw_answer)
        if not answer:
            raise _rejected(ValidationError("Answer cannot be empty."))

        with self._lock:
            player = self._find(connection_id)
            if player is None:
                raise _rejected(NotFoundError("Player not found."))

            player.answer = answer
            player.has_answered = True
            self._version += 1

            logger.info(
                "Player %s answered (%d/%d answered)",
                connection_id, sum(1 for p in self._participants if p.has_answered), len(self._participants),
            )

    # ---- admin operations ----

    def update_player_name(self, requester_id: str, target_id, current_name, new_name) -> None:
        """Rename a player on behalf of the admin.

        The target is looked up by id first, then by exact current name. A name
        shared by several players is rejected rather than guessed at.
        """
        name = _clean(new_name)

        with self._lock:
            if self._admin_id is None or requester_id != self._admin_id:
                raise _rejected(PermissionDenied("Only the admin can edit player names."))
            if not name:
                raise _rejected(ValidationError("Name is required."))

            player = self._resolve_target(target_id, current_name)
            old_name = player.name
            player.name = name
            self._version += 1

            logger.info("Admin %s renamed %s: %r -> %r", requester_id, player.connection_id, old_name, name)

    def reset(self, requester_id: str) -> None:
        """Start the next round. Only allowed once every player has answered."""
        with self._lock:
            if self._admin_id is None or requester_id != self._admin_id:
                raise _rejected(PermissionDenied("Only the admin can reset the game."))
            if not self._all_answered():
                raise _rejected(PreconditionError("All players must answer before resetting."))

            for player in self._participants:
                player.clear_answer()
            self._version += 1

            logger.info("Admin %s reset the round for %d players", requester_id, len(self._participants))

    # ---- reads ----

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            all_answered = self._all_answered()
            players = tuple(
                PlayerView(
                    id=p.connection_id,
                    name=p.name,
                    has_answered=p.has_answered,
                    answer=p.answer if all_answered else None,
                )
                for p in self._participants
            )
            return SessionSnapshot(
                players=players,
                admin_id=self._admin_id,
                all_answered=all_answered,
                capacity=self.capacity,
                version=self._version,
            )

    # ---- helpers; callers must hold the lock ----

    def _find(self, connection_id) -> Optional[Participant]:
        for player in self._participants:
            if player.connection_id == connection_id:
                return player
        return None

    def _all_answered(self) -> bool:
        return bool(self._participants) and all(p.has_answered for p in self._participants)

    def _resolve_target(self, target_id, current_name) -> Participant:
        player = None

        # Blank checks trim, matching is exact
        if _clean(target_id):
            player = self._find(target_id)

        if player is None and _clean(current_name):
            matches = [p for p in self._participants if p.name == current_name]
            if len(matches) > 1:
                raise _rejected(AmbiguityError("Multiple players share that name. Please retry."))
            if matches:
                player = matches[0]

        if player is None:
            raise _rejected(NotFoundError("Player not found."))
        return player
