import threading


class SnapshotBroadcaster:
    """Pushes session snapshots to every client on a namespace.

    Taking the snapshot and emitting it happen under one lock, so snapshots go
    out in version order and no observer sees an older state after a newer one.
    This lock is separate from the session lock; the session is never locked
    while emitting.
    """

    def __init__(self, socketio, session, namespace='/ws', event='state_updated'):
        self.socketio = socketio
        self.session = session
        self.namespace = namespace
        self.event = event
        self._lock = threading.Lock()

    def broadcast(self):
        """Emit the current snapshot to everyone and return it."""
        with self._lock:
            snapshot = self.session.snapshot()
            self.socketio.emit(self.event, snapshot.to_dict(), namespace=self.namespace)
            return snapshot

    def send_to(self, sid):
        """Emit the current snapshot to one connection only.

        Shares the broadcast lock, so a client that has just joined the
        namespace cannot receive this snapshot after a newer broadcast.
        """
        with self._lock:
            snapshot = self.session.snapshot()
            self.socketio.emit(self.event, snapshot.to_dict(), to=sid, namespace=self.namespace)
            return snapshot
