import threading

from osmsc.errors import TransformInterrupted

# Nodes are cheap, so they only poll once per this many.
NODE_CHECK_INTERVAL = 1000


class CancelToken(object):
    """Cooperative cancellation signal shared between a transform and the
    thread that wants to stop it."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self):
        return self._event.is_set()

    def check(self):
        if self._event.is_set():
            raise TransformInterrupted("Transform cancelled by caller.")


def check(token):
    if token is not None:
        token.check()
