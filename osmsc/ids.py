import numpy as np

ALPHABET = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
ID_LENGTH = 10

# Ids are drawn this many at a time, then handed out one per call.
BLOCK_SIZE = 4096

_SYMBOLS = np.frombuffer(ALPHABET.encode('ascii'), dtype=np.uint8)


def make_rng(seed=None):
    """Random source for one transform. Pass a seed to make edge ids reproducible."""
    return np.random.default_rng(seed)


class EdgeIdGenerator(object):
    """Draws fixed-length alphanumeric edge ids from an injected numpy Generator.

    Ids are not checked for uniqueness. With 62**10 possible values a
    collision inside one bundle is possible but vanishingly unlikely.
    """

    def __init__(self, length=ID_LENGTH, rng=None, block_size=BLOCK_SIZE):
        if length < 1:
            raise ValueError("Edge id length must be positive, got %r" % (length,))
        self.length = length
        self.rng = rng if rng is not None else make_rng()
        self.block_size = block_size
        self._block = None
        self._next = 0

    def _refill(self):
        codes = self.rng.integers(0, len(_SYMBOLS), size=(self.block_size, self.length))
        self._block = _SYMBOLS[codes].view('S%d' % self.length).ravel()
        self._next = 0

    def __call__(self):
        if self._block is None or self._next == self.block_size:
            self._refill()
        i = self._next
        self._next += 1
        return self._block[i].decode('ascii')
