class OsmScError(Exception):
    """Base class for errors raised while building silicate tables."""


class TransformInterrupted(OsmScError):
    """The caller cancelled a transform; no tables are returned."""


class CardinalityError(OsmScError):
    """A fill pass wrote a different number of rows than its count pass
    allocated, usually because the input changed mid-transform."""

    def __init__(self, table, allocated, written):
        super(CardinalityError, self).__init__(
            "Table %s was sized for %d rows but %d were written." % (table, allocated, written))
        self.table = table
        self.allocated = allocated
        self.written = written
