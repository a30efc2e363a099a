import collections


class Table(object):
    """A named set of equal-length numpy columns, in a fixed column order."""

    def __init__(self, name, columns):
        self.name = name
        self._columns = collections.OrderedDict(columns)
        lengths = set(len(c) for c in self._columns.values())
        if len(lengths) > 1:
            raise ValueError("Columns of table %s have different lengths: %s" % (name, sorted(lengths)))

    @property
    def columns(self):
        return list(self._columns.keys())

    def __getitem__(self, column):
        return self._columns[column]

    def __contains__(self, column):
        return column in self._columns

    def __len__(self):
        for c in self._columns.values():
            return len(c)
        return 0

    def rows(self):
        """Yield one tuple per row, in column order."""
        return zip(*[c.tolist() for c in self._columns.values()])

    def to_dict(self):
        return collections.OrderedDict((k, v.tolist()) for (k, v) in self._columns.items())

    def __repr__(self):
        return '<Table %s: %d rows, columns %s>' % (self.name, len(self), ', '.join(self.columns))


class SCBundle(collections.OrderedDict):
    """Silicate tables keyed by name, in the order they were assembled."""

    def __repr__(self):
        return '<SCBundle %s>' % ', '.join('%s[%d]' % (k, len(v)) for (k, v) in self.items())
