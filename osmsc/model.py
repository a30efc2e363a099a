import collections

## OSM Objects
Tag = collections.namedtuple('Tag', 'key,value')
Node = collections.namedtuple('Node', 'id, version, changeset, user, uid, visible, timestamp, lat, lon, tags')
Way = collections.namedtuple('Way', 'id, version, changeset, user, uid, visible, timestamp, nds, tags')
Relation = collections.namedtuple('Relation', 'id, version, changeset, user, uid, visible, timestamp, members, tags')
Member = collections.namedtuple('Member', 'type, ref, role')


class OsmGraph(collections.namedtuple('OsmGraph', 'nodes, ways, relations')):
    """A parsed document: three OrderedDicts keyed by object id.

    Tables built from a graph follow the iteration order of these mappings.
    When an id repeats, the first object with that id is the one kept.
    """
    __slots__ = ()

    @classmethod
    def from_objects(cls, nodes=(), ways=(), relations=()):
        return cls(_first_by_id(nodes), _first_by_id(ways), _first_by_id(relations))


def _first_by_id(objects):
    by_id = collections.OrderedDict()
    for o in objects:
        by_id.setdefault(o.id, o)
    return by_id


def node(id, lon, lat, tags=()):
    """Build a Node with only the fields the tabulators look at."""
    return Node(id, None, None, None, None, None, None, lat, lon, [Tag(k, v) for (k, v) in tags])


def way(id, nds, tags=()):
    return Way(id, None, None, None, None, None, None, list(nds), [Tag(k, v) for (k, v) in tags])


def relation(id, members, tags=()):
    """`members` is an iterable of (type, ref, role) triples."""
    return Relation(id, None, None, None, None, None, None,
                    [Member(t, ref, role) for (t, ref, role) in members],
                    [Tag(k, v) for (k, v) in tags])
