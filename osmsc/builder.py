"""Exact-size column storage shared by every path that produces silicate tables.

Both the parsed-graph path and the streaming path count first, allocate once
here, then fill row by row through the add_* methods. Rows go in at an
explicit per-table counter; nothing is ever appended or resized.
"""
import collections
import logging

import numpy as np

from osmsc.errors import CardinalityError
from osmsc.ids import EdgeIdGenerator
from osmsc.tables import SCBundle, Table

logger = logging.getLogger(__name__)

KV_TABLES = {
    'node': 'obj_node',
    'way': 'obj_way',
    'relation': 'obj_rel',
}

# Table name -> ((column, dtype), ...); bundle order follows this list.
LAYOUT = [
    ('vertex', (('x', np.float64), ('y', np.float64), ('vertex_id', object))),
    ('edge', (('from_vertex', object), ('to_vertex', object), ('edge_id', object))),
    ('object_link_edge', (('edge_id', object), ('object_id', object))),
    ('obj_node', (('object_id', object), ('key', object), ('value', object))),
    ('obj_way', (('object_id', object), ('key', object), ('value', object))),
    ('obj_rel', (('object_id', object), ('key', object), ('value', object))),
    ('rel', (('object_id', object), ('ref', object), ('role', object))),
]


def _sizes(counts):
    return {
        'vertex': counts.vertices,
        'edge': counts.edges,
        'object_link_edge': counts.edges,
        'obj_node': counts.node_kv,
        'obj_way': counts.way_kv,
        'obj_rel': counts.rel_kv,
        'rel': counts.members,
    }


class TabularGraphBuilder(object):

    def __init__(self, counts, edge_ids=None, with_members=True):
        self.counts = counts
        self.edge_ids = edge_ids if edge_ids is not None else EdgeIdGenerator()
        self.with_members = with_members

        self._size = _sizes(counts)
        self._next = dict((name, 0) for name in self._size)
        self._cols = collections.OrderedDict()
        for (name, columns) in LAYOUT:
            if name == 'rel' and not with_members:
                continue
            n = self._size[name]
            self._cols[name] = collections.OrderedDict(
                (col, np.empty(n, dtype=dtype)) for (col, dtype) in columns)
        logger.debug("Allocated tables: %s", self._size)

    def _row(self, name):
        i = self._next[name]
        if i >= self._size[name]:
            raise CardinalityError(name, self._size[name], i + 1)
        self._next[name] = i + 1
        return i

    def add_vertex(self, node_id, lon, lat):
        i = self._row('vertex')
        cols = self._cols['vertex']
        cols['x'][i] = np.nan if lon is None else lon
        cols['y'][i] = np.nan if lat is None else lat
        cols['vertex_id'][i] = str(node_id)

    def add_edge(self, from_id, to_id, way_id):
        """Add one edge of `way_id` and its link row; returns the new edge id."""
        edge_id = self.edge_ids()

        i = self._row('edge')
        cols = self._cols['edge']
        cols['from_vertex'][i] = str(from_id)
        cols['to_vertex'][i] = str(to_id)
        cols['edge_id'][i] = edge_id

        i = self._row('object_link_edge')
        cols = self._cols['object_link_edge']
        cols['edge_id'][i] = edge_id
        cols['object_id'][i] = str(way_id)
        return edge_id

    def add_kv(self, kind, object_id, key, value):
        name = KV_TABLES[kind]
        i = self._row(name)
        cols = self._cols[name]
        cols['object_id'][i] = str(object_id)
        cols['key'][i] = key
        cols['value'][i] = value

    def add_member(self, relation_id, way_id, role):
        i = self._row('rel')
        cols = self._cols['rel']
        cols['object_id'][i] = str(relation_id)
        cols['ref'][i] = str(way_id)
        cols['role'][i] = role

    def finish(self):
        """Check every table was filled exactly and hand back the bundle."""
        bundle = SCBundle()
        for (name, cols) in self._cols.items():
            if self._next[name] != self._size[name]:
                raise CardinalityError(name, self._size[name], self._next[name])
            bundle[name] = Table(name, cols)
        self._cols = collections.OrderedDict()
        return bundle
