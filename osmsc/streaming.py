"""Silicate tables straight from an OSM XML document, without building an OsmGraph.

The document is read twice: once to count rows, once to fill them. Each
primitive is dropped as soon as its rows are written; besides the output
tables only the ids already seen are held, because a repeated id keeps just
its first occurrence, as on the parsed-graph path. Rows are written by the
same emit_* functions the parsed-graph path uses. Relations are not flattened
here, so the bundle has no `rel` membership table.
"""
import logging

from osmsc import cancel as cancellation
from osmsc import counting, model
from osmsc.builder import TabularGraphBuilder
from osmsc.parsing import iter_osm_file
from osmsc.tabulate import emit_node, emit_relation_tags, emit_way

logger = logging.getLogger(__name__)


def _primitives(f, cancel):
    """Primitives of `f`, first occurrence of each id only, polling `cancel`
    every NODE_CHECK_INTERVAL nodes and on every way and relation."""
    seen = set()
    nodes = 0
    for p in iter_osm_file(f, parse_timestamps=False):
        key = (type(p), p.id)
        if key in seen:
            continue
        seen.add(key)

        if type(p) == model.Node:
            if nodes % cancellation.NODE_CHECK_INTERVAL == 0:
                cancellation.check(cancel)
            nodes += 1
        else:
            cancellation.check(cancel)
        yield p

def count_document(opener, cancel=None):
    with opener() as f:
        return counting.count_stream(_primitives(f, cancel))

def fill_document(builder, opener, cancel=None):
    with opener() as f:
        for p in _primitives(f, cancel):
            if type(p) == model.Node:
                emit_node(builder, p)
            elif type(p) == model.Way:
                emit_way(builder, p)
            elif type(p) == model.Relation:
                emit_relation_tags(builder, p.id, p.tags)

def stream_sc(opener, edge_ids=None, cancel=None):
    """Build a bundle from `opener`, a callable returning a fresh file-like
    over the same document each time it is called."""
    counts = count_document(opener, cancel)
    logger.debug("Streaming pass counted %s", counts)
    builder = TabularGraphBuilder(counts, edge_ids=edge_ids, with_members=False)
    fill_document(builder, opener, cancel)
    return builder.finish()
