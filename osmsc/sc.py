"""Silicate (SC) form of OSM data.

An OSM document becomes a bundle of flat tables, in this order:

    vertex            x, y, vertex_id            one row per node
    edge              from_vertex, to_vertex,    one row per consecutive
                      edge_id                    node pair of a way
    object_link_edge  edge_id, object_id         the way each edge came from
    obj_node          object_id, key, value      one row per node tag
    obj_way           object_id, key, value      one row per way tag
    obj_rel           object_id, key, value      one row per relation tag
    rel               object_id, ref, role       one row per flattened way
                                                 member (parsed-graph path only)

Ids are decimal strings so 64-bit values survive consumers without 64-bit
integers. Edge ids are random 10-character alphanumeric strings; pass a
`seed` (or your own numpy Generator as `rng`) to make them reproducible.
"""
import logging

from osmsc import counting
from osmsc.builder import TabularGraphBuilder
from osmsc.ids import ID_LENGTH, EdgeIdGenerator, make_rng
from osmsc.parsing import as_filelike, parse_osm_file
from osmsc.relations import flatten_all
from osmsc.streaming import stream_sc
from osmsc.tables import SCBundle, Table
from osmsc.tabulate import tabulate_nodes, tabulate_relations, tabulate_ways

logger = logging.getLogger(__name__)

__all__ = ['SCBundle', 'Table', 'graph_to_sc', 'osmdata_sc', 'osmdata_sc_file']


def _edge_ids(id_length, seed, rng):
    if rng is None:
        rng = make_rng(seed)
    return EdgeIdGenerator(id_length, rng)

def graph_to_sc(graph, id_length=ID_LENGTH, seed=None, rng=None, cancel=None):
    """Convert a parsed OsmGraph into an SCBundle.

    Raises TransformInterrupted if `cancel` (a CancelToken) fires part way;
    nothing is returned in that case.
    """
    flattened = flatten_all(graph.relations, cancel)
    counts = counting.count_graph(graph, flattened)
    logger.debug("Counted %s", counts)

    builder = TabularGraphBuilder(counts, edge_ids=_edge_ids(id_length, seed, rng))
    tabulate_nodes(builder, graph.nodes, cancel)
    tabulate_ways(builder, graph.ways, cancel)
    tabulate_relations(builder, flattened, cancel)
    return builder.finish()

def osmdata_sc(document, id_length=ID_LENGTH, seed=None, rng=None, cancel=None, streaming=False):
    """Convert OSM XML text (str or bytes) into an SCBundle.

    With streaming=True the document is converted without building the
    object graph first; the result then has no `rel` table.
    """
    if streaming:
        return stream_sc(lambda: as_filelike(document),
                         edge_ids=_edge_ids(id_length, seed, rng), cancel=cancel)

    graph = parse_osm_file(as_filelike(document), parse_timestamps=False)
    return graph_to_sc(graph, id_length, seed, rng, cancel)

def osmdata_sc_file(path, id_length=ID_LENGTH, seed=None, rng=None, cancel=None, streaming=False):
    """Like osmdata_sc, for an OSM XML file on disk."""
    if streaming:
        return stream_sc(lambda: open(path, 'rb'),
                         edge_ids=_edge_ids(id_length, seed, rng), cancel=cancel)

    with open(path, 'rb') as f:
        graph = parse_osm_file(f, parse_timestamps=False)
    return graph_to_sc(graph, id_length, seed, rng, cancel)
