import collections

from osmsc import model

Cardinality = collections.namedtuple('Cardinality', 'vertices, edges, node_kv, way_kv, rel_kv, members')
Cardinality.__new__.__defaults__ = (0, 0, 0, 0, 0, 0)


def way_edges(nds):
    return max(0, len(nds) - 1)

def count_nodes(nodes):
    vertices = node_kv = 0
    for n in nodes:
        vertices += 1
        node_kv += len(n.tags)
    return Cardinality(vertices=vertices, node_kv=node_kv)

def count_ways(ways):
    edges = way_kv = 0
    for w in ways:
        edges += way_edges(w.nds)
        way_kv += len(w.tags)
    return Cardinality(edges=edges, way_kv=way_kv)

def count_relations(flattened):
    """Count rows for relations that have already been through flatten_all."""
    rel_kv = members = 0
    for f in flattened:
        rel_kv += len(f.tags)
        members += len(f.ways)
    return Cardinality(rel_kv=rel_kv, members=members)

def merge(*counts):
    return Cardinality(*[sum(field) for field in zip(*counts)])

def count_graph(graph, flattened):
    return merge(count_nodes(graph.nodes.values()),
                 count_ways(graph.ways.values()),
                 count_relations(flattened.values()))

def count_stream(primitives):
    """Single pass over a stream of primitives. Relations only contribute
    their tags here since the stream is never flattened."""
    vertices = edges = node_kv = way_kv = rel_kv = 0
    for p in primitives:
        if type(p) == model.Node:
            vertices += 1
            node_kv += len(p.tags)
        elif type(p) == model.Way:
            edges += way_edges(p.nds)
            way_kv += len(p.tags)
        elif type(p) == model.Relation:
            rel_kv += len(p.tags)
    return Cardinality(vertices, edges, node_kv, way_kv, rel_kv, 0)
