"""Node, way and relation tabulators.

The emit_* functions write one primitive's rows into a TabularGraphBuilder
and are shared by the parsed-graph path (the tabulate_* loops below) and the
streaming path in osmsc.streaming.
"""
from osmsc import cancel as cancellation


def emit_node(builder, node):
    builder.add_vertex(node.id, node.lon, node.lat)
    for tag in node.tags:
        builder.add_kv('node', node.id, tag.key, tag.value)

def emit_way(builder, way):
    nds = way.nds
    # Only consecutive pairs; a closing edge exists only if the way repeats its first node.
    for j in range(len(nds) - 1):
        builder.add_edge(nds[j], nds[j + 1], way.id)
    for tag in way.tags:
        builder.add_kv('way', way.id, tag.key, tag.value)

def emit_relation_tags(builder, relation_id, tags):
    for tag in tags:
        builder.add_kv('relation', relation_id, tag.key, tag.value)

def emit_relation(builder, relation_id, flattened):
    for (way_id, role) in flattened.ways:
        builder.add_member(relation_id, way_id, role)
    emit_relation_tags(builder, relation_id, flattened.tags)


def tabulate_nodes(builder, nodes, cancel=None):
    """Write the vertex and obj_node rows for every node, in order."""
    i = 0
    for node in nodes.values():
        if i % cancellation.NODE_CHECK_INTERVAL == 0:
            cancellation.check(cancel)
        emit_node(builder, node)
        i += 1

def tabulate_ways(builder, ways, cancel=None):
    """Write the edge, object_link_edge and obj_way rows for every way, in order."""
    for way in ways.values():
        cancellation.check(cancel)
        emit_way(builder, way)

def tabulate_relations(builder, flattened, cancel=None):
    """Write rel and obj_rel rows from the output of relations.flatten_all."""
    for (relation_id, f) in flattened.items():
        cancellation.check(cancel)
        emit_relation(builder, relation_id, f)
