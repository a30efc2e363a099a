"""Flattening of nested relation membership into terminal way references."""
import collections
import logging

from osmsc import cancel as cancellation

logger = logging.getLogger(__name__)

FLATTENED = 'flattened'
CYCLE = 'cycle'
UNRESOLVED = 'unresolved'

Flattened = collections.namedtuple('Flattened', 'ways, tags, status')


def flatten_relation(relation, relations):
    """Resolve `relation` into a flat list of (way_id, role) pairs.

    Way members are kept in member order. A relation member is expanded in
    place into its own way members, recursively, each keeping the role it has
    in the relation that lists it directly. Node members are dropped.

    Each sub-relation is expanded at most once per call; later references to
    it are skipped, so shared sub-relations cost nothing extra.

    `relations` maps relation id to Relation. A relation that is already being
    expanded higher up the same path is skipped and the result is marked
    CYCLE; a member relation missing from `relations` is skipped and the
    result is marked UNRESOLVED. Both still return whatever ways were found.
    """
    ways = []
    problems = set()
    path = set()
    expanded = set()

    # Explicit stack of member iterators so deep nesting can't hit the recursion limit.
    path.add(relation.id)
    stack = [(relation.id, iter(relation.members))]
    while stack:
        rel_id, members = stack[-1]
        member = next(members, None)
        if member is None:
            stack.pop()
            path.discard(rel_id)
            expanded.add(rel_id)
            continue

        if member.type == 'way':
            ways.append((member.ref, member.role))
        elif member.type == 'relation':
            if member.ref in path:
                problems.add(CYCLE)
                continue
            if member.ref in expanded:
                continue
            child = relations.get(member.ref)
            if child is None:
                problems.add(UNRESOLVED)
                continue
            path.add(child.id)
            stack.append((child.id, iter(child.members)))

    if CYCLE in problems:
        status = CYCLE
    elif UNRESOLVED in problems:
        status = UNRESOLVED
    else:
        status = FLATTENED

    if status != FLATTENED:
        logger.warning("Relation %s flattened with status %s; kept %d way members",
                       relation.id, status, len(ways))

    return Flattened(ways, list(relation.tags), status)


def flatten_all(relations, cancel=None):
    """Flatten every relation in `relations`, keeping its order."""
    flattened = collections.OrderedDict()
    for (rel_id, rel) in relations.items():
        cancellation.check(cancel)
        flattened[rel_id] = flatten_relation(rel, relations)
    return flattened
