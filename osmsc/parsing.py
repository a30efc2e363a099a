import osmsc.model as model
import datetime
import io
import logging
from lxml import etree

logger = logging.getLogger(__name__)


def isoToDatetime(s):
    """Parse a ISO8601-formatted string to a Python datetime."""
    if s is None:
        return s
    else:
        return datetime.datetime.strptime(s, "%Y-%m-%dT%H:%M:%SZ")

def maybeInt(s):
    return int(s) if s is not None else s

def maybeFloat(s):
    return float(s) if s is not None else s

def maybeBool(s):
    return s == 'true' if s is not None else s

def as_filelike(text):
    """Wrap document text (str or bytes) so lxml can iterparse it."""
    if isinstance(text, str):
        text = text.encode('utf-8')
    return io.BytesIO(text)

def iter_osm_file(f, parse_timestamps=True):
    """Parse a file-like containing OSM XML and yield one OSM primitive at a time
    to the caller."""

    obj = None
    for event, elem in etree.iterparse(f, events=('start', 'end')):
        if event == 'start':
            if elem.tag == 'node':
                obj = model.Node(
                    int(elem.attrib['id']),
                    maybeInt(elem.get('version')),
                    maybeInt(elem.get('changeset')),
                    elem.attrib.get('user'),
                    maybeInt(elem.attrib.get('uid')),
                    maybeBool(elem.attrib.get('visible')),
                    isoToDatetime(elem.attrib.get('timestamp')) if parse_timestamps else elem.attrib.get('timestamp'),
                    maybeFloat(elem.get('lat')),
                    maybeFloat(elem.get('lon')),
                    []
                )
            elif elem.tag == 'way':
                obj = model.Way(
                    int(elem.attrib['id']),
                    maybeInt(elem.get('version')),
                    maybeInt(elem.get('changeset')),
                    elem.attrib.get('user'),
                    maybeInt(elem.attrib.get('uid')),
                    maybeBool(elem.attrib.get('visible')),
                    isoToDatetime(elem.attrib.get('timestamp')) if parse_timestamps else elem.attrib.get('timestamp'),
                    [],
                    []
                )
            elif elem.tag == 'tag':
                # Overpass output can carry tags on <area> and friends, which we skip
                if obj is not None:
                    obj.tags.append(
                        model.Tag(
                            elem.attrib['k'],
                            elem.attrib['v']
                        )
                    )
            elif elem.tag == 'nd':
                if obj is not None:
                    obj.nds.append(int(elem.attrib['ref']))
            elif elem.tag == 'relation':
                obj = model.Relation(
                    int(elem.attrib['id']),
                    maybeInt(elem.get('version')),
                    maybeInt(elem.get('changeset')),
                    elem.attrib.get('user'),
                    maybeInt(elem.attrib.get('uid')),
                    maybeBool(elem.attrib.get('visible')),
                    isoToDatetime(elem.attrib.get('timestamp')) if parse_timestamps else elem.attrib.get('timestamp'),
                    [],
                    []
                )
            elif elem.tag == 'member':
                if obj is not None:
                    obj.members.append(
                        model.Member(
                            elem.attrib['type'],
                            int(elem.attrib['ref']),
                            elem.attrib.get('role', '')
                        )
                    )
        elif event == 'end':
            if elem.tag in ('node', 'way', 'relation'):
                if obj is not None:
                    yield obj
                obj = None

        elem.clear()
        while elem.getprevious() is not None:
            del elem.getparent()[0]

def parse_osm_file(f, parse_timestamps=True):
    """Parse a file-like containing OSM XML into memory and return an OsmGraph
    with the nodes, ways, and relations it contains, each keyed by id in
    document order. If an id repeats (Overpass prints a node again for every
    `>` recursion that reaches it) the first occurrence is kept. """

    graph = model.OsmGraph.from_objects()

    for p in iter_osm_file(f, parse_timestamps):

        if type(p) == model.Node:
            graph.nodes.setdefault(p.id, p)
        elif type(p) == model.Way:
            graph.ways.setdefault(p.id, p)
        elif type(p) == model.Relation:
            graph.relations.setdefault(p.id, p)

    logger.debug("Parsed %d nodes, %d ways, %d relations",
                 len(graph.nodes), len(graph.ways), len(graph.relations))
    return graph

def parse_osm_string(text, parse_timestamps=True):
    """Same as parse_osm_file, for a document already held in memory."""
    return parse_osm_file(as_filelike(text), parse_timestamps)
