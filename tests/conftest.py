"""
Shared pytest fixtures: a small OSM XML document and its parsed graph.

The document holds four nodes, three ways (one open, one looping back on
itself, one with a single node) and two relations, one nested in the other.
"""

import pytest

from osmsc import model
from osmsc.parsing import parse_osm_string


SAMPLE_OSM = b"""<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="osmsc tests">
  <bounds minlat="19.0" minlon="9.0" maxlat="21.0" maxlon="11.0"/>
  <node id="1" lat="20.0" lon="10.0" version="3" changeset="77" user="mapper" uid="12" visible="true" timestamp="2020-01-02T03:04:05Z">
    <tag k="name" v="A"/>
  </node>
  <node id="2" lat="20.1" lon="10.1"/>
  <node id="3" lat="20.2" lon="10.2">
    <tag k="highway" v="crossing"/>
    <tag k="name" v="C"/>
  </node>
  <node id="4" lat="20.3" lon="10.3"/>
  <way id="5">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
    <tag k="highway" v="residential"/>
  </way>
  <way id="6">
    <nd ref="3"/>
    <nd ref="4"/>
    <nd ref="1"/>
    <nd ref="3"/>
  </way>
  <way id="7">
    <nd ref="4"/>
  </way>
  <relation id="9">
    <member type="way" ref="5" role="outer"/>
    <member type="node" ref="1" role="label"/>
    <tag k="type" v="multipolygon"/>
  </relation>
  <relation id="10">
    <member type="relation" ref="9" role="sub"/>
    <member type="way" ref="6" role="inner"/>
    <tag k="type" v="route"/>
    <tag k="name" v="R"/>
  </relation>
</osm>
"""


@pytest.fixture
def sample_osm():
    """Raw XML bytes of the sample document."""
    return SAMPLE_OSM


@pytest.fixture
def sample_osm_path(tmp_path, sample_osm):
    """The sample document written to a file."""
    path = tmp_path / "sample.osm"
    path.write_bytes(sample_osm)
    return str(path)


@pytest.fixture
def sample_graph(sample_osm):
    """The sample document parsed into an OsmGraph."""
    return parse_osm_string(sample_osm)


@pytest.fixture
def small_graph():
    """One node, one way and one relation, built directly from the model helpers."""
    return model.OsmGraph.from_objects(
        nodes=[
            model.node(1, 10.0, 20.0, [("name", "A")]),
            model.node(2, 10.5, 20.5),
            model.node(3, 11.0, 21.0),
        ],
        ways=[model.way(5, [1, 2, 3])],
        relations=[model.relation(9, [("way", 5, "outer")])],
    )
