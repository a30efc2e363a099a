"""
Unit tests for TabularGraphBuilder and the Table container.
"""

import math

import numpy as np
import pytest

from osmsc.builder import TabularGraphBuilder
from osmsc.counting import Cardinality
from osmsc.errors import CardinalityError
from osmsc.ids import EdgeIdGenerator, make_rng
from osmsc.tables import SCBundle, Table


@pytest.fixture
def edge_ids():
    return EdgeIdGenerator(rng=make_rng(0))


class TestTabularGraphBuilder:
    """Test filling pre-sized tables."""

    def test_allocates_exact_sizes(self, edge_ids):
        """Test that an unused builder with zero counts finishes cleanly."""
        bundle = TabularGraphBuilder(Cardinality(), edge_ids).finish()
        assert list(bundle) == ["vertex", "edge", "object_link_edge",
                                "obj_node", "obj_way", "obj_rel", "rel"]
        assert all(len(t) == 0 for t in bundle.values())

    def test_without_members(self, edge_ids):
        """Test that with_members=False leaves out the rel table."""
        bundle = TabularGraphBuilder(Cardinality(), edge_ids, with_members=False).finish()
        assert "rel" not in bundle

    def test_vertex_rows(self, edge_ids):
        """Test vertex rows hold float coordinates and a string id."""
        builder = TabularGraphBuilder(Cardinality(vertices=2), edge_ids)
        builder.add_vertex(1, 10.0, 20.0)
        builder.add_vertex(2, None, None)
        vertex = builder.finish()["vertex"]
        assert vertex["x"].dtype == np.float64
        assert vertex["vertex_id"].tolist() == ["1", "2"]
        assert vertex["x"][0] == 10.0 and vertex["y"][0] == 20.0
        assert math.isnan(vertex["x"][1]) and math.isnan(vertex["y"][1])

    def test_edge_and_link_share_id(self, edge_ids):
        """Test that an edge and its link row carry the same generated id."""
        builder = TabularGraphBuilder(Cardinality(edges=1), edge_ids)
        edge_id = builder.add_edge(1, 2, 5)
        bundle = builder.finish()
        assert list(bundle["edge"].rows()) == [("1", "2", edge_id)]
        assert list(bundle["object_link_edge"].rows()) == [(edge_id, "5")]

    def test_kv_tables_by_kind(self, edge_ids):
        """Test that tags go to the table of their entity kind."""
        builder = TabularGraphBuilder(Cardinality(node_kv=1, way_kv=1, rel_kv=1), edge_ids)
        builder.add_kv("node", 1, "name", "A")
        builder.add_kv("way", 5, "highway", "residential")
        builder.add_kv("relation", 9, "type", "route")
        bundle = builder.finish()
        assert list(bundle["obj_node"].rows()) == [("1", "name", "A")]
        assert list(bundle["obj_way"].rows()) == [("5", "highway", "residential")]
        assert list(bundle["obj_rel"].rows()) == [("9", "type", "route")]

    def test_member_rows(self, edge_ids):
        """Test relation membership rows."""
        builder = TabularGraphBuilder(Cardinality(members=1), edge_ids)
        builder.add_member(9, 5, "outer")
        assert list(builder.finish()["rel"].rows()) == [("9", "5", "outer")]

    def test_large_ids_kept_exact(self, edge_ids):
        """Test that ids beyond 2**53 survive as exact decimal strings."""
        builder = TabularGraphBuilder(Cardinality(vertices=1), edge_ids)
        builder.add_vertex(2 ** 63 - 1, 0.0, 0.0)
        assert builder.finish()["vertex"]["vertex_id"].tolist() == ["9223372036854775807"]

    def test_overflow_raises(self, edge_ids):
        """Test that writing past an allocation raises CardinalityError."""
        builder = TabularGraphBuilder(Cardinality(vertices=1), edge_ids)
        builder.add_vertex(1, 0.0, 0.0)
        with pytest.raises(CardinalityError, match="vertex") as exc:
            builder.add_vertex(2, 0.0, 0.0)
        assert exc.value.allocated == 1
        assert exc.value.written == 2

    def test_underfill_raises(self, edge_ids):
        """Test that finishing with rows missing raises CardinalityError."""
        builder = TabularGraphBuilder(Cardinality(node_kv=2), edge_ids)
        builder.add_kv("node", 1, "a", "b")
        with pytest.raises(CardinalityError, match="obj_node"):
            builder.finish()


class TestTable:
    """Test the Table container."""

    def test_columns_and_rows(self):
        """Test column order, length and row iteration."""
        table = Table("t", [("a", np.array([1, 2])), ("b", np.array(["x", "y"], dtype=object))])
        assert table.columns == ["a", "b"]
        assert len(table) == 2
        assert "a" in table
        assert list(table.rows()) == [(1, "x"), (2, "y")]
        assert table.to_dict() == {"a": [1, 2], "b": ["x", "y"]}

    def test_ragged_columns_rejected(self):
        """Test that columns of different lengths are rejected."""
        with pytest.raises(ValueError, match="different lengths"):
            Table("t", [("a", np.array([1])), ("b", np.array([1, 2]))])

    def test_empty_table(self):
        """Test a table with no columns has no rows."""
        assert len(Table("t", [])) == 0

    def test_bundle_repr(self):
        """Test the bundle summary lists tables and sizes."""
        bundle = SCBundle()
        bundle["vertex"] = Table("vertex", [("x", np.array([1.0]))])
        assert repr(bundle) == "<SCBundle vertex[1]>"
