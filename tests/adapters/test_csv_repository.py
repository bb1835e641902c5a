"""Tests for the CSV graph repository adapter."""

import pytest

from graphpath import CSVGraphRepository, GraphError, InvalidCostError, PathFinder
from graphpath.config import GraphConfig


class TestCSVGraphRepository:
    """Test suite for CSVGraphRepository."""

    @pytest.fixture
    def data_dir(self, tmp_path):
        (tmp_path / "edges.csv").write_text(
            "\n".join(
                [
                    "source,target,cost",
                    "A,B,1",
                    "A,C,4",
                    "B,C,1",
                    ",,",
                    "C,D,2.5",
                    "A,C,3",
                ]
            ),
            encoding="utf-8",
        )
        (tmp_path / "nodes.csv").write_text("node_id\nA\nB\nC\nD\nISLAND\n", encoding="utf-8")
        return tmp_path

    @pytest.fixture
    def repository(self, data_dir):
        return CSVGraphRepository(config=GraphConfig(data_dir=data_dir))

    def test_load_reads_edges(self, repository):
        graph = repository.load()

        assert graph["A"] == {"B": "1", "C": "3"}
        assert graph["C"] == {"D": "2.5"}

    def test_load_registers_isolated_nodes(self, repository):
        graph = repository.load()

        assert graph["ISLAND"] == {}
        assert graph["D"] == {}

    def test_load_is_cached(self, repository):
        assert repository.load() is repository.load()

    def test_clear_cache_reloads(self, repository, data_dir):
        first = repository.load()
        (data_dir / "edges.csv").write_text("source,target,cost\nX,Y,1\n", encoding="utf-8")

        repository.clear_cache()
        second = repository.load()

        assert second is not first
        assert second["X"] == {"Y": "1"}

    def test_nodes_file_is_optional(self, data_dir):
        (data_dir / "nodes.csv").unlink()
        repository = CSVGraphRepository(config=GraphConfig(data_dir=data_dir))

        assert "ISLAND" not in repository.load()
        assert "D" not in repository.load()

    def test_list_nodes_includes_edge_targets(self, data_dir):
        (data_dir / "nodes.csv").unlink()
        repository = CSVGraphRepository(config=GraphConfig(data_dir=data_dir))

        assert repository.list_nodes() == ["A", "B", "C", "D"]

    def test_missing_edges_file_raises(self, tmp_path):
        repository = CSVGraphRepository(config=GraphConfig(data_dir=tmp_path))

        with pytest.raises(GraphError) as excinfo:
            repository.load()

        assert excinfo.value.file_path.endswith("edges.csv")
        assert isinstance(excinfo.value.cause, OSError)

    def test_missing_columns_raise(self, tmp_path):
        (tmp_path / "edges.csv").write_text("from,to,weight\nA,B,1\n", encoding="utf-8")
        repository = CSVGraphRepository(config=GraphConfig(data_dir=tmp_path))

        with pytest.raises(GraphError, match="source, target, cost"):
            repository.load()

    def test_undecodable_edges_file_raises(self, tmp_path):
        (tmp_path / "edges.csv").write_bytes(b"source,target,cost\n\xff\xfe,B,1\n")
        repository = CSVGraphRepository(config=GraphConfig(data_dir=tmp_path))

        with pytest.raises(GraphError) as excinfo:
            repository.load()

        assert excinfo.value.file_path.endswith("edges.csv")
        assert isinstance(excinfo.value.cause, UnicodeDecodeError)

    def test_undecodable_nodes_file_raises(self, data_dir):
        (data_dir / "nodes.csv").write_bytes(b"node_id\n\xff\xfe\n")
        repository = CSVGraphRepository(config=GraphConfig(data_dir=data_dir))

        with pytest.raises(GraphError) as excinfo:
            repository.load()

        assert excinfo.value.file_path.endswith("nodes.csv")
        assert isinstance(excinfo.value.cause, UnicodeDecodeError)

    def test_path_finder_from_repository(self, repository):
        finder = PathFinder.from_repository(repository)

        assert finder.path("A", "D", cost=True) == {"path": ["A", "B", "C", "D"], "cost": 4.5}
        assert finder.path("A", "ISLAND") is None

    def test_invalid_cost_surfaces_from_path_finder(self, tmp_path):
        (tmp_path / "edges.csv").write_text("source,target,cost\nA,B,-4\n", encoding="utf-8")
        repository = CSVGraphRepository(config=GraphConfig(data_dir=tmp_path))

        with pytest.raises(InvalidCostError):
            PathFinder.from_repository(repository)

    def test_default_config_comes_from_environment(self, data_dir, monkeypatch):
        from graphpath.config import reset_config

        monkeypatch.setenv("GRAPHPATH_GRAPH_DATA_DIR", str(data_dir))
        reset_config()
        try:
            repository = CSVGraphRepository()
            assert repository.config.edges_path == data_dir / "edges.csv"
            assert "ISLAND" in repository.load()
        finally:
            reset_config()
