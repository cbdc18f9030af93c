import pytest

from wgraph.algorithms.base import SearchAlgorithm, SearchStrategy, search_fabric
from wgraph.algorithms.bfs import BreadthFirstSearch
from wgraph.algorithms.dijkstra import DijkstraSearch


def test_search_strategy_is_abstract(sample):
    with pytest.raises(TypeError):
        SearchStrategy(sample)  # type: ignore[abstract]


def test_search_fabric(sample):
    bfs = search_fabric(sample, SearchAlgorithm.BFS)
    dijkstra = search_fabric(sample, SearchAlgorithm.DIJKSTRA)
    assert isinstance(bfs, BreadthFirstSearch)
    assert isinstance(dijkstra, DijkstraSearch)
    assert bfs.graph is sample and dijkstra.graph is sample
    assert isinstance(search_fabric(sample), DijkstraSearch)


def test_search_fabric_unknown(sample):
    with pytest.raises(ValueError, match="Unknown search algorithm"):
        search_fabric(sample, 99)  # type: ignore[arg-type]


def test_strategies_share_graph(sample):
    bfs = BreadthFirstSearch(sample)
    dijkstra = DijkstraSearch(sample)
    assert bfs.find_path("A", "D") == ["A", "B", "D"]
    assert dijkstra.find_path("A", "D") == ["A", "B", "C", "D"]
    # searches leave the graph untouched
    assert sorted(sample.edges()) == [
        ("A", "B", 1.0),
        ("A", "C", 4.0),
        ("B", "C", 2.0),
        ("B", "D", 5.0),
        ("C", "D", 1.0),
    ]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("bfs", SearchAlgorithm.BFS),
        ("BFS", SearchAlgorithm.BFS),
        ("Dijkstra", SearchAlgorithm.DIJKSTRA),
    ],
)
def test_search_algorithm_from_string(value, expected):
    assert SearchAlgorithm.from_string(value) is expected


def test_search_algorithm_from_string_invalid():
    with pytest.raises(ValueError, match="Valid values are: bfs, dijkstra"):
        SearchAlgorithm.from_string("astar")
