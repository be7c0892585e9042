import numpy as np
import pytest

from src.analysis import Betweenness, Centrality, CentralityFactory, DegreeCentrality, DistanceCentrality
from src.core.errors import InvalidCentralityError, InvalidHSVError, InvalidMaxMinError
from src.graphs import EdgeGraph

RED = (1.0, 0.0, 0.0)
BLUE = (0.0, 0.0, 1.0)


def test_normalize():
    assert Centrality.normalize(15, 20, 10) == 0.5


def test_normalize_inverted_range():
    with pytest.raises(InvalidMaxMinError):
        Centrality.normalize(1, 0, 5)


@pytest.mark.parametrize('h, expected', [
    (0, (1, 0, 0)),
    (120, (0, 1, 0)),
    (240, (0, 0, 1)),
    (60, (1, 1, 0)),
])
def test_hsv_to_rgb(h, expected):
    assert Centrality.hsv_to_rgb(h, 1, 1) == pytest.approx(expected)


def test_hsv_without_saturation_is_grey():
    assert Centrality.hsv_to_rgb(200, 0, 0.3) == (0.3, 0.3, 0.3)


@pytest.mark.parametrize('h, s, v', [(361, 1, 1), (-1, 1, 1), (0, 1.5, 1), (0, 1, -0.5)])
def test_hsv_out_of_range(h, s, v):
    with pytest.raises(InvalidHSVError):
        Centrality.hsv_to_rgb(h, s, v)


# Grado

def test_degree_star(star_graph):
    DegreeCentrality().apply(star_graph)
    colours = [v.get_colour() for v in star_graph.get_vertices()]

    assert colours[0] == pytest.approx(RED)
    assert colours[1] == pytest.approx(BLUE)
    assert colours[2] == pytest.approx(BLUE)


def test_degree_keeps_selected_colour(star_graph):
    star_graph.get_vertex(0).set_selected(True)
    DegreeCentrality().apply(star_graph)

    assert star_graph.get_vertex(0).get_colour() == (1.0, 1.0, 1.0)
    assert star_graph.get_vertex(1).get_colour() == pytest.approx(BLUE)


def test_equal_scores_are_blue():
    graph = EdgeGraph("0 1")
    DegreeCentrality().apply(graph)
    assert all(v.get_colour() == pytest.approx(BLUE) for v in graph.get_vertices())


def test_empty_graph_is_noop():
    centrality = DegreeCentrality()
    centrality.apply(EdgeGraph())
    assert centrality.get_metrics()['scores'] == []


# Distancia

def test_distance_uses_layout_positions(path_graph):
    path_graph.set_positions(np.array([[0, 0, 0], [1, 0, 0], [10, 0, 5]], dtype=float))
    centrality = DistanceCentrality()
    centrality.apply(path_graph)

    # z no interviene
    assert centrality.scores.tolist() == pytest.approx([11, 10, 19])
    assert path_graph.get_vertex(2).get_colour() == pytest.approx(RED)
    assert path_graph.get_vertex(1).get_colour() == pytest.approx(BLUE)


# Intermediación

def test_betweenness_path(path_graph):
    centrality = Betweenness()
    centrality.apply(path_graph)

    assert centrality.scores.tolist() == [2, 3, 2]
    assert path_graph.get_vertex(1).get_colour() == pytest.approx(RED)
    assert path_graph.get_vertex(0).get_colour() == pytest.approx(BLUE)


def test_betweenness_star(star_graph):
    centrality = Betweenness()
    centrality.apply(star_graph)
    assert int(np.argmax(centrality.scores)) == 0


def test_betweenness_skips_unreachable_pairs():
    graph = EdgeGraph(edge_list=[[0, 1], [2, 3]])
    centrality = Betweenness()
    centrality.apply(graph)
    assert centrality.scores.tolist() == [1, 1, 1, 1]


def test_metrics(star_graph):
    centrality = DegreeCentrality()
    centrality.apply(star_graph)
    metrics = centrality.get_metrics()

    assert metrics['centrality'] == 'DegreeCentrality'
    assert metrics['scores'] == [2, 1, 1]
    assert metrics['max'] == 2 and metrics['min'] == 1


# Fábrica

@pytest.mark.parametrize('name, cls', [
    ('Betweenness', Betweenness),
    ('DegreeCentrality', DegreeCentrality),
    ('DistanceCentrality', DistanceCentrality),
])
def test_factory_creates(name, cls):
    assert isinstance(CentralityFactory.create_centrality(name), cls)


def test_factory_unknown():
    with pytest.raises(InvalidCentralityError):
        CentralityFactory.create_centrality('Closeness')
