import copy
import json
import logging

import numpy as np
import pytest
from pydantic import ValidationError

from src.core.errors import (
    InvalidAdjacencyMatrixError,
    InvalidEdgeError,
    InvalidGraphError,
    InvalidParamsError,
    InvalidTokenError,
    InvalidVertexError,
    NoHeaderError,
    PrematureEOFError,
    UnsupportedTypeError,
)
from src.core.graph import Graph, GraphAnalyzer
from src.graphs import AdjacencyGraph, EdgeGraph, GraphFactory, MatrixMarketGraph
from tests.conftest import MATRIX_MARKET_STAR, STAR_MATRIX


def assert_degrees_match_matrix(graph):
    matrix = graph.get_adjacency_matrix()
    for i, vertex in enumerate(graph.get_vertices()):
        assert vertex.get_degree() == int(matrix[i].sum())


# split

def test_split_numbers():
    assert Graph.split(' 1  2\t3 ') == [1, 2, 3]


def test_split_blank():
    assert Graph.split('   ') == []


def test_split_names_bad_token():
    with pytest.raises(InvalidTokenError, match="'x' is not a number"):
        Graph.split('1 x 2')


# Matriz de adyacencia

def test_adjacency_star(star_graph):
    assert star_graph.get_num_vertices() == 3
    assert star_graph.get_vertex(0).get_attached_points() == [1, 2]
    assert star_graph.get_edges() == [[0, 1], [0, 2]]
    assert_degrees_match_matrix(star_graph)


def test_adjacency_round_trip_is_byte_identical(star_graph):
    assert star_graph.to_string() == STAR_MATRIX
    assert str(AdjacencyGraph(star_graph.to_string())) == STAR_MATRIX


def test_adjacency_ids_restart_per_graph():
    first = AdjacencyGraph(STAR_MATRIX)
    second = AdjacencyGraph(STAR_MATRIX)
    assert [v.get_vertex_number() for v in second.get_vertices()] == [0, 1, 2]
    assert first == second


@pytest.mark.parametrize('content', [
    "0 1\n1 0 0",
    "0 1 1\n1 0 0",
    "0 2\n2 0",
])
def test_adjacency_invalid(content):
    with pytest.raises(InvalidAdjacencyMatrixError):
        AdjacencyGraph(content)


def test_adjacency_bad_token():
    with pytest.raises(InvalidTokenError):
        AdjacencyGraph("0 a\n1 0")


def test_adjacency_warns_on_broken_invariants(caplog):
    with caplog.at_level(logging.WARNING, logger='src.graphs.adjacency_graph'):
        graph = AdjacencyGraph("0 1 0\n0 0 0\n0 0 1")

    # Se acepta igualmente: 0 -> 1 se une, pero no hay arista canónica
    assert graph.get_vertex(0).get_attached_points() == [1]
    assert graph.get_edges() == []
    assert '(0, 1)' in caplog.text
    assert 'Diagonal no nula en los vértices: [2]' in caplog.text


def test_symmetric_adjacency_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger='src.graphs.adjacency_graph'):
        AdjacencyGraph(STAR_MATRIX)
    assert caplog.records == []


def test_adjacency_empty():
    graph = AdjacencyGraph('')
    assert graph.get_num_vertices() == 0
    assert graph.get_edges() == []


# Lista de aristas

def test_edge_list_direct(triangle_graph):
    expected = np.ones((3, 3), dtype=int) - np.eye(3, dtype=int)
    assert np.array_equal(triangle_graph.get_adjacency_matrix(), expected)
    assert triangle_graph.get_edges() == [[0, 1], [0, 2], [1, 2]]
    assert_degrees_match_matrix(triangle_graph)


def test_edge_list_text_canonical():
    graph = EdgeGraph("1 0\n\n2 1\n0 2\n")
    assert graph.to_string() == "0 1\n0 2\n1 2"
    assert graph.get_num_vertices() == 3


def test_edge_list_round_trip_set_equal():
    graph = EdgeGraph("3 1\n0 3\n2 0")
    again = EdgeGraph(graph.to_string())
    assert set(graph.to_string().splitlines()) == set(again.to_string().splitlines())
    assert np.array_equal(again.get_adjacency_matrix(), graph.get_adjacency_matrix())


def test_edge_list_vertex_count_from_max_endpoint():
    graph = EdgeGraph("0 5")
    assert graph.get_num_vertices() == 6
    assert graph.get_vertex(3).get_degree() == 0


def test_edge_list_duplicates_and_loops_ignored():
    graph = EdgeGraph("0 1\n1 0\n1 1")
    assert graph.get_edges() == [[0, 1]]
    assert_degrees_match_matrix(graph)


def test_edge_list_both_params():
    with pytest.raises(InvalidParamsError):
        EdgeGraph("0 1", edge_list=[[0, 1]])


@pytest.mark.parametrize('edge_list', [[[0, 1, 2]], [[0]], [[0, 1.5]], [[0, -1]]])
def test_edge_list_invalid_pairs(edge_list):
    with pytest.raises(InvalidEdgeError):
        EdgeGraph(edge_list=edge_list)


def test_edge_list_invalid_line():
    with pytest.raises(InvalidEdgeError):
        EdgeGraph("0 1 2")


def test_edge_list_empty():
    assert EdgeGraph('').get_num_vertices() == 0
    assert EdgeGraph().get_num_vertices() == 0


# Matrix Market

def test_matrix_market_star():
    graph = MatrixMarketGraph(MATRIX_MARKET_STAR)
    assert graph.get_num_vertices() == 3
    assert graph.get_edges() == [[0, 1], [0, 2]]
    assert_degrees_match_matrix(graph)


def test_matrix_market_writer_sorts_pairs():
    graph = MatrixMarketGraph(
        "%%MatrixMarket matrix coordinate pattern symmetric\n4 4 3\n4 2\n2 1\n3 1\n"
    )
    assert graph.to_string().splitlines() == [
        "%%MatrixMarket matrix coordinate pattern symmetric",
        "4 4 3",
        "1 2",
        "1 3",
        "2 4",
    ]
    assert MatrixMarketGraph(graph.to_string()).to_string() == graph.to_string()


def test_matrix_market_unsupported_type():
    with pytest.raises(UnsupportedTypeError, match='only supports'):
        MatrixMarketGraph("%%MatrixMarket matrix coordinate real general\n2 2 1\n1 2 0.5\n")


def test_matrix_market_unknown_type():
    with pytest.raises(UnsupportedTypeError):
        MatrixMarketGraph("%%MatrixMarket matrix sparse pattern symmetric\n2 2 1\n2 1\n")


def test_matrix_market_no_header():
    with pytest.raises(NoHeaderError):
        MatrixMarketGraph("%%Matrix matrix coordinate pattern symmetric\n2 2 1\n2 1\n")


def test_matrix_market_short_banner():
    with pytest.raises(PrematureEOFError):
        MatrixMarketGraph("%%MatrixMarket matrix coordinate pattern\n2 2 1\n2 1\n")


def test_matrix_market_missing_entries():
    with pytest.raises(PrematureEOFError):
        MatrixMarketGraph("%%MatrixMarket matrix coordinate pattern symmetric\n3 3 2\n2 1\n")


def test_matrix_market_missing_size():
    with pytest.raises(PrematureEOFError):
        MatrixMarketGraph("%%MatrixMarket matrix coordinate pattern symmetric\n% nada\n")


def test_matrix_market_out_of_range():
    with pytest.raises(InvalidEdgeError):
        MatrixMarketGraph("%%MatrixMarket matrix coordinate pattern symmetric\n2 2 1\n3 1\n")


# Fábrica

@pytest.mark.parametrize('content, expected', [
    (MATRIX_MARKET_STAR, MatrixMarketGraph),
    ("0 1\n1 2", EdgeGraph),
    (STAR_MATRIX, AdjacencyGraph),
    ('', EdgeGraph),
])
def test_factory_sniffing(content, expected):
    assert type(GraphFactory.parse(content)) is expected


def test_factory_rejects_unknown_format():
    with pytest.raises(InvalidGraphError, match='not supported'):
        GraphFactory.parse("hello world")


def test_factory_keeps_short_adjacency_as_edge_list():
    # Una matriz 2x2 tiene la primera línea de longitud 3
    assert type(GraphFactory.parse("0 1\n1 0")) is EdgeGraph


# Mutación

def test_attach_and_detach_vertices(path_graph):
    assert path_graph.attach_vertices(0, 2)
    assert path_graph.get_edges() == [[0, 1], [0, 2], [1, 2]]
    assert not path_graph.attach_vertices(2, 0)
    assert_degrees_match_matrix(path_graph)

    path_graph.detach_vertices(1, 0)
    assert path_graph.get_edges() == [[0, 2], [1, 2]]
    assert path_graph.get_vertex(0).get_attached_points() == [2]
    assert_degrees_match_matrix(path_graph)

    with pytest.raises(InvalidVertexError):
        path_graph.detach_vertices(0, 1)


def test_attach_out_of_range(path_graph):
    with pytest.raises(InvalidVertexError):
        path_graph.attach_vertices(0, 5)
    with pytest.raises(InvalidVertexError):
        path_graph.attach_vertices(1, 1)


def test_get_vertex_out_of_range(path_graph):
    with pytest.raises(InvalidVertexError):
        path_graph.get_vertex(3)


# Geometría

def test_bounding_box(path_graph):
    path_graph.set_positions(np.array([[0, 0, 0], [2, -1, 1], [-3, 4, 0]], dtype=float))
    low, high = path_graph.get_bounding_box()
    assert np.allclose(low, [-3, -1, 0])
    assert np.allclose(high, [2, 4, 1])


def test_bounding_box_empty():
    low, high = EdgeGraph().get_bounding_box()
    assert np.allclose(low, 0) and np.allclose(high, 0)


# Igualdad

def test_structural_equality_and_hash(star_graph):
    other = AdjacencyGraph(STAR_MATRIX)
    assert other == star_graph
    assert hash(other) == hash(star_graph)

    other.get_vertex(1).set_pos(x=3)
    assert other != star_graph


# JSON

def test_json_round_trip(star_graph):
    star_graph.get_vertex(0).set_text('centro')
    star_graph.get_vertex(2).set_pos(1.5, -2.0, 0.0)

    data = json.loads(json.dumps(star_graph.to_json()))
    restored = Graph.from_json(data)

    assert type(restored) is AdjacencyGraph
    assert restored == star_graph
    assert restored.to_string() == STAR_MATRIX


@pytest.mark.parametrize('graph_cls, content', [
    (EdgeGraph, "0 1\n1 2"),
    (MatrixMarketGraph, MATRIX_MARKET_STAR),
])
def test_json_dispatches_on_type(graph_cls, content):
    graph = graph_cls(content)
    restored = Graph.from_json(graph.to_json())
    assert type(restored) is graph_cls
    assert restored.to_string() == graph.to_string()


def test_json_relinks_shifted_ids(star_graph):
    data = copy.deepcopy(star_graph.to_json())
    for vertex in data['vertices']:
        vertex['vertexNumber'] += 10
        vertex['attachedPoints'] = [p + 10 for p in vertex['attachedPoints']]
        vertex['edges'] = [{'from': e['from'] + 10, 'to': e['to'] + 10} for e in vertex['edges']]

    restored = Graph.from_json(data)
    hub = restored.get_vertex(0)

    assert [v.get_vertex_number() for v in restored.get_vertices()] == [0, 1, 2]
    assert hub.get_attached_points() == [1, 2]
    assert [e.get_ends() for e in hub.get_edges()] == [(0, 1), (0, 2)]


def test_json_unresolved_reference(star_graph):
    data = star_graph.to_json()
    data['vertices'][0]['attachedPoints'] = [42]
    with pytest.raises(InvalidGraphError):
        Graph.from_json(data)


def test_json_unknown_type(star_graph):
    data = star_graph.to_json()
    data['type'] = 'SparseGraph'
    with pytest.raises(InvalidGraphError):
        Graph.from_json(data)


def test_json_type_must_match_class(star_graph):
    with pytest.raises(InvalidGraphError):
        EdgeGraph.from_json(star_graph.to_json())


def test_json_matrix_dimension(star_graph):
    data = star_graph.to_json()
    data['adjacencyMatrix'] = data['adjacencyMatrix'][:2]
    with pytest.raises(InvalidAdjacencyMatrixError):
        Graph.from_json(data)


def test_json_schema_failure(star_graph):
    data = star_graph.to_json()
    del data['type']
    with pytest.raises(ValidationError):
        Graph.from_json(data)


# Estadísticas

def test_statistics(star_graph):
    stats = GraphAnalyzer.get_statistics(star_graph)
    assert stats['nodos'] == 3
    assert stats['aristas'] == 2
    assert stats['componentes'] == 1
    assert stats['componente_mayor'] == 3
    assert stats['densidad'] == pytest.approx(2 / 3)


def test_statistics_empty():
    assert GraphAnalyzer.get_statistics(EdgeGraph())['nodos'] == 0


def test_to_networkx_carries_attributes(star_graph):
    G = star_graph.to_networkx()
    assert sorted(G.edges()) == [(0, 1), (0, 2)]
    assert G.nodes[0]['colour'] == (1.0, 1.0, 1.0)
    assert len(G.nodes[0]['pos']) == 3
