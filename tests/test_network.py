import math

import pytest

from tidbits.network import (
    LISBON_EDGES,
    SPORTS_GRAPH,
    UFC_FIGHTERS,
    UFC_FIGHTS,
    Fighter,
    PageRank,
    closeness_centrality,
    main_centrality,
    main_pagerank,
    main_shortest_path,
    shortest_distance,
)


def test_fighter_prints_its_name():
    assert str(Fighter("Nate Diaz")) == "Nate Diaz"


def test_conor_has_lowest_centrality():
    results = dict(closeness_centrality(UFC_FIGHTERS, UFC_FIGHTS))
    assert min(results, key=results.get) == "Conor McGregor"


def test_equal_fight_counts_share_centrality():
    results = dict(closeness_centrality(UFC_FIGHTERS, UFC_FIGHTS))
    assert results["Khabib Nurmagomedov"] == results["Jose Aldo"]
    assert results["Dustin Poirier"] == results["Nate Diaz"]
    assert results["Dustin Poirier"] < results["Jose Aldo"]


def test_centrality_is_reciprocal_of_fight_count():
    results = closeness_centrality(UFC_FIGHTERS, UFC_FIGHTS)
    for index, (_, closeness) in enumerate(results):
        fights = sum(index in pair for pair in UFC_FIGHTS)
        assert closeness * fights == pytest.approx(1.0)


def test_fighter_without_fights_is_infinitely_far():
    results = dict(closeness_centrality(["a", "b", "c"], [(0, 1)]))
    assert results["c"] == math.inf


def test_centrality_rejects_bad_index():
    with pytest.raises(IndexError):
        closeness_centrality(["a"], [(0, 3)])


def test_lisbon_shortest_distance():
    assert shortest_distance(LISBON_EDGES, "Belem Tower", "Lisbon Cathedral") == 8


def test_distance_is_symmetric():
    forward = shortest_distance(LISBON_EDGES, "LX Factory", "Lisbon Cathedral")
    backward = shortest_distance(LISBON_EDGES, "Lisbon Cathedral", "LX Factory")
    assert forward == backward


def test_distance_never_exceeds_direct_edge():
    for a, b, weight in LISBON_EDGES:
        assert shortest_distance(LISBON_EDGES, a, b) <= weight


def test_distance_to_self_is_zero():
    assert shortest_distance(LISBON_EDGES, "LX Factory", "LX Factory") == 0


def test_unreachable_goal_gives_none():
    edges = [("a", "b", 1), ("c", "d", 1)]
    assert shortest_distance(edges, "a", "d") is None


def test_unknown_place_raises():
    with pytest.raises(KeyError):
        shortest_distance(LISBON_EDGES, "Belem Tower", "Nowhere")


def test_negative_weight_raises():
    with pytest.raises(ValueError):
        shortest_distance([("a", "b", -1)], "a", "b")


def test_pagerank_preserves_total_rank():
    ranks = PageRank().rank(SPORTS_GRAPH)
    assert sum(ranks) == pytest.approx(1.0)


def test_pagerank_hub_ranks_highest():
    ranks = PageRank(0.85, 100).rank(SPORTS_GRAPH)
    assert ranks.index(max(ranks)) == 0


def test_pagerank_without_iterations_is_uniform():
    ranks = PageRank(0.85, 0).rank(SPORTS_GRAPH)
    assert ranks == [1 / len(SPORTS_GRAPH)] * len(SPORTS_GRAPH)


def test_pagerank_of_cycle_is_uniform():
    ranks = PageRank().rank([[1], [2], [0]])
    assert ranks == pytest.approx([1 / 3] * 3)


def test_pagerank_of_empty_graph():
    assert PageRank().rank([]) == []


def test_pagerank_rejects_link_outside_graph():
    with pytest.raises(IndexError):
        PageRank().rank([[1], [5]])


def test_main_pagerank_output(capsys):
    assert main_pagerank([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("The PageRank of ESPN is ")
    assert all(len(line) <= 78 for line in lines[5:])
    assert lines[5].startswith("PageRank is a link analysis algorithm")


def test_main_shortest_path_output(capsys):
    assert main_shortest_path([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("The shortest distance from Belem Tower to Lisbon Cathedral is ")


def test_main_centrality_output(capsys):
    assert main_centrality([]) == 0
    out = capsys.readouterr().out
    assert "The closeness centrality of Conor McGregor is" in out
    assert out.count("-----------------") == len(UFC_FIGHTERS)