"""Graph measures: fighter centrality, shortest walking routes and PageRank."""

from __future__ import annotations

import argparse
import heapq
import math
import textwrap
from collections import defaultdict
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass

UFC_FIGHTERS = (
    "Dustin Poirier",
    "Khabib Nurmagomedov",
    "Jose Aldo",
    "Conor McGregor",
    "Nate Diaz",
)
UFC_FIGHTS = ((0, 1), (1, 3), (3, 0), (3, 2), (3, 4), (0, 4), (2, 4))

LISBON_EDGES = (
    ("Belem Tower", "Jerónimos Monastery", 1),
    ("Belem Tower", "LX Factory", 3),
    ("Belem Tower", "Commerce Square", 7),
    ("Jerónimos Monastery", "LX Factory", 3),
    ("Jerónimos Monastery", "Commerce Square", 6),
    ("LX Factory", "Commerce Square", 5),
    ("Commerce Square", "Lisbon Cathedral", 1),
)

SPORTS_GRAPH = ((1, 2), (0,), (0, 3), (0,), (0, 1))
SPORTS_NAMES = ("ESPN", "NFL", "NBA", "UFC", "MLB")

PAGERANK_EXPLANATION = (
    "PageRank is a link analysis algorithm used by Google that uses the hyperlink "
    "structure of the web to determine a quality ranking for each web page. It works "
    "by counting the number and quality of links to a page to determine a rough "
    "estimate of how important the website is."
)


@dataclass(frozen=True)
class Fighter:
    """A fighter in the network."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PageRank:
    """PageRank with a fixed damping factor and number of iterations."""

    damping: float = 0.85
    iterations: int = 100

    def rank(self, graph: Sequence[Sequence[int]]) -> list[float]:
        """Rank the nodes of ``graph``, given as lists of linked node indexes."""
        n = len(graph)
        if n == 0:
            return []
        for edges in graph:
            for edge in edges:
                if not 0 <= edge < n:
                    raise IndexError(f"link to node {edge} outside the graph of {n} nodes")
        teleport = (1.0 - self.damping) / n
        ranks = [1.0 / n] * n
        for _ in range(self.iterations):
            incoming = [0.0] * n
            for rank, edges in zip(ranks, graph):
                if not edges:
                    continue
                share = rank / len(edges)
                for edge in edges:
                    incoming[edge] += share
            ranks = [value * self.damping + teleport for value in incoming]
        return ranks


def closeness_centrality(
    names: Sequence[str], fights: Iterable[tuple[int, int]]
) -> list[tuple[str, float]]:
    """Return each name with the reciprocal of its number of fights.

    ``fights`` holds pairs of indexes into ``names``. A name without fights
    gets infinity.
    """
    degree = [0] * len(names)
    for a, b in fights:
        for index in (a, b):
            if not 0 <= index < len(names):
                raise IndexError(f"fighter index {index} out of range")
        degree[a] += 1
        if b != a:
            degree[b] += 1
    return [
        (name, 1.0 / count if count else math.inf) for name, count in zip(names, degree)
    ]


def shortest_distance(
    edges: Iterable[tuple[Hashable, Hashable, float]], start: Hashable, goal: Hashable
) -> float | None:
    """Length of the shortest route between two places over undirected edges.

    Returns ``None`` when ``goal`` cannot be reached from ``start``.
    """
    adjacency: dict[Hashable, list[tuple[Hashable, float]]] = defaultdict(list)
    for a, b, weight in edges:
        if weight < 0:
            raise ValueError(f"edge weight must not be negative, got {weight}")
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))
    for node in (start, goal):
        if node not in adjacency:
            raise KeyError(node)
    best = {start: 0}
    queue: list[tuple[float, int, Hashable]] = [(0, 0, start)]
    done = set()
    tie = 1
    while queue:
        distance, _, node = heapq.heappop(queue)
        if node in done:
            continue
        if node == goal:
            return distance
        done.add(node)
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if neighbour not in done and candidate < best.get(neighbour, math.inf):
                best[neighbour] = candidate
                heapq.heappush(queue, (candidate, tie, neighbour))
                tie += 1
    return None


def _explain(name: str, closeness: float) -> str | None:
    if name == "Conor McGregor":
        return (
            f"{name} has the lowest centrality because he has fought with all other "
            "fighters in the network. In this context, a lower centrality value means "
            "a higher number of fights."
        )
    if name in ("Dustin Poirier", "Nate Diaz"):
        return (
            f"{name} has a centrality of {closeness:.2f}, implying they had less fights "
            "compared to Conor McGregor but more than Khabib Nurmagomedov and Jose Aldo."
        )
    if name in ("Khabib Nurmagomedov", "Jose Aldo"):
        return (
            f"{name} has the highest centrality of {closeness:.2f} as they have fought "
            "with the least number of fighters."
        )
    return None


def main_centrality(argv: Sequence[str] | None = None) -> int:
    """Print the closeness centrality of each fighter."""
    argparse.ArgumentParser(description="Fighter closeness centrality").parse_args(argv)
    fighters = [Fighter(name) for name in UFC_FIGHTERS]
    results = closeness_centrality([fighter.name for fighter in fighters], UFC_FIGHTS)
    for fighter, (_, closeness) in zip(fighters, results):
        print(f"The closeness centrality of {fighter} is {closeness:.2f}")
        explanation = _explain(fighter.name, closeness)
        if explanation is not None:
            print(explanation)
        print("-----------------")
    return 0


def main_shortest_path(argv: Sequence[str] | None = None) -> int:
    """Print the shortest distance between two Lisbon landmarks."""
    argparse.ArgumentParser(description="Shortest route across Lisbon").parse_args(argv)
    distance = shortest_distance(LISBON_EDGES, "Belem Tower", "Lisbon Cathedral")
    if distance is None:
        print("No route found from Belem Tower to Lisbon Cathedral.")
    else:
        print(
            "The shortest distance from Belem Tower to Lisbon Cathedral is "
            f"{distance} km"
        )
    return 0


def main_pagerank(argv: Sequence[str] | None = None) -> int:
    """Rank a small graph of sports sites and explain PageRank."""
    argparse.ArgumentParser(description="PageRank of sports websites").parse_args(argv)
    ranks = PageRank(0.85, 100).rank(SPORTS_GRAPH)
    for name, rank in zip(SPORTS_NAMES, ranks):
        print(f"The PageRank of {name} is {rank!r}")
    print(textwrap.fill(PAGERANK_EXPLANATION, 78))
    return 0


if __name__ == "__main__":
    raise SystemExit(main_pagerank())