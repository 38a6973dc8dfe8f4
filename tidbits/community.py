"""Find communities of accounts that retweet each other."""

from __future__ import annotations

import argparse
import json
from collections.abc import Iterable, Mapping, Sequence
from itertools import pairwise

TWITTER_USERNAMES = (
    "blackmattersus",
    "bleepthepolice",
    "jenn_abrams",
    "leroylovesusa",
    "missourinewsus",
    "rightnpr",
    "ten_gop",
    "traceyhappymom",
    "trayneshacole",
    "traceyhappymom",
    "ten_gop",
    "leroylovesusa",
    "leroylovesusa",
    "traceyhappymom",
    "traceyhappymom",
    "traceyhappymom",
    "ten_gop",
    "traceyhappymom",
    "jenn_abrams",
    "ten_gop",
    "rightnpr",
    "traceyhappymom",
    "leroylovesusa",
    "ten_gop",
    "ten_gop",
    "jenn_abrams",
    "leroylovesusa",
    "leroylovesusa",
    "ten_gop",
    "traceyhappymom",
    "ten_gop",
    "leroylovesusa",
    "ten_gop",
    "traceyhappymom",
    "jenn_abrams",
    "trayneshacole",
    "ten_gop",
    "ten_gop",
    "leroylovesusa",
    "leroylovesusa",
    "leroylovesusa",
    "leroylovesusa",
    "ten_gop",
    "ten_gop",
    "leroylovesusa",
    "ten_gop",
    "ten_gop",
    "traceyhappymom",
    "traceyhappymom",
    "ten_gop",
    "traceyhappymom",
    "ten_gop",
    "jenn_abrams",
    "ten_gop",
    "ten_gop",
    "leroylovesusa",
    "worldofhashtags",
    "traceyhappymom",
    "ten_gop",
    "leroylovesusa",
    "ten_gop",
    "traceyhappymom",
    "traceyhappymom",
    "ten_gop",
    "traceyhappymom",
    "traceyhappymom",
    "worldofhashtags",
    "ten_gop",
    "traceyhappymom",
    "ten_gop",
    "ten_gop",
    "ten_gop",
    "rightnpr",
    "ten_gop",
    "leroylovesusa",
    "traceyhappymom",
    "leroylovesusa",
    "leroylovesusa",
    "traceyhappymom",
    "traceyhappymom",
    "traceyhappymom",
    "ten_gop",
    "leroylovesusa",
    "traceyhappymom",
    "ten_gop",
    "blackmattersus",
    "ten_gop",
    "leroylovesusa",
    "ten_gop",
    "traceyhappymom",
    "jenn_abrams",
    "trayneshacole",
    "ten_gop",
    "ten_gop",
    "leroylovesusa",
    "leroylovesusa",
    "leroylovesusa",
    "leroylovesusa",
    "ten_gop",
    "ten_gop",
    "leroylovesusa",
    "ten_gop",
    "ten_gop",
    "traceyhappymom",
    "traceyhappymom",
    "worldofhashtags",
    "blackmattersus",
    "jenn_abrams",
    "traceyhappymom",
    "leroylovesusa",
    "jenn_abrams",
    "leroylovesusa",
    "traceyhappymom",
    "leroylovesusa",
    "jenn_abrams",
    "ten_gop",
    "leroylovesusa",
    "ten_gop",
    "ten_gop",
    # A small, separate circle of accounts.
    "journalist1",
    "journalist2",
    "journalist3",
    "journalist1",
    "journalist2",
    "journalist1",
    "journalist3",
    "journalist2",
    "journalist1",
    "journalist3",
    "journalist2",
    "journalist3",
    "journalist1",
    "journalist2",
    "journalist1",
    "journalist3",
    "journalist2",
    "journalist1",
    "journalist3",
    "journalist2",
    "journalist3",
)

Graph = Mapping[str, Sequence[str]]


def build_retweet_graph(usernames: Iterable[str]) -> dict[str, list[str]]:
    """Link every username to the one that follows it.

    Nodes appear in order of first appearance; repeated links are kept.
    """
    graph: dict[str, list[str]] = {}
    for user, mention in pairwise(usernames):
        graph.setdefault(user, [])
        graph.setdefault(mention, [])
        graph[user].append(mention)
    return graph


def _nodes(graph: Graph) -> list[str]:
    nodes = dict.fromkeys(graph)
    for successors in graph.values():
        nodes.update(dict.fromkeys(successors))
    return list(nodes)


def _reverse(graph: Graph, nodes: Iterable[str]) -> dict[str, list[str]]:
    reverse: dict[str, list[str]] = {node: [] for node in nodes}
    for node, successors in graph.items():
        for successor in successors:
            reverse[successor].append(node)
    return reverse


def _postorder(graph: Graph, root: str, visited: set[str]) -> list[str]:
    finished = []
    visited.add(root)
    stack = [(root, iter(graph.get(root, ())))]
    while stack:
        node, successors = stack[-1]
        for successor in successors:
            if successor not in visited:
                visited.add(successor)
                stack.append((successor, iter(graph.get(successor, ()))))
                break
        else:
            stack.pop()
            finished.append(node)
    return finished


def _reachable(graph: Graph, root: str, visited: set[str]) -> list[str]:
    found = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        found.append(node)
        stack.extend(n for n in graph.get(node, ()) if n not in visited)
    return found


def kosaraju_scc(graph: Graph) -> list[list[str]]:
    """Return the strongly connected components of a directed graph.

    Components come in reverse topological order: a component is listed
    before any component that links to it.
    """
    nodes = _nodes(graph)
    reverse = _reverse(graph, nodes)
    visited: set[str] = set()
    finish_order: list[str] = []
    for node in nodes:
        if node not in visited:
            finish_order.extend(_postorder(reverse, node, visited))
    visited = set()
    components = []
    for node in reversed(finish_order):
        if node not in visited:
            components.append(_reachable(graph, node, visited))
    return components


def detect_communities(usernames: Iterable[str]) -> list[list[str]]:
    """Build the retweet graph of ``usernames`` and return its communities."""
    return kosaraju_scc(build_retweet_graph(usernames))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the communities found among the known accounts."""
    argparse.ArgumentParser(description="Detect retweet communities").parse_args(argv)
    for component in detect_communities(TWITTER_USERNAMES):
        print(f"{len(component)} nodes in community discovered")
        print(json.dumps(component, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())