# License: BSD3

"""
Checks on the dependency structure of a sentence.

A well-formed sentence is a tree rooted at node 0; annotation errors can
however leave us with dependents that (indirectly) govern their own
head.
"""

import networkx as nx


def dependency_graph(sentence):
    """
    Directed graph of a sentence, with an edge from each head to its
    dependents. Every node (the root included) is in the graph, even
    when it has no recorded head.

    Parameters
    ----------
    sentence : Sentence

    Returns
    -------
    graph : networkx.DiGraph
    """
    graph = nx.DiGraph()
    graph.add_nodes_from(range(len(sentence)))
    for idx in range(1, len(sentence)):
        edge = sentence.head(idx)
        if edge is not None:
            graph.add_edge(edge.head, idx, relation=edge.relation)
    return graph


def find_cycles(sentence):
    """Groups of nodes which are on a cycle together.

    A single node governing itself is not reported.

    Returns
    -------
    cycles : list of list of int
        Node indices (1-based, as in the head column) in increasing
        order, cycles ordered by their lowest node
    """
    components = nx.strongly_connected_components(dependency_graph(sentence))
    return sorted(sorted(x) for x in components if len(x) > 1)
