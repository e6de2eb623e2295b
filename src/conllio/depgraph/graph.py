# Copyright (c) 2010 Leif Johnson <leif@leifjohnson.net>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Directed graphs built from dependency head arrays."""

import logging

log = logging.getLogger(__name__)

ROOT = "ROOT"
"""Node id of the virtual root in graphs built from head arrays."""


class Digraph:
    """We represent directed graphs using a map of outgoing edges for each node."""

    def __init__(self, successors, get_label=None):
        """Initialize this digraph using a successors map and a label function.

        successors: A map from source node ids to lists of target nodes that can
          be reached from each source node. For instance, {1: [2], 2: [1, 3],
          3: [1]} represents a directed graph with three nodes (1, 2, 3) and two
          cycles, (1 -> 2 -> 1) and (1 -> 2 -> 3 -> 1). Similarly, {1: [],
          2: [3], 3: []} represents a directed graph with three nodes and one
          edge that connects node 2 to node 3.
        get_label: A callable that takes two node ids and returns the label of
          the directed edge between those two nodes. Defaults to the empty
          string for every edge.
        """
        self.successors = successors
        self.get_label = get_label
        if not callable(self.get_label):
            self.get_label = lambda s, t: ""

    @classmethod
    def from_heads(cls, heads, labels=None):
        """Build the digraph of a head array, edges pointing from head to
        dependent. Roots are attached to the extra node ROOT. Heads outside
        the array are dropped.

        labels: An optional sequence of edge labels, one per dependent.
        """
        size = len(heads)
        succs = {ROOT: []}
        succs.update((i, []) for i in range(size))
        edge_labels = {}
        for dependent, head in enumerate(heads):
            source = ROOT if head is None else head
            if source != ROOT and not 0 <= source < size:
                log.debug("dropping out of range head %s of %s", head, dependent)
                continue
            succs[source].append(dependent)
            if labels is not None:
                edge_labels[source, dependent] = labels[dependent]
        return cls(succs, lambda s, t: edge_labels.get((s, t), ""))

    def __contains__(self, x):
        """Return True iff x is a node in our Digraph."""
        return x in self.successors

    def __iter__(self):
        """Iterate over the nodes in our graph."""
        return iter(self.successors)

    def num_nodes(self):
        """Return the number of nodes in this Digraph."""
        return len(self.successors)

    def num_edges(self):
        """Return the number of edges in this Digraph."""
        return sum(1 for _ in self.iteredges())

    def dot(self, name):
        """Get this graph as a dot string."""
        nodes = " ".join("_%s_%s;" % (x, name) for x in self)
        edges = " ".join(
            '_%s_%s -> _%s_%s [label="%s"];'
            % (s, name, t, name, self.get_label(s, t))
            for s, t in self.iteredges()
        )
        return "digraph _%s {%s %s}" % (name, nodes, edges)

    def iteredges(self):
        """Iterate over the pairs of node ids in all edges in this Digraph."""
        for source, targets in self.successors.items():
            for target in targets:
                yield source, target

    def find_cycle(self):
        """Find and return the nodes of a cycle in our Digraph, or None.

        The nodes are listed in edge order, starting anywhere on the cycle.
        """
        # from guido's blog :
        # http://neopythonic.blogspot.com/2009/01/detecting-cycles-in-directed-graph.html
        worklist = set(self.successors)
        while worklist:
            stack = [worklist.pop()]
            while stack:
                top = stack[-1]
                for node in self.successors.get(top, ()):
                    if node in stack:
                        return stack[stack.index(node) :]
                    if node in worklist:
                        stack.append(node)
                        worklist.remove(node)
                        break
                else:
                    stack.pop()
        return None
