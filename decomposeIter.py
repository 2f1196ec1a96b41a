from collections import namedtuple
import networkx as nx

UNVISITED = "unvisited"
IN_PROGRESS = "in-progress"
FINISHED = "finished"


class Edge(namedtuple("Edge", ["v", "u"])):
    """An undirected edge of a biconnected component, printed as v-u."""
    __slots__ = ()

    def __new__(cls, v, u, vertices = None):
        if vertices is not None:
            if not 0 <= v < vertices:
                raise ValueError("v must be in the range of 0 and {}, got {}".format(vertices - 1, v))
            if not 0 <= u < vertices:
                raise ValueError("u must be in the range of 0 and {}, got {}".format(vertices - 1, u))
        return super().__new__(cls, v, u)

    def key(self):
        return frozenset((self.v, self.u))

    def __str__(self):
        return "{}-{}".format(self.v, self.u)


class Decomposer:
    """Depth-first search over a private copy of an IntGraph.

    traverse() records DFS numbers, LOW values, tree children, back edges and
    articulation points; getBiconnectedComponents() replays the recorded tree
    to split the edges into biconnected components. Both walks use explicit
    stacks, so deep graphs do not hit the recursion limit.
    """

    def __init__(self, graph):
        if graph is None:
            raise ValueError("Graph passed in cannot be None.")
        self.graph = graph.copy()
        self.vertices = self.graph.numberOfVertices()
        self.debug = False
        self.reset()

    def reset(self):
        self.dfsNums = [-1 for _ in range(self.vertices)]
        self.low = [0 for _ in range(self.vertices)]
        self.children = [[] for _ in range(self.vertices)]
        self.backEdges = [[] for _ in range(self.vertices)]
        self.finished = [False for _ in range(self.vertices)]
        self.articPts = set()
        self.root = None
        self.dfsCount = 0

    def checkVertex(self, v):
        if not 0 <= v < self.vertices:
            raise ValueError("v must be in the range of 0 and {}, got {}".format(self.vertices - 1, v))

    def visit(self, v):
        self.dfsCount += 1
        if self.dfsCount == 1:
            self.root = v
        self.dfsNums[v] = self.dfsCount
        self.low[v] = self.dfsCount

    def traverse(self, v, parent = -1):
        # a finished pass from the same root is kept as is, parent is not looked at
        if self.doneWithDFS(v):
            return

        if parent < -1 or parent >= self.vertices:
            raise ValueError("parent must be in the range of -1 and {}, got {}".format(self.vertices - 1, parent))

        if self.dfsCount == self.vertices:
            self.reset()
        elif self.dfsNums[v] != -1:
            #v was already reached by the unfinished pass, start a new one from v
            self.reset()

        self.visit(v)
        treeRoot = v if (parent == -1 or self.dfsNums[v] == 1) else None

        #frames are [vertex, parent, neighbor cursor]
        stack = [[v, parent, 0]]
        while len(stack) > 0:
            frame = stack[-1]
            w, wParent, cursor = frame
            neighbors = self.graph.adjList[w]
            if cursor < len(neighbors):
                frame[2] += 1
                x = neighbors[cursor]
                if self.dfsNums[x] == -1:
                    self.children[w].append(x)
                    self.visit(x)
                    stack.append([x, w, 0])
                elif x != wParent:
                    if self.dfsNums[x] < self.dfsNums[w]:
                        self.backEdges[w].append(x)
                    self.low[w] = min(self.low[w], self.dfsNums[x])
                continue

            stack.pop()
            self.finished[w] = True
            if len(stack) == 0:
                break
            p = stack[-1][0]
            self.low[p] = min(self.low[p], self.low[w])
            if p == treeRoot:
                #the root is a cut vertex iff it has more than one tree child
                if len(self.children[p]) > 1:
                    self.articPts.add(p)
            elif self.low[w] >= self.dfsNums[p]:
                self.articPts.add(p)

        if self.debug:
            for x in range(self.vertices):
                if self.dfsNums[x] != -1:
                    assert self.low[x] <= self.dfsNums[x], "low[{}] = {} exceeds dfs# {}".format(x, self.low[x], self.dfsNums[x])

    def getRootOfDFS(self):
        return self.root

    def doneWithDFS(self, v):
        self.checkVertex(v)
        return self.root == v and self.dfsCount == self.vertices

    def dfsNumberOf(self, v):
        self.checkVertex(v)
        return self.dfsNums[v]

    def lowOf(self, v):
        self.checkVertex(v)
        return self.low[v]

    def childrenOf(self, v):
        self.checkVertex(v)
        return list(self.children[v])

    def backEdgesOf(self, v):
        self.checkVertex(v)
        return list(self.backEdges[v])

    def vertexState(self, v):
        self.checkVertex(v)
        if self.finished[v]:
            return FINISHED
        if self.dfsNums[v] != -1:
            return IN_PROGRESS
        return UNVISITED

    def isArticulationPoint(self, v):
        self.checkVertex(v)
        return v in self.articPts

    def getArticulationPoints(self):
        return set(self.articPts)

    def edge(self, v, u):
        return Edge(v, u, self.vertices)

    def getBiconnectedComponents(self):
        if self.root is None:
            raise RuntimeError("Must call traverse before calling getBiconnectedComponents.")

        components = []
        for v in range(self.vertices):
            for x in self.children[v]:
                #x's subtree cannot climb above v, so the tree edge v-x opens a new component
                if self.low[x] >= self.dfsNums[v]:
                    component = [self.edge(v, x)]
                    self.collectComponent(component, x)
                    components.append(component)
        return components

    def collectComponent(self, component, v):
        component.extend(self.edge(v, w) for w in self.backEdges[v])
        stack = [(v, iter(self.children[v]))]
        while len(stack) > 0:
            w, children = stack[-1]
            for x in children:
                if self.low[x] < self.dfsNums[w]:
                    component.append(self.edge(w, x))
                    component.extend(self.edge(x, y) for y in self.backEdges[x])
                    stack.append((x, iter(self.children[x])))
                    break
            else:
                stack.pop()


def normalizeComponents(components):
    return sorted(sorted(tuple(sorted(e)) for e in comp) for comp in components)


#cross-check a finished traversal against networkx on the vertices it reached
def verify(decomposer):
    G = nx.Graph(decomposer.graph.toNetworkx())
    G.remove_edges_from(list(nx.selfloop_edges(G)))
    reached = [v for v in range(decomposer.vertices) if decomposer.dfsNums[v] != -1]
    H = G.subgraph(reached)

    expected = set(nx.articulation_points(H))
    actual = decomposer.getArticulationPoints()
    assert expected == actual, "articulation points differ: networkx {}, dfs {}".format(sorted(expected), sorted(actual))

    expectedComponents = normalizeComponents(nx.biconnected_component_edges(H))
    actualComponents = normalizeComponents(decomposer.getBiconnectedComponents())
    assert expectedComponents == actualComponents, "biconnected components differ: networkx {}, dfs {}".format(expectedComponents, actualComponents)
    return True
