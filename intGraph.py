import networkx as nx


class IntGraph:
    """Undirected multigraph over the vertices 0..N-1, stored as adjacency lists.

    Parallel edges and self-loops are kept as they are added.
    """

    def __init__(self, v):
        if v < 0:
            raise ValueError("v passed in must be >= 0.")
        self.adjList = [[] for _ in range(v)]
        self.edgeLog = []
        self.vertices = v

    def copy(self):
        g = IntGraph(self.vertices)
        g.adjList = [list(neighbors) for neighbors in self.adjList]
        g.edgeLog = list(self.edgeLog)
        return g

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def checkVertex(self, v, name = "v"):
        if not 0 <= v < self.vertices:
            raise ValueError("{} must be in the range of 0 to {}, got {}".format(name, self.vertices - 1, v))

    def addEdge(self, v, u):
        self.checkVertex(v, "v")
        self.checkVertex(u, "u")
        self.adjList[v].append(u)
        self.adjList[u].append(v)
        self.edgeLog.append((v, u)) #one edge, two adjacency entries

    def numberOfVertices(self):
        return self.vertices

    def numberOfEdges(self):
        return len(self.edgeLog)

    def isAdjacentTo(self, u, v):
        self.checkVertex(u, "u")
        self.checkVertex(v, "v")
        return u in self.adjList[v]

    def neighborsOf(self, v):
        self.checkVertex(v, "v")
        return list(self.adjList[v])

    def edges(self):
        return iter(list(self.edgeLog))

    def toNetworkx(self):
        G = nx.MultiGraph()
        G.add_nodes_from(range(self.vertices))
        G.add_edges_from(self.edgeLog)
        return G

    def __repr__(self):
        return "IntGraph(vertices={}, edges={})".format(self.vertices, len(self.edgeLog))


#parse an edge-list file: N followed by pairs of vertex ids in [0, N)
def parse(filename):
    if filename is None:
        raise ValueError("File name cannot be None.")
    with open(filename, "r") as f:
        tokens = f.read().split()
    if len(tokens) == 0:
        raise ValueError("{} is not well-formatted: the file is empty".format(filename))

    numbers = []
    for i, token in enumerate(tokens):
        try:
            numbers.append(int(token))
        except ValueError:
            raise ValueError("{} is not well-formatted: token {} ('{}') is not an integer".format(filename, i, token)) from None

    vertices = numbers[0]
    if vertices <= 0:
        raise ValueError("{}: first integer in the file must be a positive integer, got {}".format(filename, vertices))
    if len(numbers) % 2 == 0:
        raise ValueError("{} is not well-formatted: trailing vertex {} has no pair".format(filename, numbers[-1]))

    g = IntGraph(vertices)
    for i in range(1, len(numbers), 2):
        v, u = numbers[i], numbers[i + 1]
        for node in [v, u]:
            if node < 0 or node >= vertices:
                raise ValueError("{}: node {} must be a non-negative integer in the range of 0 to {}".format(filename, node, vertices - 1))
        g.addEdge(v, u)
    return g
