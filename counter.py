import sys
import time
import argparse
import os
from intGraph import parse
from decomposeIter import Decomposer, verify

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


class Counter:
    def __init__(self, filename):
        self.filename = filename
        self.graph = parse(filename)
        self.root = 0
        self.loops = 500
        self.debug = False
        self.verbosity = 1
        self.out = sys.stdout

    def log(self, *args):
        print(*args, file = self.out)

    #runs the dfs from self.root and reports the decomposition,
    #returns a pair (number of articulation points, number of biconnected components)
    def run(self):
        decomposer = Decomposer(self.graph)
        decomposer.debug = self.debug
        decomposer.traverse(self.root, -1)
        ap = decomposer.getArticulationPoints()

        #average over several extractions, a single one is below timer resolution on small graphs
        totalTime = 0
        bc = decomposer.getBiconnectedComponents()
        for _ in range(self.loops):
            startTime = time.time()
            bc = decomposer.getBiconnectedComponents()
            totalTime += time.time() - startTime
        averageTime = totalTime * 1000.0 / max(self.loops, 1)

        if self.debug:
            verify(decomposer)

        self.log("Number of vertices: {}".format(self.graph.numberOfVertices()))
        self.log("Number of edges: {}".format(self.graph.numberOfEdges()))
        self.log("Number of articulation points: {}".format(len(ap)))
        self.log("Number of biconnected components: {}".format(len(bc)))

        if self.verbosity >= 2:
            for v in range(self.graph.numberOfVertices()):
                self.log("{}'s children: {}".format(v, decomposer.childrenOf(v)))
                self.log("{}'s back edges: {}".format(v, decomposer.backEdgesOf(v)))

        if self.verbosity >= 1:
            self.log("List of articulation points:", " ".join([str(v) for v in sorted(ap)]))
            self.log("Biconnected components:")
            for component in bc:
                self.log(" " + " ".join([str(e) for e in component]))

        self.log("Algorithm run time: {:.3f} milliseconds".format(averageTime))
        return len(ap), len(bc)


def runDirectory(folder, args, excluded = ()):
    results = {}
    for name in sorted(os.listdir(folder)):
        path = os.path.join(folder, name)
        if name in excluded or not os.path.isfile(path):
            continue
        counter = Counter(path)
        counter.root = args.root
        counter.loops = args.loops
        counter.debug = args.debug
        counter.verbosity = 0
        counter.log(path)
        results[name] = counter.run()
    return results


def tests(args):
    #file: (articulation points, biconnected components) for a dfs from vertex 0
    files = {
            "triangle_tail.txt": (2, 3),
            "single_edge.txt": (0, 1),
            "two_triangles.txt": (3, 4),
            "bowtie.txt": (1, 2),
            "path.txt": (3, 4),
            }
    for test in files:
        counter = Counter(os.path.join(DATA_DIR, test))
        counter.loops = args.loops
        counter.debug = args.debug
        counter.verbosity = args.verbosity
        startTime = time.time()
        assert files[test] == counter.run(), test
        print("duration", time.time() - startTime)


def main(argv = None):
    parser = argparse.ArgumentParser("biconnected components counter")
    parser.add_argument("input_file", help = "A path to an edge-list file (N followed by pairs of vertices), a directory of such files, or 'tests' to run the bundled regression files. See ./data/")
    parser.add_argument("--root", help = "Vertex the depth-first search starts from", type = int, default = 0)
    parser.add_argument("--loops", help = "Number of timed component extractions to average", type = int, default = 500)
    parser.add_argument("--verbosity", help = "Verbosity level. 0 prints counts only, 2 adds the dfs children and back edges of every vertex.", type = int, default = 1)
    parser.add_argument("--exclude", help = "File names skipped in directory mode", nargs = "*", default = [])
    parser.add_argument("--debug", action = 'store_true', help = "Cross-check the results with networkx")
    args = parser.parse_args(argv)

    if args.input_file == "tests":
        tests(args)
    elif os.path.isdir(args.input_file):
        runDirectory(args.input_file, args, args.exclude)
    else:
        counter = Counter(args.input_file)
        counter.root = args.root
        counter.loops = args.loops
        counter.debug = args.debug
        counter.verbosity = args.verbosity
        counter.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
