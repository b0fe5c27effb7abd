# Algorithm labels reported in ShortestPathResult.algorithm_used
DIJKSTRA = "Dijkstra"
BELLMAN_FORD = "Bellman-Ford"

# Distance assigned to nodes not (yet) reached from the start node
INFINITY = float('inf')
