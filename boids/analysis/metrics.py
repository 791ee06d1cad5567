from collections import Counter

import numpy as np
from scipy.sparse import csgraph, csr_matrix
from scipy.spatial import KDTree

from boids.core.rules import Rule, neighbors, select_rule


def calculate_order_parameter(direction):
    """
    Calculates the global polarization (order parameter) from headings.
    phi = | sum((cos theta_i, sin theta_i)) | / N
    Closer to 1 means aligned, 0 means disordered.
    """
    direction = np.asarray(direction, dtype=np.float64)
    if direction.size == 0:
        return 0.0

    headings = np.column_stack((np.cos(direction), np.sin(direction)))
    sum_heading = np.sum(headings, axis=0)
    return float(np.linalg.norm(sum_heading) / direction.size)


def calculate_fragmentation(pos, connection_radius, box=None):
    """
    Calculates the number of connected components and the size of the largest cluster.
    Two boids are connected if dist(i, j) <= connection_radius.
    Pass box=(width, height) to measure distances across the wrapped edges.
    """
    pos = np.asarray(pos, dtype=np.float64)
    N = pos.shape[0]
    if N == 0:
        return 0, 0

    if box is not None:
        # KDTree needs coordinates strictly inside the periodic box
        pos = np.mod(pos, box)
        pos[pos >= box] = 0.0
    tree = KDTree(pos, boxsize=box)
    # query_pairs finds all pairs with dist <= r
    pairs = tree.query_pairs(connection_radius)

    if not pairs:
        return N, 1  # All isolated

    pairs = list(pairs)
    rows = [p[0] for p in pairs]
    cols = [p[1] for p in pairs]
    data = np.ones(len(rows))
    adj = csr_matrix((data, (rows, cols)), shape=(N, N))
    # Make symmetric (undirected)
    adj = adj + adj.T

    n_components, labels = csgraph.connected_components(adj)

    _, counts = np.unique(labels, return_counts=True)
    largest_cluster_size = int(np.max(counts))

    return int(n_components), largest_cluster_size


def calculate_rule_usage(flock, params=None):
    """How many boids would follow each rule on the next tick."""
    usage = Counter({rule: 0 for rule in Rule})
    for i in range(flock.N):
        usage[select_rule(flock, i, params).rule] += 1
    return usage


def calculate_mean_neighbors(pos, radius):
    """
    Average number of boids each boid sees within `radius`.
    Uses the same strict, unwrapped distance test as the steering rules.
    """
    pos = np.asarray(pos, dtype=np.float64)
    N = pos.shape[0]
    if N == 0:
        return 0.0
    return float(np.mean([len(neighbors(pos, i, None, radius)) for i in range(N)]))
