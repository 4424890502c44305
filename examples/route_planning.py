"""Route planning example: spanning trees and shortest paths on a road map.

Builds a small undirected road network, compares the three minimum spanning
tree algorithms, then routes a traveller through a directed one-way network.
"""

from __future__ import annotations

import routegraph as rg


def main() -> None:
    """Run the spanning-tree comparison and a routed trip."""
    roads = rg.WeightedGraph(directed=False)
    roads.add_edge(1, 2, 2)
    roads.add_edge(1, 3, 3)
    roads.add_edge(2, 3, 1)
    roads.add_edge(2, 4, 4)
    roads.add_edge(3, 4, 5)

    print("Road network:")
    roads.print_adjacency()

    for name, build in (
        ("Prim", roads.mst_prim),
        ("Kruskal", roads.mst_kruskal),
        ("Boruvka", roads.mst_boruvka),
    ):
        edges, weight = build(verbose=False)
        print(f"{name}: {len(edges)} edges, total weight {weight}")

    one_way = rg.WeightedGraph(directed=True)
    one_way.add_edge(1, 2, 2)
    one_way.add_edge(2, 3, 3)
    one_way.add_edge(1, 3, 10)
    one_way.add_edge(3, 4, 1)

    env = rg.Environment()
    env.add_route(rg.Route(rg.Point("Depot", 0, 0), rg.Point("Harbour", 6, 0), 6))
    env.add_obstacle(rg.Obstacle("Traffic jam", 2, 1))
    env.show()

    route = env.find_optimal_route(one_way, 1, 4, "Delivery van")
    env.move_along("Delivery van", route)


if __name__ == "__main__":
    main()
