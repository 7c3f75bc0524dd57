import networkx as nx
from pathlib import Path
import io
import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt

def visualize(graph, route_nodes: list = None, show: bool = False, save_path: str | Path = None):
    """Draw the travel network, highlighting `route_nodes` (0-based) in red."""
    route_nodes = list(route_nodes or [])
    for node in route_nodes:
        if not isinstance(node, int) or not 0 <= node < graph.num_cities:
            raise ValueError(f"Route node {node!r} is not a city of this network")

    G = graph.to_networkx()
    pos = nx.circular_layout(G)
    labels = {n: data["name"] for n, data in G.nodes(data=True)}

    fig, ax = plt.subplots(figsize=(8, 8))
    nx.draw_networkx_edges(G, pos=pos, edge_color="#cccccc", width=1.5, ax=ax)
    nx.draw_networkx_nodes(G, pos=pos, node_color="#4ab3f4", node_size=900, ax=ax)
    nx.draw_networkx_labels(G, pos=pos, labels=labels, font_size=9, ax=ax)

    route_edges = list(zip(route_nodes[:-1], route_nodes[1:]))
    if route_edges:
        nx.draw_networkx_edges(
            G,
            pos=pos,
            edgelist=route_edges,
            edge_color="red",
            width=3.0,
            ax=ax,
        )
        edge_labels = {
            (u, v): f"{G.edges[u, v]['distance_km']} km" for u, v in route_edges
        }
        nx.draw_networkx_edge_labels(G, pos=pos, edge_labels=edge_labels, font_size=8, ax=ax)

    ax.set_axis_off()

    if save_path is not None:
        fig.savefig(save_path, format="png", bbox_inches="tight")

    if show:
        plt.show()
        plt.close(fig)
        return None

    buf = io.BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)
    return buf
