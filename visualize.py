# visualize.py

"""
Render the noun graph with matplotlib.
Implications (weight 1) are solid green, exclusions (weight 0) dashed red.
"""

import logging

import matplotlib.pyplot as plt
import networkx as nx

from knowledge_graph import WeightedGraph

logger = logging.getLogger(__name__)

PLOT_SEED = 42
DEFAULT_DPI = 300


def plot_knowledge_graph(graph: WeightedGraph, path: str,
                         include_reflexive: bool = False,
                         dpi: int = DEFAULT_DPI) -> str:
    G = graph.to_networkx()
    if not include_reflexive:
        G.remove_edges_from(list(nx.selfloop_edges(G)))

    implies  = [(u, v) for u, v, w in G.edges(data="weight") if w == 1]
    excludes = [(u, v) for u, v, w in G.edges(data="weight") if w == 0]

    fig, ax = plt.subplots(figsize=(10, 7), dpi=dpi)
    pos = nx.spring_layout(G, seed=PLOT_SEED)

    if G.number_of_nodes():
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color='#d9edf7',
                               edgecolors='black', node_size=1200)
        nx.draw_networkx_labels(G, pos, ax=ax, font_size=8)
    if implies:
        nx.draw_networkx_edges(G, pos, ax=ax, edgelist=implies,
                               edge_color='#5cb85c', arrows=True)
    if excludes:
        nx.draw_networkx_edges(G, pos, ax=ax, edgelist=excludes,
                               edge_color='#d9534f', style='dashed', arrows=True)

    ax.set_title('Noun Knowledge Graph', fontsize=14, fontweight='bold')
    ax.axis('off')
    fig.tight_layout()

    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    logger.info(f"[visualize] Graph saved as {path!r} "
                f"({len(implies)} implications, {len(excludes)} exclusions)")
    return path
