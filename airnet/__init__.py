"""Top-level package for the AirNet route-network analysis.

This package builds a weighted, undirected graph of airports from
tabular route records and ranks the airports with four centrality
measures: degree, closeness, betweenness and eigenvector.
"""

__version__ = "0.1.0"
