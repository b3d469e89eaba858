"""HTTP surfaces for the graph engine."""
