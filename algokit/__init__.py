"""Classic algorithms and data structures: list helpers, LIS, graphs, containers and a circuit breaker."""

__version__ = "0.1.0"

__all__ = [
    "circuit_breaker",
    "containers",
    "graphs",
    "lis",
    "reverse",
    "sliceutils",
]