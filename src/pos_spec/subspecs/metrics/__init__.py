"""
Metrics module for observability.

Provides counters, gauges, and histograms for tracking block production.
Exposes metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    admission_failures,
    blocks_admitted,
    chain_length,
    chain_validation_time,
    generate_metrics,
    leader_selections,
    stake_penalties,
    validators_count,
)

__all__ = [
    "REGISTRY",
    "admission_failures",
    "blocks_admitted",
    "chain_length",
    "chain_validation_time",
    "generate_metrics",
    "leader_selections",
    "stake_penalties",
    "validators_count",
]
