"""
Metric registry using prometheus_client.

Provides pre-defined metrics for block production and leader selection.
Exposes metrics in Prometheus text format.
"""

from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

# Dedicated registry, kept free of default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Chain
# -----------------------------------------------------------------------------

chain_length = Gauge(
    "pos_chain_length",
    "Number of blocks in the chain, genesis included",
    registry=REGISTRY,
)

validators_count = Gauge(
    "pos_validators_count",
    "Registered validators",
    registry=REGISTRY,
)

chain_validation_time = Histogram(
    "pos_chain_validation_seconds",
    "Full chain integrity check duration",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Block Admission
# -----------------------------------------------------------------------------

blocks_admitted = Counter(
    "pos_blocks_admitted_total",
    "Blocks appended to the chain",
    registry=REGISTRY,
)

admission_failures = Counter(
    "pos_admission_failures_total",
    "Block admissions that failed",
    ["reason"],
    registry=REGISTRY,
)

stake_penalties = Counter(
    "pos_stake_penalties_total",
    "Stake penalties applied to validators",
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Leader Selection
# -----------------------------------------------------------------------------

leader_selections = Counter(
    "pos_leader_selections_total",
    "Successful leader selections",
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
