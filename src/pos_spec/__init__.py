"""Python specification of a stake-weighted proof-of-stake block producer."""
