"""Genesis configuration loader.

Loads the starting point of a chain from YAML:

    GENESIS_TIME: 1704085200000000000
    SEED: 42
    VALIDATOR_STAKES:
    - 60
    - 40

`GENESIS_TIME` is in nanoseconds since the Unix epoch. When it is omitted
the clock's current time is used. `SEED` makes leader selection and
validator addresses reproducible.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import Field, model_validator

from pos_spec.subspecs.chain import DEFAULT_CONFIG, BlockClock, ChainConfig, TimeSource
from pos_spec.subspecs.network import PoSNetwork
from pos_spec.types import StrictBaseModel


class GenesisConfig(StrictBaseModel):
    """
    Configuration that establishes the birth of a proof-of-stake chain.

    Field names use UPPERCASE in YAML. Aliases map them to snake_case
    Python attributes.
    """

    genesis_time: Annotated[int, Field(ge=0)] | None = Field(default=None, alias="GENESIS_TIME")
    """Genesis timestamp in nanoseconds. None means "now" at network creation."""

    seed: int | None = Field(default=None, alias="SEED")
    """Seed for the network's random source. None seeds from OS entropy."""

    num_validators: int | None = Field(default=None, alias="NUM_VALIDATORS")
    """Optional expected validator count, checked against the stake list."""

    validator_stakes: list[int] = Field(min_length=1, alias="VALIDATOR_STAKES")
    """Starting stake of each genesis validator, in registration order."""

    @model_validator(mode="after")
    def validate_num_validators_consistency(self) -> GenesisConfig:
        """Verify num_validators matches actual count when provided."""
        if self.num_validators is not None:
            actual_count = len(self.validator_stakes)
            if self.num_validators != actual_count:
                raise ValueError(
                    f"NUM_VALIDATORS ({self.num_validators}) does not match "
                    f"actual validator count ({actual_count})"
                )
        return self

    def create_network(
        self,
        *,
        clock: TimeSource | None = None,
        config: ChainConfig = DEFAULT_CONFIG,
    ) -> PoSNetwork:
        """
        Build the network: genesis block first, then the validators in order.

        Args:
            clock: Timestamp source, also used for the genesis time when
                `genesis_time` is not set.
            config: Chain parameters.
        """
        if clock is None:
            clock = BlockClock()
        genesis_time = self.genesis_time if self.genesis_time is not None else clock()

        network = PoSNetwork.initialize(
            genesis_time,
            rng=random.Random(self.seed),
            clock=clock,
            config=config,
        )
        network.add_validators(self.validator_stakes)
        return network

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> GenesisConfig:
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, content: str) -> GenesisConfig:
        """Load configuration from a YAML string."""
        return cls.model_validate(yaml.safe_load(content))
