# ABOUTME: KafkaSection model with client identity, consumer group and broker addresses
# ABOUTME: Broker addresses are a tagged value distinguishing unset, empty and listed

from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enum import BrokerState


class BrokerAddresses(BaseModel):
    """
    Broker address list tagged with its state.

    ``UNSET`` means nothing was configured and no default applies (brokers
    may be supplied by discovery at runtime), ``EMPTY`` an explicitly empty
    list, ``LISTED`` one or more addresses.
    """

    state: BrokerState
    addresses: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @model_validator(mode="after")
    def check_state_matches_addresses(self) -> "BrokerAddresses":
        if (self.state is BrokerState.LISTED) != bool(self.addresses):
            raise ValueError(f"broker state {self.state.value} does not match {len(self.addresses)} addresses")
        return self

    @classmethod
    def unset(cls) -> "BrokerAddresses":
        return cls(state=BrokerState.UNSET)

    @classmethod
    def of(cls, addresses: Iterable[str]) -> "BrokerAddresses":
        addresses = tuple(addresses)
        return cls(state=BrokerState.LISTED if addresses else BrokerState.EMPTY, addresses=addresses)

    @property
    def is_set(self) -> bool:
        return self.state is not BrokerState.UNSET

    def as_list(self) -> Optional[list[str]]:
        """Addresses as a list, or None when unset."""
        return list(self.addresses) if self.is_set else None


class KafkaConsumerGroup(BaseModel):
    group_id: str = Field(min_length=1, description="Consumer group identifier")

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class KafkaSection(BaseModel):
    """
    Messaging broker client settings.
    """

    client_id: str = Field(min_length=1, description="Client identifier, always the application name")
    group_id: str = Field(min_length=1, description="Consumer group identifier")
    brokers: BrokerAddresses

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)
