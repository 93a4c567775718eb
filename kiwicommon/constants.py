"""Shared enumerations for listings, authorities and agents."""

from __future__ import annotations

from enum import IntEnum


class AgentStatus(IntEnum):
    """The role an agent played in a sale."""

    LISTING_AND_SALE = 0
    LISTING = 1
    SALE = 2


class Authority(IntEnum):
    """How a property is offered for sale."""

    UNKNOWN = 0
    AUCTION = 1
    EXCLUSIVE = 2
    MULTILIST = 3
    CONJUNCTIONAL = 4
    OPEN = 5
    SALE = 6
    SET_SALE = 7


class ListingState(IntEnum):
    """The market state of a listing."""

    OFFMARKET = 0
    CURRENT = 1
    WITHDRAWN = 2
    SOLD = 3
    LEASED = 4