"""Options passed explicitly into the decoders and the route resolver."""

from dataclasses import dataclass

DEFAULT_MAX_RANKED_TRAINS = 3


@dataclass(frozen=True)
class QueryOptions:
    """Per-query switches.

    verbose: log raw rows and decoded records at debug level.
    use_alternate_source: read documents from the local debug server.
    max_ranked_trains: how many upcoming trains are resolved in detail.
    """

    verbose: bool = False
    use_alternate_source: bool = False
    max_ranked_trains: int = DEFAULT_MAX_RANKED_TRAINS
