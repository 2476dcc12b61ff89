"""
Error types raised while configuring and running a check.
"""

from typing import Iterable, List, Union


class CheckError(Exception):
    """Base class for all check errors."""


class ConfigError(CheckError, ValueError):
    """
    Invalid or missing configuration.

    Raised before any request is sent. Holds every problem found so the
    command line can report them all at once.
    """

    def __init__(self, messages: Union[str, Iterable[str]]):
        if isinstance(messages, str):
            messages = [messages]
        self.messages: List[str] = list(messages)
        super().__init__("; ".join(self.messages))


class TransportError(CheckError):
    """Connection to Elasticsearch or search execution failed."""


class EmptyResultError(CheckError):
    """The search matched no documents or returned no bucket."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"No data in search result - {detail}")


class MissingMetricError(CheckError):
    """The bucket does not carry the statistic the aggregation asked for."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(
            f"Aggregation result value missing in response - {kind} (see --debug)"
        )


class MissingArgumentError(ConfigError):
    """A mandatory command line argument is empty."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Missing mandatory argument ({argument})")
