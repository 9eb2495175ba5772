"""Exception taxonomy for the trending pipeline."""


class SayCheeseError(Exception):
    """Base class for all project errors."""


class AdapterError(SayCheeseError):
    """A source adapter could not produce items (network, timeout, payload shape)."""

    def __init__(self, adapter: str, message: str) -> None:
        super().__init__(f"{adapter}: {message}")
        self.adapter = adapter
        self.message = message


class ConfigurationError(SayCheeseError):
    """Configuration is missing or invalid. Surfaced to callers as a hard failure."""


class AggregationError(SayCheeseError):
    """The orchestrator could not produce any response structure."""
