"""Algorithm-related exceptions."""


class AlgorithmError(Exception):
    """Base exception for algorithm errors."""

    pass


class UnknownAlgorithmError(AlgorithmError):
    """Raised when an algorithm name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown algorithm: '{name}'")


class UnreachableDestinationError(AlgorithmError):
    """Raised when the destination cannot be reached from the source."""

    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(
            f"Node '{destination}' is not reachable from node '{source}'"
        )
