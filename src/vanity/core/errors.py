"""Error taxonomy for address derivation, salt search and deployment."""


class VanityError(Exception):
    pass


class InvalidInput(VanityError, ValueError):
    """Malformed fixed-width argument, prefix or search budget."""
    pass


class SearchExhausted(VanityError):
    """No salt produced the wanted prefix within the iteration budget."""

    def __init__(self, prefix: str, max_iterations: int):
        self.prefix = prefix
        self.max_iterations = max_iterations
        super().__init__(
            f"Could not find vanity address with prefix 0x{prefix} "
            f"after {max_iterations:,} iterations"
        )


class DeploymentMismatch(VanityError):
    """
    An address differs from the one predicted.

    With ``deployed`` set the chain reported ``actual``; otherwise the
    search result disagreed with the address derived from the full init
    code, before anything was sent.
    """

    def __init__(self, name: str, predicted: bytes, actual: bytes, deployed: bool = True):
        self.name = name
        self.predicted = predicted
        self.actual = actual
        self.deployed = deployed
        if deployed:
            message = f"{name}: deployed at 0x{actual.hex()}, expected 0x{predicted.hex()}"
        else:
            message = (
                f"{name}: search predicted 0x{predicted.hex()}, "
                f"init code derives 0x{actual.hex()}"
            )
        super().__init__(message)


class VerificationFailed(VanityError):
    """A deployed proxy returned unexpected state when read back."""

    def __init__(self, name: str, getter: str, detail: str):
        self.name = name
        self.getter = getter
        super().__init__(f"{name}.{getter}: {detail}")
