class InvalidImplementation(ValueError):
    """Raised when a registered class does not satisfy its capability contract."""

    def __init__(self, candidate, contract):
        self.candidate = candidate
        self.contract = contract
        name = getattr(candidate, "__qualname__", None) or repr(candidate)
        super().__init__(
            f"{name} must be a concrete implementation of "
            f"{contract.__module__}.{contract.__qualname__}"
        )
