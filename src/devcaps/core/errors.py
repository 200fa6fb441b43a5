"""Error types for the capability enhancer."""


class EnhancerError(Exception):
    """Base error for all enhancer failures."""


class StringTableError(EnhancerError):
    """The string table could not register the well-known names."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("String table unusable" + (f": {detail}" if detail else ""))


class UnknownCapabilityError(EnhancerError, KeyError):
    """A capability key was written that has no registered write policy."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No write policy registered for capability: {key}")

    def __str__(self) -> str:
        return str(self.args[0])
