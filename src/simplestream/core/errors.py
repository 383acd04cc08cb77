class SimplestreamError(Exception):
    """Base class for every failure raised while reading a catalog."""


class FetchError(SimplestreamError):
    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"failed to fetch {source}: {reason}")
        self.source = source
        self.reason = reason


class ParseError(SimplestreamError):
    """The raw document is not valid JSON, or its root is not an object."""


class SchemaError(SimplestreamError):
    def __init__(self, key: str, problem: str) -> None:
        super().__init__(f"{key} is {problem}")
        self.key = key
        self.problem = problem


class EmptyError(SimplestreamError):
    def __init__(self, key: str = "object") -> None:
        super().__init__(f"{key} has no members")
        self.key = key


class NotFoundError(SimplestreamError):
    def __init__(self, revision_id: str) -> None:
        super().__init__(f"revision {revision_id} not found")
        self.revision_id = revision_id
