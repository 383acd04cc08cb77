from typing import Protocol


class DocumentSource(Protocol):
    def fetch(self) -> str: ...
