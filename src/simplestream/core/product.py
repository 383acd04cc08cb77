from __future__ import annotations

from dataclasses import dataclass, field

from simplestream.config import StreamConfig
from simplestream.core.document import (
    Document,
    Node,
    get_bool,
    get_last_member_name,
    get_object,
    get_string,
    member_names,
)
from simplestream.core.errors import NotFoundError


@dataclass(frozen=True)
class ItemInfo:
    document: Document
    name: str
    node: Node = field(compare=False)

    def get(self, key: str) -> str:
        return get_string(self.node, key)


@dataclass(frozen=True)
class Revision:
    """One dated build of a product, keyed by its revision id."""

    document: Document
    revision_id: str
    node: Node = field(compare=False)

    @property
    def pubname(self) -> str:
        return get_string(self.node, "pubname")

    def item(self, name: str) -> ItemInfo:
        items = get_object(self.node, "items")
        return ItemInfo(self.document, name, get_object(items, name))


def resolve_revision(product: ProductView, revision_id: str = "") -> Revision:
    """Return the requested revision of ``product``.

    An empty ``revision_id`` selects the revision inserted last into
    ``versions``, which upstream publishes in chronological order. No date
    comparison takes place.
    """
    versions = get_object(product.node, "versions")
    if not revision_id:
        revision_id = get_last_member_name(versions, "versions")
    elif revision_id not in member_names(versions):
        raise NotFoundError(revision_id)
    return Revision(product.document, revision_id, get_object(versions, revision_id))


@dataclass(frozen=True)
class ProductView:
    """Read-only accessors over one ``products`` member."""

    document: Document
    name: str
    node: Node = field(compare=False)
    config: StreamConfig

    def is_present(self) -> bool:
        return True

    @property
    def supported(self) -> bool:
        return get_bool(self.node, "supported")

    @property
    def aliases(self) -> str:
        return get_string(self.node, "aliases")

    @property
    def release(self) -> str:
        return get_string(self.node, "release")

    @property
    def release_title(self) -> str:
        return get_string(self.node, "release_title")

    @property
    def version(self) -> str:
        return get_string(self.node, "version")

    def alias_tokens(self) -> list[str]:
        return self.aliases.split(",")

    def revision_ids(self) -> list[str]:
        return member_names(get_object(self.node, "versions"))

    def resolve_revision(self, revision_id: str = "") -> Revision:
        return resolve_revision(self, revision_id)

    def get_pubname(self, revision_id: str = "") -> str:
        return self.resolve_revision(revision_id).pubname

    def get_image_digest(self, revision_id: str = "") -> str:
        item = self.resolve_revision(revision_id).item(self.config.image_tag)
        return item.get(self.config.digest_field)


@dataclass(frozen=True)
class ProductNotFound:
    """Explicit absence of a product; carries only the query that failed."""

    query: str

    def is_present(self) -> bool:
        return False


ProductLookup = ProductView | ProductNotFound
