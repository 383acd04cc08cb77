from collections.abc import Iterable

from simplestream.config import StreamConfig
from simplestream.core.catalog import current_product, supported_products
from simplestream.core.document import Document
from simplestream.core.matcher import find_product
from simplestream.core.product import ProductNotFound
from simplestream.models import CurrentRelease, DigestLookup, ImageDigest, ReleaseNotFound, ReleaseSummary


def list_releases(document: Document, config: StreamConfig) -> list[ReleaseSummary]:
    return [
        ReleaseSummary(release_title=p.release_title, release=p.release) for p in supported_products(document, config)
    ]


def current_release(document: Document, config: StreamConfig, revision_id: str = "") -> CurrentRelease | None:
    product = current_product(document, config)
    if isinstance(product, ProductNotFound):
        return None
    return CurrentRelease(version=product.version, pubname=product.get_pubname(revision_id))


def image_digests(
    document: Document,
    identifiers: Iterable[str],
    config: StreamConfig,
    revision_id: str = "",
) -> list[DigestLookup]:
    """Look up the image digest for each identifier.

    An identifier matching no product yields a ``ReleaseNotFound`` entry and the
    batch continues. Schema failures still propagate.
    """
    results: list[DigestLookup] = []
    for identifier in identifiers:
        product = find_product(document, identifier, config)
        if isinstance(product, ProductNotFound):
            results.append(ReleaseNotFound(identifier=identifier))
            continue
        revision = product.resolve_revision(revision_id)
        item = revision.item(config.image_tag)
        results.append(
            ImageDigest(
                identifier=identifier,
                pubname=revision.pubname,
                image_tag=config.image_tag,
                sha256=item.get(config.digest_field),
            )
        )
    return results
