import logging

from simplestream.config import StreamConfig
from simplestream.core.catalog import all_products
from simplestream.core.document import Document
from simplestream.core.product import ProductLookup, ProductNotFound, ProductView

logger = logging.getLogger(__name__)

# shared by every LTS release, so it never identifies one
_AMBIGUOUS_ALIAS = "lts"


def _matches_alias(product: ProductView, identifier: str) -> bool:
    return any(token == identifier for token in product.alias_tokens() if token != _AMBIGUOUS_ALIAS)


def _matches_version(product: ProductView, identifier: str) -> bool:
    return product.version in identifier


def find_product(document: Document, identifier: str, config: StreamConfig) -> ProductLookup:
    """Resolve a codename, alias or version-bearing string to a product.

    Products are tried in document order. Each is matched first against its
    alias tokens (exact, case-sensitive) and then by looking for its version
    inside ``identifier``, e.g. ``"Ubuntu-24.04"``.
    """
    for product in all_products(document, config):
        if _matches_alias(product, identifier):
            logger.debug("%r matched %s by alias", identifier, product.name)
            return product
        if _matches_version(product, identifier):
            logger.debug("%r matched %s by version", identifier, product.name)
            return product
    return ProductNotFound(identifier)
