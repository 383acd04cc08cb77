import logging
from collections.abc import Callable, Iterator

from simplestream.config import StreamConfig
from simplestream.core.document import Document, get_object, member_names
from simplestream.core.product import ProductLookup, ProductNotFound, ProductView

logger = logging.getLogger(__name__)


class ProductSequence:
    """Lazy, restartable view over catalog products in document order.

    Every iteration re-reads the document, so the sequence can be walked any
    number of times without side effects.
    """

    def __init__(
        self,
        document: Document,
        config: StreamConfig,
        predicate: Callable[[ProductView], bool] | None = None,
    ) -> None:
        self._document = document
        self._config = config
        self._predicate = predicate

    def __iter__(self) -> Iterator[ProductView]:
        products = get_object(self._document.root, "products")
        for name in member_names(products):
            if not name.endswith(self._config.architecture):
                continue
            product = ProductView(self._document, name, get_object(products, name), self._config)
            if self._predicate is None or self._predicate(product):
                yield product

    def filter(self, predicate: Callable[[ProductView], bool]) -> "ProductSequence":
        if self._predicate is None:
            return ProductSequence(self._document, self._config, predicate)
        outer = self._predicate
        return ProductSequence(self._document, self._config, lambda p: outer(p) and predicate(p))


def all_products(document: Document, config: StreamConfig) -> ProductSequence:
    return ProductSequence(document, config)


def supported_products(document: Document, config: StreamConfig) -> ProductSequence:
    return all_products(document, config).filter(lambda p: p.supported)


def current_product(document: Document, config: StreamConfig) -> ProductLookup:
    """Return the first product flagged ``default`` in its aliases."""
    for product in all_products(document, config):
        # substring test over the raw field, not per token
        if "default" in product.aliases:
            logger.debug("Current product is %s", product.name)
            return product
    return ProductNotFound("default")
