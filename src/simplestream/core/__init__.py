from simplestream.core.catalog import ProductSequence, all_products, current_product, supported_products
from simplestream.core.document import (
    Document,
    get_bool,
    get_last_member_name,
    get_object,
    get_string,
    member_names,
    parse_document,
)
from simplestream.core.errors import (
    EmptyError,
    FetchError,
    NotFoundError,
    ParseError,
    SchemaError,
    SimplestreamError,
)
from simplestream.core.matcher import find_product
from simplestream.core.product import ItemInfo, ProductNotFound, ProductView, Revision, resolve_revision

__all__ = [
    "Document",
    "EmptyError",
    "FetchError",
    "ItemInfo",
    "NotFoundError",
    "ParseError",
    "ProductNotFound",
    "ProductSequence",
    "ProductView",
    "Revision",
    "SchemaError",
    "SimplestreamError",
    "all_products",
    "current_product",
    "find_product",
    "get_bool",
    "get_last_member_name",
    "get_object",
    "get_string",
    "member_names",
    "parse_document",
    "resolve_revision",
    "supported_products",
]
