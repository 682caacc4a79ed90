"""FakturoidPy - Python client library for the Fakturoid invoicing API."""

from fakturoidpy._version import __version__
from fakturoidpy.client_base import PaginatedIterator, build_query_string
from fakturoidpy.client_sync import FakturoidClient
from fakturoidpy.entity_proxy import FakturoidEntityProxy
from fakturoidpy.exceptions import (
    FakturoidAPIError,
    FakturoidAuthError,
    FakturoidBadRequestError,
    FakturoidFormatError,
    FakturoidNotFoundError,
    FakturoidRateLimitError,
    FakturoidServerError,
    FakturoidValidationError,
)
from fakturoidpy.models import (
    Invoice,
    InvoiceEvent,
    InvoiceLine,
    InvoiceQuery,
    InvoiceStatus,
    Subject,
    SubjectQuery,
    SubjectType,
)
from fakturoidpy.proxies import InvoicesProxy, SubjectsProxy

__all__ = [
    "__version__",
    "FakturoidClient",
    "FakturoidEntityProxy",
    "SubjectsProxy",
    "InvoicesProxy",
    "PaginatedIterator",
    "build_query_string",
    "Subject",
    "SubjectType",
    "SubjectQuery",
    "Invoice",
    "InvoiceLine",
    "InvoiceStatus",
    "InvoiceEvent",
    "InvoiceQuery",
    "FakturoidAPIError",
    "FakturoidAuthError",
    "FakturoidBadRequestError",
    "FakturoidFormatError",
    "FakturoidNotFoundError",
    "FakturoidRateLimitError",
    "FakturoidServerError",
    "FakturoidValidationError",
]
