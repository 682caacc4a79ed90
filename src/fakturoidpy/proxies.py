"""Resource proxies for the Fakturoid API."""

from __future__ import annotations

from fakturoidpy.client_base import (
    PaginatedIterator,
    build_query_string,
    ensure_success,
)
from fakturoidpy.entity_proxy import FakturoidEntityProxy
from fakturoidpy.models import (
    Invoice,
    InvoiceEvent,
    InvoiceQuery,
    Subject,
    SubjectQuery,
)


def _require_id(value: int | None, name: str = "id") -> int:
    if value is None or value < 1:
        raise ValueError(f"{name} must be greater than zero")
    return value


class SubjectsProxy(FakturoidEntityProxy):
    """Subjects (contacts) of the account."""

    def select(self, query: SubjectQuery | None = None) -> list[Subject]:
        """Get all subjects.

        Args:
            query: Optional filters

        Returns:
            List of subjects
        """
        return self.get_unpaged_entities("subjects.json", Subject, query)

    def select_single(self, id: int) -> Subject:
        """Get subject with the given id."""
        _require_id(id)
        return self.get_single_entity(f"subjects/{id}.json", Subject)

    def create(self, entity: Subject) -> int:
        """Create a subject.

        Args:
            entity: The new subject

        Returns:
            Id of the created subject
        """
        if entity is None:
            raise ValueError("entity must not be None")
        return self.create_entity("subjects.json", entity)

    def update(self, entity: Subject) -> Subject:
        """Update a subject.

        Args:
            entity: Subject with modified attributes; its id selects the record

        Returns:
            Subject as stored by the API
        """
        if entity is None:
            raise ValueError("entity must not be None")
        _require_id(entity.id, "entity.id")
        return self.update_single_entity(f"subjects/{entity.id}.json", entity)

    def delete(self, id: int) -> None:
        """Delete subject with the given id."""
        _require_id(id)
        self.delete_single_entity(f"subjects/{id}.json")


class InvoicesProxy(FakturoidEntityProxy):
    """Invoices and proformas of the account."""

    def select(self, query: InvoiceQuery | None = None) -> list[Invoice]:
        """Get all invoices, walking every page of the listing.

        Args:
            query: Optional filters

        Returns:
            List of invoices
        """
        return self.get_all_paged_entities("invoices.json", Invoice, query)

    def select_page(
        self, page: int, query: InvoiceQuery | None = None
    ) -> list[Invoice]:
        """Get one page of invoices.

        Args:
            page: Page number, starting at 1
            query: Optional filters

        Returns:
            Invoices on the page; empty past the last page
        """
        return self.get_paged_entities("invoices.json", Invoice, page, query)

    def iter(self, query: InvoiceQuery | None = None) -> PaginatedIterator[Invoice]:
        """Iterate over all invoices, fetching pages as needed."""
        return self.iter_paged_entities("invoices.json", Invoice, query)

    def select_single(self, id: int) -> Invoice:
        """Get invoice with the given id."""
        _require_id(id)
        return self.get_single_entity(f"invoices/{id}.json", Invoice)

    def create(self, entity: Invoice) -> int:
        """Create an invoice.

        Args:
            entity: The new invoice

        Returns:
            Id of the created invoice
        """
        if entity is None:
            raise ValueError("entity must not be None")
        return self.create_entity("invoices.json", entity)

    def update(self, entity: Invoice) -> Invoice:
        """Update an invoice.

        Args:
            entity: Invoice with modified attributes; its id selects the record

        Returns:
            Invoice as stored by the API
        """
        if entity is None:
            raise ValueError("entity must not be None")
        _require_id(entity.id, "entity.id")
        return self.update_single_entity(f"invoices/{entity.id}.json", entity)

    def delete(self, id: int) -> None:
        """Delete invoice with the given id."""
        _require_id(id)
        self.delete_single_entity(f"invoices/{id}.json")

    def fire(self, id: int, event: InvoiceEvent | str) -> None:
        """Trigger a state change of an invoice, e.g. mark it as paid.

        Args:
            id: Invoice id
            event: Name of the action
        """
        _require_id(id)
        if event is None or not str(event).strip():
            raise ValueError("event must not be empty")

        uri = f"invoices/{id}/fire.json" + build_query_string({"event": event}, "?")
        response = self.context.request("POST", uri)
        ensure_success(response)
