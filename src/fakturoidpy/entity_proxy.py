"""Generic access to Fakturoid entities.

Resource proxies subclass :class:`FakturoidEntityProxy` and only supply the
endpoint paths and entity types; listing, paging, creation, update and
deletion work the same way for every kind of entity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, TypeAdapter

from fakturoidpy.client_base import (
    PaginatedIterator,
    QueryParams,
    build_query_string,
    ensure_success,
    parse_entity_id,
)

if TYPE_CHECKING:
    from fakturoidpy.client_sync import FakturoidClient

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def _require_uri(uri: str | None, name: str = "uri") -> str:
    if uri is None:
        raise ValueError(f"{name} must not be None")
    if not uri.strip():
        raise ValueError(f"{name} cannot be empty or whitespace only string")
    return uri


def _dump_entity(entity: BaseModel) -> dict[str, Any]:
    return entity.model_dump(by_alias=True, exclude_none=True, mode="json")


class FakturoidEntityProxy:
    """Base class for resource proxies.

    All requests go through the shared HTTP client of the owning
    :class:`~fakturoidpy.client_sync.FakturoidClient`. Every call is a single
    blocking request, except paged listings which issue one request per page.
    """

    def __init__(self, context: FakturoidClient) -> None:
        """Initialize proxy.

        Args:
            context: Client providing the account address and HTTP connection
        """
        if context is None:
            raise ValueError("context must not be None")
        self.context = context

    def get_all_paged_entities(
        self,
        base_uri: str,
        model_class: type[T],
        additional_query_params: QueryParams | None = None,
    ) -> list[T]:
        """Get all entities of a paged listing, requesting pages one by one.

        The result may contain duplicate entities, or miss some, if entities
        are added or removed between the page requests.

        Args:
            base_uri: Listing endpoint without query string
            model_class: Type of the listed entities
            additional_query_params: Filters appended to every page request

        Returns:
            All entities in the order the pages returned them
        """
        return list(
            self.iter_paged_entities(base_uri, model_class, additional_query_params)
        )

    def iter_paged_entities(
        self,
        base_uri: str,
        model_class: type[T],
        additional_query_params: QueryParams | None = None,
    ) -> PaginatedIterator[T]:
        """Lazily iterate over all entities of a paged listing.

        Args:
            base_uri: Listing endpoint without query string
            model_class: Type of the listed entities
            additional_query_params: Filters appended to every page request

        Returns:
            Iterator fetching the next page when the current one is consumed
        """
        _require_uri(base_uri, "base_uri")
        return PaginatedIterator(
            self, base_uri, model_class, additional_query_params
        )

    def get_paged_entities(
        self,
        base_uri: str,
        model_class: type[T],
        page: int,
        additional_query_params: QueryParams | None = None,
    ) -> list[T]:
        """Get a single page of entities.

        The number of entities per page is decided by the API and differs
        between entity types.

        Args:
            base_uri: Listing endpoint without query string
            model_class: Type of the listed entities
            page: Page number, starting at 1
            additional_query_params: Filters for the listing

        Returns:
            Entities on the page; an empty list past the last page

        Raises:
            ValueError: If base_uri is blank or page is lower than 1
        """
        _require_uri(base_uri, "base_uri")
        if page < 1:
            raise ValueError("page must be greater than zero")

        uri = f"{base_uri}?page={page}" + build_query_string(
            additional_query_params, "&"
        )
        return self.get_single_entity(uri, list[model_class])  # type: ignore[valid-type]

    def get_unpaged_entities(
        self,
        base_uri: str,
        model_class: type[T],
        additional_query_params: QueryParams | None = None,
    ) -> list[T]:
        """Get all entities of a listing the API does not paginate.

        Args:
            base_uri: Listing endpoint without query string
            model_class: Type of the listed entities
            additional_query_params: Filters for the listing

        Returns:
            All entities of the listing
        """
        _require_uri(base_uri, "base_uri")

        uri = base_uri + build_query_string(additional_query_params, "?")
        return self.get_single_entity(uri, list[model_class])  # type: ignore[valid-type]

    def get_single_entity(self, uri: str, model_class: Any) -> Any:
        """GET a resource and validate its JSON body.

        Args:
            uri: Resource address, relative to the account
            model_class: Anything pydantic can validate, e.g. ``Subject``
                or ``list[Subject]``

        Returns:
            Instance of model_class

        Raises:
            FakturoidAPIError: If the API does not answer with a 2xx status
        """
        _require_uri(uri)

        response = self.context.request("GET", uri)
        ensure_success(response)

        return TypeAdapter(model_class).validate_python(response.json())

    def create_entity(self, uri: str, new_entity: BaseModel) -> int:
        """POST a new entity.

        Args:
            uri: Collection endpoint
            new_entity: Entity to create

        Returns:
            Id the API assigned to the new entity

        Raises:
            FakturoidAPIError: If the API does not answer with a 2xx status
            FakturoidFormatError: If the ``Location`` header holds no entity id
        """
        _require_uri(uri)
        if new_entity is None:
            raise ValueError("new_entity must not be None")

        response = self.context.request("POST", uri, json=_dump_entity(new_entity))
        ensure_success(response)

        return parse_entity_id(response.headers.get("Location"))

    def update_single_entity(self, uri: str, entity: M) -> M:
        """PUT a modified entity.

        Args:
            uri: Entity address
            entity: Entity with modified attributes

        Returns:
            The entity as stored by the API, which may differ from the one sent
        """
        _require_uri(uri)
        if entity is None:
            raise ValueError("entity must not be None")

        response = self.context.request("PUT", uri, json=_dump_entity(entity))
        ensure_success(response)

        return type(entity).model_validate(response.json())

    def delete_single_entity(self, uri: str) -> None:
        """DELETE an entity.

        Args:
            uri: Entity address
        """
        _require_uri(uri)

        response = self.context.request("DELETE", uri)
        ensure_success(response)
