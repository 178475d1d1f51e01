"""API client: binds built queries to resource endpoints and decodes responses."""

import logging
from typing import Any, Iterable, List, Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from igdb_query.builder import RequestBuilder
from igdb_query.config import ClientConfig, Credentials
from igdb_query.errors import (
    AmbiguousResult,
    EntityNotFound,
    InvalidIdentifier,
    MalformedResponse,
    MissingCredentials,
    RateLimited,
    ResourceNotFound,
    ServerError,
    Unauthorized,
)
from igdb_query.images import Image, ImageSize, sized_image_url
from igdb_query.models import Count, OperationKind, Query
from igdb_query.options import QueryOption, set_search
from igdb_query.resources import RESOURCES, STATUS_PATH, ApiStatus, Resource

logger = logging.getLogger(__name__)


def _check_identifier(identifier: Any) -> int:
    """
    Validate an entity id.

    Args:
        identifier: Value passed by the caller

    Returns:
        int: The id

    Raises:
        InvalidIdentifier: If identifier is not a non-negative integer
    """
    if isinstance(identifier, bool) or not isinstance(identifier, int) or identifier < 0:
        raise InvalidIdentifier(
            f"Invalid id {identifier!r}; expected an integer >= 0.", value=identifier
        )
    return identifier


def _raise_for_status(response: httpx.Response) -> None:
    """
    Classify a non-2xx response into the matching protocol error.

    Args:
        response: Response to check

    Raises:
        Unauthorized: On 401 or 403
        ResourceNotFound: On 404
        RateLimited: On 429
        ServerError: On any other non-2xx status
    """
    if response.is_success:
        return

    status_code = response.status_code
    logger.warning(
        "%s %s returned status %s", response.request.method, response.request.url, status_code
    )
    detail = response.reason_phrase or "request failed"
    if status_code in (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN):
        error_cls = Unauthorized
    elif status_code == httpx.codes.NOT_FOUND:
        error_cls = ResourceNotFound
    elif status_code == httpx.codes.TOO_MANY_REQUESTS:
        error_cls = RateLimited
    else:
        error_cls = ServerError
    raise error_cls(detail, status_code=status_code, body=response.text)


def _decode_model(model: Type[BaseModel], payload: Any, response: httpx.Response) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponse(
            f"Response does not match {model.__name__}: {e.error_count()} error(s)",
            status_code=response.status_code,
            body=response.text,
        ) from e


def _decode_array(model: Type[BaseModel], payload: Any, response: httpx.Response) -> List[Any]:
    if not isinstance(payload, list):
        raise MalformedResponse(
            f"Expected a JSON array, got {type(payload).__name__}",
            status_code=response.status_code,
            body=response.text,
        )
    return [_decode_model(model, item, response) for item in payload]


class Endpoint:
    """
    Operations on one resource.

    Obtained from a Client attribute named after the resource, e.g.
    ``client.games`` or ``client.companies``.
    """

    def __init__(self, client: "Client", resource: Resource):
        """
        Initialize Endpoint.

        Args:
            client: Client used to send requests
            resource: Resource this endpoint serves
        """
        self.client = client
        self.resource = resource

    def __repr__(self) -> str:
        return f"Endpoint({self.resource.path!r})"

    def list(self, *options: QueryOption) -> List[Any]:
        """
        Return the entities matching the options, in response order.

        An empty list means nothing matched.

        Args:
            options: Query options

        Returns:
            List: Decoded entities
        """
        query = self.client.builder.build(OperationKind.LIST, *options)
        payload, response = self.client.send(self.resource, f"{self.resource.path}/", query)
        return _decode_array(self.resource.model, payload, response)

    def get(self, identifier: int, *options: QueryOption) -> Any:
        """
        Return the single entity with the given id.

        Args:
            identifier: Entity id
            options: Query options (set_fields() is the useful one here)

        Returns:
            The decoded entity

        Raises:
            InvalidIdentifier: If identifier is not an integer >= 0
            EntityNotFound: If no entity has that id
            AmbiguousResult: If more than one entity came back
        """
        identifier = _check_identifier(identifier)
        query = self.client.builder.build(OperationKind.GET, *options)
        path = f"{self.resource.path}/{identifier}"
        payload, response = self.client.send(self.resource, path, query)
        entities = _decode_array(self.resource.model, payload, response)
        return self._exactly_one(entities, identifier)

    def get_many(self, identifiers: Iterable[int], *options: QueryOption) -> List[Any]:
        """
        Return the entities with the given ids. Unknown ids are skipped.

        Args:
            identifiers: Entity ids
            options: Query options

        Returns:
            List: Decoded entities

        Raises:
            InvalidIdentifier: If no ids are given or one is invalid
        """
        ids = [_check_identifier(i) for i in identifiers]
        if not ids:
            raise InvalidIdentifier("get_many() needs at least one id.", value=ids)
        query = self.client.builder.build(OperationKind.GET, *options)
        path = f"{self.resource.path}/{','.join(str(i) for i in ids)}"
        payload, response = self.client.send(self.resource, path, query)
        return _decode_array(self.resource.model, payload, response)

    def search(self, term: str, *options: QueryOption) -> List[Any]:
        """
        Return the entities matching a free-text search.

        Args:
            term: Search term
            options: Further query options

        Returns:
            List: Decoded entities

        Raises:
            EmptySearchTerm: If term is blank
        """
        query = self.client.builder.build(OperationKind.SEARCH, *options, set_search(term))
        payload, response = self.client.send(self.resource, f"{self.resource.path}/", query)
        return _decode_array(self.resource.model, payload, response)

    def count(self, *options: QueryOption) -> int:
        """
        Return the number of entities matching the options.

        Args:
            options: Query options; set_fields() is rejected

        Returns:
            int: Count

        Raises:
            IncompatibleOption: If set_fields() is among the options
            MalformedResponse: If the body has no integer ``count``
        """
        query = self.client.builder.build(OperationKind.COUNT, *options)
        path = f"{self.resource.path}/count"
        payload, response = self.client.send(self.resource, path, query)
        return _decode_model(Count, payload, response).count

    def fields(self) -> List[str]:
        """
        Return the current field names of this resource.

        Returns:
            List[str]: Field names, subfields included (``cover.image_id``)
        """
        path = f"{self.resource.path}/meta"
        payload, response = self.client.send(self.resource, path, None)
        if not isinstance(payload, list) or not all(isinstance(f, str) for f in payload):
            raise MalformedResponse(
                "Expected a JSON array of field names",
                status_code=response.status_code,
                body=response.text,
            )
        return payload

    def _exactly_one(self, entities: List[Any], identifier: Any) -> Any:
        if not entities:
            raise EntityNotFound(
                f"No {self.resource.path} entity with id {identifier}.",
                resource=self.resource.path,
                identifier=identifier,
            )
        if len(entities) > 1:
            raise AmbiguousResult(
                f"Expected one {self.resource.path} entity for id {identifier}, "
                f"got {len(entities)}.",
                resource=self.resource.path,
                identifier=identifier,
                count=len(entities),
            )
        return entities[0]


class Client:
    """
    Client for the API.

    Holds credentials, configuration and the HTTP transport; it keeps no
    per-request state, so one instance can serve concurrent callers. Each
    resource in RESOURCES is exposed as an Endpoint attribute.

    Example:
        client = Client(Credentials("my-client-id", "my-token"))
        games = client.games.list(set_limit(5), set_fields("name"))
        total = client.companies.count(set_filter("country", FilterOperator.EQ, 840))
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: Optional[httpx.Client] = None,
        config: Optional[ClientConfig] = None,
    ):
        """
        Initialize Client.

        Args:
            credentials: Credentials sent with every request
            transport: HTTP client to send requests with. When omitted, one is
                created with config.timeout and closed by close().
            config: Client configuration (default: ClientConfig())
        """
        self.credentials = credentials
        self.config = config or ClientConfig()
        self._owns_transport = transport is None
        if transport is None:
            transport = httpx.Client(timeout=self.config.timeout)
        self.transport = transport
        self.builder = RequestBuilder(
            max_limit=self.config.max_limit, max_offset=self.config.max_offset
        )

        for name, resource in RESOURCES.items():
            setattr(self, name, Endpoint(self, resource))

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def endpoint(self, name: str) -> Endpoint:
        """
        Return the Endpoint for a resource by name.

        Raises:
            KeyError: If name is not a known resource
        """
        return Endpoint(self, RESOURCES[name])

    def headers(self, resource: Optional[Resource] = None) -> dict:
        """
        Request headers for a resource.

        Raises:
            MissingCredentials: If the resource needs an access token and none is set
        """
        if resource is not None and resource.requires_token and not self.credentials.access_token:
            raise MissingCredentials(
                f"Resource '{resource.path}' requires an access token.", value=resource.path
            )
        headers = {"Accept": "application/json", **self.credentials.headers()}
        if self.config.user_agent:
            headers["User-Agent"] = self.config.user_agent
        return headers

    def send(
        self, resource: Optional[Resource], path: str, query: Optional[Query]
    ) -> "tuple[Any, httpx.Response]":
        """
        Send a GET request and decode the JSON body.

        Transport exceptions (httpx.TransportError) propagate unchanged.

        Args:
            resource: Resource the request is for, or None for API-level paths
            path: Path below the API root
            query: Built query, or None for no parameters

        Returns:
            tuple: Decoded JSON payload and the response

        Raises:
            ProtocolError: On a non-2xx status or a body that is not JSON
        """
        headers = self.headers(resource)
        url = self.config.url_for(path)
        params = query.to_params() if query is not None else {}
        logger.debug("GET %s params=%s", url, params)

        response = self.transport.get(url, params=params, headers=headers)
        _raise_for_status(response)
        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse(
                "Response body is not valid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e
        return payload, response

    def status(self) -> ApiStatus:
        """
        Return the usage report for the configured credentials.

        Raises:
            EntityNotFound: If the report is empty
            AmbiguousResult: If more than one report came back
        """
        payload, response = self.send(None, STATUS_PATH, None)
        reports = _decode_array(ApiStatus, payload, response)
        if len(reports) != 1:
            error_cls = EntityNotFound if not reports else AmbiguousResult
            raise error_cls(
                f"Expected one API status report, got {len(reports)}.",
                resource=STATUS_PATH,
                count=len(reports),
            )
        return reports[0]

    def image_url(self, image: Image, size: ImageSize, ratio: int = 1) -> str:
        """Return the sized URL of an image against config.image_base_url."""
        base_url = self.config.image_base_url
        return sized_image_url(image.image_id or "", size, ratio, base_url=base_url)
