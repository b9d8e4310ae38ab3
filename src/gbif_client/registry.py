"""
GBIF registry API: networks, nodes, organizations, installations, datasets.

API docs: https://techdocs.gbif.org/en/openapi/v1/registry

Each listing function takes a ``data`` category (``"all"`` by default) and an
optional entity ``uuid``; :func:`gbif_client.routing.route` validates the pair
and picks the path before any request is made.

Example::

    from gbif_client import registry

    registry.networks(limit=5)
    registry.nodes(data="identifier", uuid="03e816b3-8f58-49ae-bc12-4e18b358d6d9")
    registry.nodes(data="country", isocode="US")
    registry.organizations(data="deleted")
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from gbif_client import request
from gbif_client.http import RequestOptions
from gbif_client.params import DatasetQuery, DatasetSearchQuery, DatasetSuggestQuery, RegistryQuery
from gbif_client.routing import Family, route

Options = RequestOptions | dict[str, Any] | None
Category = StrEnum | str


def _listing(
    family: Family,
    data: Category,
    uuid: str | None,
    q: Any,
    identifier: Any,
    identifierType: Any,
    limit: Any,
    offset: Any,
    verbose: bool,
    options: Options,
    isocode: str | None = None,
) -> dict[str, Any]:
    path = route(family, data, uuid, isocode=isocode)
    query = RegistryQuery(q=q, identifier=identifier, identifierType=identifierType, limit=limit, offset=offset)
    result: dict[str, Any] = request.perform(path, query.to_query(), verbose=verbose, options=options)
    return result


def networks(
    data: Category = "all",
    uuid: str | None = None,
    q: str | None = None,
    identifier: int | str | None = None,
    identifierType: str | None = None,
    limit: int | None = 100,
    offset: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    Networks metadata.

    Args:
        data: One of ``all, contact, endpoint, identifier, tag, machineTag,
            comment, constituents``. Anything but ``all`` needs ``uuid``.
        uuid: Network uuid.
        q: Free-text query (listings only).
        identifier: Identifier value, e.g. ``120``.
        identifierType: ``DOI``, ``GBIF_NODE``, ``LSID``, ``URL``, ``UUID``, ...
        limit: Page size.
        offset: Record to start at.
        verbose: Log request/response metadata.
        options: Transport options.
    """
    return _listing(
        Family.NETWORK, data, uuid, q, identifier, identifierType, limit, offset, verbose, options
    )


def nodes(
    data: Category = "all",
    uuid: str | None = None,
    q: str | None = None,
    identifier: int | str | None = None,
    identifierType: str | None = None,
    limit: int | None = 100,
    offset: int | None = None,
    isocode: str | None = None,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    Nodes metadata.

    Args:
        data: One of ``all, organization, endpoint, identifier, tag,
            machineTag, comment, pendingEndorsement, country, dataset,
            installation``. Only ``all`` and ``country`` work without ``uuid``.
        uuid: Node uuid.
        q: Free-text query (listings only).
        identifier: Identifier value.
        identifierType: Identifier type.
        limit: Page size.
        offset: Record to start at.
        isocode: Two-letter country code, used with ``data="country"``
            to fetch that country's node.
        verbose: Log request/response metadata.
        options: Transport options.
    """
    return _listing(
        Family.NODE, data, uuid, q, identifier, identifierType, limit, offset, verbose, options, isocode=isocode
    )


def organizations(
    data: Category = "all",
    uuid: str | None = None,
    q: str | None = None,
    identifier: int | str | None = None,
    identifierType: str | None = None,
    limit: int | None = 100,
    offset: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    Organizations metadata.

    ``data`` is one of ``all, contact, endpoint, identifier, tag, machineTag,
    comment, hostedDataset, ownedDataset, deleted, pending, nonPublishing``;
    ``all``, ``deleted``, ``pending`` and ``nonPublishing`` need no ``uuid``.
    """
    return _listing(
        Family.ORGANIZATION, data, uuid, q, identifier, identifierType, limit, offset, verbose, options
    )


def installations(
    data: Category = "all",
    uuid: str | None = None,
    q: str | None = None,
    identifier: int | str | None = None,
    identifierType: str | None = None,
    limit: int | None = 100,
    offset: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    Installations metadata.

    ``data`` is one of ``all, contact, endpoint, dataset, identifier, tag,
    machineTag, comment, deleted, nonPublishing``; ``all``, ``deleted`` and
    ``nonPublishing`` need no ``uuid``.
    """
    return _listing(
        Family.INSTALLATION, data, uuid, q, identifier, identifierType, limit, offset, verbose, options
    )


def datasets(
    data: Category = "all",
    type: str | None = None,  # noqa: A002
    uuid: str | None = None,
    query: str | None = None,
    id: str | None = None,  # noqa: A002
    limit: int | None = 100,
    offset: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    Datasets metadata.

    Args:
        data: One of ``all, organization, contact, endpoint, identifier, tag,
            machinetag, comment, constituents, document, metadata, deleted,
            duplicate, subDataset, withNoEndpoint``. ``all, deleted,
            duplicate, subDataset, withNoEndpoint`` need no ``uuid``.
        type: Dataset type (``OCCURRENCE``, ``CHECKLIST``, ``METADATA``, ``SAMPLING_EVENT``).
        uuid: Dataset uuid.
        query: Free-text query (sent as ``q``).
        id: Metadata document id. With ``data="metadata"`` and no ``uuid``
            this fetches ``dataset/metadata/<id>/document``.
        limit: Page size.
        offset: Record to start at.
        verbose: Log request/response metadata.
        options: Transport options.
    """
    path = route(Family.DATASET, data, uuid, document_id=id)
    params = DatasetQuery(type=type, query=query, limit=limit, offset=offset)
    result: dict[str, Any] = request.perform(path, params.to_query(), verbose=verbose, options=options)
    return result


def dataset_metrics(uuid: str, verbose: bool = False, options: Options = None) -> dict[str, Any]:
    """Checklist dataset metrics (``dataset/<uuid>/metrics``)."""
    result: dict[str, Any] = request.perform(f"dataset/{uuid}/metrics", {}, verbose=verbose, options=options)
    return result


def dataset_suggest(
    q: str | None = None,
    type: str | None = None,  # noqa: A002
    keyword: str | None = None,
    owningOrg: str | None = None,
    publishingOrg: str | None = None,
    hostingOrg: str | None = None,
    publishingCountry: str | None = None,
    decade: int | str | None = None,
    limit: int | None = 100,
    offset: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> list[dict[str, Any]]:
    """Dataset title autocomplete (``dataset/suggest``)."""
    params = DatasetSuggestQuery(
        q=q,
        type=type,
        keyword=keyword,
        owningOrg=owningOrg,
        publishingOrg=publishingOrg,
        hostingOrg=hostingOrg,
        publishingCountry=publishingCountry,
        decade=decade,
        limit=limit,
        offset=offset,
    )
    result: list[dict[str, Any]] = request.perform(
        "dataset/suggest", params.to_query(), verbose=verbose, options=options
    )
    return result


def dataset_search(
    q: str | None = None,
    type: str | None = None,  # noqa: A002
    keyword: str | None = None,
    owningOrg: str | None = None,
    publishingOrg: str | None = None,
    hostingOrg: str | None = None,
    decade: int | str | None = None,
    publishingCountry: str | None = None,
    facet: str | list[str] | None = None,
    facetMincount: int | None = None,
    facetMultiselect: bool | None = None,
    hl: bool = False,
    limit: int | None = 100,
    offset: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    Full-text dataset search (``dataset/search``).

    Args:
        q: Query term(s).
        type: Dataset type.
        keyword: Keyword tag.
        owningOrg: Owning organization uuid.
        publishingOrg: Publishing organization uuid.
        hostingOrg: Hosting organization uuid.
        decade: Decade covered, e.g. ``1980``.
        publishingCountry: Two-letter country code of the publisher.
        facet: Field(s) to facet on; a list is sent as repeated keys.
        facetMincount: Hide facet values with fewer records.
        facetMultiselect: Count facet values that are currently filtered out too.
        hl: Highlight matching terms.
        limit: Page size.
        offset: Record to start at.
        verbose: Log request/response metadata.
        options: Transport options.
    """
    params = DatasetSearchQuery(
        q=q,
        type=type,
        keyword=keyword,
        owningOrg=owningOrg,
        publishingOrg=publishingOrg,
        hostingOrg=hostingOrg,
        decade=decade,
        publishingCountry=publishingCountry,
        facet=facet,
        facetMincount=facetMincount,
        facetMultiselect=facetMultiselect,
        hl=hl,
        limit=limit,
        offset=offset,
    )
    result: dict[str, Any] = request.perform("dataset/search", params.to_query(), verbose=verbose, options=options)
    return result
