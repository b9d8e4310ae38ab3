"""
GBIF species (checklist bank) API.

API docs: https://techdocs.gbif.org/en/openapi/v1/species

Example::

    from gbif_client import species

    species.name_backbone(name="Helianthus")["usageKey"]  # 3119134
    species.name_lookup(q="Puma", rank="GENUS", facet=["status", "rank"])
"""

from __future__ import annotations

from typing import Any

from gbif_client import request
from gbif_client.http import RequestOptions
from gbif_client.params import NameBackboneQuery, NameLookupQuery, NameSuggestQuery, NameUsageQuery

MATCH_PATH = "species/match"
SUGGEST_PATH = "species/suggest"
USAGE_PATH = "species/"
SEARCH_PATH = "species/search"

Options = RequestOptions | dict[str, Any] | None


def name_backbone(
    name: str,
    rank: str | None = None,
    kingdom: str | None = None,
    phylum: str | None = None,
    clazz: str | None = None,
    order: str | None = None,
    family: str | None = None,
    genus: str | None = None,
    strict: bool | None = None,
    offset: int | None = None,
    limit: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    Match a name against the GBIF backbone taxonomy.

    The higher-rank arguments are hints used when the name alone is ambiguous.

    Args:
        name: Full scientific name, optionally with authorship.
        rank: Rank of the name, as GBIF's rank enum.
        kingdom: Kingdom hint.
        phylum: Phylum hint.
        clazz: Class hint (sent as ``class``).
        order: Order hint.
        family: Family hint.
        genus: Genus hint.
        strict: Only (fuzzy) match the given name, never a higher taxon.
        offset: Record to start at.
        limit: Number of results.
        verbose: Log request/response metadata.
        options: Transport options (see :class:`~gbif_client.http.RequestOptions`).

    Returns:
        The match record (``usageKey``, ``matchType``, ``confidence``, ...).
    """
    query = NameBackboneQuery(
        name=name,
        rank=rank,
        kingdom=kingdom,
        phylum=phylum,
        clazz=clazz,
        order=order,
        family=family,
        genus=genus,
        strict=strict,
        offset=offset,
        limit=limit,
    )
    result: dict[str, Any] = request.perform(MATCH_PATH, query.to_query(), verbose=verbose, options=options)
    return result


def name_suggest(
    q: str | None = None,
    datasetKey: str | None = None,
    rank: str | None = None,
    limit: int | None = 100,
    offset: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> list[dict[str, Any]]:
    """
    Name autocomplete.

    Args:
        q: Simple search term; wildcards allowed (``*puma*``).
        datasetKey: Checklist dataset uuid to search in.
        rank: Restrict to a taxonomic rank.
        limit: Number of suggestions.
        offset: Record to start at.
        verbose: Log request/response metadata.
        options: Transport options.
    """
    query = NameSuggestQuery(q=q, datasetKey=datasetKey, rank=rank, limit=limit, offset=offset)
    result: list[dict[str, Any]] = request.perform(
        SUGGEST_PATH, query.to_query(), verbose=verbose, options=options
    )
    return result


def name_usage(
    name: str | None = None,
    language: str | None = None,
    datasetKey: str | None = None,
    sourceId: int | str | None = None,
    limit: int | None = 100,
    offset: int | None = None,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    List name usages.

    Args:
        name: Case-insensitive canonical name, e.g. ``"Puma concolor"``.
        language: Language for vernacular names.
        datasetKey: Restrict to one checklist dataset.
        sourceId: Source identifier within the dataset.
        limit: Page size.
        offset: Record to start at.
        verbose: Log request/response metadata.
        options: Transport options.
    """
    query = NameUsageQuery(
        name=name, language=language, datasetKey=datasetKey, sourceId=sourceId, limit=limit, offset=offset
    )
    result: dict[str, Any] = request.perform(USAGE_PATH, query.to_query(), verbose=verbose, options=options)
    return result


def name_lookup(
    q: str | None = None,
    rank: str | None = None,
    higherTaxonKey: int | str | None = None,
    status: str | list[str] | None = None,
    isExtinct: bool | None = None,
    habitat: str | None = None,
    nameType: str | None = None,
    datasetKey: str | None = None,
    nomenclaturalStatus: str | None = None,
    limit: int | None = 100,
    offset: int | None = None,
    facet: bool | str | list[str] = False,
    facetMincount: int | None = None,
    facetMultiselect: bool | None = None,
    type: str | None = None,  # noqa: A002
    hl: bool = False,
    verbosity: bool = False,
    verbose: bool = False,
    options: Options = None,
) -> dict[str, Any]:
    """
    Full-text search across name usages.

    Args:
        q: Query term(s).
        rank: Rank filter (``GENUS``, ``SPECIES``, ...).
        higherTaxonKey: Any higher Linnean rank key within the checklist.
        status: Taxonomic status (``ACCEPTED``, ``SYNONYM``, ...).
        isExtinct: Extinction status.
        habitat: ``marine``, ``freshwater`` or ``terrestrial``.
        nameType: Name type (``SCINAME``, ``WELLFORMED``, ...).
        datasetKey: Restrict to one dataset.
        nomenclaturalStatus: Nomenclatural status.
        limit: Page size.
        offset: Record to start at.
        facet: Facet name(s) to count on; a list is sent as repeated ``facet`` keys.
        facetMincount: Hide facet values with fewer records.
        facetMultiselect: Count facet values that are currently filtered out too.
        type: ``occurrence``, ``checklist`` or ``metadata``.
        hl: Highlight matching terms.
        verbosity: Show rejected alternative matches (sent as ``verbose``).
        verbose: Log request/response metadata.
        options: Transport options.

    Returns:
        Paged result with ``results`` and, when requested, ``facets``.
    """
    query = NameLookupQuery(
        q=q,
        rank=rank,
        higherTaxonKey=higherTaxonKey,
        status=status,
        isExtinct=isExtinct,
        habitat=habitat,
        nameType=nameType,
        datasetKey=datasetKey,
        nomenclaturalStatus=nomenclaturalStatus,
        limit=limit,
        offset=offset,
        facet=facet,
        facetMincount=facetMincount,
        facetMultiselect=facetMultiselect,
        type=type,
        hl=hl,
        verbosity=verbosity,
    )
    result: dict[str, Any] = request.perform(SEARCH_PATH, query.to_query(), verbose=verbose, options=options)
    return result
