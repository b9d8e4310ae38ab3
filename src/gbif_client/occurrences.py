"""
GBIF occurrence search.

API docs: https://techdocs.gbif.org/en/openapi/v1/occurrence

Paging is left to the caller: repeat :func:`search` with a growing
``offset`` until ``endOfRecords`` is true (see
:func:`gbif_client.schemas.get_meta`).

Example::

    from gbif_client import occurrences

    occurrences.search(taxonKey=3329049, limit=5)
    occurrences.search(catalogNumber=["49366", "Bird.27847588"])
"""

from __future__ import annotations

from typing import Any

from gbif_client import request
from gbif_client.http import RequestOptions
from gbif_client.params import OccurrenceSearchQuery

SEARCH_PATH = "occurrence/search"


def search(
    taxonKey: Any = None,
    repatriated: Any = None,
    kingdomKey: Any = None,
    phylumKey: Any = None,
    classKey: Any = None,
    orderKey: Any = None,
    familyKey: Any = None,
    genusKey: Any = None,
    subgenusKey: Any = None,
    scientificName: Any = None,
    country: Any = None,
    publishingCountry: Any = None,
    hasCoordinate: Any = None,
    typeStatus: Any = None,
    recordNumber: Any = None,
    lastInterpreted: Any = None,
    continent: Any = None,
    geometry: Any = None,
    recordedBy: Any = None,
    basisOfRecord: Any = None,
    datasetKey: Any = None,
    eventDate: Any = None,
    catalogNumber: Any = None,
    year: Any = None,
    month: Any = None,
    decimalLatitude: Any = None,
    decimalLongitude: Any = None,
    elevation: Any = None,
    depth: Any = None,
    institutionCode: Any = None,
    collectionCode: Any = None,
    hasGeospatialIssue: Any = None,
    issue: Any = None,
    q: Any = None,
    spellCheck: Any = None,
    mediatype: Any = None,
    limit: int | None = 300,
    offset: int | None = 0,
    establishmentMeans: Any = None,
    facet: Any = None,
    facetMincount: Any = None,
    facetMultiselect: Any = None,
    verbose: bool = False,
    options: RequestOptions | dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Search occurrence records.

    Every filter is optional and may be a single value or a list; lists are
    sent as repeated keys (``issue=A&issue=B``), which GBIF ORs together.
    Ranges use GBIF's ``"min,max"`` string form (``year="1990,2000"``).

    Args:
        taxonKey: Backbone taxon key(s).
        country: ISO 3166-1 alpha-2 country code(s) where recorded.
        geometry: WKT polygon to search within.
        issue: Interpretation issue flag(s).
        q: Simple full-text search.
        limit: Page size (GBIF caps this at 300).
        offset: Record to start at.
        facet: Field(s) to facet on.
        verbose: Log request/response metadata.
        options: Transport options.

    The remaining arguments map one-to-one onto GBIF's occurrence search
    parameters of the same name.

    Returns:
        ``{"offset", "limit", "endOfRecords", "count", "results", "facets"}``
    """
    query = OccurrenceSearchQuery(
        taxonKey=taxonKey,
        repatriated=repatriated,
        kingdomKey=kingdomKey,
        phylumKey=phylumKey,
        classKey=classKey,
        orderKey=orderKey,
        familyKey=familyKey,
        genusKey=genusKey,
        subgenusKey=subgenusKey,
        scientificName=scientificName,
        country=country,
        publishingCountry=publishingCountry,
        hasCoordinate=hasCoordinate,
        typeStatus=typeStatus,
        recordNumber=recordNumber,
        lastInterpreted=lastInterpreted,
        continent=continent,
        geometry=geometry,
        recordedBy=recordedBy,
        basisOfRecord=basisOfRecord,
        datasetKey=datasetKey,
        eventDate=eventDate,
        catalogNumber=catalogNumber,
        year=year,
        month=month,
        decimalLatitude=decimalLatitude,
        decimalLongitude=decimalLongitude,
        elevation=elevation,
        depth=depth,
        institutionCode=institutionCode,
        collectionCode=collectionCode,
        hasGeospatialIssue=hasGeospatialIssue,
        issue=issue,
        q=q,
        spellCheck=spellCheck,
        mediatype=mediatype,
        limit=limit,
        offset=offset,
        establishmentMeans=establishmentMeans,
        facet=facet,
        facetMincount=facetMincount,
        facetMultiselect=facetMultiselect,
    )
    result: dict[str, Any] = request.perform(SEARCH_PATH, query.to_query(), verbose=verbose, options=options)
    return result
