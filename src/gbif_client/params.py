"""
Query-string normalization.

Every endpoint has a small pydantic model listing the parameters it accepts.
Field names are the keyword arguments callers use; aliases are the wire names
GBIF expects where the two differ (``clazz`` → ``class``). Only set fields are
serialized, so an unset optional parameter never shows up in the URL::

    NameBackboneQuery(name="Helianthus", clazz="Magnoliopsida").to_query()
    # {"name": "Helianthus", "class": "Magnoliopsida"}

Values are not type-checked here; GBIF validates them and its error
responses are surfaced unmodified.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def encode_value(value: Any) -> Any:
    """Encode a single value for the wire.

    Booleans become ``"true"``/``"false"``; lists and tuples become lists with
    each element encoded (``None`` elements dropped). Everything else is
    returned untouched for requests to stringify.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value if v is not None]
    return value


def normalize(params: Mapping[Any, Any]) -> dict[str, Any]:
    """
    Flatten ``params`` into a query mapping.

    Drops entries whose value is ``None``, stringifies keys and encodes values
    with :func:`encode_value`. Falsy values other than ``None`` (``False``,
    ``0``, ``""``) are kept. Idempotent.
    """
    return {str(key): encode_value(value) for key, value in params.items() if value is not None}


class QueryParams(BaseModel):
    """Base for per-endpoint parameter sets."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    def to_query(self) -> dict[str, Any]:
        """Serialize set fields under their wire names."""
        return normalize(self.model_dump(by_alias=True, exclude_none=True))


# =============================================================================
# Species
# =============================================================================


class NameBackboneQuery(QueryParams):
    """``species/match``"""

    name: Any
    rank: Any = None
    kingdom: Any = None
    phylum: Any = None
    clazz: Any = Field(default=None, alias="class")
    order: Any = None
    family: Any = None
    genus: Any = None
    strict: Any = None
    offset: Any = None
    limit: Any = None


class NameSuggestQuery(QueryParams):
    """``species/suggest``"""

    q: Any = None
    datasetKey: Any = None
    rank: Any = None
    limit: Any = None
    offset: Any = None


class NameUsageQuery(QueryParams):
    """``species/``"""

    name: Any = None
    language: Any = None
    datasetKey: Any = None
    sourceId: Any = None
    limit: Any = None
    offset: Any = None


class NameLookupQuery(QueryParams):
    """``species/search``

    ``verbosity`` is sent as ``verbose``; the Python name is taken by the
    request-logging switch every call accepts.
    """

    q: Any = None
    rank: Any = None
    higherTaxonKey: Any = None
    status: Any = None
    isExtinct: Any = None
    habitat: Any = None
    nameType: Any = None
    datasetKey: Any = None
    nomenclaturalStatus: Any = None
    limit: Any = None
    offset: Any = None
    facet: Any = None
    facetMincount: Any = None
    facetMultiselect: Any = None
    type: Any = None
    hl: Any = None
    verbosity: Any = Field(default=None, alias="verbose")


# =============================================================================
# Occurrences
# =============================================================================


class OccurrenceSearchQuery(QueryParams):
    """``occurrence/search``"""

    taxonKey: Any = None
    repatriated: Any = None
    kingdomKey: Any = None
    phylumKey: Any = None
    classKey: Any = None
    orderKey: Any = None
    familyKey: Any = None
    genusKey: Any = None
    subgenusKey: Any = None
    scientificName: Any = None
    country: Any = None
    publishingCountry: Any = None
    hasCoordinate: Any = None
    typeStatus: Any = None
    recordNumber: Any = None
    lastInterpreted: Any = None
    continent: Any = None
    geometry: Any = None
    recordedBy: Any = None
    basisOfRecord: Any = None
    datasetKey: Any = None
    eventDate: Any = None
    catalogNumber: Any = None
    year: Any = None
    month: Any = None
    decimalLatitude: Any = None
    decimalLongitude: Any = None
    elevation: Any = None
    depth: Any = None
    institutionCode: Any = None
    collectionCode: Any = None
    hasGeospatialIssue: Any = None
    issue: Any = None
    q: Any = None
    spellCheck: Any = None
    mediatype: Any = None
    limit: Any = None
    offset: Any = None
    establishmentMeans: Any = None
    facet: Any = None
    facetMincount: Any = None
    facetMultiselect: Any = None


# =============================================================================
# Registry
# =============================================================================


class RegistryQuery(QueryParams):
    """Filters shared by network, node, organization and installation listings."""

    q: Any = None
    identifier: Any = None
    identifierType: Any = None
    limit: Any = None
    offset: Any = None


class DatasetQuery(QueryParams):
    """``dataset[/...]`` listings. ``query`` is sent as ``q``."""

    type: Any = None
    query: Any = Field(default=None, alias="q")
    limit: Any = None
    offset: Any = None


class DatasetSuggestQuery(QueryParams):
    """``dataset/suggest``"""

    q: Any = None
    type: Any = None
    keyword: Any = None
    owningOrg: Any = None
    publishingOrg: Any = None
    hostingOrg: Any = None
    publishingCountry: Any = None
    decade: Any = None
    limit: Any = None
    offset: Any = None


class DatasetSearchQuery(DatasetSuggestQuery):
    """``dataset/search``"""

    facet: Any = None
    facetMincount: Any = None
    facetMultiselect: Any = None
    hl: Any = None
