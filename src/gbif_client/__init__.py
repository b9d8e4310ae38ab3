"""gbif-client - thin Python client for the GBIF REST API.

Architecture::

    config.py       Process-wide settings (base URL, credentials, timeout)
    params.py       Query models: keyword arguments → wire query mapping
    routing.py      Registry family/category validation → URL path
    http.py         requests session factory, User-Agent, per-call options
    request.py      Request executor: one GET, typed errors, JSON out
    species.py      species/match, species/suggest, species/, species/search
    occurrences.py  occurrence/search
    registry.py     network, node, organization, installation, dataset
    schemas.py      Paging helpers for listing responses

Data flow: API function → params → routing (registry) → request → caller.
"""

__version__ = "0.1.0"

from gbif_client import occurrences, registry, species
from gbif_client.config import Settings, configure, get_settings
from gbif_client.errors import (
    BadGateway,
    BadRequest,
    GatewayTimeout,
    GbifError,
    HTTPError,
    InternalServerError,
    InvalidResourceKind,
    MissingIdentifier,
    NotFound,
    ServiceUnavailable,
    TransportError,
)
from gbif_client.request import Client
from gbif_client.routing import Family, route
from gbif_client.schemas import PagingMeta, get_meta

__all__ = [
    "BadGateway",
    "BadRequest",
    "Client",
    "Family",
    "GatewayTimeout",
    "GbifError",
    "HTTPError",
    "InternalServerError",
    "InvalidResourceKind",
    "MissingIdentifier",
    "NotFound",
    "PagingMeta",
    "ServiceUnavailable",
    "Settings",
    "TransportError",
    "__version__",
    "configure",
    "get_meta",
    "get_settings",
    "occurrences",
    "registry",
    "route",
    "species",
]
