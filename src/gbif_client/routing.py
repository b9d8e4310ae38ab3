"""
Registry endpoint routing.

Each registry family (network, node, organization, installation, dataset)
has its own closed set of sub-resource categories, and its own subset of
categories that can be fetched without an entity uuid. :func:`route` turns a
family + category + optional uuid into the relative URL path::

    route(Family.NODE)                                   # "node"
    route(Family.NODE, "identifier", "03e816b3-...")     # "node/03e816b3-.../identifier"
    route(Family.NODE, "country", isocode="US")          # "node/country/US"
    route(Family.ORGANIZATION, "deleted")                # "organization/deleted"

Validation happens here, before any request is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from gbif_client.errors import InvalidResourceKind, MissingIdentifier

ALL = "all"


class Family(StrEnum):
    """Top-level registry resource types (the first path segment)."""

    NETWORK = "network"
    NODE = "node"
    ORGANIZATION = "organization"
    INSTALLATION = "installation"
    DATASET = "dataset"


# =============================================================================
# Categories per family
# =============================================================================


class NetworkData(StrEnum):
    ALL = "all"
    CONTACT = "contact"
    ENDPOINT = "endpoint"
    IDENTIFIER = "identifier"
    TAG = "tag"
    MACHINE_TAG = "machineTag"
    COMMENT = "comment"
    CONSTITUENTS = "constituents"


class NodeData(StrEnum):
    ALL = "all"
    ORGANIZATION = "organization"
    ENDPOINT = "endpoint"
    IDENTIFIER = "identifier"
    TAG = "tag"
    MACHINE_TAG = "machineTag"
    COMMENT = "comment"
    PENDING_ENDORSEMENT = "pendingEndorsement"
    COUNTRY = "country"
    DATASET = "dataset"
    INSTALLATION = "installation"


class OrganizationData(StrEnum):
    ALL = "all"
    CONTACT = "contact"
    ENDPOINT = "endpoint"
    IDENTIFIER = "identifier"
    TAG = "tag"
    MACHINE_TAG = "machineTag"
    COMMENT = "comment"
    HOSTED_DATASET = "hostedDataset"
    OWNED_DATASET = "ownedDataset"
    DELETED = "deleted"
    PENDING = "pending"
    NON_PUBLISHING = "nonPublishing"


class InstallationData(StrEnum):
    ALL = "all"
    CONTACT = "contact"
    ENDPOINT = "endpoint"
    DATASET = "dataset"
    IDENTIFIER = "identifier"
    TAG = "tag"
    MACHINE_TAG = "machineTag"
    COMMENT = "comment"
    DELETED = "deleted"
    NON_PUBLISHING = "nonPublishing"


class DatasetData(StrEnum):
    ALL = "all"
    ORGANIZATION = "organization"
    CONTACT = "contact"
    ENDPOINT = "endpoint"
    IDENTIFIER = "identifier"
    TAG = "tag"
    MACHINE_TAG = "machinetag"  # lowercase on the dataset API
    COMMENT = "comment"
    CONSTITUENTS = "constituents"
    DOCUMENT = "document"
    METADATA = "metadata"
    DELETED = "deleted"
    DUPLICATE = "duplicate"
    SUB_DATASET = "subDataset"
    WITH_NO_ENDPOINT = "withNoEndpoint"


@dataclass(frozen=True)
class FamilyRules:
    """Allowed categories for one family, and which need no uuid."""

    family: Family
    categories: type[StrEnum]
    without_uuid: frozenset[str]

    @property
    def choices(self) -> list[str]:
        return [c.value for c in self.categories]  # type: ignore[attr-defined]

    def coerce(self, category: str) -> StrEnum:
        """Convert an untyped category string into this family's enum."""
        try:
            return self.categories(category)
        except ValueError:
            raise InvalidResourceKind(category, self.choices) from None


RULES: dict[Family, FamilyRules] = {
    Family.NETWORK: FamilyRules(
        Family.NETWORK,
        NetworkData,
        frozenset({ALL}),
    ),
    Family.NODE: FamilyRules(
        Family.NODE,
        NodeData,
        frozenset({ALL, NodeData.COUNTRY}),
    ),
    Family.ORGANIZATION: FamilyRules(
        Family.ORGANIZATION,
        OrganizationData,
        frozenset({ALL, OrganizationData.DELETED, OrganizationData.PENDING, OrganizationData.NON_PUBLISHING}),
    ),
    Family.INSTALLATION: FamilyRules(
        Family.INSTALLATION,
        InstallationData,
        frozenset({ALL, InstallationData.DELETED, InstallationData.NON_PUBLISHING}),
    ),
    Family.DATASET: FamilyRules(
        Family.DATASET,
        DatasetData,
        frozenset(
            {
                ALL,
                DatasetData.DELETED,
                DatasetData.DUPLICATE,
                DatasetData.SUB_DATASET,
                DatasetData.WITH_NO_ENDPOINT,
            }
        ),
    ),
}


def rules_for(family: Family | str) -> FamilyRules:
    """Look up the rules for ``family``, accepting its enum or string value."""
    try:
        return RULES[Family(family)]
    except ValueError:
        raise InvalidResourceKind(family, [f.value for f in Family]) from None


def route(
    family: Family | str,
    category: StrEnum | str = ALL,
    identifier: str | None = None,
    *,
    isocode: str | None = None,
    document_id: str | None = None,
) -> str:
    """
    Build the relative path for a registry call.

    Args:
        family: Registry family (``Family.NODE`` or ``"node"``).
        category: Sub-resource selector from the family's allow-list.
        identifier: Entity uuid. Required unless the category is one of the
            family's uuid-less categories.
        isocode: Two-letter country code; only used for node ``country``
            without a uuid.
        document_id: Metadata document id; only used for dataset ``metadata``
            without a uuid.

    Returns:
        Path relative to the API root, e.g. ``"node/<uuid>/identifier"``.

    Raises:
        InvalidResourceKind: ``category`` (or ``family``) is not allowed.
        MissingIdentifier: ``category`` needs a uuid and none was given.
    """
    rules = rules_for(family)
    kind = rules.coerce(category).value
    base = rules.family.value

    if identifier is None:
        if kind == ALL:
            return base
        if rules.family is Family.NODE and kind == NodeData.COUNTRY and isocode:
            return f"{base}/country/{isocode}"
        if rules.family is Family.DATASET and kind == DatasetData.METADATA and document_id:
            return f"{base}/metadata/{document_id}/document"
        if kind not in rules.without_uuid:
            raise MissingIdentifier(base, kind, sorted(rules.without_uuid))
        return f"{base}/{kind}"

    if kind == ALL:
        return f"{base}/{identifier}"
    return f"{base}/{identifier}/{kind}"
