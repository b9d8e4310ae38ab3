"""Tests for the registry API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gbif_client import registry
from gbif_client.errors import InvalidResourceKind, MissingIdentifier
from gbif_client.routing import NodeData

if TYPE_CHECKING:
    from conftest import StubTransport

NETWORK_UUID = "16ab5405-6c94-4189-ac71-16ca3b753df7"
NODE_UUID = "03e816b3-8f58-49ae-bc12-4e18b358d6d9"
DATASET_UUID = "7b5d6a48-f762-11e1-a439-00145eb45e9a"

SAMPLE_NETWORKS_RESPONSE: dict = {
    "offset": 0,
    "limit": 5,
    "endOfRecords": False,
    "count": 14,
    "results": [{"key": NETWORK_UUID, "title": "Dryad"}],
}


class TestNetworks:
    def test_listing(self, transport: StubTransport) -> None:
        transport.body = SAMPLE_NETWORKS_RESPONSE
        res = registry.networks(limit=5)
        assert list(res.keys()) == ["offset", "limit", "endOfRecords", "count", "results"]
        assert transport.path == "/v1/network"
        assert transport.query == {"limit": ["5"]}

    def test_by_uuid(self, transport: StubTransport) -> None:
        registry.networks(uuid=NETWORK_UUID)
        assert transport.path == f"/v1/network/{NETWORK_UUID}"

    def test_category(self, transport: StubTransport) -> None:
        registry.networks(data="endpoint", uuid=NETWORK_UUID)
        assert transport.path == f"/v1/network/{NETWORK_UUID}/endpoint"

    def test_invalid_category_makes_no_request(self, transport: StubTransport) -> None:
        with pytest.raises(InvalidResourceKind):
            registry.networks(data="hostedDataset", uuid=NETWORK_UUID)
        assert transport.requests == []

    def test_missing_uuid_makes_no_request(self, transport: StubTransport) -> None:
        with pytest.raises(MissingIdentifier):
            registry.networks(data="contact")
        assert transport.requests == []


class TestNodes:
    def test_identifier_filter(self, transport: StubTransport) -> None:
        registry.nodes(identifier=120)
        assert transport.path == "/v1/node"
        assert transport.query == {"identifier": ["120"], "limit": ["100"]}

    def test_category(self, transport: StubTransport) -> None:
        registry.nodes(data="identifier", uuid=NODE_UUID)
        assert transport.path == f"/v1/node/{NODE_UUID}/identifier"

    def test_country(self, transport: StubTransport) -> None:
        registry.nodes(data=NodeData.COUNTRY, isocode="US")
        assert transport.path == "/v1/node/country/US"


class TestOrganizations:
    def test_deleted(self, transport: StubTransport) -> None:
        registry.organizations(data="deleted")
        assert transport.path == "/v1/organization/deleted"

    def test_contact_needs_uuid(self, transport: StubTransport) -> None:
        with pytest.raises(MissingIdentifier):
            registry.organizations(data="contact")
        assert transport.requests == []

    def test_search_query(self, transport: StubTransport) -> None:
        registry.organizations(q="museum", offset=0)
        assert transport.query == {"q": ["museum"], "limit": ["100"], "offset": ["0"]}


class TestInstallations:
    def test_non_publishing(self, transport: StubTransport) -> None:
        registry.installations(data="nonPublishing")
        assert transport.path == "/v1/installation/nonPublishing"

    def test_dataset_by_uuid(self, transport: StubTransport) -> None:
        registry.installations(data="dataset", uuid="b77901f9-d9b0-47fa-94e0-dd96450aa2b4")
        assert transport.path == "/v1/installation/b77901f9-d9b0-47fa-94e0-dd96450aa2b4/dataset"


class TestDatasets:
    def test_listing_with_query(self, transport: StubTransport) -> None:
        registry.datasets(query="frogs", type="OCCURRENCE", limit=5)
        assert transport.path == "/v1/dataset"
        assert transport.query == {"q": ["frogs"], "type": ["OCCURRENCE"], "limit": ["5"]}

    def test_uuidless_category(self, transport: StubTransport) -> None:
        registry.datasets(data="withNoEndpoint")
        assert transport.path == "/v1/dataset/withNoEndpoint"

    def test_category_by_uuid(self, transport: StubTransport) -> None:
        registry.datasets(data="contact", uuid=DATASET_UUID)
        assert transport.path == f"/v1/dataset/{DATASET_UUID}/contact"

    def test_metadata_document(self, transport: StubTransport) -> None:
        registry.datasets(data="metadata", id="doc-1")
        assert transport.path == "/v1/dataset/metadata/doc-1/document"

    def test_metadata_without_id(self, transport: StubTransport) -> None:
        with pytest.raises(MissingIdentifier):
            registry.datasets(data="metadata")
        assert transport.requests == []


class TestDatasetEndpoints:
    def test_metrics(self, transport: StubTransport) -> None:
        transport.body = {"datasetKey": DATASET_UUID, "usagesCount": 4200}
        res = registry.dataset_metrics(DATASET_UUID)
        assert res["usagesCount"] == 4200
        assert transport.path == f"/v1/dataset/{DATASET_UUID}/metrics"
        assert transport.query == {}

    def test_suggest(self, transport: StubTransport) -> None:
        transport.body = [{"key": DATASET_UUID, "title": "Amphibians"}]
        res = registry.dataset_suggest(q="Amph", type="CHECKLIST")
        assert res[0]["title"] == "Amphibians"
        assert transport.path == "/v1/dataset/suggest"
        assert transport.query == {"q": ["Amph"], "type": ["CHECKLIST"], "limit": ["100"]}

    def test_search_facets(self, transport: StubTransport) -> None:
        registry.dataset_search(facet=["type", "publishingCountry"], facetMincount=5)
        assert transport.path == "/v1/dataset/search"
        assert "facet=type&facet=publishingCountry" in transport.raw_query
        assert transport.query["hl"] == ["false"]
