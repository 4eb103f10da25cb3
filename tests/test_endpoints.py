"""
Endpoint normalizer tests
"""

from datetime import datetime

from chainboard.data.endpoints import PartialRecord, StringAddress, classify, normalize_endpoints
from chainboard.data.models import Endpoint, EndpointKind, provider_from_address


class TestProviderDerivation:
    def test_second_to_last_segment(self):
        assert provider_from_address("rpc.cosmos.network") == "cosmos"

    def test_single_segment_is_its_own_provider(self):
        assert provider_from_address("localhost") == "localhost"

    def test_endpoint_model_fills_missing_provider(self):
        ep = Endpoint(address="https://lcd.osmosis.zone")
        assert ep.provider == "osmosis"


class TestClassify:
    def test_bare_string_is_wrapped(self):
        assert classify("rpc.cosmos.network") == [StringAddress("rpc.cosmos.network")]

    def test_mixed_list(self):
        variants = classify(["a.b.c", {"address": "x.y.z", "provider": "me"}])
        assert variants[0] == StringAddress("a.b.c")
        assert isinstance(variants[1], PartialRecord)
        assert variants[1].fields["provider"] == "me"


class TestNormalizeEndpoints:
    def test_empty_inputs(self):
        assert normalize_endpoints(None) == []
        assert normalize_endpoints([]) == []
        assert normalize_endpoints("") == []

    def test_string_input(self):
        before = datetime.now()
        [ep] = normalize_endpoints("rpc.cosmos.network")
        assert ep.address == "rpc.cosmos.network"
        assert ep.provider == "cosmos"
        assert ep.is_active is True
        assert ep.last_checked >= before

    def test_localhost(self):
        [ep] = normalize_endpoints(["localhost"])
        assert ep.provider == "localhost"

    def test_object_fields_are_kept_but_activity_is_forced(self):
        raw = [{
            "address": "https://api.example.org",
            "provider": "Example",
            "type": "rest",
            "isActive": False,
            "lastChecked": "2020-01-01T00:00:00",
        }]
        [ep] = normalize_endpoints(raw)
        assert ep.provider == "Example"
        assert ep.kind == EndpointKind.REST
        assert ep.is_active is True
        assert ep.last_checked.year >= 2024

    def test_object_input_is_not_mutated(self):
        raw = {"address": "https://api.example.org", "isActive": False}
        normalize_endpoints([raw])
        assert raw == {"address": "https://api.example.org", "isActive": False}
