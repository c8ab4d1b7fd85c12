"""Tests for components filter encoding."""

import pytest

from places_geocoder.components import ALLOWED_FILTERS, encode_components
from places_geocoder.exceptions import MissingFilterValueError


class TestEncodeComponents:

    def test_two_filters(self):
        result = encode_components({"locality": "Rochester", "country": "uk"})
        assert result == "country:uk|locality:Rochester"

    def test_sorted_order_with_mixed_keys(self):
        components = {
            "route": "High Bank",
            "postal_code": "ME1 2NU",
            "country": "uk",
            "administrative_area": "Kent",
            "locality": "Rochester",
        }
        result = encode_components(components)
        assert result == (
            "administrative_area:Kent|country:uk|locality:Rochester"
            "|postal_code:ME1 2NU|route:High Bank"
        )

    def test_unknown_filters_are_skipped(self):
        result = encode_components({"country": "uk", "planet": "earth", "zzz": None})
        assert result == "country:uk"

    @pytest.mark.parametrize("components", [None, {}])
    def test_empty_mapping_yields_nothing(self, components):
        assert encode_components(components) is None

    def test_only_unknown_filters_yields_nothing(self):
        assert encode_components({"planet": "earth"}) is None

    def test_missing_value_for_allowed_filter(self):
        with pytest.raises(MissingFilterValueError, match="locality") as exc_info:
            encode_components({"country": "uk", "locality": None})
        assert exc_info.value.filter_name == "locality"

    def test_allowed_filter_set(self):
        assert set(ALLOWED_FILTERS) == {
            "route", "locality", "administrative_area", "postal_code", "country"
        }
