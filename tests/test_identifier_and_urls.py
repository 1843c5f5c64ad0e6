"""
Unit tests for CIK resolution/padding and relay URL construction.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from urllib.parse import parse_qs, unquote, urlparse

import pytest
from sharesview.identifier import pad_cik, resolve_cik
from sharesview.url_utils import build_concept_url, build_relay_url, encode_uri_component

SEC_BASE = "https://data.sec.gov/api/xbrl/companyconcept"
RELAY = "https://api.allorigins.win/raw"


# ──────────────────────────────────────────────────────────────────────────────
# identifier
# ──────────────────────────────────────────────────────────────────────────────

class TestResolveCik:
    @pytest.mark.parametrize("raw", ["1", "320193", "0000320193", "9999999999"])
    def test_accepts_one_to_ten_digits(self, raw):
        assert resolve_cik(raw) == raw

    def test_does_not_pad(self):
        assert resolve_cik("123") == "123"

    @pytest.mark.parametrize("raw", [
        None, "", "abc", "12a", "-123", "+123", "12345678901",
        " 123", "123 ", "123\n", "１２３", "3.2",
    ])
    def test_rejects_everything_else(self, raw):
        assert resolve_cik(raw) is None


class TestPadCik:
    def test_left_pads_to_ten(self):
        assert pad_cik("123") == "0000000123"

    def test_full_width_unchanged(self):
        assert pad_cik("1234567890") == "1234567890"

    @pytest.mark.parametrize("raw", ["1", "42", "320193", "000123"])
    def test_suffix_preserved(self, raw):
        padded = pad_cik(raw)
        assert len(padded) == 10
        assert padded.endswith(raw)
        assert set(padded[: 10 - len(raw)]) <= {"0"}


# ──────────────────────────────────────────────────────────────────────────────
# url_utils
# ──────────────────────────────────────────────────────────────────────────────

class TestBuildConceptUrl:
    def test_apple(self):
        assert build_concept_url("320193", SEC_BASE) == (
            "https://data.sec.gov/api/xbrl/companyconcept/CIK0000320193/"
            "dei/EntityCommonStockSharesOutstanding.json"
        )

    def test_trailing_slash_on_base(self):
        assert build_concept_url("1", SEC_BASE + "/").startswith(
            "https://data.sec.gov/api/xbrl/companyconcept/CIK0000000001/"
        )


class TestBuildRelayUrl:
    def test_wraps_percent_encoded(self):
        upstream = build_concept_url("320193", SEC_BASE)
        relay = build_relay_url(upstream, RELAY)
        assert relay.startswith(RELAY + "?url=https%3A%2F%2Fdata.sec.gov%2F")
        assert "CIK0000320193" in relay
        assert unquote(relay.split("url=", 1)[1]) == upstream

    def test_relay_with_existing_query(self):
        relay = build_relay_url("https://x.test/a?b=1", "https://relay.test/get?mode=raw")
        qs = parse_qs(urlparse(relay).query)
        assert qs["mode"] == ["raw"]
        assert qs["url"] == ["https://x.test/a?b=1"]

    def test_encode_uri_component_reserved(self):
        assert encode_uri_component("a b&c=d/e?f") == "a%20b%26c%3Dd%2Fe%3Ff"
        assert encode_uri_component("-_.!~*'()") == "-_.!~*'()"
