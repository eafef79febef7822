"""Tests for the endpoint scanner."""

from ipsift.models import Endpoint
from ipsift.scanner import scan_endpoints, valid_port


class TestScanEndpoints:
    def test_attached_port(self):
        assert scan_endpoints("1.2.3.4:80 US ok") == [Endpoint("1.2.3.4", "80")]

    def test_bare_address(self):
        assert scan_endpoints("host 10.0.0.1 is up") == [Endpoint("10.0.0.1", "")]

    def test_multiple_per_line(self):
        line = "a 1.1.1.1, 2.2.2.2:8080; 3.3.3.3"
        assert scan_endpoints(line) == [
            Endpoint("1.1.1.1", ""),
            Endpoint("2.2.2.2", "8080"),
            Endpoint("3.3.3.3", ""),
        ]

    def test_json_fragment(self):
        line = '{"proxy": "8.8.8.8:53", "backup": "8.8.4.4"}'
        assert scan_endpoints(line) == [
            Endpoint("8.8.8.8", "53"),
            Endpoint("8.8.4.4", ""),
        ]

    def test_invalid_octet_rejected(self):
        assert scan_endpoints("300.1.1.1 test") == []

    def test_embedded_in_longer_digit_run(self):
        assert scan_endpoints("id 1234.1.1.1") == []

    def test_boundary_values(self):
        assert scan_endpoints("0.0.0.0 and 255.255.255.255") == [
            Endpoint("0.0.0.0", ""),
            Endpoint("255.255.255.255", ""),
        ]

    def test_no_matches(self):
        assert scan_endpoints("nothing to see here") == []

    def test_out_of_range_port_dropped(self):
        assert scan_endpoints("1.2.3.4:99999") == [Endpoint("1.2.3.4", "")]

    def test_zero_port_dropped(self):
        assert scan_endpoints("1.2.3.4:0") == [Endpoint("1.2.3.4", "")]

    def test_six_digit_port_not_attached(self):
        assert scan_endpoints("1.2.3.4:123456") == [Endpoint("1.2.3.4", "")]


class TestValidPort:
    def test_range(self):
        assert valid_port("1")
        assert valid_port("65535")
        assert not valid_port("0")
        assert not valid_port("65536")

    def test_non_numeric(self):
        assert not valid_port("")
        assert not valid_port("8a")
