"""Tests for IP address validators."""

import pytest

from rulecheck.exceptions import WrongTypeError
from rulecheck.validators.network import ip, ipv4, ipv6


class TestIp:
    """Test ip."""

    @pytest.mark.parametrize("value", ["192.168.0.1", "::1", "2001:db8::1", "::ffff:1.2.3.4"])
    def test_valid(self, value):
        assert ip(value) is None

    @pytest.mark.parametrize("value", ["300.1.1.1", "1.2.3", "localhost", ""])
    def test_invalid(self, value):
        assert ip(value) is not None

    def test_non_text_raises(self):
        with pytest.raises(WrongTypeError):
            ip(3232235521)


class TestIpv4:
    """Test ipv4."""

    def test_dotted_quad(self):
        assert ipv4("10.0.0.1") is None

    @pytest.mark.parametrize("value", ["::1", "::ffff:1.2.3.4", "10.0.0.256"])
    def test_rejects_other_forms(self, value):
        assert ipv4(value).rule == "ipv4"


class TestIpv6:
    """Test ipv6."""

    @pytest.mark.parametrize("value", ["::1", "2001:db8::1", "fe80::1"])
    def test_valid(self, value):
        assert ipv6(value) is None

    def test_rejects_ipv4_mapped(self):
        assert ipv6("::ffff:1.2.3.4") is not None

    def test_rejects_ipv4(self):
        assert ipv6("10.0.0.1") is not None
