from pathlib import Path

import pytest

from aperture.base import ProtocolError, Scheme, get_scheme, parse_address

PREFIXES = {
    'inproc': 'inproc://',
    'ipc': 'ipc://',
    'tcp': 'tcp://',
    'pgm': 'pgm://',
    'epgm': 'epgm://',
}
LOCATIONS = ['127.0.0.1:5555', '*:*', 'eth0;239.192.1.1:5555', 'Stage-One', 5555,
             Path('/tmp/Aperture/feed')]


class TestParseAddress:
    @pytest.mark.parametrize("scheme", list(PREFIXES))
    @pytest.mark.parametrize("location", LOCATIONS)
    def test_pair(self, scheme, location):
        assert parse_address((scheme, location)) == PREFIXES[scheme] + str(location)

    def test_pair_as_list(self):
        assert parse_address(['tcp', 'localhost:5000']) == 'tcp://localhost:5000'

    @pytest.mark.parametrize("scheme", list(Scheme))
    def test_scheme_member(self, scheme):
        assert parse_address((scheme, 'here')) == PREFIXES[scheme.value] + 'here'

    @pytest.mark.parametrize("keyword, scheme", [
        ('in-process', Scheme.INPROC),
        ('epgm-multicast', Scheme.EPGM),
        ('TCP', Scheme.TCP),
    ])
    def test_scheme_aliases(self, keyword, scheme):
        assert get_scheme(keyword) is scheme
        assert parse_address((keyword, 'x')) == scheme.prefix + 'x'

    @pytest.mark.parametrize("literal", ['tcp://127.0.0.1:5555', 'inproc://Mixed-Case',
                                         'not an address', ''])
    def test_literal_unchanged(self, literal):
        assert parse_address(literal) == literal

    @pytest.mark.parametrize("spec", [('udp', 'host:1'), ('vmci', '1:2'), (None, 'x'), (5, 'x')])
    def test_unknown_scheme(self, spec):
        with pytest.raises(ProtocolError) as cm:
            parse_address(spec)
        assert cm.value.spec == spec

    @pytest.mark.parametrize("spec", [42, None, ('tcp',), ('tcp', 'a', 'b'), {'tcp': 'x'}, b'tcp://x'])
    def test_invalid_spec(self, spec):
        with pytest.raises(ProtocolError) as cm:
            parse_address(spec)
        assert cm.value.spec == spec

    def test_get_scheme_unknown(self):
        with pytest.raises(ProtocolError, match="Unknown ZeroMQ protocol 'http'"):
            get_scheme('http')
