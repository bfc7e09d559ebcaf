import pytest
import zmq

from aperture.base import (ConfigurationError, Device, NamedToken, Namespace, PatternRegistry, RawCode,
                           SendFlag, SocketPattern, as_token, pattern_registry, resolve_device,
                           resolve_flags, resolve_pattern)


class TestTokens:
    @pytest.mark.parametrize("value, expected", [
        (zmq.PUSH, RawCode(zmq.PUSH)),
        (SocketPattern.PULL, RawCode(zmq.PULL)),
        ('pair', NamedToken('pair')),
        (None, NamedToken(None)),
        (True, NamedToken(True)),
        (NamedToken('pub'), NamedToken('pub')),
        (RawCode(7), RawCode(7)),
    ])
    def test_as_token(self, value, expected):
        assert as_token(value) == expected


class TestPatternRegistry:
    @pytest.mark.parametrize("name, code", [
        ('pair', zmq.PAIR),
        ('push', zmq.PUSH),
        ('pull', zmq.PULL),
        ('pub', zmq.PUB),
        ('sub', zmq.SUB),
        ('req', zmq.REQ),
        ('rep', zmq.REP),
        ('xreq', zmq.DEALER),
        ('xrep', zmq.ROUTER),
        ('extended-req', zmq.DEALER),
        ('extended-rep', zmq.ROUTER),
    ])
    def test_patterns(self, name, code):
        assert pattern_registry.resolve(Namespace.PATTERN, name) == code

    @pytest.mark.parametrize("name, code", [
        (None, 0),
        ('none', 0),
        ('streamer', zmq.STREAMER),
        ('forwarder', zmq.FORWARDER),
        ('queue', zmq.QUEUE),
    ])
    def test_devices(self, name, code):
        assert resolve_device(name) == code

    @pytest.mark.parametrize("name, code", [
        (None, 0),
        ('none', 0),
        ('send-more', zmq.SNDMORE),
        ('no-block', zmq.NOBLOCK),
        ('dont-wait', zmq.NOBLOCK),
    ])
    def test_flags(self, name, code):
        assert resolve_flags(name) == code

    def test_numeric_code_unchanged(self):
        assert resolve_pattern(zmq.PUSH) == zmq.PUSH
        assert resolve_pattern(12345) == 12345
        assert resolve_flags(zmq.NOBLOCK) == zmq.NOBLOCK
        assert resolve_device(Device.QUEUE) == zmq.QUEUE
        assert resolve_pattern(RawCode(zmq.SUB)) == zmq.SUB

    def test_named_token(self):
        assert resolve_pattern(NamedToken('rep')) == zmq.REP

    def test_name_normalization(self):
        assert resolve_pattern('PUSH') == zmq.PUSH
        assert resolve_pattern(' pull ') == zmq.PULL
        assert resolve_flags('NO_BLOCK') == zmq.NOBLOCK
        assert resolve_pattern('Extended_Req') == zmq.DEALER

    def test_result_is_enum(self):
        assert resolve_pattern('pair') is SocketPattern.PAIR
        assert resolve_flags('send-more') is SendFlag.SEND_MORE

    def test_flag_sequence(self):
        assert resolve_flags(['send-more', 'no-block']) == zmq.SNDMORE | zmq.NOBLOCK
        assert resolve_flags(('no-block', zmq.SNDMORE)) == zmq.SNDMORE | zmq.NOBLOCK
        assert resolve_flags([]) == 0

    @pytest.mark.parametrize("namespace, token", [
        (Namespace.PATTERN, 'bogus'),
        (Namespace.PATTERN, None),
        (Namespace.PATTERN, 'none'),
        (Namespace.DEVICE, 'push'),
        (Namespace.FLAG, 'more'),
        (Namespace.FLAG, True),
        (Namespace.FLAG, 1.5),
    ])
    def test_unknown(self, namespace, token):
        with pytest.raises(ConfigurationError) as cm:
            pattern_registry.resolve(namespace, token)
        assert cm.value.namespace is namespace
        assert cm.value.token == token

    def test_unknown_flag_in_sequence(self):
        with pytest.raises(ConfigurationError) as cm:
            resolve_flags(['no-block', 'bogus'])
        assert cm.value.token == 'bogus'

    def test_names(self):
        assert set(pattern_registry.names(Namespace.DEVICE)) == {'none', 'streamer', 'forwarder', 'queue'}
        assert 'send-more' in pattern_registry.names(Namespace.FLAG)

    def test_contains(self):
        assert (Namespace.PATTERN, 'push') in pattern_registry
        assert (Namespace.PATTERN, 'SUB') in pattern_registry
        assert (Namespace.FLAG, 'push') not in pattern_registry
        assert (Namespace.FLAG, None) not in pattern_registry

    def test_custom_tables(self):
        registry = PatternRegistry({Namespace.PATTERN: {'sink': zmq.PULL}})
        assert registry.resolve(Namespace.PATTERN, 'sink') == zmq.PULL
        assert registry.resolve(Namespace.FLAG, 'no-block') == zmq.NOBLOCK
        with pytest.raises(ConfigurationError):
            registry.resolve(Namespace.PATTERN, 'pair')
