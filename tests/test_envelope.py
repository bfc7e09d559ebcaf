import pickle
from dataclasses import dataclass

import pytest
import zmq
from google.protobuf import struct_pb2

from firebird.base.protobuf import dict2struct, struct2dict

from aperture.base import (NO_RESULT, ConfigurationError, InvalidMessageError, PickleSerializer,
                           ProtobufSerializer, ResourceError, Serializer, aperture_config,
                           default_serializer, recv, send)


@dataclass
class Reading:
    sensor: str
    values: list[float]


class TestEnvelope:
    @pytest.mark.parametrize("obj", [
        None,
        42,
        'text',
        b'\x00binary',
        {'stage': [1, 2, {'nested': (3.5, None)}], 'done': False},
        Reading('t-01', [21.5, 21.7]),
    ], ids=['none', 'int', 'str', 'bytes', 'nested', 'record'])
    def test_send_recv(self, pair, obj):
        left, right = pair
        assert send(left.socket, obj)
        assert recv(right.socket) == obj

    def test_one_message_per_object(self, pair):
        left, right = pair
        send(left.socket, ['a', 'b'])
        frames = right.socket.recv_multipart()
        assert len(frames) == 1
        assert pickle.loads(frames[0]) == ['a', 'b']

    def test_recv_no_block(self, pair):
        left, right = pair
        assert recv(right.socket, 'no-block') is NO_RESULT
        assert recv(right.socket, zmq.NOBLOCK) is NO_RESULT
        send(left.socket, None)
        assert right.message_available(1000)
        assert recv(right.socket, 'dont-wait') is None

    def test_recv_timeout(self, portal_factory):
        portal = portal_factory('pull', {'rcvtimeo': 10})
        with pytest.raises(ResourceError) as cm:
            recv(portal.socket)
        assert cm.value.errno == zmq.EAGAIN

    def test_send_no_block(self, portal_factory):
        portal = portal_factory('push')
        assert send(portal.socket, 'nobody listens', 'no-block') is False

    def test_send_more(self, pair):
        left, right = pair
        assert send(left.socket, 'head', 'send-more')
        assert send(left.socket, 'tail')
        assert recv(right.socket) == 'head'
        assert right.socket.rcvmore
        assert recv(right.socket) == 'tail'

    def test_unknown_flag(self, pair):
        left, right = pair
        with pytest.raises(ConfigurationError) as cm:
            send(left.socket, 'data', 'eventually')
        assert cm.value.token == 'eventually'
        with pytest.raises(ConfigurationError):
            recv(right.socket, 'eventually')
        assert not right.message_available()

    def test_serializer(self, pair):
        left, right = pair
        serializer = ProtobufSerializer()
        msg = dict2struct({'answer': 42, 'label': 'x'})
        assert send(left.socket, msg, serializer=serializer)
        result = recv(right.socket, serializer=serializer)
        assert isinstance(result, struct_pb2.Struct)
        assert struct2dict(result) == {'answer': 42, 'label': 'x'}

    def test_portal_serializer(self, portal_factory):
        address = 'inproc://portal-serializer'
        left = portal_factory('pair', serializer=ProtobufSerializer())
        right = portal_factory('pair', serializer=ProtobufSerializer())
        left.bind(address)
        right.connect(address)
        left.send(dict2struct({'items': [1, 2]}))
        assert struct2dict(right.recv()) == {'items': [1, 2]}


class TestPickleSerializer:
    def test_default(self):
        assert isinstance(default_serializer, PickleSerializer)
        assert isinstance(default_serializer, Serializer)
        assert default_serializer.protocol == aperture_config.pickle_protocol.value

    def test_protocol(self):
        serializer = PickleSerializer(protocol=2)
        data = serializer.serialize({'a': 1})
        # PROTO opcode followed by protocol number
        assert data[:2] == b'\x80\x02'
        assert serializer.deserialize(data) == {'a': 1}
        assert repr(serializer) == 'PickleSerializer(protocol=2)'

    def test_record(self):
        serializer = PickleSerializer()
        record = Reading('p-02', [])
        assert serializer.deserialize(serializer.serialize(record)) == record


class TestProtobufSerializer:
    def test_protocol(self):
        assert isinstance(ProtobufSerializer(), Serializer)

    def test_message_type(self):
        serializer = ProtobufSerializer()
        msg = struct_pb2.Value(string_value='hello')
        result = serializer.deserialize(serializer.serialize(msg))
        assert isinstance(result, struct_pb2.Value)
        assert result.string_value == 'hello'

    @pytest.mark.parametrize("data", [b'', b'\xff\xff'], ids=['empty', 'garbage'])
    def test_invalid(self, data):
        with pytest.raises(InvalidMessageError):
            ProtobufSerializer().deserialize(data)
