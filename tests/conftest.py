import uuid

import pytest

from aperture.base import TransportContext, create_portal


@pytest.fixture
def transport():
    transport = TransportContext(io_threads=1)
    yield transport
    # Sockets left open by failed test would block plain termination
    transport.terminate(forced=True)

@pytest.fixture
def portal_factory(transport):
    "Creates portals in test transport context, closing those left open after test."
    created = []
    def factory(pattern='pair', options=None, **kwargs):
        options = {'close_timeout': 0, 'rcvtimeo': 2000, **(options or {})}
        portal = create_portal(pattern, options, context=transport, **kwargs)
        created.append(portal)
        return portal
    yield factory
    for portal in reversed(created):
        if not portal.closed:
            portal.close()

@pytest.fixture
def pair(portal_factory):
    "Bound and connected PAIR portals."
    address = f"inproc://pair-{uuid.uuid4().hex}"
    left = portal_factory('pair', label='left')
    right = portal_factory('pair', label='right')
    left.bind(address)
    right.connect(address)
    return left, right
