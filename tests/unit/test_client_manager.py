"""Unit tests for the HTTP client manager."""

from constantcontact.utils.http import HTTPClientManager, create_limits, create_timeout


def test_http_client_manager_is_singleton():
    assert HTTPClientManager() is HTTPClientManager()


def test_create_client_returns_a_new_client_each_call():
    m = HTTPClientManager()
    c1 = m.create_client()
    c2 = m.create_client()
    try:
        assert c1 is not c2
        assert not c1.is_closed
        assert not c2.is_closed
    finally:
        m.close_client(c1)
        m.close_client(c2)


def test_create_client_applies_timeout_and_limits():
    m = HTTPClientManager()
    client = m.create_client(timeout=create_timeout(connect=2, read=7), limits=create_limits(1, 2))
    try:
        assert client.timeout.connect == 2
        assert client.timeout.read == 7
        assert client.follow_redirects is True
    finally:
        m.close_client(client)


def test_close_client_leaves_other_clients_open():
    m = HTTPClientManager()
    before = m.open_clients
    c1 = m.create_client()
    c2 = m.create_client()
    assert m.open_clients == before + 2

    m.close_client(c1)
    assert c1.is_closed
    assert not c2.is_closed
    assert m.open_clients == before + 1

    m.close_client(c2)
    assert m.open_clients == before


def test_close_all_closes_every_client():
    m = HTTPClientManager()
    c1 = m.create_client()
    c2 = m.create_client()
    m.close_all()
    assert c1.is_closed
    assert c2.is_closed
    assert m.open_clients == 0
