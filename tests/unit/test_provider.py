import pytest

from beeswax_provider.core.beeswax import AuthenticationError, ConfigurationError, ReconcileError
from beeswax_provider.core.resources import (
    RoleDataSource,
    RoleResource,
    RolesDataSource,
    UserDataSource,
    UserResource,
)
from beeswax_provider.provider import BeeswaxProvider


def _configure(provider, session):
    return provider.configure(
        host="https://buzz.example.com", email="ops@example.com", password="s3cret", session=session
    )


def test_configure_logs_in_once(fake_session):
    fake_session.queue(200, {"success": True})
    provider = BeeswaxProvider(version="test")

    client = _configure(provider, fake_session)

    assert client.authenticated is True
    assert [c["path"] for c in fake_session.calls] == ["/rest/v2/authenticate"]


def test_configure_fails_fast_on_bad_login(fake_session):
    fake_session.queue(401, "invalid credentials")
    provider = BeeswaxProvider()

    with pytest.raises(ReconcileError) as excinfo:
        _configure(provider, fake_session)

    assert excinfo.value.summary == "Unable to Create Beeswax API Client"
    assert isinstance(excinfo.value.cause, AuthenticationError)
    assert "invalid credentials" in excinfo.value.detail
    with pytest.raises(ReconcileError):
        provider.resources()


def test_configure_requires_settings(monkeypatch, fake_session):
    for var in ("BEESWAX_HOST", "BEESWAX_EMAIL", "BEESWAX_PASSWORD"):
        monkeypatch.delenv(var, raising=False)

    with pytest.raises(ConfigurationError):
        BeeswaxProvider().configure(host="https://buzz.example.com", email="", password="", session=fake_session)
    assert fake_session.calls == []


def test_registries_share_one_client(fake_session):
    fake_session.queue(200, {"success": True})
    provider = BeeswaxProvider()
    client = _configure(provider, fake_session)

    resources = provider.resources()
    data_sources = provider.data_sources()

    assert isinstance(resources["beeswax_user"], UserResource)
    assert isinstance(resources["beeswax_role"], RoleResource)
    assert isinstance(data_sources["beeswax_user"], UserDataSource)
    assert isinstance(data_sources["beeswax_role"], RoleDataSource)
    assert isinstance(data_sources["beeswax_roles"], RolesDataSource)
    assert resources["beeswax_user"].users.client is client
    assert resources["beeswax_role"].roles.client is client
    assert data_sources["beeswax_role"].reader.client is client


def test_resources_before_configure_are_refused():
    with pytest.raises(ReconcileError):
        BeeswaxProvider().data_sources()


def test_configure_twice_reuses_the_authenticated_client(fake_session):
    fake_session.queue(200, {"success": True})
    provider = BeeswaxProvider()

    first = _configure(provider, fake_session)
    second = _configure(provider, fake_session)

    assert second is first
    assert [c["path"] for c in fake_session.calls] == ["/rest/v2/authenticate"]


def test_failed_configure_can_be_retried(fake_session):
    fake_session.queue(401, "invalid credentials").queue(200, {"success": True})
    provider = BeeswaxProvider()

    with pytest.raises(ReconcileError):
        _configure(provider, fake_session)
    client = _configure(provider, fake_session)

    assert client.authenticated is True
    assert len(fake_session.calls) == 2
