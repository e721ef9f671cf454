from types import SimpleNamespace

import pytest
import requests

from beeswax_provider.core.beeswax import BeeswaxAPIError, ReconcileError, Role, TransportError, User
from beeswax_provider.core.resources import (
    RoleDataSource,
    RoleResource,
    RolesDataSource,
    UserDataSource,
    UserResource,
)
from beeswax_provider.core.state import PermissionState, RoleState, RolesState, RoleSummary, UserState


def _user_plan(**overrides):
    base = dict(
        email="a@b.com",
        first_name="A",
        last_name="B",
        role_id=7,
        account_id=1,
        account_group_ids=[1, 2],
    )
    base.update(overrides)
    return UserState(**base)


def _role_plan(**overrides):
    base = dict(
        name="Ops",
        parent_role_id=1,
        permissions=[PermissionState("advertiser", 15), PermissionState("campaign", 1)],
        report_ids=[3],
    )
    base.update(overrides)
    return RoleState(**base)


def test_create_user_fills_in_server_id(users, fake_session):
    fake_session.queue(201, {"id": 99, "email": "a@b.com"})
    plan = _user_plan()

    state = UserResource(users).create(plan)

    assert state.id == 99
    assert state == UserState(**{**plan.to_dict(), "id": 99})
    sent = fake_session.calls[0]["body"]
    assert sent["account_group_ids"] == [1, 2]
    assert sent["active"] is True


def test_update_role_uses_id_on_file(roles, fake_session):
    fake_session.queue(200, {})

    state = RoleResource(roles).update(_role_plan(id=None), RoleState(id=5))

    call = fake_session.calls[0]
    assert call["path"] == "/rest/v2/roles/5"
    assert call["body"]["id"] == 5
    assert state.id == 5


def test_update_user_overrides_plan_id(users, fake_session):
    fake_session.queue(200, {})

    state = UserResource(users).update(_user_plan(id=0), _user_plan(id=42))

    call = fake_session.calls[0]
    assert call["path"] == "/rest/v2/users/42"
    assert call["body"]["id"] == 42
    assert state.id == 42


def test_read_role_refreshes_state(roles, fake_session):
    fake_session.queue(
        200,
        {
            "id": 5,
            "name": "Ops (renamed)",
            "parent_role_id": 1,
            "permissions": [{"object_type": "advertiser", "permission": 7}],
            "report_ids": [3, 8],
        },
    )

    state = RoleResource(roles).read(_role_plan(id=5))

    assert state.name == "Ops (renamed)"
    assert state.permissions == [PermissionState("advertiser", 7)]
    assert state.report_ids == [3, 8]
    assert state.notes == ""


def test_delete_then_read_surfaces_api_error(users, fake_session):
    fake_session.queue(204, b"").queue(404, '{"error":"not found"}')
    resource = UserResource(users)

    resource.delete(UserState(id=9))
    with pytest.raises(ReconcileError) as excinfo:
        resource.read(UserState(id=9))

    err = excinfo.value
    assert isinstance(err.cause, BeeswaxAPIError)
    assert err.summary == "Error Reading Beeswax user"
    assert "ID 9" in err.detail
    assert "404" in err.detail
    assert '{"error":"not found"}' in err.detail


def test_create_failure_keeps_error_kind(roles, fake_session):
    fake_session.queue_error(requests.ConnectionError("refused"))

    with pytest.raises(ReconcileError) as excinfo:
        RoleResource(roles).create(_role_plan())

    assert isinstance(excinfo.value.cause, TransportError)
    assert excinfo.value.summary == "Error creating role"


def test_delete_role_failure_names_the_id(roles, fake_session):
    fake_session.queue(403, "forbidden")

    with pytest.raises(ReconcileError) as excinfo:
        RoleResource(roles).delete(RoleState(id=11))

    assert "role ID 11" in excinfo.value.detail


def test_roles_data_source_projects_id_and_name(roles, fake_session):
    fake_session.queue(200, [{"id": 1, "name": "Admin"}, {"id": 2, "name": "Viewer"}])

    state = RolesDataSource(roles).read()

    assert state == RolesState(roles=[RoleSummary(1, "Admin"), RoleSummary(2, "Viewer")])
    assert state.to_dict() == {"roles": [{"id": 1, "name": "Admin"}, {"id": 2, "name": "Viewer"}]}


def test_data_sources_accept_any_reader():
    seen = []

    def get_role(entity_id):
        seen.append(entity_id)
        return Role(id=entity_id, name="Viewer")

    role_reader = SimpleNamespace(get=get_role)
    user_reader = SimpleNamespace(get=lambda entity_id: User(id=entity_id, email="x@y.z"))

    assert RoleDataSource(role_reader).read(2).name == "Viewer"
    assert UserDataSource(user_reader).read(4).email == "x@y.z"
    assert seen == [2]


def test_user_data_source_reads_through_gateway(users, fake_session):
    fake_session.queue(200, {"id": 4, "email": "x@y.z", "active": True, "account_group_ids": [5]})

    state = UserDataSource(users).read(4)

    assert fake_session.calls[0]["path"] == "/rest/v2/users/4"
    assert state.account_group_ids == [5]
    assert state.active is True
