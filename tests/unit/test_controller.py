import pytest

from core.controller import AuthorizedController
from core.rbac import AuthorizationDenied, AuthorizationRegistry


class MyController(AuthorizedController):
    pass


MyController.add_authorization("admin", on=["index", "show", "create", "update", "destroy"])
MyController.add_authorization("user", on=["index", "show"])


class OtherController(AuthorizedController):
    pass


@pytest.fixture
def controller():
    return MyController()


def test_admin_permission(controller):
    for action in ("index", "show", "create", "update", "destroy"):
        assert controller.admin_authorized_on(action)


def test_user_permission(controller):
    assert controller.user_authorized_on("index")
    assert controller.user_authorized_on("show")
    assert not controller.user_authorized_on("create")
    assert not controller.user_authorized_on("update")
    assert not controller.user_authorized_on("destroy")


def test_ability(controller):
    assert controller.able("admin", "index")
    assert controller.able("admin", "create")
    assert controller.able("user", "show")
    assert controller.unable("user", "create")
    assert controller.unable("user", "update")
    assert controller.unable("guest", "index")


def test_instances_share_class_table():
    assert MyController().authorization is MyController().authorization
    assert MyController.authorization.able("user", "index")


def test_subclasses_get_their_own_table():
    assert OtherController.authorization is not MyController.authorization
    assert OtherController().unable("admin", "index")
    assert AuthorizedController.authorization.unable("admin", "index")


def test_injected_registry_is_used_for_instance():
    injected = AuthorizationRegistry({"editor": ["update"]})
    c = MyController(authorization=injected)
    assert c.able("editor", "update")
    assert c.unable("admin", "index")
    assert MyController().able("admin", "index")


def test_authorize(controller):
    controller.authorize("admin", "destroy")
    with pytest.raises(AuthorizationDenied):
        controller.authorize("user", "destroy")


def test_unknown_attribute(controller):
    with pytest.raises(AttributeError):
        controller.guest_authorized_on("index")
    with pytest.raises(AttributeError):
        controller.missing
