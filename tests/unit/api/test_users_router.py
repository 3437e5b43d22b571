"""Router tests for the console user screens."""

import pytest

from slshopping_admin.app.core.errors import NotFoundError
from slshopping_admin.app.core.flash import FLASH_COOKIE, flash_store
from slshopping_admin.app.schemas.user import Role, User

ROLES = [
    Role(id=1, code="Admin", display_name="管理者"),
    Role(id=2, code="Editor", display_name="編集者"),
]

USER_FORM = {
    "email": "aaa@example.com",
    "password": "password",
    "name": "userA",
    "roles": ["1"],
}


@pytest.fixture
def user_service(mock_user_service):
    mock_user_service.list_roles.return_value = ROLES
    return mock_user_service


def flash_of(response):
    return flash_store.peek(response.cookies[FLASH_COOKIE])


class TestListUsers:

    def test_list_users(self, client, user_service):
        users = []
        user_service.list_all.return_value = users

        response = client.get("/users")

        assert response.status_code == 200
        assert response.template.name == "users/users.html"
        assert response.context["listUsers"] == users
        assert response.context["keyword"] is None


class TestNewUser:

    def test_new_user(self, client, user_service):
        response = client.get("/users/new")

        assert response.status_code == 200
        assert response.template.name == "users/user_form.html"
        assert isinstance(response.context["user"], User)
        assert response.context["listRoles"] == ROLES


class TestSaveUser:

    def test_save_user(self, client, user_service):
        """Should resolve the checked roles, save and redirect."""
        response = client.post("/users/save", data=USER_FORM, follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/users"
        assert flash_of(response) == {"success_message": "登録に成功しました"}
        saved = user_service.save.await_args.args[0]
        assert saved.email == "aaa@example.com"
        assert saved.enabled is False
        assert [role.code for role in saved.roles] == ["Admin"]

    def test_enabled_checkbox_and_unknown_roles(self, client, user_service):
        client.post(
            "/users/save",
            data={**USER_FORM, "enabled": "on", "roles": ["2", "42", "x"]},
            follow_redirects=False,
        )

        saved = user_service.save.await_args.args[0]
        assert saved.enabled is True
        assert [role.id for role in saved.roles] == [2]

    def test_duplicate_email_rerenders_form(self, client, user_service):
        user_service.check_unique.return_value = False

        response = client.post("/users/save", data=USER_FORM, follow_redirects=False)

        assert response.status_code == 200
        assert response.template.name == "users/user_form.html"
        assert response.context["errors"] == {"email": "既に登録されているメールアドレスです"}
        assert response.context["listRoles"] == ROLES
        user_service.save.assert_not_awaited()

    def test_password_required_on_registration(self, client, user_service):
        response = client.post("/users/save", data={**USER_FORM, "password": ""}, follow_redirects=False)

        assert response.status_code == 200
        assert response.context["errors"] == {"password": "入力してください"}
        user_service.save.assert_not_awaited()

    def test_malformed_email(self, client, user_service):
        response = client.post("/users/save", data={**USER_FORM, "email": "not-an-address"}, follow_redirects=False)

        assert response.status_code == 200
        assert response.context["errors"] == {"email": "メールアドレスの形式が不正です"}
        user_service.check_unique.assert_not_awaited()


class TestUserDetailAndEdit:

    def test_detail_user(self, client, user_service):
        user = User()
        user_service.get.return_value = user

        response = client.get("/users/detail/1")

        assert response.status_code == 200
        assert response.template.name == "users/user_detail.html"
        assert response.context["user"] == user

    def test_detail_user_not_found(self, client, user_service):
        user_service.get.side_effect = NotFoundError("User", 1000)

        assert client.get("/users/detail/1000").status_code == 404

    def test_edit_user_form(self, client, user_service):
        user = User()
        user_service.get.return_value = user

        response = client.get("/users/edit/1")

        assert response.status_code == 200
        assert response.template.name == "users/user_edit.html"
        assert response.context["user"] == user
        assert response.context["listRoles"] == ROLES

    def test_edit_user(self, client, user_service):
        response = client.post("/users/edit/1", data=USER_FORM, follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/users"
        assert flash_of(response) == {"success_message": "更新に成功しました"}
        assert user_service.save.await_args.args[0].id == 1

    def test_edit_user_keeps_blank_password(self, client, user_service):
        """Should accept an empty password on the edit screen."""
        response = client.post("/users/edit/1", data={**USER_FORM, "password": ""}, follow_redirects=False)

        assert response.status_code == 302
        assert user_service.save.await_args.args[0].password == ""

    def test_edit_deleted_user(self, client, user_service):
        user_service.save.side_effect = NotFoundError("User", 1)

        response = client.post("/users/edit/1", data={**USER_FORM, "password": ""}, follow_redirects=False)

        assert response.status_code == 404


class TestDeleteUser:

    def test_delete_user(self, client, user_service):
        response = client.get("/users/delete/1", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/users"
        assert flash_of(response) == {"success_message": "削除に成功しました"}
        user_service.delete.assert_awaited_once_with(1)
