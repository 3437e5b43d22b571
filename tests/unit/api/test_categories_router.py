"""Router tests for the category screens."""

import pytest

from slshopping_admin.app.core.errors import NotFoundError
from slshopping_admin.app.core.flash import FLASH_COOKIE, flash_store
from slshopping_admin.app.schemas.category import Category


def flash_of(response):
    return flash_store.peek(response.cookies[FLASH_COOKIE])


class TestListCategories:

    def test_lists_without_keyword(self, client, mock_category_service):
        """Should render the list view with the categories and a None keyword."""
        categories = [Category(id=1, name="categoryA")]
        mock_category_service.list_all.return_value = categories

        response = client.get("/categories")

        assert response.status_code == 200
        assert response.template.name == "categories/categories.html"
        assert response.context["listCategories"] == categories
        assert response.context["keyword"] is None
        mock_category_service.list_all.assert_awaited_once_with(None)

    def test_echoes_keyword(self, client, mock_category_service):
        response = client.get("/categories", params={"keyword": "cat"})

        assert response.status_code == 200
        assert response.context["keyword"] == "cat"
        mock_category_service.list_all.assert_awaited_once_with("cat")


class TestNewCategory:

    def test_renders_blank_form(self, client, mock_category_service):
        response = client.get("/categories/new")

        assert response.status_code == 200
        assert response.template.name == "categories/category_form.html"
        assert isinstance(response.context["category"], Category)
        assert response.context["category"].id is None


class TestSaveCategory:

    def test_success_redirects_with_flash(self, client, mock_category_service):
        """Should save a unique category and redirect to the list."""
        mock_category_service.save.return_value = Category(id=1, name="categoryA")

        response = client.post("/categories/save", data={"name": "categoryA"}, follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/categories"
        assert flash_of(response) == {"success_message": "登録に成功しました"}
        saved = mock_category_service.save.await_args.args[0]
        assert saved.name == "categoryA"

    def test_flash_is_shown_once_on_the_list(self, client, mock_category_service):
        """Should show the flash on the next page only."""
        client.post("/categories/save", data={"name": "categoryA"}, follow_redirects=False)

        first = client.get("/categories")
        second = client.get("/categories")

        assert first.context["success_message"] == "登録に成功しました"
        assert "登録に成功しました" in first.text
        assert "success_message" not in second.context

    def test_duplicate_name_rerenders_form(self, client, mock_category_service):
        """Should not save when the name is already used."""
        mock_category_service.check_unique.return_value = False

        response = client.post("/categories/save", data={"name": "categoryA"}, follow_redirects=False)

        assert response.status_code == 200
        assert response.template.name == "categories/category_form.html"
        assert response.context["errors"] == {"name": "既に登録されている名前です"}
        assert response.context["category"].name == "categoryA"
        mock_category_service.save.assert_not_awaited()

    def test_blank_name_rerenders_form(self, client, mock_category_service):
        response = client.post("/categories/save", data={"name": ""}, follow_redirects=False)

        assert response.status_code == 200
        assert response.context["errors"] == {"name": "入力してください"}
        mock_category_service.check_unique.assert_not_awaited()
        mock_category_service.save.assert_not_awaited()


class TestCategoryDetailAndEdit:

    def test_detail(self, client, mock_category_service):
        category = Category(id=1, name="categoryA")
        mock_category_service.get.return_value = category

        response = client.get("/categories/detail/1")

        assert response.status_code == 200
        assert response.template.name == "categories/category_detail.html"
        assert response.context["category"] == category
        mock_category_service.get.assert_awaited_once_with(1)

    def test_detail_not_found(self, client, mock_category_service):
        """Should answer 404 when the category does not exist."""
        mock_category_service.get.side_effect = NotFoundError("Category", 1000)

        response = client.get("/categories/detail/1000")

        assert response.status_code == 404
        assert response.template.name == "errors/not_found.html"

    def test_edit_form(self, client, mock_category_service):
        category = Category(id=1, name="categoryA")
        mock_category_service.get.return_value = category

        response = client.get("/categories/edit/1")

        assert response.status_code == 200
        assert response.template.name == "categories/category_edit.html"
        assert response.context["category"] == category

    def test_edit_form_not_found(self, client, mock_category_service):
        mock_category_service.get.side_effect = NotFoundError("Category", 1000)

        assert client.get("/categories/edit/1000").status_code == 404

    def test_update_takes_id_from_path(self, client, mock_category_service):
        """Should save under the path id, ignoring an id in the body."""
        response = client.post(
            "/categories/edit/1",
            data={"id": "99", "name": "categoryB"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/categories"
        assert flash_of(response) == {"success_message": "更新に成功しました"}
        saved = mock_category_service.save.await_args.args[0]
        assert saved.id == 1
        assert saved.name == "categoryB"

    def test_update_duplicate_rerenders_edit_form(self, client, mock_category_service):
        mock_category_service.check_unique.return_value = False

        response = client.post("/categories/edit/1", data={"name": "categoryA"}, follow_redirects=False)

        assert response.status_code == 200
        assert response.template.name == "categories/category_edit.html"
        assert response.context["errors"]["name"] == "既に登録されている名前です"
        mock_category_service.save.assert_not_awaited()


class TestDeleteCategory:

    @pytest.mark.parametrize("category_id", [1, 1000])
    def test_delete_always_redirects(self, client, mock_category_service, category_id):
        """Should delete and redirect whether or not the id exists."""
        response = client.get(f"/categories/delete/{category_id}", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/categories"
        assert flash_of(response) == {"success_message": "削除に成功しました"}
        mock_category_service.delete.assert_awaited_once_with(category_id)
        mock_category_service.get.assert_not_awaited()


class TestFlashLifetime:

    def test_repeated_redirects_keep_one_pending_message(self, client, mock_category_service):
        """Should replace the pending message on each redirect and drop it once shown."""
        for _ in range(50):
            client.get("/categories/delete/1", follow_redirects=False)

        assert len(flash_store) == 1

        response = client.get("/categories")

        assert response.context["success_message"] == "削除に成功しました"
        assert len(flash_store) == 0
