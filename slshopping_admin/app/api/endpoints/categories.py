"""
Category screens.

List/search, create, detail, edit and delete of product categories.
Successful writes redirect to the list with a flash message; a
submission that fails binding or the name uniqueness check re-renders
its form with field errors and saves nothing.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from slshopping_admin.app.api import messages
from slshopping_admin.app.api.deps import get_category_service
from slshopping_admin.app.api.forms import bind_form, form_data
from slshopping_admin.app.core.flash import redirect_with_flash
from slshopping_admin.app.core.templating import render
from slshopping_admin.app.schemas.category import Category
from slshopping_admin.app.services.category_service import CategoryService

router = APIRouter()

LIST_URL = "/categories"


@router.get("")
async def list_categories(
    request: Request,
    keyword: Optional[str] = None,
    service: CategoryService = Depends(get_category_service),
):
    categories = await service.list_all(keyword)
    return render(request, "categories/categories", {"listCategories": categories, "keyword": keyword})


@router.get("/new")
async def new_category(request: Request):
    return render(request, "categories/category_form", {"category": Category()})


@router.post("/save")
async def save_category(request: Request, service: CategoryService = Depends(get_category_service)):
    category, errors = bind_form(Category, form_data(await request.form()))
    if "name" not in errors and not await service.check_unique(category):
        errors["name"] = messages.DUPLICATE_NAME
    if errors:
        return render(request, "categories/category_form", {"category": category, "errors": errors})
    await service.save(category)
    return redirect_with_flash(request, LIST_URL, success_message=messages.REGISTERED)


@router.get("/detail/{category_id}")
async def category_detail(
    request: Request,
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    category = await service.get(category_id)
    return render(request, "categories/category_detail", {"category": category})


@router.get("/edit/{category_id}")
async def edit_category_form(
    request: Request,
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    category = await service.get(category_id)
    return render(request, "categories/category_edit", {"category": category})


@router.post("/edit/{category_id}")
async def update_category(
    request: Request,
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    data = form_data(await request.form())
    data["id"] = category_id
    category, errors = bind_form(Category, data)
    if "name" not in errors and not await service.check_unique(category):
        errors["name"] = messages.DUPLICATE_NAME
    if errors:
        return render(request, "categories/category_edit", {"category": category, "errors": errors})
    await service.save(category)
    return redirect_with_flash(request, LIST_URL, success_message=messages.UPDATED)


@router.get("/delete/{category_id}")
async def delete_category(
    request: Request,
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    await service.delete(category_id)
    return redirect_with_flash(request, LIST_URL, success_message=messages.DELETED)
