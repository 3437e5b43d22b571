"""
Brand screens.

List/search, create, detail, edit and delete of brands.
Successful writes redirect to the list with a flash message; a
submission that fails binding or the name uniqueness check re-renders
its form with field errors and saves nothing.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from slshopping_admin.app.api import messages
from slshopping_admin.app.api.deps import get_brand_service
from slshopping_admin.app.api.forms import bind_form, form_data
from slshopping_admin.app.core.flash import redirect_with_flash
from slshopping_admin.app.core.templating import render
from slshopping_admin.app.schemas.brand import Brand
from slshopping_admin.app.services.brand_service import BrandService

router = APIRouter()

LIST_URL = "/brands"


@router.get("")
async def list_brands(
    request: Request,
    keyword: Optional[str] = None,
    service: BrandService = Depends(get_brand_service),
):
    brands = await service.list_all(keyword)
    return render(request, "brands/brands", {"listBrands": brands, "keyword": keyword})


@router.get("/new")
async def new_brand(request: Request):
    return render(request, "brands/brand_form", {"brand": Brand()})


@router.post("/save")
async def save_brand(request: Request, service: BrandService = Depends(get_brand_service)):
    brand, errors = bind_form(Brand, form_data(await request.form()))
    if "name" not in errors and not await service.check_unique(brand):
        errors["name"] = messages.DUPLICATE_NAME
    if errors:
        return render(request, "brands/brand_form", {"brand": brand, "errors": errors})
    await service.save(brand)
    return redirect_with_flash(request, LIST_URL, success_message=messages.REGISTERED)


@router.get("/detail/{brand_id}")
async def brand_detail(
    request: Request,
    brand_id: int,
    service: BrandService = Depends(get_brand_service),
):
    brand = await service.get(brand_id)
    return render(request, "brands/brand_detail", {"brand": brand})


@router.get("/edit/{brand_id}")
async def edit_brand_form(
    request: Request,
    brand_id: int,
    service: BrandService = Depends(get_brand_service),
):
    brand = await service.get(brand_id)
    return render(request, "brands/brand_edit", {"brand": brand})


@router.post("/edit/{brand_id}")
async def update_brand(
    request: Request,
    brand_id: int,
    service: BrandService = Depends(get_brand_service),
):
    data = form_data(await request.form())
    data["id"] = brand_id
    brand, errors = bind_form(Brand, data)
    if "name" not in errors and not await service.check_unique(brand):
        errors["name"] = messages.DUPLICATE_NAME
    if errors:
        return render(request, "brands/brand_edit", {"brand": brand, "errors": errors})
    await service.save(brand)
    return redirect_with_flash(request, LIST_URL, success_message=messages.UPDATED)


@router.get("/delete/{brand_id}")
async def delete_brand(request: Request, brand_id: int, service: BrandService = Depends(get_brand_service)):
    await service.delete(brand_id)
    return redirect_with_flash(request, LIST_URL, success_message=messages.DELETED)
