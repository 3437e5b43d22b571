"""
Product screens.

Besides the product service these screens use the category and brand
services, which fill the select boxes of the forms, and the image
service, which checks and stores an optional product image.  Nothing
is persisted, not even the image, unless every check passes.  A
replaced image, and the image of a deleted product, is removed from the
upload directory.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from slshopping_admin.app.api import messages
from slshopping_admin.app.api.deps import (
    get_brand_service,
    get_category_service,
    get_product_image_service,
    get_product_service,
)
from slshopping_admin.app.api.forms import bind_form, form_data
from slshopping_admin.app.core.errors import NotFoundError
from slshopping_admin.app.core.flash import redirect_with_flash
from slshopping_admin.app.core.templating import render
from slshopping_admin.app.schemas.product import Product
from slshopping_admin.app.services.brand_service import BrandService
from slshopping_admin.app.services.category_service import CategoryService
from slshopping_admin.app.services.product_image_service import ProductImageService
from slshopping_admin.app.services.product_service import ProductService

router = APIRouter()

LIST_URL = "/products"

_NULLABLE_FIELDS = ("description", "image_path", "category_id", "brand_id")


async def _form_model(
    product: Product,
    category_service: CategoryService,
    brand_service: BrandService,
    errors: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    model: Dict[str, Any] = {
        "product": product,
        "listCategories": await category_service.list_all(),
        "listBrands": await brand_service.list_all(),
    }
    if errors is not None:
        model["errors"] = errors
    return model


async def _submit(
    request: Request,
    product_id: Optional[int],
    product_service: ProductService,
    image_service: ProductImageService,
):
    """Bind and check a submitted product form.

    Returns the bound product, the uploaded image (``None`` when no file
    was chosen) and the field errors.
    """
    form = await request.form()
    data = form_data(form, exclude=("image",), blank_as_none=_NULLABLE_FIELDS)
    if product_id is not None:
        data["id"] = product_id
    product, errors = bind_form(Product, data)

    image = form.get("image")
    upload = image if isinstance(image, UploadFile) and image.filename else None
    if not await image_service.is_valid(upload):
        errors["image"] = messages.INVALID_IMAGE
    if "name" not in errors and not await product_service.check_unique(product):
        errors["name"] = messages.DUPLICATE_NAME
    return product, upload, errors


async def _stored_image_path(product_id: int, product_service: ProductService) -> Optional[str]:
    try:
        return (await product_service.get(product_id)).image_path
    except NotFoundError:
        return None


async def _store(
    product: Product,
    upload: Optional[UploadFile],
    product_service: ProductService,
    image_service: ProductImageService,
) -> Product:
    """Save ``product``, storing ``upload`` as its image.

    An image replaced by the upload is removed once the product is saved.
    """
    if upload is None:
        return await product_service.save(product)
    previous = None
    if product.id is not None:
        previous = await _stored_image_path(product.id, product_service)
    product = product.model_copy(update={"image_path": await image_service.save(upload)})
    saved = await product_service.save(product)
    if previous and previous != product.image_path:
        await image_service.delete(previous)
    return saved


@router.get("")
async def list_products(
    request: Request,
    keyword: Optional[str] = None,
    product_service: ProductService = Depends(get_product_service),
):
    products = await product_service.list_all(keyword)
    return render(request, "products/products", {"listProducts": products, "keyword": keyword})


@router.get("/new")
async def new_product(
    request: Request,
    category_service: CategoryService = Depends(get_category_service),
    brand_service: BrandService = Depends(get_brand_service),
):
    model = await _form_model(Product(), category_service, brand_service)
    return render(request, "products/product_form", model)


@router.post("/save")
async def save_product(
    request: Request,
    product_service: ProductService = Depends(get_product_service),
    category_service: CategoryService = Depends(get_category_service),
    brand_service: BrandService = Depends(get_brand_service),
    image_service: ProductImageService = Depends(get_product_image_service),
):
    product, upload, errors = await _submit(request, None, product_service, image_service)
    if errors:
        model = await _form_model(product, category_service, brand_service, errors)
        return render(request, "products/product_form", model)
    await _store(product, upload, product_service, image_service)
    return redirect_with_flash(request, LIST_URL, success_message=messages.REGISTERED)


@router.get("/detail/{product_id}")
async def product_detail(
    request: Request,
    product_id: int,
    product_service: ProductService = Depends(get_product_service),
):
    product = await product_service.get(product_id)
    return render(request, "products/product_detail", {"product": product})


@router.get("/edit/{product_id}")
async def edit_product_form(
    request: Request,
    product_id: int,
    product_service: ProductService = Depends(get_product_service),
    category_service: CategoryService = Depends(get_category_service),
    brand_service: BrandService = Depends(get_brand_service),
):
    product = await product_service.get(product_id)
    model = await _form_model(product, category_service, brand_service)
    return render(request, "products/product_edit", model)


@router.post("/edit/{product_id}")
async def update_product(
    request: Request,
    product_id: int,
    product_service: ProductService = Depends(get_product_service),
    category_service: CategoryService = Depends(get_category_service),
    brand_service: BrandService = Depends(get_brand_service),
    image_service: ProductImageService = Depends(get_product_image_service),
):
    product, upload, errors = await _submit(request, product_id, product_service, image_service)
    if errors:
        model = await _form_model(product, category_service, brand_service, errors)
        return render(request, "products/product_edit", model)
    await _store(product, upload, product_service, image_service)
    return redirect_with_flash(request, LIST_URL, success_message=messages.UPDATED)


@router.get("/delete/{product_id}")
async def delete_product(
    request: Request,
    product_id: int,
    product_service: ProductService = Depends(get_product_service),
    image_service: ProductImageService = Depends(get_product_image_service),
):
    image_path = await _stored_image_path(product_id, product_service)
    await product_service.delete(product_id)
    await image_service.delete(image_path)
    return redirect_with_flash(request, LIST_URL, success_message=messages.DELETED)
