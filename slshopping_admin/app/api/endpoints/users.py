"""
Console user screens.

Users are identified by e-mail address, which must be unique.  Forms
list every role as a checkbox; the submitted role ids are resolved
against the stored roles and unknown ids are dropped.  A password is
required when a user is registered; on the edit screen an empty
password keeps the current one.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import FormData

from slshopping_admin.app.api import messages
from slshopping_admin.app.api.deps import get_user_service
from slshopping_admin.app.api.forms import bind_form, form_data
from slshopping_admin.app.core.flash import redirect_with_flash
from slshopping_admin.app.core.templating import render
from slshopping_admin.app.schemas.user import Role, User
from slshopping_admin.app.services.user_service import UserService

router = APIRouter()

LIST_URL = "/users"


def _selected_roles(form: FormData, roles: List[Role]) -> List[Role]:
    selected = {int(value) for value in form.getlist("roles") if isinstance(value, str) and value.isdigit()}
    return [role for role in roles if role.id in selected]


async def _submit(request: Request, user_id: Optional[int], service: UserService):
    form = await request.form()
    roles = await service.list_roles()
    data = form_data(form, exclude=("roles", "enabled"))
    data["enabled"] = "enabled" in form
    data["roles"] = _selected_roles(form, roles)
    if user_id is not None:
        data["id"] = user_id
    user, errors = bind_form(User, data)
    if user_id is None and not data.get("password"):
        errors.setdefault("password", messages.REQUIRED)
    if "email" not in errors and not await service.check_unique(user):
        errors["email"] = messages.DUPLICATE_EMAIL
    return user, roles, errors


def _form_model(user: User, roles: List[Role], errors: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    model: Dict[str, Any] = {"user": user, "listRoles": roles}
    if errors is not None:
        model["errors"] = errors
    return model


@router.get("")
async def list_users(
    request: Request,
    keyword: Optional[str] = None,
    service: UserService = Depends(get_user_service),
):
    users = await service.list_all(keyword)
    return render(request, "users/users", {"listUsers": users, "keyword": keyword})


@router.get("/new")
async def new_user(request: Request, service: UserService = Depends(get_user_service)):
    return render(request, "users/user_form", _form_model(User(), await service.list_roles()))


@router.post("/save")
async def save_user(request: Request, service: UserService = Depends(get_user_service)):
    user, roles, errors = await _submit(request, None, service)
    if errors:
        return render(request, "users/user_form", _form_model(user, roles, errors))
    await service.save(user)
    return redirect_with_flash(request, LIST_URL, success_message=messages.REGISTERED)


@router.get("/detail/{user_id}")
async def user_detail(request: Request, user_id: int, service: UserService = Depends(get_user_service)):
    user = await service.get(user_id)
    return render(request, "users/user_detail", {"user": user})


@router.get("/edit/{user_id}")
async def edit_user_form(request: Request, user_id: int, service: UserService = Depends(get_user_service)):
    user = await service.get(user_id)
    return render(request, "users/user_edit", _form_model(user, await service.list_roles()))


@router.post("/edit/{user_id}")
async def update_user(request: Request, user_id: int, service: UserService = Depends(get_user_service)):
    user, roles, errors = await _submit(request, user_id, service)
    if errors:
        return render(request, "users/user_edit", _form_model(user, roles, errors))
    await service.save(user)
    return redirect_with_flash(request, LIST_URL, success_message=messages.UPDATED)


@router.get("/delete/{user_id}")
async def delete_user(request: Request, user_id: int, service: UserService = Depends(get_user_service)):
    await service.delete(user_id)
    return redirect_with_flash(request, LIST_URL, success_message=messages.DELETED)
