"""
Template rendering for the console screens.

Views are addressed by name without extension (``"products/products"``)
and resolved to ``templates/<name>.html``.  Every rendered page receives
the flash messages left by the redirect that led to it.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .flash import discard_flash_cookie, pop_flash

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    view: str,
    model: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """Render ``view`` with ``model`` plus any pending flash messages."""
    context: Dict[str, Any] = pop_flash(request)
    context.update(model or {})
    response = templates.TemplateResponse(
        request, f"{view}.html", context, status_code=status_code
    )
    discard_flash_cookie(request, response)
    return response
