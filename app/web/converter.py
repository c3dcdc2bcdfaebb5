"""Web converter routes (Jinja2 + HTMX)."""
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.core.deps import get_rate_lookup
from app.schemas.conversion import ConverterState
from app.services import converter_service
from app.services.exchange_rate_service import RateLookup

router = APIRouter(tags=["web-converter"])
templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")


def _is_htmx(request: Request) -> bool:
    return request.headers.get("HX-Request") == "true"


def _form_state(amount: str, from_currency: str, to_currency: str) -> ConverterState:
    """Rebuild converter state from the submitted form fields."""
    state = converter_service.select_currencies(
        converter_service.initial_state(), from_currency, to_currency
    )
    return converter_service.with_amount(state, amount)


def _render(request: Request, template: str, state: ConverterState) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        template,
        converter_service.render(state),
    )


@router.get("/", response_class=HTMLResponse)
async def converter_page(request: Request):
    """Display the converter form with defaults."""
    return _render(request, "converter.html", converter_service.initial_state())


@router.post("/convert", response_class=HTMLResponse)
async def convert(
    request: Request,
    lookup: Annotated[RateLookup, Depends(get_rate_lookup)],
    amount: str = Form(""),
    from_currency: str = Form(...),
    to_currency: str = Form(...),
):
    """
    Process the converter form (submit button or Enter in the amount field).

    HTMX requests get the result region plus an out-of-band timestamp
    update; plain form posts get the whole page.
    """
    state = _form_state(amount, from_currency, to_currency)
    state = await converter_service.convert(state, lookup)
    if _is_htmx(request):
        return _render(request, "partials/_convert_response.html", state)
    return _render(request, "converter.html", state)


@router.post("/validate-amount", response_class=HTMLResponse)
async def validate_amount(request: Request, amount: str = Form("")):
    """Inline amount field message, refreshed on every input change."""
    state = converter_service.with_amount(converter_service.initial_state(), amount)
    return _render(request, "partials/_amount_error.html", state)


@router.post("/swap", response_class=HTMLResponse)
async def swap(
    request: Request,
    amount: str = Form(""),
    from_currency: str = Form(...),
    to_currency: str = Form(...),
):
    """Swap the selected currencies and clear the shown result."""
    state = converter_service.swap(_form_state(amount, from_currency, to_currency))
    return _render(request, "partials/_swap_response.html", state)


@router.get("/clear", response_class=HTMLResponse)
async def clear(request: Request):
    """Empty result region, used when a currency selector changes."""
    state = converter_service.clear(converter_service.initial_state())
    return _render(request, "partials/_result.html", state)
