"""
Compose page — a server-rendered form over the same generation flow as
``POST /api/generate-email``, with the result shown as subject + body and
a mailto link.
"""

from pathlib import Path
from typing import Optional
import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from jobmail.api.email_routes import uploaded_file_or_none
from jobmail.errors import JobMailError
from jobmail.prompts.email_templates import DEFAULT_TEMPLATE_ID, list_templates
from jobmail.services.email_service import generate_email, mailto_link, split_subject
from jobmail.utils.dependencies import APIKeys, ModelChoice, get_api_keys, get_model_choice

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _render(request: Request, status_code: int = 200, **context) -> HTMLResponse:
    context.setdefault("templates", list_templates())
    context.setdefault("selected_template", DEFAULT_TEMPLATE_ID)
    context.setdefault("text", "")
    context.setdefault("user_details", "")
    return templates.TemplateResponse(request, "compose.html", context, status_code=status_code)


@router.get("", response_class=HTMLResponse)
async def compose_form(request: Request):
    """Show the empty job application form."""
    return _render(request)


@router.post("", response_class=HTMLResponse)
async def compose_submit(
    request: Request,
    file: Optional[UploadFile] = File(None),
    text: Optional[str] = Form(None),
    template: str = Form(DEFAULT_TEMPLATE_ID),
    user_details: Optional[str] = Form(None, alias="userDetails"),
    model: ModelChoice = Depends(get_model_choice),
    api_keys: APIKeys = Depends(get_api_keys),
):
    """Generate an email and render it below the form, keeping the user's input."""
    form_state = {
        "selected_template": template,
        "text": text or "",
        "user_details": user_details or "",
    }
    try:
        result = await generate_email(
            text=text,
            file=uploaded_file_or_none(file),
            template_id=template,
            user_details=user_details,
            provider=model.provider,
            model_key=model.model_key,
            api_key=api_keys.get_key(model.provider),
        )
    except JobMailError as e:
        return _render(request, e.status_code, error=e.error, details=e.details, **form_state)
    except Exception as e:
        logger.exception("Error generating email")
        return _render(request, 500, error="Failed to generate email", details=str(e), **form_state)

    subject, _ = split_subject(result.email)
    return _render(
        request,
        email=result.email,
        subject=subject,
        mailto=mailto_link(result.email),
        template_name=result.template_name,
        **form_state,
    )
