from typing import Optional
import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from jobmail.errors import GenerationError, JobMailError
from jobmail.models.email_models import GeneratedEmail, TemplateInfo, TemplateListResponse
from jobmail.prompts.email_templates import DEFAULT_TEMPLATE_ID, list_templates
from jobmail.services.email_service import generate_email
from jobmail.utils.dependencies import APIKeys, ModelChoice, get_api_keys, get_model_choice

logger = logging.getLogger(__name__)

router = APIRouter()


def uploaded_file_or_none(file: Optional[UploadFile]) -> Optional[UploadFile]:
    """Browsers submit an empty part for an untouched file input; treat it as no file."""
    if file is None or not file.filename:
        return None
    return file


@router.get("/templates", response_model=TemplateListResponse)
async def get_templates():
    """List the available email templates."""
    return TemplateListResponse(
        templates=[
            TemplateInfo(id=t.id, name=t.name, description=t.description)
            for t in list_templates()
        ]
    )


@router.post("/generate-email", response_model=GeneratedEmail)
async def generate_job_email(
    file: Optional[UploadFile] = File(None),
    text: Optional[str] = Form(None),
    template: str = Form(DEFAULT_TEMPLATE_ID),
    user_details: Optional[str] = Form(None, alias="userDetails"),
    model: ModelChoice = Depends(get_model_choice),
    api_keys: APIKeys = Depends(get_api_keys),
):
    """Generate a job application email from a job description (text or file)."""
    try:
        return await generate_email(
            text=text,
            file=uploaded_file_or_none(file),
            template_id=template,
            user_details=user_details,
            provider=model.provider,
            model_key=model.model_key,
            api_key=api_keys.get_key(model.provider),
        )
    except JobMailError:
        raise
    except Exception as e:
        logger.exception("Error generating email")
        raise GenerationError(str(e)) from e
