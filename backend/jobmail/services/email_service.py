"""
Email Service — turn a job description into a job application email.

Picks the requested template, wraps it around the job description and
candidate details, and returns whatever text the model writes. Also holds
the helpers the compose page uses to split the subject line out of the reply.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

from fastapi import UploadFile

from jobmail.errors import InvalidInputError
from jobmail.models.email_models import GeneratedEmail
from jobmail.prompts import job_application
from jobmail.prompts.email_templates import DEFAULT_TEMPLATE_ID, EmailTemplate, get_template
from jobmail.services import upload_service
from jobmail.services.llm_service import complete
from jobmail.utils.text_cleanup import is_blank

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "Job Application"

_SUBJECT_RE = re.compile(r"subject:\s*", re.IGNORECASE)


async def generate_email(
    *,
    text: str | None,
    file: UploadFile | None,
    template_id: str | None,
    user_details: str | None,
    provider: str,
    model_key: str,
    api_key: str | None,
) -> GeneratedEmail:
    """
    Generate a job application email.

    An uploaded file takes precedence over typed text. Unknown template ids
    fall back to the standard template; ``template_used`` echoes the id the
    caller asked for.
    """
    template_id = template_id or DEFAULT_TEMPLATE_ID

    logger.info(
        f"Request received: has_text={bool(text)} has_file={file is not None} "
        f"template={template_id} user_details_length={len(user_details or '')}"
    )

    if not text and file is None:
        raise InvalidInputError("Either text description or file upload is required")

    if file is not None:
        job_description = await upload_service.read_job_description(file)
    else:
        job_description = text

    template = get_template(template_id)
    prompt = build_prompt(template, job_description, user_details)

    logger.info(f"Sending request to {provider}/{model_key} ({len(prompt)} chars)")
    email = await complete(
        provider=provider,
        model_key=model_key,
        api_key=api_key,
        messages=[{"role": "user", "content": prompt}],
        prompt_name="job_email",
    )

    logger.info("Email generated successfully")
    return GeneratedEmail(
        email=email,
        template_used=template_id,
        template_name=template.name,
    )


def build_prompt(template: EmailTemplate, job_description: str, user_details: str | None = None) -> str:
    """Assemble the full prompt for one email."""
    candidate_section = ""
    if not is_blank(user_details):
        candidate_section = job_application.CANDIDATE_SECTION_TEMPLATE.format(
            user_details=user_details,
        )
    return job_application.USER_PROMPT_TEMPLATE.format(
        template_prompt=template.prompt,
        job_description=job_description,
        candidate_section=candidate_section,
    )


# ── Presentation Helpers ─────────────────────────────────────────────────────


def split_subject(email: str) -> tuple[str, str]:
    """
    Split a generated email into ``(subject, body)``.

    The first line mentioning ``subject:`` supplies the subject; every such
    line is dropped from the body. Without one, the whole email is the body.
    """
    lines = email.split("\n")
    subject_line = next((line for line in lines if "subject:" in line.lower()), None)
    if subject_line is None:
        return DEFAULT_SUBJECT, email

    subject = _SUBJECT_RE.sub("", subject_line, count=1).strip()
    body = "\n".join(line for line in lines if "subject:" not in line.lower())
    return subject, body


def mailto_link(email: str) -> str:
    """Build a ``mailto:`` URL that opens the email in the user's mail client."""
    subject, body = split_subject(email)
    return f"mailto:?subject={quote(subject, safe='')}&body={quote(body, safe='')}"
