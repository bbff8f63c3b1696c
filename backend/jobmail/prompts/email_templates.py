"""
Email Templates — the four writing styles a user can pick from.

Each template is an instruction string placed at the top of the job
application prompt (see job_application.py). The registry is fixed at import
time; only id, name and description are exposed to clients.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TEMPLATE_ID = "default"


@dataclass(frozen=True)
class EmailTemplate:
    id: str
    name: str
    description: str
    prompt: str


_TEMPLATES: dict[str, EmailTemplate] = {
    "formal": EmailTemplate(
        id="formal",
        name="Formal",
        description="Professional and traditional approach",
        prompt=(
            "Write a formal job application email that highlights the candidate's relevant "
            "skills and experience matching the job description. Use professional language, "
            "proper business format, and maintain a respectful tone throughout. Include a clear "
            "subject line, proper salutation, structured body paragraphs, and professional closing."
        ),
    ),
    "creative": EmailTemplate(
        id="creative",
        name="Creative",
        description="Engaging and memorable approach",
        prompt=(
            "Write a creative and engaging job application email that showcases the candidate's "
            "personality while maintaining professionalism. Make it memorable with a unique "
            "opening, showcase enthusiasm for the role, and use compelling language that stands "
            "out without being overly casual. Include specific examples of how the candidate's "
            "skills match the role."
        ),
    ),
    "direct": EmailTemplate(
        id="direct",
        name="Direct",
        description="Concise and to the point",
        prompt=(
            "Write a direct and concise job application email that gets straight to the point. "
            "Focus on key qualifications and how they directly match the job requirements. Use "
            "clear, straightforward language, bullet points for key skills, and avoid unnecessary "
            "fluff while maintaining professionalism."
        ),
    ),
    DEFAULT_TEMPLATE_ID: EmailTemplate(
        id=DEFAULT_TEMPLATE_ID,
        name="Standard",
        description="Balanced professional approach",
        prompt=(
            "Write a professional job application email that effectively matches the candidate's "
            "skills and experience with the job requirements. Use a balanced tone that is both "
            "professional and personable. Highlight the most relevant qualifications, express "
            "genuine interest in the position and company, and end with a call to action."
        ),
    ),
}


def get_template(template_id: str | None) -> EmailTemplate:
    """Return the template for ``template_id``, falling back to the standard one."""
    return _TEMPLATES.get(template_id or DEFAULT_TEMPLATE_ID, _TEMPLATES[DEFAULT_TEMPLATE_ID])


def list_templates() -> list[EmailTemplate]:
    return list(_TEMPLATES.values())
