from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class _CamelModel(BaseModel):
    """Serialized with camelCase keys to match the web form's expectations."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Response Models ─────────────────────────────────────────────────────────


class TemplateInfo(_CamelModel):
    """Public descriptor of an email template (the prompt itself stays server-side)."""

    id: str
    name: str
    description: str


class TemplateListResponse(_CamelModel):
    success: bool = True
    templates: list[TemplateInfo]


class GeneratedEmail(_CamelModel):
    """A generated job application email."""

    success: bool = True
    email: str
    template_used: str
    template_name: str


class ErrorResponse(_CamelModel):
    success: bool = False
    error: str
    details: Optional[str] = None


class ApiInfo(_CamelModel):
    message: str
    endpoints: dict[str, str]
