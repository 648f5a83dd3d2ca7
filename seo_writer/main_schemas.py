from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from typing import Any, List, Optional


class GenerationRequest(BaseModel):
    """Business context posted by the form. Field names are camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    # Kept as a plain string so unknown tags reach the handler as a 400
    provider: str = Field(default="openai", description="Provider tag: 'openai' or 'gemini'")
    api_key: str = Field(default="", alias="apiKey", description="Caller-supplied provider credential")
    model: str = Field(default="", description="Provider model id, blank for the provider default")
    business_name: str = Field(default="", alias="businessName")
    service: str = ""
    city: str = ""
    target_audience: str = Field(default="", alias="targetAudience")
    primary_keyword: str = Field(default="", alias="primaryKeyword")
    secondary_keywords: str = Field(default="", alias="secondaryKeywords", description="Comma-delimited keywords")
    tone: str = "clear, helpful"
    cta: str = "Contact us"

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """The form may send null for untouched fields; treat it as absent."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class PromptContext(BaseModel):
    business_name: str
    service: str
    city: str
    target_audience: str
    primary_keyword: str
    secondary: List[str] = Field(default_factory=list, description="Normalized secondary keywords, in input order")
    tone: str
    cta: str


class SeoChecks(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title_ok: bool = Field(alias="titleOk")
    desc_ok: bool = Field(alias="descOk")
    h1_ok: bool = Field(alias="h1Ok")


class SeoScore(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title_length: int = Field(alias="titleLength")
    description_length: int = Field(alias="descriptionLength")
    checks: SeoChecks


class ErrorResponse(BaseModel):
    error: str
    raw: Optional[Any] = None
