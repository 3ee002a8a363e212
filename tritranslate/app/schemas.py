from pydantic import BaseModel, Field


class TranslateRequest(BaseModel):
    text: str | None = None
    target_languages: list[str] | None = Field(default=None, alias="targetLanguages")

    model_config = {"frozen": True, "populate_by_name": True}


class TranslateResponse(BaseModel):
    translations: dict[str, str]


class ErrorResponse(BaseModel):
    error: str


class LanguageResponse(BaseModel):
    code: str
    name: str

    model_config = {"from_attributes": True}
