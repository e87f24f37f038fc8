from datetime import datetime
from typing import Annotated, Any, List, Literal, Mapping, Optional
from pydantic import (
    AfterValidator,
    AnyHttpUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from reachout.core.exceptions import FormValidationError
from reachout.core.timestamps import format_timestamp, parse_local_datetime


class Notification(BaseModel):
    level: Literal["success", "error"]
    message: str


class APIResponse(BaseModel):
    message: str
    data: Any | None
    notifications: List[Notification] = []


_http_url = TypeAdapter(AnyHttpUrl)


def blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def check_http_url(v: Optional[str]) -> Optional[str]:
    # validate, but keep the operator's spelling of the URL
    if v is not None:
        try:
            _http_url.validate_python(v)
        except ValidationError:
            raise ValueError("must be a valid http(s) URL")
    return v


def parse_form_datetime(v: Any) -> Any:
    if isinstance(v, str):
        return parse_local_datetime(v)
    return v


NonBlank = Annotated[str, Field(min_length=1)]
RequiredUrl = Annotated[str, AfterValidator(check_http_url)]
OptionalUrl = Annotated[Optional[str], BeforeValidator(blank_to_none), AfterValidator(check_http_url)]
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]
LocalDateTime = Annotated[datetime, BeforeValidator(parse_form_datetime)]
Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str, when_used="json")]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FormModel(CamelModel):
    """Base for submitted forms: decoded once, then handed to the store as-is."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
        extra="ignore",
    )

    @classmethod
    def decode(cls, data: Mapping[str, Any]):
        """
        Decode a raw form payload into a typed record.

        Raises:
            FormValidationError: with one ``{"field", "message"}`` entry per problem
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            errors = [
                {
                    "field": ".".join(str(part) for part in error["loc"]) or "form",
                    "message": error["msg"],
                }
                for error in e.errors()
            ]
            raise FormValidationError(errors)
