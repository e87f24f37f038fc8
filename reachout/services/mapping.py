"""
Store boundary adapter.

Records travel to and from the data client as plain dicts keyed by the
stored (snake_case) column names. The application and the HTTP API work
with pydantic models whose aliases are camelCase. Every conversion between
the two goes through this module so that the naming rule lives in one place.
"""
import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from reachout.core.timestamps import format_local_input
from reachout.schemas.common import FormModel
from reachout.schemas.document import DocumentForm, DocumentRead
from reachout.schemas.event import EventForm, EventRead
from reachout.schemas.prayer_request import PrayerRequestForm, PrayerRequestRead
from reachout.schemas.sermon import SermonForm, SermonRead
from reachout.schemas.soul_count import SoulCountRead
from reachout.schemas.volunteer import VolunteerForm, VolunteerRead

# Collection names in the backing store
EVENTS = "events"
SERMONS = "sermons"
DOCUMENTS = "documents"
VOLUNTEERS = "volunteers"
SOUL_COUNT = "soul_count"
PRAYER_REQUESTS = "prayer_requests"


@dataclass(frozen=True)
class EntityConfig:
    name: str
    plural: str
    collection: str
    order_by: str
    read_model: Type[BaseModel]
    form_model: Optional[Type[FormModel]] = None
    # preselected values of an empty create form, in form field names
    create_defaults: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    @property
    def label(self) -> str:
        return self.name.capitalize()


EVENT = EntityConfig("event", "events", EVENTS, "date", EventRead, EventForm, {"type": "future"})
SERMON = EntityConfig("sermon", "sermons", SERMONS, "date", SermonRead, SermonForm)
DOCUMENT = EntityConfig("document", "documents", DOCUMENTS, "created_at", DocumentRead, DocumentForm)
VOLUNTEER = EntityConfig("volunteer", "volunteers", VOLUNTEERS, "created_at", VolunteerRead, VolunteerForm)
PRAYER_REQUEST = EntityConfig(
    "prayer request", "prayer requests", PRAYER_REQUESTS, "created_at", PrayerRequestRead, PrayerRequestForm
)
SOUL_COUNT_ENTITY = EntityConfig("soul count", "soul count", SOUL_COUNT, "last_updated", SoulCountRead)


def to_record(form: FormModel) -> Dict[str, Any]:
    """
    Form model -> stored record. Every field is present; unset optional
    values are written as explicit ``None``.
    """
    return form.model_dump(by_alias=False, exclude_unset=False)


def from_record(model: Type[BaseModel], record: Dict[str, Any]) -> BaseModel:
    """Stored record -> typed model."""
    return model.model_validate(record)


def from_records(model: Type[BaseModel], records: Iterable[Dict[str, Any]]) -> List[BaseModel]:
    return [from_record(model, record) for record in records]


def to_api(item: BaseModel) -> Dict[str, Any]:
    """Typed model -> camelCase JSON-ready dict."""
    return item.model_dump(mode="json", by_alias=True)


def to_api_list(items: Iterable[BaseModel]) -> List[Dict[str, Any]]:
    return [to_api(item) for item in items]


def record_keys_to_camel(record: Dict[str, Any]) -> Dict[str, Any]:
    return {to_camel(key): value for key, value in record.items()}


def form_defaults(item: Optional[BaseModel], create_defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Values a modal form starts with: the record being edited, in form field
    names and input formats, or the preselected values of an empty create form.
    """
    if item is None:
        return record_keys_to_camel(dict(create_defaults or {}))
    values = {}
    for name, value in item.model_dump(by_alias=False).items():
        if name in ("id", "created_at", "last_updated"):
            continue
        if isinstance(value, datetime):
            value = format_local_input(value)
        elif isinstance(value, enum.Enum):
            value = value.value
        values[name] = value
    return record_keys_to_camel(values)
