import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel

from reachout.core.config import settings
from reachout.core.exceptions import DataClientError, FormValidationError
from reachout.models.event import EventType
from reachout.models.volunteer import VolunteerUnit
from reachout.services import mapping
from reachout.services.data_client import DataClient
from reachout.services.notifications import Notifier

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

VOLUNTEER_UNITS: List[str] = [unit.value for unit in VolunteerUnit]

VOLUNTEER_THANKS = "Thank you for volunteering! We will contact you soon."
SUBMIT_FAILED = "Something went wrong. Please try again."
DONATE_ONLINE_UNAVAILABLE = "Payment gateway integration coming soon!"


class HomeController:
    """Home page: only needs the soul-count aggregate."""

    def __init__(self, client: DataClient):
        self.client = client
        self.soul_count = 0

    async def load(self) -> int:
        try:
            row = await self.client.single(mapping.SOUL_COUNT)
        except DataClientError as e:
            logger.warning(f"Soul count unavailable: {e.message}")
            row = None
        self.soul_count = int(row["count"]) if row and row.get("count") is not None else 0
        return self.soul_count


class GetInvolvedController:
    """
    Volunteer application form. A successful submission resets the form; a
    failed one keeps the operator's input so it can be sent again.
    """

    def __init__(self, client: DataClient, notifier: Optional[Notifier] = None):
        self.client = client
        self.notifier = notifier or Notifier()
        self.form_values: Dict[str, Any] = {}
        self.form_errors: List[Dict[str, Any]] = []
        self.submitting = False

    @property
    def units(self) -> List[str]:
        return VOLUNTEER_UNITS

    @property
    def donation_details(self) -> Dict[str, str]:
        return {
            "bankName": settings.DONATION_BANK_NAME,
            "accountName": settings.DONATION_ACCOUNT_NAME,
            "accountNumber": settings.DONATION_ACCOUNT_NUMBER,
        }

    async def submit_volunteer(self, form_data: Mapping[str, Any]) -> Optional[BaseModel]:
        self.form_values = dict(form_data)
        self.submitting = True
        try:
            form = mapping.VOLUNTEER.form_model.decode(form_data)
            row = await self.client.insert(mapping.VOLUNTEERS, mapping.to_record(form))
        except FormValidationError as e:
            self.form_errors = e.errors
            self.notifier.error(SUBMIT_FAILED)
            return None
        except DataClientError as e:
            logger.error(f"Volunteer submission failed: {e.message}")
            self.notifier.error(SUBMIT_FAILED)
            return None
        finally:
            self.submitting = False

        self.form_values = {}
        self.form_errors = []
        self.notifier.success(VOLUNTEER_THANKS)
        return mapping.from_record(mapping.VOLUNTEER.read_model, row)

    def donate_online(self) -> None:
        self.notifier.error(DONATE_ONLINE_UNAVAILABLE)


class ResourcesController:
    """Public read-only listings: sermons, documents and events."""

    def __init__(self, client: DataClient, notifier: Optional[Notifier] = None):
        self.client = client
        self.notifier = notifier or Notifier()

    async def _list(self, config: mapping.EntityConfig) -> List[BaseModel]:
        try:
            rows = await self.client.list(config.collection, order_by=config.order_by, descending=True)
        except DataClientError as e:
            logger.error(f"{config.label} fetch error: {e.message}")
            self.notifier.error(f"Error loading {config.plural}")
            return []
        return mapping.from_records(config.read_model, rows)

    async def sermons(self) -> List[BaseModel]:
        return await self._list(mapping.SERMON)

    async def documents(self) -> List[BaseModel]:
        return await self._list(mapping.DOCUMENT)

    async def events(self, event_type: Optional[EventType] = None) -> List[BaseModel]:
        events = await self._list(mapping.EVENT)
        if event_type is not None:
            events = [event for event in events if event.type == event_type]
        return events


class PrayerRequestController:
    def __init__(self, client: DataClient, notifier: Optional[Notifier] = None):
        self.client = client
        self.notifier = notifier or Notifier()
        self.form_errors: List[Dict[str, Any]] = []

    async def submit(self, form_data: Mapping[str, Any]) -> Optional[BaseModel]:
        try:
            form = mapping.PRAYER_REQUEST.form_model.decode(form_data)
            row = await self.client.insert(mapping.PRAYER_REQUESTS, mapping.to_record(form))
        except FormValidationError as e:
            self.form_errors = e.errors
            self.notifier.error(e.summary)
            return None
        except DataClientError as e:
            logger.error(f"Prayer request submission failed: {e.message}")
            self.notifier.error(SUBMIT_FAILED)
            return None

        self.form_errors = []
        self.notifier.success("Your prayer request has been received. We are praying with you.")
        return mapping.from_record(mapping.PRAYER_REQUEST.read_model, row)
