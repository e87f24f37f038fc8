import asyncio
import enum
import logging
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from reachout.core.config import settings
from reachout.core.exceptions import DataClientError, FormValidationError
from reachout.models.common import utcnow
from reachout.schemas.soul_count import SoulCountRead
from reachout.services import mapping
from reachout.services.data_client import AuthSession, DataClient
from reachout.services.notifications import Notifier

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ManagedEntity(str, enum.Enum):
    EVENTS = "events"
    SERMONS = "sermons"
    DOCUMENTS = "documents"

    @property
    def config(self) -> mapping.EntityConfig:
        return ENTITIES[self]


ENTITIES: Dict[ManagedEntity, mapping.EntityConfig] = {
    ManagedEntity.EVENTS: mapping.EVENT,
    ManagedEntity.SERMONS: mapping.SERMON,
    ManagedEntity.DOCUMENTS: mapping.DOCUMENT,
}


# Modal state per entity type: Closed | Creating | Editing(record)

class Closed(BaseModel):
    model_config = ConfigDict(frozen=True)
    state: Literal["closed"] = "closed"


class Creating(BaseModel):
    model_config = ConfigDict(frozen=True)
    state: Literal["creating"] = "creating"


class Editing(BaseModel):
    model_config = ConfigDict(frozen=True)
    state: Literal["editing"] = "editing"
    record: BaseModel


ModalState = Union[Closed, Creating, Editing]

Confirm = Callable[[str], bool]


class DashboardContext:
    """Everything a dashboard controller talks to, passed in explicitly."""

    def __init__(
        self,
        client: DataClient,
        auth: Optional[AuthSession] = None,
        notifier: Optional[Notifier] = None,
        login_path: str = settings.LOGIN_PATH,
    ):
        self.client = client
        self.auth = auth
        self.notifier = notifier or Notifier()
        self.login_path = login_path


class AdminDashboardController:
    """
    Back-office state for events, sermons and documents.

    Lists are only ever replaced by a fresh fetch from the store, never
    patched locally, so what the operator sees always matches the store
    including server-assigned fields.
    """

    def __init__(self, context: DashboardContext):
        self.context = context
        self.loading = False
        self.location = "dashboard"
        self.records: Dict[ManagedEntity, List[BaseModel]] = {kind: [] for kind in ManagedEntity}
        self.modals: Dict[ManagedEntity, ModalState] = {kind: Closed() for kind in ManagedEntity}
        self.form_errors: Dict[ManagedEntity, List[Dict[str, Any]]] = {kind: [] for kind in ManagedEntity}

    @property
    def client(self) -> DataClient:
        return self.context.client

    @property
    def notifier(self) -> Notifier:
        return self.context.notifier

    @property
    def events(self) -> List[BaseModel]:
        return self.records[ManagedEntity.EVENTS]

    @property
    def sermons(self) -> List[BaseModel]:
        return self.records[ManagedEntity.SERMONS]

    @property
    def documents(self) -> List[BaseModel]:
        return self.records[ManagedEntity.DOCUMENTS]

    # loading

    async def load_all(self) -> None:
        self.loading = True
        await asyncio.gather(*(self.refresh(kind) for kind in ManagedEntity))
        self.loading = False

    async def refresh(self, kind: ManagedEntity) -> bool:
        config = kind.config
        try:
            rows = await self.client.list(config.collection, order_by=config.order_by, descending=True)
            self.records[kind] = mapping.from_records(config.read_model, rows)
            return True
        except DataClientError as e:
            logger.error(f"{config.label} fetch error: {e.message}")
        except Exception:
            logger.exception(f"Unexpected error loading {config.plural}")
        self.notifier.error(f"Error loading {config.plural}")
        return False

    # modal state

    def open_create(self, kind: ManagedEntity) -> None:
        self.modals[kind] = Creating()
        self.form_errors[kind] = []

    def begin_edit(self, kind: ManagedEntity, record: BaseModel) -> None:
        self.modals[kind] = Editing(record=record)
        self.form_errors[kind] = []

    def close_modal(self, kind: ManagedEntity) -> None:
        self.modals[kind] = Closed()
        self.form_errors[kind] = []

    def editing(self, kind: ManagedEntity) -> Optional[BaseModel]:
        modal = self.modals[kind]
        return modal.record if isinstance(modal, Editing) else None

    def form_defaults(self, kind: ManagedEntity) -> Dict[str, Any]:
        return mapping.form_defaults(self.editing(kind), kind.config.create_defaults)

    async def find(self, kind: ManagedEntity, record_id: Any) -> Optional[BaseModel]:
        """Look a record up in the loaded list, falling back to the store."""
        for record in self.records[kind]:
            if str(record.id) == str(record_id):
                return record
        config = kind.config
        try:
            row = await self.client.get(config.collection, record_id)
        except DataClientError as e:
            logger.error(f"{config.label} lookup error: {e.message}")
            row = None
        if row is None:
            self.notifier.error(f"{config.label} not found")
            return None
        return mapping.from_record(config.read_model, row)

    # mutations

    async def submit(self, kind: ManagedEntity, form_data: Mapping[str, Any]) -> bool:
        """
        Create-or-update from a submitted modal form.

        Editing(record) updates that record's id, Creating inserts. On any
        failure the modal state is left as it was so the operator can retry.
        """
        config = kind.config
        modal = self.modals[kind]
        if isinstance(modal, Closed):
            self.notifier.error(f"Open the {config.name} form before submitting")
            return False

        try:
            form = config.form_model.decode(form_data)
        except FormValidationError as e:
            self.form_errors[kind] = e.errors
            self.notifier.error(e.summary)
            return False
        self.form_errors[kind] = []

        record = mapping.to_record(form)
        is_update = isinstance(modal, Editing)
        try:
            if is_update:
                await self.client.update(config.collection, modal.record.id, record)
            else:
                await self.client.insert(config.collection, record)
        except DataClientError as e:
            logger.error(f"{config.label} save error: {e.message}")
            self.notifier.error(e.message or f"Error saving {config.name}")
            return False
        except Exception:
            logger.exception(f"{config.label} save error")
            self.notifier.error(f"Error saving {config.name}")
            return False

        self.notifier.success(
            f"{config.label} updated successfully" if is_update else f"{config.label} created successfully"
        )
        self.close_modal(kind)
        await self.refresh(kind)
        return True

    async def delete(self, kind: ManagedEntity, record_id: Any, confirm: Confirm) -> bool:
        config = kind.config
        if not confirm(f"Are you sure you want to delete this {config.name}?"):
            return False

        try:
            await self.client.delete(config.collection, record_id)
        except DataClientError as e:
            logger.error(f"Delete error: {e.message}")
            self.notifier.error(f"Error deleting {config.name}")
            return False
        except Exception:
            logger.exception("Delete error")
            self.notifier.error(f"Error deleting {config.name}")
            return False

        self.notifier.success(f"{config.label} deleted successfully")
        await self.load_all()
        return True

    # inbox and aggregate

    async def _read(self, config: mapping.EntityConfig) -> Optional[List[BaseModel]]:
        try:
            rows = await self.client.list(config.collection, order_by=config.order_by, descending=True)
            return mapping.from_records(config.read_model, rows)
        except DataClientError as e:
            logger.error(f"{config.label} fetch error: {e.message}")
        except Exception:
            logger.exception(f"Unexpected error loading {config.plural}")
        self.notifier.error(f"Error loading {config.plural}")
        return None

    async def load_volunteers(self) -> Optional[List[BaseModel]]:
        return await self._read(mapping.VOLUNTEER)

    async def load_prayer_requests(self) -> Optional[List[BaseModel]]:
        return await self._read(mapping.PRAYER_REQUEST)

    async def set_soul_count(self, count: int) -> Optional[SoulCountRead]:
        values = {"count": count, "last_updated": utcnow()}
        try:
            current = await self.client.single(mapping.SOUL_COUNT)
            if current is None:
                row = await self.client.insert(mapping.SOUL_COUNT, values)
            else:
                row = await self.client.update(mapping.SOUL_COUNT, current["id"], values)
        except DataClientError as e:
            logger.error(f"Soul count save error: {e.message}")
            self.notifier.error("Error saving soul count")
            return None
        self.notifier.success("Soul count updated successfully")
        return mapping.from_record(SoulCountRead, row)

    # session

    async def sign_out(self) -> str:
        if self.context.auth is not None:
            try:
                await self.client.sign_out(self.context.auth)
            except DataClientError as e:
                logger.error(f"Sign-out error: {e.message}")
        self.location = self.context.login_path
        return self.location
