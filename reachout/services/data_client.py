import enum
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import SQLAlchemyError

from reachout.core.config import settings
from reachout.core.database import Database, db
from reachout.core.exceptions import AuthError, DataClientError, RecordNotFoundError
from reachout.core.security import create_access_token, decode_access_token, verify_password
from reachout.models import (
    Document,
    Event,
    PrayerRequest,
    RevokedToken,
    Sermon,
    SoulCount,
    User as UserModel,
    Volunteer,
)
from reachout.models.common import utcnow
from reachout.models.user import UserStatus
from reachout.services import mapping

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class AuthSession(BaseModel):
    """An authenticated operator session handed to controllers explicitly."""
    user_id: UUID
    email: str
    access_token: str
    jti: str
    expires_at: datetime


class DataClient(ABC):
    """
    Generic async CRUD over named collections plus sign-in/sign-out.

    Every operation is a single attempt. Any failure is raised as
    DataClientError (or AuthError for sign-in) carrying only a message.
    """

    @abstractmethod
    async def list(self, collection: str, order_by: Optional[str] = None, descending: bool = False) -> List[Record]:
        ...

    @abstractmethod
    async def get(self, collection: str, record_id: Any) -> Optional[Record]:
        ...

    @abstractmethod
    async def single(self, collection: str) -> Optional[Record]:
        ...

    @abstractmethod
    async def insert(self, collection: str, record: Record) -> Record:
        ...

    @abstractmethod
    async def update(self, collection: str, record_id: Any, record: Record) -> Record:
        ...

    @abstractmethod
    async def delete(self, collection: str, record_id: Any) -> None:
        ...

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession:
        ...

    @abstractmethod
    async def sign_out(self, auth: AuthSession) -> None:
        ...


COLLECTION_MODELS = {
    mapping.EVENTS: Event,
    mapping.SERMONS: Sermon,
    mapping.DOCUMENTS: Document,
    mapping.VOLUNTEERS: Volunteer,
    mapping.SOUL_COUNT: SoulCount,
    mapping.PRAYER_REQUESTS: PrayerRequest,
}


def row_to_record(row) -> Record:
    record = {}
    for attr in sa_inspect(row).mapper.column_attrs:
        value = getattr(row, attr.key)
        if isinstance(value, enum.Enum):
            value = value.value
        record[attr.key] = value
    return record


def parse_id(collection: str, record_id: Any) -> UUID:
    if isinstance(record_id, UUID):
        return record_id
    try:
        return UUID(str(record_id))
    except ValueError:
        raise RecordNotFoundError(f"No {collection} record with id {record_id}", collection)


class SqlDataClient(DataClient):
    """DataClient backed by the SQLAlchemy models; one session per call."""

    def __init__(self, database: Database = db):
        self.database = database

    def _model(self, collection: str):
        try:
            return COLLECTION_MODELS[collection]
        except KeyError:
            raise DataClientError(f"Unknown collection '{collection}'", collection)

    def _columns(self, model, collection: str, record: Record) -> Record:
        values = {key: value for key, value in record.items() if key != "id"}
        known = {attr.key for attr in sa_inspect(model).column_attrs}
        for key in values:
            if key not in known:
                raise DataClientError(f"Could not find the '{key}' column of '{collection}'", collection)
        return values

    async def _run(self, collection: str, func: Callable, *args) -> Any:
        try:
            return await run_in_threadpool(func, *args)
        except DataClientError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Store error on '{collection}': {str(e)}")
            message = str(getattr(e, "orig", None) or e)
            raise DataClientError(message, collection)

    # reads

    def _list(self, collection, order_by, descending) -> List[Record]:
        model = self._model(collection)
        with self.database.session() as session:
            query = session.query(model)
            if order_by:
                column = getattr(model, order_by, None)
                if column is None:
                    raise DataClientError(f"Cannot order '{collection}' by '{order_by}'", collection)
                query = query.order_by(column.desc() if descending else column.asc())
            return [row_to_record(row) for row in query.all()]

    async def list(self, collection: str, order_by: Optional[str] = None, descending: bool = False) -> List[Record]:
        return await self._run(collection, self._list, collection, order_by, descending)

    def _get(self, collection, record_id) -> Optional[Record]:
        model = self._model(collection)
        key = parse_id(collection, record_id)
        with self.database.session() as session:
            row = session.get(model, key)
            return row_to_record(row) if row is not None else None

    async def get(self, collection: str, record_id: Any) -> Optional[Record]:
        return await self._run(collection, self._get, collection, record_id)

    def _single(self, collection) -> Optional[Record]:
        model = self._model(collection)
        with self.database.session() as session:
            row = session.query(model).first()
            return row_to_record(row) if row is not None else None

    async def single(self, collection: str) -> Optional[Record]:
        return await self._run(collection, self._single, collection)

    # writes

    def _insert(self, collection, record) -> Record:
        model = self._model(collection)
        values = self._columns(model, collection, record)
        with self.database.session() as session:
            row = model(**values)
            session.add(row)
            session.flush()
            session.refresh(row)
            return row_to_record(row)

    async def insert(self, collection: str, record: Record) -> Record:
        return await self._run(collection, self._insert, collection, record)

    def _update(self, collection, record_id, record) -> Record:
        model = self._model(collection)
        values = self._columns(model, collection, record)
        key = parse_id(collection, record_id)
        with self.database.session() as session:
            row = session.get(model, key)
            if row is None:
                raise RecordNotFoundError(f"No {collection} record with id {record_id}", collection)
            for field, value in values.items():
                setattr(row, field, value)
            session.flush()
            session.refresh(row)
            return row_to_record(row)

    async def update(self, collection: str, record_id: Any, record: Record) -> Record:
        return await self._run(collection, self._update, collection, record_id, record)

    def _delete(self, collection, record_id) -> None:
        model = self._model(collection)
        key = parse_id(collection, record_id)
        with self.database.session() as session:
            row = session.get(model, key)
            if row is None:
                raise RecordNotFoundError(f"No {collection} record with id {record_id}", collection)
            session.delete(row)

    async def delete(self, collection: str, record_id: Any) -> None:
        await self._run(collection, self._delete, collection, record_id)

    # auth

    def _sign_in(self, email: str, password: str) -> AuthSession:
        with self.database.session() as session:
            user = session.query(UserModel).filter(UserModel.email == email).first()
            if not user or not verify_password(password, user.hashed_password):
                raise AuthError("Incorrect email or password")
            if user.status != UserStatus.ACTIVE:
                raise AuthError("Your account has been disabled. Please contact support for assistance.")
            user_id, user_email = user.id, user.email

        token = create_access_token(
            user_id,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        )
        payload = decode_access_token(token)
        logger.info(f"Operator {user_email} signed in")
        return AuthSession(
            user_id=user_id,
            email=user_email,
            access_token=token,
            jti=payload["jti"],
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    async def sign_in(self, email: str, password: str) -> AuthSession:
        try:
            return await run_in_threadpool(self._sign_in, email, password)
        except SQLAlchemyError as e:
            logger.error(f"Sign-in failed: {str(e)}")
            raise DataClientError("Sign-in is unavailable right now")

    def _sign_out(self, auth: AuthSession) -> None:
        with self.database.session() as session:
            # expired tokens are refused on decode, their revocations are dead weight
            pruned = (
                session.query(RevokedToken)
                .filter(RevokedToken.expires_at < utcnow())
                .delete(synchronize_session=False)
            )
            session.merge(RevokedToken(jti=auth.jti, user_id=auth.user_id, expires_at=auth.expires_at))
        if pruned:
            logger.info(f"Pruned {pruned} expired token revocations")
        logger.info(f"Operator {auth.email} signed out")

    async def sign_out(self, auth: AuthSession) -> None:
        await self._run("revoked_tokens", self._sign_out, auth)
