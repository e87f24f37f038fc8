import copy
import uuid
from collections import defaultdict
from datetime import datetime, timedelta, timezone

from reachout.core.exceptions import AuthError, DataClientError, RecordNotFoundError
from reachout.services.data_client import AuthSession, DataClient

TIMESTAMP_FIELDS = {
    "sermons": "created_at",
    "documents": "created_at",
    "volunteers": "created_at",
    "prayer_requests": "created_at",
    "soul_count": "last_updated",
}


class InMemoryDataClient(DataClient):
    """
    Substitutable store for controller tests. Records every call and can be
    told to fail a given (operation, collection) pair.
    """

    def __init__(self):
        self.collections = defaultdict(list)
        self.calls = []
        self.failures = {}
        self.signed_out = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def fail(self, operation, collection, message="Service unavailable"):
        self.failures[(operation, collection)] = message

    def calls_to(self, operation):
        return [call for call in self.calls if call[0] == operation]

    def _enter(self, operation, collection, record_id=None):
        self.calls.append((operation, collection, record_id))
        message = self.failures.get((operation, collection))
        if message is not None:
            raise DataClientError(message, collection)

    def _find(self, collection, record_id):
        for record in self.collections[collection]:
            if str(record["id"]) == str(record_id):
                return record
        raise RecordNotFoundError(f"No {collection} record with id {record_id}", collection)

    def _tick(self):
        self._clock += timedelta(seconds=1)
        return self._clock

    def seed(self, collection, record):
        record = dict(record)
        record.setdefault("id", uuid.uuid4())
        field = TIMESTAMP_FIELDS.get(collection)
        if field:
            record.setdefault(field, self._tick())
        self.collections[collection].append(record)
        return copy.deepcopy(record)

    async def list(self, collection, order_by=None, descending=False):
        self._enter("list", collection)
        records = copy.deepcopy(self.collections[collection])
        if order_by:
            records.sort(key=lambda record: record[order_by], reverse=descending)
        return records

    async def get(self, collection, record_id):
        self._enter("get", collection, record_id)
        try:
            return copy.deepcopy(self._find(collection, record_id))
        except RecordNotFoundError:
            return None

    async def single(self, collection):
        self._enter("single", collection)
        records = self.collections[collection]
        return copy.deepcopy(records[0]) if records else None

    async def insert(self, collection, record):
        self._enter("insert", collection)
        return self.seed(collection, {key: value for key, value in record.items() if key != "id"})

    async def update(self, collection, record_id, record):
        self._enter("update", collection, record_id)
        stored = self._find(collection, record_id)
        stored.update({key: value for key, value in record.items() if key != "id"})
        return copy.deepcopy(stored)

    async def delete(self, collection, record_id):
        self._enter("delete", collection, record_id)
        stored = self._find(collection, record_id)
        self.collections[collection].remove(stored)

    async def sign_in(self, email, password):
        raise AuthError()

    async def sign_out(self, auth: AuthSession):
        self._enter("sign_out", "auth")
        self.signed_out.append(auth.jti)
