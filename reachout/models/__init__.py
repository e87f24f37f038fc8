from reachout.models.user import User, RevokedToken
from reachout.models.event import Event, EventType
from reachout.models.sermon import Sermon
from reachout.models.document import Document
from reachout.models.volunteer import Volunteer, VolunteerUnit
from reachout.models.soul_count import SoulCount
from reachout.models.prayer_request import PrayerRequest

# This makes it easy to import all models at once
__all__ = [
    'User', 'RevokedToken', 'Event', 'EventType', 'Sermon', 'Document',
    'Volunteer', 'VolunteerUnit', 'SoulCount', 'PrayerRequest',
]
