from .event_helper import EventHistory
from .request_helper import fake_requests

__all__ = ("EventHistory", "fake_requests")
