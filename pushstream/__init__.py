from ._core.observable import Observable, Producer, Subscription
from ._core.observer import (
    Event,
    EventListener,
    Observer,
    ObserverCompleted,
    ObserverErrored,
    ObserverEvent,
    ObserverHandlers,
    ObserverUnsubscribed,
    Teardown,
    TeardownCalled,
)

__all__ = (
    "Event",
    "EventListener",
    "Observable",
    "Observer",
    "ObserverCompleted",
    "ObserverErrored",
    "ObserverEvent",
    "ObserverHandlers",
    "ObserverUnsubscribed",
    "Producer",
    "Subscription",
    "Teardown",
    "TeardownCalled",
    "from_iterable",
)

from_iterable = Observable.from_iterable
