from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, ContextManager, Self, override
from uuid import uuid4

from pushstream.exceptions import ObserverError

type Teardown = Callable[[], Any]

"""
Events
"""


class Event(ABC):
    __slots__ = ()


class EventListener(ABC):
    __slots__ = ()

    @abstractmethod
    def on_event(self, event: Event, /) -> ContextManager[None] | None:
        raise NotImplementedError


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class EventChannel:
    # Held strongly, observables are often dropped while subscribed.
    __listeners: dict[EventListener, None] = field(default_factory=dict, init=False)

    @contextmanager
    def dispatch(self, event: Event) -> Iterator[None]:
        with ExitStack() as stack:
            for listener in tuple(self.__listeners):
                if (context_manager := listener.on_event(event)) is not None:
                    stack.enter_context(context_manager)

            yield

    def add_listener(self, listener: EventListener) -> Self:
        self.__listeners[listener] = None
        return self

    def remove_listener(self, listener: EventListener) -> Self:
        self.__listeners.pop(listener, None)
        return self


@dataclass(frozen=True, slots=True)
class ObserverEvent(Event, ABC):
    observer: Observer[Any]


@dataclass(frozen=True, slots=True)
class ObserverCompleted(ObserverEvent):
    @override
    def __str__(self) -> str:
        return f"`{self.observer}` has completed."


@dataclass(frozen=True, slots=True)
class ObserverErrored(ObserverEvent):
    error: Exception

    @override
    def __str__(self) -> str:
        return f"`{self.observer}` has received an error: {self.error!r}."


@dataclass(frozen=True, slots=True)
class ObserverUnsubscribed(ObserverEvent):
    @override
    def __str__(self) -> str:
        return f"`{self.observer}` is now unsubscribed."


@dataclass(frozen=True, slots=True)
class TeardownCalled(ObserverEvent):
    @override
    def __str__(self) -> str:
        return f"The teardown of `{self.observer}` has been called."


"""
Observer
"""


def _ignore(*_: Any) -> None:
    return


@dataclass(frozen=True, slots=True)
class ObserverHandlers[T]:
    next: Callable[[T], Any] | None = None
    error: Callable[[Exception], Any] | None = None
    complete: Callable[[], Any] | None = None


@dataclass(eq=False, slots=True)
class Observer[T]:
    handlers: ObserverHandlers[T] = field(repr=False)
    name: str = field(default_factory=lambda: f"observer@{uuid4().hex[:7]}")
    __on_next: Callable[[T], Any] = field(init=False, repr=False)
    __on_error: Callable[[Exception], Any] = field(init=False, repr=False)
    __on_complete: Callable[[], Any] = field(init=False, repr=False)
    __channel: EventChannel = field(
        default_factory=EventChannel,
        init=False,
        repr=False,
    )
    __teardown: Teardown | None = field(default=None, init=False, repr=False)
    __is_attached: bool = field(default=False, init=False, repr=False)
    __is_released: bool = field(default=False, init=False, repr=False)
    __is_unsubscribed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        handlers = self.handlers
        self.__on_next = handlers.next or _ignore
        self.__on_error = handlers.error or _ignore
        self.__on_complete = handlers.complete or _ignore

    @property
    def is_unsubscribed(self) -> bool:
        return self.__is_unsubscribed

    def next(self, value: T, /) -> None:
        if self.__is_unsubscribed:
            return

        self.__on_next(value)

    def error(self, exc: Exception, /) -> None:
        if self.__is_unsubscribed:
            return

        with self.__channel.dispatch(ObserverErrored(self, exc)):
            self.__on_error(exc)

        self.unsubscribe()

    def complete(self) -> None:
        if self.__is_unsubscribed:
            return

        with self.__channel.dispatch(ObserverCompleted(self)):
            self.__on_complete()

        self.unsubscribe()

    def unsubscribe(self) -> None:
        if self.__is_unsubscribed:
            self.__release()
            return

        with self.__channel.dispatch(ObserverUnsubscribed(self)):
            self.__is_unsubscribed = True
            self.__release()

    def attach(self, teardown: Teardown | None) -> Self:
        if self.__is_attached:
            raise ObserverError(f"`{self}` already has a teardown.")

        self.__is_attached = True
        self.__teardown = teardown
        return self

    def add_listener(self, listener: EventListener) -> Self:
        self.__channel.add_listener(listener)
        return self

    def remove_listener(self, listener: EventListener) -> Self:
        self.__channel.remove_listener(listener)
        return self

    def __release(self) -> None:
        if self.__is_released or (teardown := self.__teardown) is None:
            return

        self.__is_released = True
        self.__teardown = None

        with self.__channel.dispatch(TeardownCalled(self)):
            teardown()
