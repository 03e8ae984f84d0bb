from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from logging import Logger, getLogger
from typing import Any, ContextManager, Self, override

from pushstream._core.observer import (
    Event,
    EventChannel,
    EventListener,
    Observer,
    ObserverHandlers,
    Teardown,
)
from pushstream.exceptions import ProducerError

type Producer[T] = Callable[[Observer[T]], Teardown | None]


def _release() -> None:
    return


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class Subscription:
    __observer: Observer[Any]

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_: Any) -> None:
        self.unsubscribe()

    def unsubscribe(self) -> None:
        self.__observer.unsubscribe()


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class Observable[T](EventListener):
    producer: Producer[T]
    __channel: EventChannel = field(default_factory=EventChannel, init=False)
    __loggers: list[Logger] = field(
        default_factory=lambda: [getLogger("python-pushstream")],
        init=False,
    )

    def subscribe(
        self,
        handlers: ObserverHandlers[T] | None = None,
        /,
        *,
        next: Callable[[T], Any] | None = None,
        error: Callable[[Exception], Any] | None = None,
        complete: Callable[[], Any] | None = None,
    ) -> Subscription:
        if handlers is None:
            handlers = ObserverHandlers(next, error, complete)

        elif any(callback is not None for callback in (next, error, complete)):
            raise TypeError("Handlers can't be passed both as object and keywords.")

        observer = Observer(handlers).add_listener(self)
        teardown = self.producer(observer)

        if teardown is not None and not callable(teardown):
            observer.unsubscribe()
            raise ProducerError(teardown)

        observer.attach(teardown)
        return Subscription(observer)

    def add_logger(self, logger: Logger) -> Self:
        self.__loggers.append(logger)
        return self

    def add_listener(self, listener: EventListener) -> Self:
        self.__channel.add_listener(listener)
        return self

    def remove_listener(self, listener: EventListener) -> Self:
        self.__channel.remove_listener(listener)
        return self

    @override
    def on_event(self, event: Event, /) -> ContextManager[None] | None:
        return self.dispatch(event)

    @contextmanager
    def dispatch(self, event: Event) -> Iterator[None]:
        with self.__channel.dispatch(event):
            yield
            message = str(event)
            self.__debug(message)

    def __debug(self, message: object) -> None:
        for logger in tuple(self.__loggers):
            logger.debug(message)

    @classmethod
    def from_iterable(cls, values: Iterable[T], /) -> Self:
        items = tuple(values)

        def produce(observer: Observer[T]) -> Teardown:
            for item in items:
                if observer.is_unsubscribed:
                    break

                observer.next(item)

            observer.complete()
            return _release

        return cls(produce)
