from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal, NamedTuple

from pushstream import ObserverHandlers

__all__ = ("Call", "HandlerRecorder")

type CallName = Literal["next", "error", "complete"]


class Call(NamedTuple):
    name: CallName
    argument: Any = None
    result: Any = None


def _identity(value: Any = None) -> Any:
    return value


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class HandlerRecorder[T]:
    on_next: Callable[[T], Any] = field(default=_identity)
    on_error: Callable[[Exception], Any] = field(default=_identity)
    on_complete: Callable[[], Any] = field(default=lambda: None)
    __calls: list[Call] = field(default_factory=list, init=False)

    def __len__(self) -> int:
        return len(self.__calls)

    @property
    def calls(self) -> tuple[Call, ...]:
        return tuple(self.__calls)

    @property
    def values(self) -> tuple[T, ...]:
        return self.__arguments("next")

    @property
    def errors(self) -> tuple[Exception, ...]:
        return self.__arguments("error")

    @property
    def completions(self) -> int:
        return len(self.__arguments("complete"))

    @property
    def results(self) -> tuple[Any, ...]:
        return tuple(call.result for call in self.__calls)

    @property
    def handlers(self) -> ObserverHandlers[T]:
        return ObserverHandlers(self.next, self.error, self.complete)

    def next(self, value: T) -> Any:
        result = self.on_next(value)
        self.__calls.append(Call("next", value, result))
        return result

    def error(self, exc: Exception) -> Any:
        result = self.on_error(exc)
        self.__calls.append(Call("error", exc, result))
        return result

    def complete(self) -> Any:
        result = self.on_complete()
        self.__calls.append(Call("complete", result=result))
        return result

    def clear(self) -> None:
        self.__calls.clear()

    def __arguments(self, name: CallName) -> tuple[Any, ...]:
        return tuple(call.argument for call in self.__calls if call.name == name)
