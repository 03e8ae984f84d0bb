from typing import Any

__all__ = (
    "ObserverError",
    "ProducerError",
    "PushStreamError",
)


class PushStreamError(Exception): ...


class ObserverError(PushStreamError): ...


class ProducerError(TypeError, PushStreamError):
    __slots__ = ("__teardown",)

    __teardown: Any

    def __init__(self, teardown: Any) -> None:
        super().__init__(
            f"Producer must return a callable or `None`, not `{teardown!r}`."
        )
        self.__teardown = teardown

    @property
    def teardown(self) -> Any:
        return self.__teardown
