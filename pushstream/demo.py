import logging
from typing import Annotated

from pushstream import Observable, Observer
from pushstream._core import is_installed
from pushstream.testing.mocks import (
    REQUESTS_MOCK,
    RequestMock,
    ResponseResult,
    handle_complete,
    handle_error,
    handle_request,
)

if is_installed("typer", __name__):
    from typer import Option, Typer, echo

__all__ = ("app", "mock_requests")

app = Typer(help="Push the mock requests through an observable.")


def mock_requests(fail_after: int | None = None) -> Observable[RequestMock]:
    if fail_after is None:
        return Observable.from_iterable(REQUESTS_MOCK)

    def produce(observer: Observer[RequestMock]) -> None:
        for request in REQUESTS_MOCK[:fail_after]:
            observer.next(request)

        exc = ConnectionError(f"Connection lost after {fail_after} request(s).")
        observer.error(exc)

    return Observable(produce)


@app.command()
def run(
    verbose: Annotated[
        bool,
        Option("--verbose", "-v", help="Show the observation events."),
    ] = False,
    fail_after: Annotated[
        int | None,
        Option(min=0, help="Send an error after this number of requests."),
    ] = None,
    unsubscribe: Annotated[
        bool,
        Option("--unsubscribe/--keep", help="Unsubscribe once the producer returns."),
    ] = True,
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    def on_next(request: RequestMock) -> ResponseResult:
        response = handle_request(request)
        echo(f"{request.method} {request.host}/{request.path} -> {response.status}")
        return response

    def on_error(exc: Exception) -> ResponseResult:
        response = handle_error(exc)
        echo(f"error: {exc} -> {response.status}")
        return response

    def on_complete() -> None:
        handle_complete()
        echo("complete")

    subscription = mock_requests(fail_after).subscribe(
        next=on_next,
        error=on_error,
        complete=on_complete,
    )

    if unsubscribe:
        subscription.unsubscribe()
        echo("unsubscribed")
