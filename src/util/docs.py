# src/util/docs.py
from typing import Any, Type

from core.exception.exceptions import BaseCustomException, GlobalErrorResponse


def _error_example(exc: BaseCustomException) -> dict[str, Any]:
    return {
        "summary": exc.code,
        "description": exc.detail,
        "value": {"status_code": exc.status_code, "code": exc.code, "detail": exc.detail},
    }


def create_error_response(*exception_classes: Type[BaseCustomException]) -> dict[int, dict]:
    """OpenAPI ``responses`` for an endpoint, built from the exceptions it may raise.

    Exceptions sharing a status code are listed as named examples of one response;
    the response description lists their codes.
    """
    responses: dict[int, dict] = {}

    for exc_class in exception_classes:
        exc = exc_class()
        response = responses.setdefault(
            exc.status_code,
            {"model": GlobalErrorResponse, "codes": [], "examples": {}},
        )
        response["codes"].append(exc.code)
        response["examples"][exc_class.__name__] = _error_example(exc)

    return {
        status_code: {
            "model": response["model"],
            "description": " / ".join(response["codes"]),
            "content": {"application/json": {"examples": response["examples"]}},
        }
        for status_code, response in responses.items()
    }
