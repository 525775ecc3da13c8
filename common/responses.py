"""Success envelope shared by the handlers."""

from rest_framework import status as http_status
from rest_framework.response import Response

from common.pagination import Page


def success_response(data=None, *, message: str | None = None, status: int = http_status.HTTP_200_OK, **extra) -> Response:
    body = {"success": True}
    if message is not None:
        body["message"] = message
    body.update(extra)
    body["data"] = data if data is not None else {}
    return Response(body, status=status)


def page_response(page: Page, data: list, **extra) -> Response:
    """Envelope for a paginated listing."""
    return success_response(
        data,
        count=len(page),
        total=page.total,
        pagination=page.pagination,
        **extra,
    )
