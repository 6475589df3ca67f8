import logging

import sentry_sdk
from drf_standardized_errors.handler import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    # call drf_standardized_errors
    response = drf_exception_handler(exc, context)

    view = context.get("view")
    view_name = type(view).__name__ if view is not None else "unknown"

    # Unhandled exception: let it propagate so Django returns a 500 and Sentry sees it
    if response is None:
        logger.exception("Unhandled exception in %s", view_name)
        sentry_sdk.capture_exception(exc)
        raise exc

    if response.status_code >= 500:
        logger.error("Server error %s in %s: %s", response.status_code, view_name, exc)
        sentry_sdk.capture_exception(exc)

    return response
