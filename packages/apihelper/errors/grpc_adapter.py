"""gRPC servicer helper for classified errors."""

from __future__ import annotations

import grpc

from packages.apihelper.envelope.defaults import current_config

from .chain import as_grpc_error


def abort_for_error(
    context: grpc.ServicerContext,
    error: BaseException,
    *,
    default_message: str | None = None,
) -> None:
    """Abort the current RPC with the status mapped from ``error``.

    Soft errors map to ``OK``, which gRPC cannot abort with; for those only
    the details are set and the call returns so the handler can finish
    normally. Errors without a gRPC status abort as ``INTERNAL`` with
    ``default_message``, or the configured envelope default message when
    none is given.
    """
    capable = as_grpc_error(error)
    if capable is None:
        if default_message is None:
            default_message = current_config().default_error_message
        context.abort(grpc.StatusCode.INTERNAL, default_message)
        return

    status = grpc.StatusCode.__members__.get(capable.grpc_status, grpc.StatusCode.UNKNOWN)
    if status == grpc.StatusCode.OK:
        context.set_details(str(capable))
        return
    context.abort(status, str(capable))
