"""Tests for cause-chain walking and capability extraction."""

from __future__ import annotations

from dataclasses import dataclass

import grpc

from packages.apihelper.errors import (
    ClassifiedError,
    ErrorCapability,
    HttpErrorCapability,
    StatusClass,
    as_classified,
    as_error_capability,
    as_grpc_error,
    as_http_error,
    is_caused_by,
    iter_error_chain,
    new,
    not_found,
    with_cause,
    with_code,
    with_status,
)


@dataclass
class DataAccessError(Exception):
    """Lower-layer error that satisfies the capability structurally."""

    code: str
    message: str
    http_status: int

    def __str__(self) -> str:
        return f"data access: {self.code}"


class FakeRpcError(grpc.RpcError):
    """gRPC error whose ``code`` is a method, not a string."""

    def code(self) -> grpc.StatusCode:
        return grpc.StatusCode.UNAVAILABLE

    def details(self) -> str:
        return "down"


def _raise_from(outer: Exception, inner: BaseException) -> Exception:
    try:
        try:
            raise inner
        except BaseException as exc:
            raise outer from exc
    except Exception as exc:
        return exc


def test_classified_error_satisfies_capability_protocols() -> None:
    """ClassifiedError should satisfy both capability protocols."""
    error = new("x")

    assert isinstance(error, ErrorCapability)
    assert isinstance(error, HttpErrorCapability)


def test_iter_error_chain_walks_outermost_to_innermost() -> None:
    """The chain should list the outer error first and follow causes."""
    root = ValueError("root")
    middle = new("middle", with_cause(root))
    outer = _raise_from(RuntimeError("outer"), middle)

    chain = list(iter_error_chain(outer))

    assert chain == [outer, middle, root]


def test_iter_error_chain_ignores_implicit_context() -> None:
    """Implicit ``__context__`` chaining should not be followed."""
    try:
        try:
            raise ValueError("first")
        except ValueError:
            raise RuntimeError("second")
    except RuntimeError as exc:
        error = exc

    assert list(iter_error_chain(error)) == [error]


def test_iter_error_chain_stops_on_cycles() -> None:
    """A cyclic ``__cause__`` chain should be visited once per error."""
    first = ValueError("first")
    second = ValueError("second")
    first.__cause__ = second
    second.__cause__ = first

    assert list(iter_error_chain(first)) == [first, second]


def test_iter_error_chain_of_none_is_empty() -> None:
    """No error should mean no chain."""
    assert list(iter_error_chain(None)) == []


def test_as_http_error_finds_classified_error_below_foreign_wrapper() -> None:
    """Extraction should find a classified error anywhere in the chain."""
    classified = not_found("USER_NOT_FOUND", "user missing")
    outer = _raise_from(RuntimeError("handler failed"), classified)

    assert as_http_error(outer) is classified
    assert as_classified(outer) is classified


def test_as_http_error_returns_outermost_match() -> None:
    """When several errors qualify, the outermost one should win."""
    inner = new("inner", with_status(StatusClass.NOT_FOUND), with_code("INNER"))
    outer = new("outer", with_status(StatusClass.UNAVAILABLE), with_code("OUTER"), with_cause(inner))

    assert as_http_error(outer) is outer


def test_structural_error_without_nominal_relationship_is_extracted() -> None:
    """Any error exposing the accessors should be extracted without subclassing."""
    lower = DataAccessError(code="DB_LOCKED", message="database locked", http_status=503)
    outer = _raise_from(RuntimeError("service failed"), lower)

    found = as_http_error(outer)

    assert found is lower
    assert not isinstance(found, ClassifiedError)


def test_foreign_error_without_capability_is_not_extracted() -> None:
    """Plain exceptions should yield no capability."""
    assert as_error_capability(ValueError("plain")) is None
    assert as_http_error(ValueError("plain")) is None
    assert as_http_error(None) is None


def test_rpc_error_with_code_method_is_not_a_capability() -> None:
    """An error whose code is a method should not satisfy the capability."""
    assert as_error_capability(FakeRpcError()) is None


def test_as_grpc_error_requires_grpc_status() -> None:
    """Only errors exposing grpc_status should be returned for gRPC."""
    lower = DataAccessError(code="DB_LOCKED", message="database locked", http_status=503)

    assert as_grpc_error(lower) is None
    assert as_grpc_error(new("x")) is not None


def test_is_caused_by_matches_identity_and_type() -> None:
    """is_caused_by should match instances by identity and types by isinstance."""
    root = KeyError("k")
    error = new("lookup", with_cause(root))

    assert is_caused_by(error, root)
    assert is_caused_by(error, KeyError)
    assert is_caused_by(error, ClassifiedError)
    assert not is_caused_by(error, KeyError("k"))
    assert not is_caused_by(error, TimeoutError)
