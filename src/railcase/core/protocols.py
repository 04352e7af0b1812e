"""Structural contract shared by every container.

``Result``, ``Option``, ``Task`` and ``TaskResult`` never inherit from these;
they match them structurally. The generic pipeable combinators in
``railcase.pipeline.combinators`` accept anything satisfying the relevant
protocol.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Mappable(Protocol):
    """Functor: ``map`` over the success payload."""

    def map(self, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Chainable(Mappable, Protocol):
    """Monad: ``chain`` sequences a container-returning function."""

    def chain(self, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class WideChainable(Chainable, Protocol):
    """Containers with an error channel that can widen under ``chain_w``."""

    def chain_w(self, f: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class ErrorMappable(Protocol):
    """Containers whose failure payload can be transformed."""

    def map_error(self, f: Callable[[Any], Any]) -> Any: ...

    def bimap(self, ok_fn: Callable[[Any], Any], err_fn: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Matchable(Protocol):
    """Containers with a total two-way ``match``."""

    def match(self, on_err: Callable[..., Any], on_ok: Callable[[Any], Any]) -> Any: ...

    def match_w(self, on_err: Callable[..., Any], on_ok: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class Fallible(Protocol):
    """Containers that can be collapsed to a bare value with a fallback."""

    def get_or_else(self, fallback: Callable[[], Any]) -> Any: ...
