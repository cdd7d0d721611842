"""
``iterpipe.stream``
===================

One-shot sequences. A ``Stream`` wraps any iterable and hands out a
cursor over its elements exactly once, failing loudly on any further
attempt rather than appearing empty, as a spent generator would.
"""
import functools as fn
import logging
import typing as ty
import warnings

from rich.console import Console
from rich.tree import Tree

from iterpipe import base

__all__ = ["Stream", "streamed"]


logger = logging.getLogger(__name__)


class Stream(ty.Generic[base.T]):
    """Lazily produced, ordered sequence of elements, which may be
    traversed at most once.

    :group: Stream

    Parameters
    ----------
    source : iterable
        The elements of the stream. Nothing is drawn from ``source``
        until the cursor returned by ``iterator()`` is advanced.

    Attributes
    ----------
    consumed : bool
        Whether the cursor has already been issued, or the stream
        closed.

    Raises
    ------
    StreamConsumedError
        If ``iterator()`` is called more than once, or after
        ``close()``.

    Notes
    -----
    Streams are not Python iterables, so they cannot be passed to a
    for-loop directly. Use ``iterpipe.once()`` to bind a stream to a
    single loop, or ``iterpipe.through()`` to feed each element to a
    callback.
    """

    __iter__ = None  # type: ignore

    def __init__(self, source: ty.Iterable[base.T]) -> None:
        self._source = source
        self._consumed = False

    @classmethod
    def of(cls, *elements: base.T) -> "Stream[base.T]":
        """Returns a stream over the given elements, in order."""
        return cls(elements)

    def __rich__(self) -> Tree:
        name = self.__class__.__name__
        state = "consumed" if self._consumed else "open"
        tree = Tree(f"{name}(state=[yellow]'{state}'[default])")
        src_name = type(self._source).__name__
        tree.add(f"[blue]source [default]= [green]{src_name}")
        return tree

    def __repr__(self) -> str:
        console = Console(color_system=None)
        with console.capture() as capture:
            console.print(self)
        return capture.get().rstrip("\n")

    def __enter__(self) -> "Stream[base.T]":
        return self

    def __exit__(self, exc_type: ty.Any, *exc_info: ty.Any) -> None:
        self._close(warn=exc_type is None)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def iterator(self) -> ty.Iterator[base.T]:
        """Returns a cursor positioned at the start of the stream.

        Returns
        -------
        cursor : Iterator
            Iterator over the elements of the stream.

        Raises
        ------
        StreamConsumedError
            If the stream has already been traversed or closed.
        """
        if self._consumed:
            raise base.StreamConsumedError()
        self._consumed = True
        logger.debug("Issuing cursor over %s.", type(self._source).__name__)
        return iter(self._source)

    def close(self) -> None:
        """Marks the stream as used, and closes the underlying source
        if it supports closing, *eg.* a generator. Closing an already
        closed stream has no further effect.
        """
        self._close(warn=True)

    def _close(self, warn: bool) -> None:
        if warn and not self._consumed:
            warnings.warn(
                "Stream closed before being traversed. Its elements have "
                "been discarded.",
                UserWarning,
            )
        self._consumed = True
        close_source = getattr(self._source, "close", None)
        if callable(close_source):
            close_source()
        logger.debug("Closed stream over %s.", type(self._source).__name__)


def streamed(
    func: ty.Callable[..., ty.Iterable[base.T]]
) -> ty.Callable[..., Stream[base.T]]:
    """Decorator wrapping the return value of ``func`` in a ``Stream``,
    so that iterating the result a second time raises an error instead
    of silently yielding nothing.

    :group: Stream

    Parameters
    ----------
    func : callable
        Function returning an iterable, typically a generator
        function.

    Returns
    -------
    wrapper : callable
        Function with the same signature as ``func``, returning a new
        ``Stream`` on each call.

    Examples
    --------
    >>> @streamed
    ... def countdown(n):
    ...     while n > 0:
    ...         yield n
    ...         n = n - 1
    >>> list(countdown(3).iterator())
    [3, 2, 1]
    """

    @fn.wraps(func)
    def wrapper(*args: ty.Any, **kwargs: ty.Any) -> Stream[base.T]:
        return Stream(func(*args, **kwargs))

    return wrapper
