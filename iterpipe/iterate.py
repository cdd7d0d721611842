"""
``iterpipe.iterate``
====================

Helpers to make it easier to iterate through one-shot streams, either
within a single for-loop, or by passing each element to a callback.
"""
import typing as ty

from iterpipe import base

__all__ = ["SingleUseIterable", "Iterate", "once", "through"]


class SingleUseIterable(ty.Iterable[base.T]):
    """View over a one-shot stream, which may be bound to a single
    for-loop.

    :group: Iterate

    Notes
    -----
    Holds nothing but a reference to the stream. Calling ``iter()`` on
    the view a second time fails with whatever error the stream raises
    for repeated traversal.
    """

    def __init__(self, stream: ty.Any) -> None:
        self._stream = stream

    def __iter__(self) -> ty.Iterator[base.T]:
        stream = self._stream
        if isinstance(stream, base.SupportsIterator):
            return stream.iterator()
        return iter(stream)


def once(
    stream: ty.Union[base.SupportsIterator[base.T], ty.Iterable[base.T]]
) -> SingleUseIterable[base.T]:
    """With due care, iterates through ``stream`` *only once*. Keep the
    returned object restricted to the scope of a single for-loop,
    because its ``__iter__()`` method cannot be called more than once.

    :group: Iterate

    Parameters
    ----------
    stream : Stream | Iterable
        One-shot sequence, exposing an ``iterator()`` method. Plain
        iterables are delegated to ``iter()``, so a spent generator is
        silently empty on a second traversal. Wrap it in ``Stream``, or
        decorate its function with ``streamed``, to fail loudly instead.

    Returns
    -------
    view : SingleUseIterable
        Iterable producing a cursor over ``stream`` when iterated.

    Examples
    --------
    >>> for element in once(Stream.of("a", "b")):
    ...     print(element)
    a
    b
    """
    return SingleUseIterable(stream)


def through(
    stream: ty.Union[base.SupportsIterator[base.T], ty.Iterable[base.T]],
    consumer: base.Consumer[base.T],
) -> None:
    """Iterates through ``stream`` sequentially, passing each element to
    ``consumer``, with exceptions propagated.

    :group: Iterate

    Parameters
    ----------
    stream : Stream | Iterable
        One-shot sequence, traversed exactly once.
    consumer : callable
        Called with each element, in order. Any exception it raises is
        propagated to the caller unchanged, and stops the traversal.

    Raises
    ------
    ValueError
        If ``consumer`` is ``None``. The stream is left untouched.

    Examples
    --------
    >>> def write_all(stream, out):
    ...     through(stream, out.write)
    """
    if consumer is None:
        raise ValueError("consumer must not be None.")
    for element in once(stream):
        consumer(element)


class Iterate:
    """Namespace grouping ``once()`` and ``through()``. Cannot be
    instantiated.

    :group: Iterate
    """

    once = staticmethod(once)
    through = staticmethod(through)

    def __new__(cls, *args: ty.Any, **kwargs: ty.Any) -> "Iterate":
        raise TypeError(f"{cls.__name__} cannot be instantiated.")
