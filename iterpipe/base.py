import typing as ty


__all__ = [
    "T",
    "Consumer",
    "SupportsIterator",
    "StreamConsumedError",
]


T = ty.TypeVar("T")
T_co = ty.TypeVar("T_co", covariant=True)
Consumer = ty.Callable[[T], ty.Any]


@ty.runtime_checkable
class SupportsIterator(ty.Protocol[T_co]):
    """Interface for one-shot sequences, which hand out a cursor over
    their elements at most once.
    """

    def iterator(self) -> ty.Iterator[T_co]:
        ...


class StreamConsumedError(RuntimeError):
    """Raised when a cursor is requested from a one-shot sequence which
    has already been traversed or closed.
    """

    def __init__(
        self, msg: str = "stream has already been operated upon or closed."
    ) -> None:
        super().__init__(msg)
