import os
from dataclasses import dataclass, field
from typing import IO, Any, Dict, Iterable, List, Optional, Union

from .enums import FaxDirection, FaxQuality


FileSource = Union[str, os.PathLike, bytes, IO[bytes]]
Numbers = Union[str, Iterable[str]]


@dataclass(frozen=True)
class FaxIdentifier:
    """Reference to a fax on the WestFax side, as echoed by a list or describe call."""
    id: str
    direction: FaxDirection = FaxDirection.INBOUND

    def as_dict(self) -> Dict[str, str]:
        return {'Id': self.id, 'Direction': str(self.direction)}


FaxIds = Union[str, FaxIdentifier, Dict[str, Any], Iterable[Union[str, FaxIdentifier, Dict[str, Any]]]]


@dataclass
class SendFaxRequest:
    numbers: Numbers
    file: FileSource
    filename: Optional[str] = None
    job_name: Optional[str] = None
    header: Optional[str] = None
    billing_code: Optional[str] = None
    csid: Optional[str] = None
    ani: Optional[str] = None
    start_date: Optional[str] = None
    fax_quality: Optional[FaxQuality] = None
    feedback_email: Optional[str] = None
    callback_url: Optional[str] = None


@dataclass
class ProductIdLookup:
    """
    Outcome of looking up the first usable product id.

    ``product_id`` is None when nothing was found; ``errors`` holds the
    exceptions raised by the product list calls, if any.
    """
    product_id: Optional[str] = None
    errors: List[Exception] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.product_id)

    @property
    def failed(self) -> bool:
        return bool(self.errors)
