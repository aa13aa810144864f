from .config import Config, WestFaxConfig
from .base import FaxService
from .client import WestFaxService
from .factory import FaxServiceFactory, fax_service_factory
from .form import FaxForm, numbered_fields, serialize_fax_id, serialize_fax_ids
from .models import FaxIdentifier, ProductIdLookup, SendFaxRequest
from .enums import (
    DocumentFormat,
    Endpoint,
    FaxDirection,
    FaxFilter,
    FaxProvider,
    FaxQuality,
    ResponseEncoding,
)


__all__ = [
    'Config',
    'WestFaxConfig',
    'FaxService',
    'WestFaxService',
    'FaxServiceFactory',
    'fax_service_factory',
    'FaxForm',
    'numbered_fields',
    'serialize_fax_id',
    'serialize_fax_ids',
    'FaxIdentifier',
    'ProductIdLookup',
    'SendFaxRequest',
    'DocumentFormat',
    'Endpoint',
    'FaxDirection',
    'FaxFilter',
    'FaxProvider',
    'FaxQuality',
    'ResponseEncoding',
]
