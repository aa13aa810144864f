from abc import ABC, abstractmethod
from typing import Any, Optional

from .config import Config
from .models import FaxIds, SendFaxRequest


class FaxService(ABC):
    """
        Base class for fax service providers
    """
    config: Config

    def __call__(self, config: Config, *args, **kwargs):
        self.config = config

    @abstractmethod
    def send_fax(self, request: Optional[SendFaxRequest] = None, **options) -> Any:
        """
        Submits a fax job to one or more recipients
        """
        raise NotImplementedError()

    @abstractmethod
    def get_fax_documents(self, fax_ids: FaxIds, format: str = 'pdf') -> Any:
        """
        Retrieves the documents of the given faxes
        """
        raise NotImplementedError()

    @abstractmethod
    def change_fax_filter_value(self, fax_ids: FaxIds, filter: str = 'None') -> Any:
        """
        Sets the status filter of the given faxes
        """
        raise NotImplementedError()

    @abstractmethod
    def get_fax_descriptions_using_ids(self, fax_ids: FaxIds) -> Any:
        """
        Describes the given faxes
        """
        raise NotImplementedError()

    @abstractmethod
    def get_product_id(self) -> Optional[str]:
        """
        Returns the first product id available to the account, if any
        """
        raise NotImplementedError()
