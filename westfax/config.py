import logging
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic.v1 import BaseSettings, Extra

from .enums import DEFAULT_BASE_URL, FaxProvider, ResponseEncoding


logger = logging.getLogger(__name__)


class Config(BaseSettings):
    FAX_PROVIDER: FaxProvider = FaxProvider.westfax

    class Config:
        extra = Extra.ignore
        allow_mutation = False


class WestFaxConfig(Config):
    """
        Connection settings for the WestFax REST API.

        Values are read from keyword arguments first and fall back to
        ``WESTFAX_*`` environment variables.
    """
    WESTFAX_USERNAME: str = ''
    WESTFAX_PASSWORD: str = ''
    WESTFAX_PRODUCT_ID: str = ''
    WESTFAX_API_URL: str = DEFAULT_BASE_URL
    WESTFAX_RESPONSE_ENCODING: ResponseEncoding = ResponseEncoding.JSON
    WESTFAX_COOKIES: bool = False
    WESTFAX_TIMEOUT: Optional[float] = None

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs: Any) -> 'WestFaxConfig':
        """
        Loads a .env file into the process environment and builds a config from it.
        Args:
            env_file (str) : Path to the .env file. Searched for when omitted.
        """
        if not load_dotenv(env_file):
            logger.debug('No .env file loaded for WestFax settings.')
        return cls(**kwargs)

    def with_product_id(self, product_id: str) -> 'WestFaxConfig':
        return self.copy(update={'WESTFAX_PRODUCT_ID': product_id})

    @property
    def base_url(self) -> str:
        return self.WESTFAX_API_URL.rstrip('/')

    @property
    def response_encoding(self) -> str:
        return str(self.WESTFAX_RESPONSE_ENCODING)

    @property
    def username(self) -> str:
        return self.WESTFAX_USERNAME

    @property
    def password(self) -> str:
        return self.WESTFAX_PASSWORD

    @property
    def product_id(self) -> str:
        return self.WESTFAX_PRODUCT_ID

    @property
    def cookies(self) -> bool:
        return self.WESTFAX_COOKIES

    @property
    def timeout(self) -> Optional[float]:
        return self.WESTFAX_TIMEOUT
