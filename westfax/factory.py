from typing import Dict, Tuple, Type

from .enums import FaxProvider
from .base import FaxService
from .client import WestFaxService
from .config import WestFaxConfig, Config


class FaxServiceFactory:
    def __init__(self):
        self._services: Dict[str, Tuple[Type[FaxService], Type[Config]]] = {}

    def register_service(self, key: FaxProvider, service: Type[FaxService], config: Type[Config]):
        self._services[key] = (service, config)

    def _create(self, key: FaxProvider, **kwargs) -> FaxService:
        if key not in self._services:
            raise ValueError(f'No fax service registered for provider "{key}"')

        service_class, config_class = self._services[key]
        config = config_class(**kwargs)
        return service_class()(config=config)

    def get(self, **kwargs) -> FaxService:
        key = Config(**kwargs).FAX_PROVIDER
        return self._create(key, **kwargs)


fax_service_factory = FaxServiceFactory()
fax_service_factory.register_service(key=FaxProvider.westfax, service=WestFaxService, config=WestFaxConfig)
