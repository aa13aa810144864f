"""
Tests for fax service factory.

This module tests the FaxServiceFactory class that creates configured
fax service instances based on provider settings.
"""
import os
import unittest
from unittest.mock import patch

from pydantic.v1 import ValidationError

from westfax.config import WestFaxConfig
from westfax.enums import FaxProvider
from westfax.factory import FaxServiceFactory, fax_service_factory
from westfax.client import WestFaxService


@patch.dict(os.environ, {}, clear=True)
class TestFaxServiceFactory(unittest.TestCase):
    """Test FaxServiceFactory class."""

    def test_factory_initialization(self):
        factory = FaxServiceFactory()
        self.assertEqual(factory._services, {})

    def test_register_service(self):
        factory = FaxServiceFactory()

        factory.register_service(key=FaxProvider.westfax, service=WestFaxService, config=WestFaxConfig)

        self.assertEqual(factory._services[FaxProvider.westfax], (WestFaxService, WestFaxConfig))

    def test_service_factory_returns_correct_service(self):
        service = fax_service_factory.get(
            FAX_PROVIDER=FaxProvider.westfax,
            WESTFAX_USERNAME='u',
            WESTFAX_PASSWORD='p',
        )

        self.assertIsInstance(service, WestFaxService)
        self.assertIsInstance(service.config, WestFaxConfig)
        self.assertEqual(service.config.username, 'u')

    def test_provider_defaults_to_westfax(self):
        service = fax_service_factory.get(WESTFAX_USERNAME='u')

        self.assertIsInstance(service, WestFaxService)

    def test_each_get_returns_a_new_service(self):
        first = fax_service_factory.get(WESTFAX_PRODUCT_ID='one')
        second = fax_service_factory.get(WESTFAX_PRODUCT_ID='two')

        self.assertIsNot(first, second)
        self.assertEqual(first.config.product_id, 'one')
        self.assertEqual(second.config.product_id, 'two')

    def test_unregistered_provider_raises_value_error(self):
        factory = FaxServiceFactory()

        with self.assertRaises(ValueError) as context:
            factory.get(FAX_PROVIDER='westfax')

        self.assertIn('westfax', str(context.exception))

    def test_unknown_provider_fails_validation(self):
        with self.assertRaises(ValidationError):
            fax_service_factory.get(FAX_PROVIDER='ifax')


if __name__ == '__main__':
    unittest.main()
