import dataclasses
import logging
import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Tuple

import requests

from .base import FaxService
from .config import WestFaxConfig
from .enums import DEFAULT_FILENAME, MAX_RECIPIENTS, DocumentFormat, Endpoint, FaxFilter
from .form import FaxForm, numbered_fields, serialize_fax_id, serialize_fax_ids
from .models import FaxIds, FileSource, ProductIdLookup, SendFaxRequest


logger = logging.getLogger(__name__)


class WestFaxService(FaxService):
    config: WestFaxConfig

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session

    def __call__(self, config: WestFaxConfig, *args, **kwargs):
        super().__call__(config)
        return self

    def with_product_id(self, product_id: str) -> 'WestFaxService':
        """Returns a new service bound to ``product_id``; this one is left untouched."""
        return WestFaxService(session=self.session)(self.config.with_product_id(product_id))

    def endpoint_url(self, endpoint: Endpoint) -> str:
        return f'{self.config.base_url}/REST/{endpoint}/{self.config.response_encoding}'

    def send_fax(self, request: Optional[SendFaxRequest] = None, **options) -> Any:
        """
        Sends a fax to one or more numbers.

        Accepts either a ``SendFaxRequest`` or its fields as keyword arguments;
        keyword arguments override the fields of a given request.
        """
        if request is None:
            request = SendFaxRequest(**options)
        elif options:
            request = dataclasses.replace(request, **options)

        numbers = numbered_fields('Numbers', request.numbers) if request.numbers else {}
        if len(numbers) > MAX_RECIPIENTS:
            logger.warning('Fax job has %d recipients; WestFax accepts at most %d.',
                           len(numbers), MAX_RECIPIENTS)

        form = self._auth_form()
        form.add_fields(self._present({
            'JobName': request.job_name,
            'Header': request.header,
            'BillingCode': request.billing_code,
        }))
        form.add_fields(numbers)

        with self._open_file(request.file, request.filename) as (filename, content):
            if content is not None:
                form.add_file('Files0', filename, content)
            form.add_fields(self._present({
                'CSID': request.csid,
                'ANI': request.ani,
                'StartDate': request.start_date,
                'FaxQuality': request.fax_quality,
                'FeedbackEmail': request.feedback_email,
                'CallbackUrl': request.callback_url,
            }))
            response = self._send_request(
                Endpoint.SEND_FAX, form, headers={'ContentType': 'multipart/form-data'}
            )

        logger.info('Fax job "%s" submitted. Success: %s', request.job_name or filename,
                    response.get('Success') if isinstance(response, dict) else None)
        return response

    def get_fax_documents(self, fax_ids: FaxIds, format: str = DocumentFormat.PDF) -> Any:
        form = self._auth_form()
        form.add_field('Format', format)
        form.add_fields(self._numbered_fax_ids(fax_ids))
        return self._send_request(Endpoint.GET_FAX_DOCUMENTS, form)

    def change_fax_filter_value(self, fax_ids: FaxIds, filter: str = FaxFilter.NONE) -> Any:
        form = self._auth_form()
        form.add_field('Filter', filter)
        form.add_fields(self._numbered_fax_ids(fax_ids))
        return self._send_request(Endpoint.CHANGE_FAX_FILTER_VALUE, form)

    def get_fax_descriptions_using_ids(self, fax_ids: FaxIds) -> Any:
        # WestFax expects every id in one FaxIds field here, unlike the other fax calls
        form = self._auth_form()
        form.add_field('FaxIds', serialize_fax_ids(fax_ids))
        return self._send_request(Endpoint.GET_FAX_DESCRIPTIONS_USING_IDS, form)

    def get_products_with_inbound_faxes(self, filter: str = FaxFilter.NONE) -> Any:
        form = self._auth_form(cookies=False, product_id=False)
        form.add_field('Filter', filter)
        return self._send_request(Endpoint.GET_PRODUCTS_WITH_INBOUND_FAXES, form)

    def get_f2e_product_list(self) -> Any:
        return self._send_request(Endpoint.GET_F2E_PRODUCT_LIST, self._auth_form(product_id=False))

    def get_product_list(self) -> Any:
        return self._send_request(Endpoint.GET_PRODUCT_LIST, self._auth_form(product_id=False))

    def get_product_id(self) -> Optional[str]:
        return self.find_product_id().product_id

    def find_product_id(self) -> ProductIdLookup:
        """
        Looks up the first product of the account.

        The full product list is tried first, then the fax-to-email list.
        Failures of either call are logged and recorded on the result, never raised.
        """
        lookup = ProductIdLookup()

        for fetch in (self.get_product_list, self.get_f2e_product_list):
            try:
                product_id = self._first_product_id(fetch())
            except Exception as e:
                logger.exception('Error retrieving ProductId: %s', e)
                lookup.errors.append(e)
                continue

            if product_id:
                lookup.product_id = product_id
                break

        return lookup

    @staticmethod
    def _first_product_id(response: Any) -> Optional[str]:
        if not isinstance(response, dict) or not response.get('Success'):
            return None
        products = response.get('Result')
        if not products:
            return None
        return products[0].get('Id')

    @staticmethod
    def _present(fields: Dict[str, Any]) -> Dict[str, Any]:
        return {name: value for name, value in fields.items() if value}

    @staticmethod
    def _numbered_fax_ids(fax_ids: FaxIds) -> Dict[str, str]:
        fields = numbered_fields('FaxIds', fax_ids)
        return {name: serialize_fax_id(fax_id) for name, fax_id in fields.items()}

    def _auth_form(self, cookies: bool = True, product_id: bool = True) -> FaxForm:
        form = FaxForm()
        form.add_field('Username', self.config.username)
        form.add_field('Password', self.config.password)
        if cookies:
            form.add_field('Cookies', self.config.cookies)
        if product_id:
            form.add_field('ProductId', self.config.product_id)
        return form

    @contextmanager
    def _open_file(self, source: FileSource, filename: Optional[str]) -> Iterator[Tuple[str, Any]]:
        if source is None:
            yield None, None
        elif isinstance(source, (str, os.PathLike)):
            with open(source, 'rb') as file:
                yield filename or os.path.basename(os.fspath(source)), file
        elif isinstance(source, (bytes, bytearray)):
            yield filename or DEFAULT_FILENAME, bytes(source)
        elif hasattr(source, 'read'):
            yield filename or DEFAULT_FILENAME, source
        else:
            raise TypeError(f'File must be a path, bytes or a binary stream, got {type(source)}')

    def _send_request(self, endpoint: Endpoint, form: FaxForm, headers: Optional[Dict] = None) -> Any:
        url = self.endpoint_url(endpoint)
        logger.debug('POST %s fields=%s', url, [name for name in form.names if name != 'Password'])

        transport = self.session if self.session is not None else requests
        response = transport.post(url, files=form.as_files(), headers=headers, timeout=self.config.timeout)
        response.raise_for_status()
        try:
            return response.json()
        except requests.JSONDecodeError:
            logger.warning('Non-JSON response from %s, returning body as text.', url)
            return response.text
