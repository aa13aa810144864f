from enum import Enum


DEFAULT_BASE_URL = 'https://apisecure.westfax.com'
DEFAULT_FILENAME = 'document.pdf'
MAX_RECIPIENTS = 20


class FaxProvider(str, Enum):
    westfax = 'westfax'

    def __str__(self):
        return str(self.value)


class ResponseEncoding(str, Enum):
    JSON = 'JSON'

    def __str__(self):
        return str(self.value)


class Endpoint(str, Enum):
    SEND_FAX = 'Fax_SendFax'
    GET_FAX_DOCUMENTS = 'Fax_GetFaxDocuments'
    CHANGE_FAX_FILTER_VALUE = 'Fax_ChangeFaxFilterValue'
    GET_FAX_DESCRIPTIONS_USING_IDS = 'Fax_GetFaxDescriptionsUsingIds'
    GET_PRODUCTS_WITH_INBOUND_FAXES = 'Fax_GetProductsWithInboundFaxes'
    GET_F2E_PRODUCT_LIST = 'Profile_GetF2EProductList'
    GET_PRODUCT_LIST = 'Profile_GetProductList'

    def __str__(self):
        return str(self.value)


class FaxDirection(str, Enum):
    INBOUND = 'Inbound'
    OUTBOUND = 'Outbound'

    def __str__(self):
        return str(self.value)


class FaxFilter(str, Enum):
    NONE = 'None'
    RETRIEVED = 'Retrieved'
    REMOVED = 'Removed'

    def __str__(self):
        return str(self.value)


class FaxQuality(str, Enum):
    FINE = 'Fine'
    NORMAL = 'Normal'

    def __str__(self):
        return str(self.value)


class DocumentFormat(str, Enum):
    PDF = 'pdf'
    TIFF = 'tiff'
    JPEG = 'jpeg'
    PNG = 'png'
    GIF = 'gif'

    def __str__(self):
        return str(self.value)
