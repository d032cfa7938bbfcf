from clients.admins_client_sdk.admins_client import AdminsClient
from clients.admins_client_sdk.config import SDKConfig
from clients.admins_client_sdk.errors import RequestError
from clients.admins_client_sdk.http_client import HttpClient
from clients.admins_client_sdk.models import AdminRecord, AdminRole

__all__ = [
    "SDKConfig",
    "RequestError",
    "HttpClient",
    "AdminsClient",
    "AdminRecord",
    "AdminRole",
]
