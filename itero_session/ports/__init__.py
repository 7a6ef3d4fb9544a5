"""
Ports - Interfaces for storage, credential persistence and login.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from itero_session.ports.storage_port import StoragePort
from itero_session.ports.credential_store_port import CredentialStorePort
from itero_session.ports.login_port import LoginExchangePort

__all__ = [
    "StoragePort",
    "CredentialStorePort",
    "LoginExchangePort",
]
