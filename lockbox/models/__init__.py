from . import user, vault, item, folder
from .user import User
from .vault import Vault
from .item import Item
from .folder import Folder, ItemFolder

__all__ = [
    "user",
    "vault",
    "item",
    "folder",
    "User",
    "Vault",
    "Item",
    "Folder",
    "ItemFolder",
]
