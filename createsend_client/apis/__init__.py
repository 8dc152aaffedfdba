from .account_api import AccountApi
from .transactional_api import TransactionalBasicEmailApi

__all__ = ["AccountApi", "TransactionalBasicEmailApi"]
