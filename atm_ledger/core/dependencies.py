from functools import lru_cache
from ..services import AccountRegistry

@lru_cache()
def get_account_registry() -> AccountRegistry:
    return AccountRegistry()
