from .client import Client, SubAccount
from .quota_config import ClientQuotaConfig, SubAccountQuotaConfig
from .time_entry import TimeEntry

__all__ = [
    "Client",
    "SubAccount",
    "ClientQuotaConfig",
    "SubAccountQuotaConfig",
    "TimeEntry",
]
