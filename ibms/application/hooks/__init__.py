from .analytics import AnalyticsHooks
from .auth import AuthHooks
from .base import HookBase, HookContext, ResourceApi, ResourceHooks, unwrap, unwrap_page
from .clients import ClientHooks
from .communications import CommunicationHooks
from .consultants import ConsultantHooks
from .dashboard import DashboardHooks
from .documents import DocumentHooks
from .employees import EmployeeHooks
from .finance import FinanceHooks
from .leads import LeadHooks
from .notifications import NotificationHooks
from .orders import OrderHooks
from .security import SecurityHooks

__all__ = [
    "AnalyticsHooks",
    "AuthHooks",
    "ClientHooks",
    "CommunicationHooks",
    "ConsultantHooks",
    "DashboardHooks",
    "DocumentHooks",
    "EmployeeHooks",
    "FinanceHooks",
    "HookBase",
    "HookContext",
    "LeadHooks",
    "NotificationHooks",
    "OrderHooks",
    "ResourceApi",
    "ResourceHooks",
    "SecurityHooks",
    "unwrap",
    "unwrap_page",
]
