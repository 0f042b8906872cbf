from .client import Client, ClientCreate, ClientUpdate
from .common import CamelModel, ListFilters, to_payload
from .consultant import AvailabilitySlot, ConsultantCreate, ConsultantUpdate, ProjectAssignment
from .document import DocumentCreate, DocumentShare, DocumentTemplateCreate, PdfGenerateRequest
from .employee import EmployeeCreate, EmployeeUpdate, PerformanceUpdate
from .finance import TransactionCreate, TransactionUpdate
from .lead import LeadActivityCreate, LeadCreate, LeadFollowup, LeadUpdate
from .notification import MessageSend, NotificationSend, TemplateCreate
from .order import OrderCreate, OrderItemCreate, OrderStatusUpdate, OrderUpdate, PaymentCreate
from .security import AlertStatusUpdate, AuditLogCreate, SecurityExportRequest

__all__ = [
    "AlertStatusUpdate",
    "AuditLogCreate",
    "AvailabilitySlot",
    "CamelModel",
    "Client",
    "ClientCreate",
    "ClientUpdate",
    "ConsultantCreate",
    "ConsultantUpdate",
    "DocumentCreate",
    "DocumentShare",
    "DocumentTemplateCreate",
    "EmployeeCreate",
    "EmployeeUpdate",
    "LeadActivityCreate",
    "LeadCreate",
    "LeadFollowup",
    "LeadUpdate",
    "ListFilters",
    "MessageSend",
    "NotificationSend",
    "OrderCreate",
    "OrderItemCreate",
    "OrderStatusUpdate",
    "OrderUpdate",
    "PaymentCreate",
    "PdfGenerateRequest",
    "ProjectAssignment",
    "SecurityExportRequest",
    "TemplateCreate",
    "TransactionCreate",
    "TransactionUpdate",
    "to_payload",
]
