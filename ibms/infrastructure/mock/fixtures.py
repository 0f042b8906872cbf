"""Static demo fixtures — the seed content of every tenant's mock store.

Each call returns fresh objects, so tenants never share mutable records.
"""

from typing import Any

DEMO_USER = {
    "id": "1",
    "username": "demo",
    "email": "demo@easy2work.in",
    "firstName": "Demo",
    "lastName": "User",
    "role": "admin",
}


def _clients() -> list[dict[str, Any]]:
    return [
        {"id": "1", "entryDate": "2024-01-15", "entryUser": "admin", "clientName": "Acme Corporation",
         "clientContact": "9876543210", "clientEmail": "contact@acme.com", "address": "12 MG Road, Bengaluru",
         "gst": "29ABCDE1234F1Z5", "pan": "ABCDE1234F", "source": "Referral", "consultantId": 1,
         "status": "active"},
        {"id": "2", "entryDate": "2024-02-20", "entryUser": "admin", "clientName": "TechStart Inc",
         "clientContact": "9123456780", "clientEmail": "hello@techstart.com", "address": "4 Park Street, Kolkata",
         "gst": "19FGHIJ5678K1Z2", "pan": "FGHIJ5678K", "source": "Website", "consultantId": 2,
         "status": "active"},
        {"id": "3", "entryDate": "2024-03-10", "entryUser": "admin", "clientName": "Global Solutions Ltd",
         "clientContact": "9988776655", "clientEmail": "info@globalsolutions.com", "address": "88 Anna Salai, Chennai",
         "gst": "", "pan": "KLMNO9012P", "source": "Walk-in", "consultantId": 1,
         "status": "inactive"},
        {"id": "4", "entryDate": "2024-04-05", "entryUser": "manager", "clientName": "Digital Agency Pro",
         "clientContact": "8877665544", "clientEmail": "team@digitalagency.com", "address": "7 FC Road, Pune",
         "gst": "27QRSTU3456V1Z8", "pan": "QRSTU3456V", "source": "Referral", "consultantId": 3,
         "status": "active"},
        {"id": "5", "entryDate": "2024-05-12", "entryUser": "manager", "clientName": "Innovation Labs",
         "clientContact": "7766554433", "clientEmail": "contact@innovationlabs.com", "address": "3 Sector 18, Noida",
         "gst": "", "pan": "", "source": "Campaign", "consultantId": 2,
         "status": "inactive"},
    ]


def _order(number: str, client_id: str, client_name: str, status: str, net: float, paid: float,
           entry_date: str, items: list[dict[str, Any]]) -> dict[str, Any]:
    gst = round(net - net / 1.18, 2)
    return {
        "orderNumber": number, "entryDate": entry_date, "entryUser": "admin", "clientId": client_id,
        "clientName": client_name, "status": status, "totalAmount": round(net - gst, 2), "gstAmount": gst,
        "netAmount": net, "paidAmount": paid, "balanceAmount": round(net - paid, 2), "discount": 0,
        "paymentStatus": "paid" if paid >= net else ("partial" if paid > 0 else "unpaid"),
        "orderType": "advertisement", "items": items,
    }


def _orders() -> list[dict[str, Any]]:
    item = {"id": "1", "adMedium": "Newspaper", "adType": "Display", "adCategory": "Classified",
            "quantity": 1, "width": 10, "units": "sqcm", "ratePerUnit": 1000, "amountWithoutGst": 1000,
            "amount": 1180, "gstAmount": 180, "gstPercentage": "18", "discountAmount": 0}
    return [
        _order("ORD-2024-001", "1", "Acme Corporation", "processing", 17700.0, 5000.0, "2024-06-01", [item]),
        _order("ORD-2024-002", "2", "TechStart Inc", "completed", 10030.0, 10030.0, "2024-06-15", [item]),
        _order("ORD-2024-003", "1", "Acme Corporation", "pending", 3776.0, 0.0, "2024-07-02", [item]),
        _order("ORD-2024-004", "3", "Global Solutions Ltd", "processing", 6844.0, 2000.0, "2024-07-20", [item]),
        _order("ORD-2024-005", "4", "Digital Agency Pro", "cancelled", 25960.0, 0.0, "2024-08-05", [item]),
    ]


def _transactions() -> list[dict[str, Any]]:
    return [
        {"id": "1", "entryDate": "2024-06-02", "entryUser": "admin", "billNumber": "INC-001", "billDate": "2024-06-02",
         "type": "income", "amount": 5000.0, "amountExcludingGST": 4237.29, "gstAmount": 762.71,
         "orderNumber": "ORD-2024-001", "status": "active", "category": "Sales"},
        {"id": "2", "entryDate": "2024-06-16", "entryUser": "admin", "billNumber": "INC-002", "billDate": "2024-06-16",
         "type": "income", "amount": 10030.0, "amountExcludingGST": 8500.0, "gstAmount": 1530.0,
         "orderNumber": "ORD-2024-002", "status": "active", "category": "Sales"},
        {"id": "3", "entryDate": "2024-06-30", "entryUser": "admin", "billNumber": "EXP-001", "billDate": "2024-06-30",
         "type": "expense", "amount": 3540.0, "amountExcludingGST": 3000.0, "gstAmount": 540.0,
         "orderNumber": "", "status": "active", "category": "Rent"},
    ]


def _invoices() -> list[dict[str, Any]]:
    return [
        {"id": "1", "orderNumber": "ORD-2024-002", "clientId": "2", "amount": 10030.0, "status": "paid",
         "dueDate": "2024-06-30", "createdAt": "2024-06-15"},
        {"id": "2", "orderNumber": "ORD-2024-001", "clientId": "1", "amount": 17700.0, "status": "pending",
         "dueDate": "2024-07-01", "createdAt": "2024-06-01"},
        {"id": "3", "orderNumber": "ORD-2024-004", "clientId": "3", "amount": 6844.0, "status": "overdue",
         "dueDate": "2024-08-20", "createdAt": "2024-07-20"},
    ]


def _leads() -> list[dict[str, Any]]:
    def lead(n: int, prospect: str, status: str, priority: str, score: int, probability: int) -> dict[str, Any]:
        return {
            "id": str(n), "leadId": f"LD-{n:04d}", "entryDate": "2024-07-01", "prospect": prospect,
            "contactPerson": "Primary Contact", "contactNumber": "9000000000", "email": f"lead{n}@example.com",
            "address": "", "source": "Website", "consultant": "Priya Sharma", "status": status,
            "priority": priority, "followupDate": None, "followupTime": None, "quoteSent": False,
            "territory": "South", "leadScore": score, "lastActivity": "2024-07-01", "notes": "",
            "conversionProbability": probability,
        }

    return [
        lead(1, "Sunrise Traders", "new", "high", 80, 60),
        lead(2, "Metro Builders", "call_followup", "medium", 65, 40),
        lead(3, "Blue Ocean Foods", "unreachable", "low", 30, 10),
        lead(4, "Zenith Motors", "ready_for_quote", "high", 90, 75),
    ]


def _employees() -> list[dict[str, Any]]:
    def employee(n: int, first: str, last: str, designation: str, department: str, role: str,
                 status: str, rating: float) -> dict[str, Any]:
        return {
            "id": str(n), "employeeId": f"EMP-{n:03d}", "firstName": first, "lastName": last,
            "email": f"{first.lower()}@easy2work.in", "phone": "9811111111", "designation": designation,
            "department": department, "joiningDate": "2023-04-01", "status": status, "role": role,
            "salary": 50000, "address": "", "skills": [],
            "performance": {"rating": rating, "reviewDate": "2024-03-31", "goals": 10, "achievements": 8},
            "attendance": {"present": 20, "absent": 1, "late": 1, "total": 22},
            "permissions": [], "createdAt": "2023-04-01", "lastActive": "2024-08-01",
        }

    return [
        employee(1, "John", "Smith", "Manager", "Operations", "manager", "active", 4.5),
        employee(2, "Sarah", "Johnson", "Consultant", "Sales", "consultant", "active", 4.2),
        employee(3, "Mike", "Davis", "Executive", "Marketing", "executive", "on_leave", 3.8),
    ]


def _consultants() -> list[dict[str, Any]]:
    def consultant(n: int, name: str, specialization: str, rate: float, status: str, rating: float) -> dict[str, Any]:
        return {
            "id": str(n), "name": name, "email": f"{name.split()[0].lower()}@consult.in", "phone": "9822222222",
            "specialization": specialization, "hourly_rate": rate, "experience_years": 5 + n, "status": status,
            "skills": [{"id": 1, "name": specialization, "proficiency_level": "advanced"}],
            "availability": [{"day_of_week": d, "start_time": "09:00", "end_time": "18:00", "is_available": True}
                             for d in range(1, 6)],
            "recent_projects": [], "avg_rating": rating, "total_reviews": 10 * n, "active_projects": n % 2,
            "completed_projects": 3 * n, "created_at": "2023-01-10",
        }

    return [
        consultant(1, "Priya Sharma", "Marketing", 1500.0, "active", 4.7),
        consultant(2, "Arjun Mehta", "Finance", 2000.0, "busy", 4.4),
        consultant(3, "Neha Rao", "Design", 1200.0, "inactive", 4.1),
    ]


def _documents() -> list[dict[str, Any]]:
    return [
        {"id": "1", "name": "Acme contract.pdf", "type": "contract", "category": "legal", "file_size": 245_760,
         "mime_type": "application/pdf", "template_id": None, "created_by": "admin", "created_at": "2024-06-01",
         "shares": [], "versions": [{"version": 1, "created_at": "2024-06-01"}]},
        {"id": "2", "name": "June invoice.pdf", "type": "invoice", "category": "finance", "file_size": 102_400,
         "mime_type": "application/pdf", "template_id": "2", "created_by": "admin", "created_at": "2024-06-30",
         "shares": [], "versions": [{"version": 1, "created_at": "2024-06-30"}]},
    ]


def _document_templates() -> list[dict[str, Any]]:
    return [
        {"id": "1", "name": "Monthly Report", "type": "report", "category": "finance",
         "variables": ["month", "year", "revenue", "orders"], "is_active": True},
        {"id": "2", "name": "Invoice", "type": "invoice", "category": "finance",
         "variables": ["invoice_number", "client_name", "amount"], "is_active": True},
    ]


def _notifications() -> list[dict[str, Any]]:
    return [
        {"id": "1", "type": "order", "title": "New Order Received",
         "message": "Order #ORD-2024-003 from Acme Corporation requires attention", "status": "unread",
         "priority": "high", "channel": "email", "timestamp": "2024-08-01T09:30:00Z", "client": "Acme Corporation",
         "actions": ["View Order", "Mark as Read"]},
        {"id": "2", "type": "payment", "title": "Payment Reminder",
         "message": "Invoice for ORD-2024-001 is due tomorrow", "status": "read", "priority": "medium",
         "channel": "whatsapp", "timestamp": "2024-08-01T08:00:00Z", "client": "Acme Corporation",
         "actions": ["Send Reminder"]},
        {"id": "3", "type": "system", "title": "Backup Completed", "message": "Nightly backup finished",
         "status": "unread", "priority": "low", "channel": "in-app", "timestamp": "2024-07-31T23:00:00Z",
         "actions": []},
    ]


def _templates() -> list[dict[str, Any]]:
    return [
        {"id": "1", "name": "Order Confirmation", "type": "order", "channels": ["email", "whatsapp"],
         "variables": ["order_number", "client_name", "total_amount"],
         "content": "Dear {client_name}, your order {order_number} has been confirmed.", "isActive": True},
        {"id": "2", "name": "Payment Reminder", "type": "payment", "channels": ["sms"],
         "variables": ["client_name", "amount"],
         "content": "Dear {client_name}, a payment of {amount} is due.", "isActive": True},
    ]


def _channels() -> list[dict[str, Any]]:
    return [
        {"id": "email", "name": "Email", "type": "email", "enabled": True, "status": "connected",
         "config": {"host": "smtp.example.com"}, "stats": {"sent": 120, "delivered": 117, "failed": 3}},
        {"id": "whatsapp", "name": "WhatsApp", "type": "whatsapp", "enabled": True, "status": "connected",
         "config": {}, "stats": {"sent": 80, "delivered": 79, "failed": 1}},
        {"id": "sms", "name": "SMS", "type": "sms", "enabled": False, "status": "disconnected",
         "config": {}, "stats": {"sent": 0, "delivered": 0, "failed": 0}},
    ]


def _messages() -> list[dict[str, Any]]:
    return [
        {"id": "1", "channel": "email", "recipient": "contact@acme.com", "subject": "Order confirmed",
         "message": "Your order ORD-2024-001 is confirmed.", "status": "delivered", "sent_at": "2024-06-01T10:00:00Z"},
        {"id": "2", "channel": "whatsapp", "recipient": "9876543210", "subject": "",
         "message": "Payment received, thank you!", "status": "delivered", "sent_at": "2024-06-02T11:00:00Z"},
        {"id": "3", "channel": "email", "recipient": "info@globalsolutions.com", "subject": "Invoice overdue",
         "message": "Your invoice is overdue.", "status": "failed", "sent_at": "2024-08-21T09:00:00Z"},
    ]


def _audit_logs() -> list[dict[str, Any]]:
    return [
        {"id": "1", "userId": 1, "userName": "John Doe", "action": "LOGIN", "resource": "Authentication",
         "details": "User login successful", "ipAddress": "192.168.1.100", "userAgent": "Mozilla/5.0",
         "timestamp": "2024-08-01T09:00:00Z", "severity": "low", "status": "success"},
        {"id": "2", "userId": 2, "userName": "Jane Smith", "action": "DELETE", "resource": "Client",
         "details": "Client record deleted", "ipAddress": "192.168.1.101", "userAgent": "Mozilla/5.0",
         "timestamp": "2024-08-01T10:15:00Z", "severity": "high", "status": "success"},
        {"id": "3", "userId": 0, "userName": "unknown", "action": "LOGIN", "resource": "Authentication",
         "details": "Invalid password", "ipAddress": "10.0.0.5", "userAgent": "curl/8.0",
         "timestamp": "2024-08-01T11:30:00Z", "severity": "medium", "status": "failed"},
    ]


def _security_alerts() -> list[dict[str, Any]]:
    return [
        {"id": "1", "type": "login_failure", "title": "Multiple failed logins",
         "description": "5 failed attempts from 10.0.0.5", "severity": "high", "status": "open",
         "timestamp": "2024-08-01T11:35:00Z"},
        {"id": "2", "type": "permission_change", "title": "Role changed", "description": "User promoted to admin",
         "severity": "medium", "status": "resolved", "timestamp": "2024-07-28T15:00:00Z"},
    ]


def _compliance_reports() -> list[dict[str, Any]]:
    return [
        {"id": "1", "name": "GDPR Compliance", "type": "gdpr", "status": "compliant",
         "lastCheck": "2024-07-01T00:00:00Z", "score": 92, "issues": 1},
        {"id": "2", "name": "Data Retention", "type": "data_retention", "status": "needs_attention",
         "lastCheck": "2024-07-01T00:00:00Z", "score": 78, "issues": 3},
        {"id": "3", "name": "Access Control", "type": "access_control", "status": "compliant",
         "lastCheck": "2024-07-01T00:00:00Z", "score": 95, "issues": 0},
    ]


def seed_collections() -> dict[str, list[dict[str, Any]]]:
    """Fresh list-shaped fixtures, keyed by store collection name."""
    return {
        "clients": _clients(),
        "orders": _orders(),
        "transactions": _transactions(),
        "invoices": _invoices(),
        "leads": _leads(),
        "lead_activities": [],
        "employees": _employees(),
        "consultants": _consultants(),
        "documents": _documents(),
        "document_templates": _document_templates(),
        "notifications": _notifications(),
        "notification_templates": _templates(),
        "communication_templates": _templates(),
        "channels": _channels(),
        "messages": _messages(),
        "audit_logs": _audit_logs(),
        "security_alerts": _security_alerts(),
        "compliance_reports": _compliance_reports(),
    }


def seed_singletons() -> dict[str, Any]:
    """Fresh single-object fixtures."""
    return {
        "notification_settings": {
            "emailNotifications": True,
            "whatsappNotifications": True,
            "smsNotifications": False,
            "inAppNotifications": True,
            "dailyDigest": False,
            "instantNotifications": "important",
            "quietHours": {"enabled": False, "start": "22:00", "end": "07:00"},
            "channels": {"email": True, "whatsapp": True, "sms": False},
        },
        "encryption_status": {
            "database_encryption": {"enabled": True, "algorithm": "AES-256", "status": "active"},
            "api_communication": {"enabled": True, "protocol": "TLS 1.3", "status": "active"},
            "file_storage": {"enabled": True, "algorithm": "AES-256", "status": "active"},
            "backup_encryption": {"enabled": True, "algorithm": "AES-256", "status": "active"},
            "access_control": {"mfa_enabled": True, "session_timeout": 30, "password_policy": "strong",
                               "ip_restrictions": "partial"},
        },
        "departments": ["Sales", "Operations", "Human Resources", "Finance", "Marketing", "IT"],
        "designations": ["Manager", "Senior Consultant", "Consultant", "Executive", "Trainee", "Assistant"],
    }
