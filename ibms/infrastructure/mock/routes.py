"""Route table of the demo backend — one section per dashboard module."""

import time
from collections import Counter
from typing import Any

from ibms.domain.calculations import calculate_gst
from ibms.domain.entities import ApiResponse
from ibms.infrastructure.mock.backend import (
    Collection,
    MockRequest,
    MockRouter,
    MockValidationError,
    filter_records,
    list_response,
    register_collection,
    utc_now_iso,
)
from ibms.infrastructure.mock.fixtures import DEMO_USER

CLIENTS = Collection(
    "clients", "/clients", "Client",
    search_fields=("clientName", "clientEmail", "clientContact"),
    create_defaults={"status": "active", "entryUser": "admin"},
)
ORDERS = Collection(
    "orders", "/orders", "Order", id_field="orderNumber", id_prefix="ORD-2024-",
    search_fields=("orderNumber", "clientName"), filter_fields=("status", "paymentStatus", "clientId"),
)
TRANSACTIONS = Collection(
    "transactions", "/finance/transactions", "Transaction",
    search_fields=("billNumber", "orderNumber"), filter_fields=("status", "type", "category"),
    create_defaults={"status": "active"},
)
INVOICES = Collection("invoices", "/finance/invoices", "Invoice", filter_fields=("status", "clientId"))
LEADS = Collection(
    "leads", "/leads", "Lead",
    search_fields=("prospect", "contactPerson", "email", "leadId"),
    filter_fields=("status", "source", "consultant", "priority", "territory"),
    create_defaults={"status": "new", "priority": "medium", "quoteSent": False, "leadScore": 0,
                     "conversionProbability": 0},
)
EMPLOYEES = Collection(
    "employees", "/employees", "Employee",
    search_fields=("firstName", "lastName", "email", "employeeId"), filter_fields=("status", "department", "role"),
    create_defaults={"status": "active", "skills": [], "permissions": []},
)
CONSULTANTS = Collection(
    "consultants", "/consultants", "Consultant",
    search_fields=("name", "email", "specialization"), filter_fields=("status", "specialization"),
    create_defaults={"status": "active", "skills": [], "availability": [], "recent_projects": []},
)
DOCUMENTS = Collection(
    "documents", "/documents", "Document",
    search_fields=("name",), filter_fields=("type", "category", "template_id"),
    create_defaults={"shares": [], "versions": []},
)
DOCUMENT_TEMPLATES = Collection(
    "document_templates", "/documents/templates", "Template",
    search_fields=("name",), filter_fields=("type", "category"),
)
NOTIFICATIONS = Collection(
    "notifications", "/notifications", "Notification",
    search_fields=("title", "message"), filter_fields=("status", "type", "priority", "channel"),
)
NOTIFICATION_TEMPLATES = Collection(
    "notification_templates", "/notifications/templates", "Template",
    search_fields=("name",), filter_fields=("type",), create_defaults={"isActive": True},
)
COMMUNICATION_TEMPLATES = Collection(
    "communication_templates", "/communications/templates", "Template",
    search_fields=("name",), filter_fields=("type",), create_defaults={"isActive": True},
)
MESSAGES = Collection(
    "messages", "/communications/messages", "Message",
    search_fields=("recipient", "subject", "message"), filter_fields=("channel", "status"),
)
CHANNELS = Collection("channels", "/communications/channels", "Channel", filter_fields=("type",))
AUDIT_LOGS = Collection(
    "audit_logs", "/security/audit-logs", "Audit log",
    search_fields=("userName", "action", "resource", "details"), filter_fields=("severity", "status"),
)
SECURITY_ALERTS = Collection(
    "security_alerts", "/security/alerts", "Alert", filter_fields=("severity", "status", "type"),
)
COMPLIANCE_REPORTS = Collection("compliance_reports", "/security/compliance-reports", "Report")


def _sum(records: list[dict[str, Any]], key: str) -> float:
    return round(sum(float(r.get(key) or 0) for r in records), 2)


def _require(body: dict[str, Any], *names: str) -> None:
    missing = [n for n in names if body.get(n) in (None, "")]
    if missing:
        raise MockValidationError(f"Missing required field(s): {', '.join(missing)}")


# ── Auth ─────────────────────────────────────────────────────────────

def _login(request: MockRequest) -> ApiResponse:
    body = request.json
    _require(body, "email", "password")
    user = {**DEMO_USER, "email": body["email"], "tenant": body.get("tenant") or request.store.tenant}
    return ApiResponse.ok(
        {"user": user, "token": f"demo-jwt-token-{int(time.time() * 1000)}", "expiresIn": 86400},
        message="Login successful",
    )


def _logout(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok({"message": "Logged out successfully"})


def _current_user(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok({**DEMO_USER, "tenant": request.store.tenant})


def _refresh(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok({"token": f"demo-jwt-token-{int(time.time() * 1000)}", "expiresIn": 86400})


# ── Clients ──────────────────────────────────────────────────────────

def _client_search(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok(filter_records(request.store.records("clients"), CLIENTS, request))


# ── Orders ───────────────────────────────────────────────────────────

def _price_items(items: list[dict[str, Any]]) -> tuple[list[dict[str, Any]], float, float]:
    priced, subtotal, gst_total = [], 0.0, 0.0
    for index, item in enumerate(items, start=1):
        base = float(item.get("quantity") or 0) * float(item.get("ratePerUnit") or 0) - float(item.get("discountAmount") or 0)
        gst = calculate_gst(base, float(item.get("gstPercentage") or 0))
        priced.append({**item, "id": str(item.get("id") or index), "amountWithoutGst": round(base, 2),
                       "gstAmount": gst, "amount": round(base + gst, 2)})
        subtotal += base
        gst_total += gst
    return priced, round(subtotal, 2), round(gst_total, 2)


def _payment_status(paid: float, net: float) -> str:
    if paid <= 0:
        return "unpaid"
    return "paid" if paid >= net else "partial"


def _create_order(request: MockRequest) -> ApiResponse:
    body = request.json
    _require(body, "clientId")
    items, subtotal, gst = _price_items(body.get("items") or [])
    discount = float(body.get("discount") or 0)
    net = round(subtotal + gst - discount, 2)
    client = next((c for c in request.store.records("clients") if str(c["id"]) == str(body["clientId"])), {})
    order = {
        "status": "pending", "orderType": "advertisement", **body,
        "orderNumber": request.store.next_id(ORDERS), "entryDate": utc_now_iso()[:10], "entryUser": "admin",
        "clientName": client.get("clientName", ""), "clientContact": client.get("clientContact", ""),
        "clientEmail": client.get("clientEmail", ""), "items": items, "totalAmount": subtotal,
        "gstAmount": gst, "netAmount": net, "paidAmount": 0.0, "balanceAmount": net, "discount": discount,
        "paymentStatus": "unpaid",
    }
    request.store.records("orders").append(order)
    return ApiResponse.ok(order, message="Order created successfully", status_code=201)


def _order_status(request: MockRequest) -> ApiResponse:
    _require(request.json, "status")
    order = request.store.find(ORDERS, request.path_params["entity_id"])
    order["status"] = request.json["status"]
    order["updatedAt"] = utc_now_iso()
    return ApiResponse.ok(order, message="Order status updated")


def _order_payment(request: MockRequest) -> ApiResponse:
    body = request.json
    _require(body, "amount")
    order = request.store.find(ORDERS, request.path_params["entity_id"])
    amount = float(body["amount"])
    if amount <= 0:
        raise MockValidationError("Payment amount must be positive")
    order["paidAmount"] = round(float(order.get("paidAmount") or 0) + amount, 2)
    order["balanceAmount"] = round(float(order.get("netAmount") or 0) - order["paidAmount"], 2)
    order["paymentStatus"] = _payment_status(order["paidAmount"], float(order.get("netAmount") or 0))
    request.store.records("transactions").append({
        "id": request.store.next_id(TRANSACTIONS), "entryDate": utc_now_iso()[:10], "entryUser": "admin",
        "billNumber": f"PAY-{order['orderNumber']}", "billDate": utc_now_iso()[:10], "type": "income",
        "amount": amount, "amountExcludingGST": round(amount / 1.18, 2), "gstAmount": round(amount - amount / 1.18, 2),
        "orderNumber": order["orderNumber"], "status": "active", "category": body.get("method", "Sales"),
    })
    return ApiResponse.ok(order, message="Payment added")


# ── Leads ────────────────────────────────────────────────────────────

def _lead_patch(field_names: tuple[str, ...], required: str) -> Any:
    def handler(request: MockRequest) -> ApiResponse:
        _require(request.json, required)
        lead = request.store.find(LEADS, request.path_params["entity_id"])
        for name in field_names:
            if name in request.json:
                lead[name] = request.json[name]
        lead["lastActivity"] = utc_now_iso()
        return ApiResponse.ok(lead, message="Lead updated successfully")

    return handler


def _lead_assign(request: MockRequest) -> ApiResponse:
    _require(request.json, "consultantId")
    lead = request.store.find(LEADS, request.path_params["entity_id"])
    consultant_id = str(request.json["consultantId"])
    consultant = next((c for c in request.store.records("consultants") if c["id"] == consultant_id), None)
    lead["consultantId"] = consultant_id
    lead["consultant"] = consultant["name"] if consultant else consultant_id
    lead["lastActivity"] = utc_now_iso()
    return ApiResponse.ok(lead, message="Consultant assigned")


def _lead_activities(request: MockRequest) -> ApiResponse:
    lead = request.store.find(LEADS, request.path_params["entity_id"])
    activities = [a for a in request.store.records("lead_activities") if a["leadId"] == lead["id"]]
    return ApiResponse.ok(activities)


def _add_lead_activity(request: MockRequest) -> ApiResponse:
    lead = request.store.find(LEADS, request.path_params["entity_id"])
    activities = request.store.records("lead_activities")
    activity = {**request.json, "id": str(len(activities) + 1), "leadId": lead["id"], "createdAt": utc_now_iso()}
    activities.append(activity)
    lead["lastActivity"] = activity["createdAt"]
    return ApiResponse.ok(activity, message="Activity added", status_code=201)


def _lead_stats(request: MockRequest) -> ApiResponse:
    leads = filter_records(request.store.records("leads"), LEADS, request)
    total = len(leads)
    converted = sum(1 for lead in leads if lead.get("status") == "convert")
    return ApiResponse.ok({
        "total": total,
        "byStatus": dict(Counter(lead.get("status") for lead in leads)),
        "byPriority": dict(Counter(lead.get("priority") for lead in leads)),
        "averageScore": round(_sum(leads, "leadScore") / total, 1) if total else 0,
        "conversionRate": round(converted * 100 / total, 1) if total else 0,
    })


# ── Employees ────────────────────────────────────────────────────────

def _employee_status(request: MockRequest) -> ApiResponse:
    _require(request.json, "status")
    employee = request.store.find(EMPLOYEES, request.path_params["entity_id"])
    employee["status"] = request.json["status"]
    return ApiResponse.ok(employee, message="Employee status updated")


def _employee_performance(request: MockRequest) -> ApiResponse:
    employee = request.store.find(EMPLOYEES, request.path_params["entity_id"])
    employee["performance"] = {**employee.get("performance", {}), **request.json}
    return ApiResponse.ok(employee, message="Performance updated")


def _employee_stats(request: MockRequest) -> ApiResponse:
    employees = request.store.records("employees")
    total = len(employees)
    ratings = [float(e.get("performance", {}).get("rating") or 0) for e in employees]
    attendance = [e.get("attendance", {}) for e in employees]
    present = sum(a.get("present", 0) for a in attendance)
    days = sum(a.get("total", 0) for a in attendance)
    statuses = Counter(e.get("status") for e in employees)
    return ApiResponse.ok({
        "total": total,
        "active": statuses.get("active", 0),
        "inactive": statuses.get("inactive", 0),
        "onLeave": statuses.get("on_leave", 0),
        "avgRating": round(sum(ratings) / total, 2) if total else 0,
        "avgAttendance": round(present * 100 / days, 1) if days else 0,
        "departmentBreakdown": dict(Counter(e.get("department") for e in employees)),
        "roleBreakdown": dict(Counter(e.get("role") for e in employees)),
    })


def _singleton(name: str) -> Any:
    def handler(request: MockRequest) -> ApiResponse:
        return ApiResponse.ok(request.store.singletons[name])

    return handler


# ── Consultants ──────────────────────────────────────────────────────

def _consultant_stats(request: MockRequest) -> ApiResponse:
    consultants = request.store.records("consultants")
    rates = [float(c.get("hourly_rate") or 0) for c in consultants]
    ratings = [float(c.get("avg_rating") or 0) for c in consultants]
    return ApiResponse.ok({
        "by_status": dict(Counter(c.get("status") for c in consultants)),
        "by_specialization": dict(Counter(c.get("specialization") for c in consultants)),
        "hourly_rates": {
            "avg_rate": round(sum(rates) / len(rates), 2) if rates else 0,
            "min_rate": min(rates, default=0),
            "max_rate": max(rates, default=0),
        },
        "performance": {
            "total_active": sum(1 for c in consultants if c.get("status") == "active"),
            "avg_rating": round(sum(ratings) / len(ratings), 2) if ratings else 0,
            "total_assignments": sum(int(c.get("active_projects") or 0) for c in consultants),
        },
    })


def _consultant_performance(request: MockRequest) -> ApiResponse:
    consultant = request.store.find(CONSULTANTS, request.path_params["entity_id"])
    return ApiResponse.ok({
        "consultant_id": consultant["id"],
        "start_date": request.param("start_date"),
        "end_date": request.param("end_date"),
        "avg_rating": consultant.get("avg_rating"),
        "total_reviews": consultant.get("total_reviews"),
        "active_projects": consultant.get("active_projects"),
        "completed_projects": consultant.get("completed_projects"),
    })


def _assign_project(request: MockRequest) -> ApiResponse:
    _require(request.json, "project_id")
    consultant = request.store.find(CONSULTANTS, request.path_params["entity_id"])
    assignment = {"consultant_id": consultant["id"], "status": "assigned", **request.json}
    consultant.setdefault("recent_projects", []).append({
        "id": assignment["project_id"], "name": assignment.get("name", f"Project {assignment['project_id']}"),
        "role": assignment.get("role", "consultant"), "start_date": assignment.get("start_date"),
        "end_date": assignment.get("end_date"), "assignment_status": assignment["status"],
    })
    consultant["active_projects"] = int(consultant.get("active_projects") or 0) + 1
    return ApiResponse.ok(assignment, message="Project assigned", status_code=201)


def _update_availability(request: MockRequest) -> ApiResponse:
    consultant = request.store.find(CONSULTANTS, request.path_params["entity_id"])
    availability = request.json.get("availability")
    if not isinstance(availability, list):
        raise MockValidationError("availability must be a list of slots")
    consultant["availability"] = availability
    return ApiResponse.ok(consultant, message="Availability updated")


# ── Documents ────────────────────────────────────────────────────────

def _share_document(request: MockRequest) -> ApiResponse:
    document = request.store.find(DOCUMENTS, request.path_params["entity_id"])
    shares = document.setdefault("shares", [])
    share = {"share_id": len(shares) + 1, "permissions": ["view"], **request.json, "shared_at": utc_now_iso()}
    shares.append(share)
    return ApiResponse.ok(share, message="Document shared", status_code=201)


def _generate_pdf(request: MockRequest) -> ApiResponse:
    body = request.json
    _require(body, "template_id")
    template = request.store.find(DOCUMENT_TEMPLATES, str(body["template_id"]))
    document = {
        "id": request.store.next_id(DOCUMENTS), "name": f"{template['name']}.pdf", "type": template["type"],
        "category": template.get("category", "general"), "file_size": 0, "mime_type": "application/pdf",
        "template_id": template["id"], "created_by": "admin", "created_at": utc_now_iso(),
        "shares": [], "versions": [{"version": 1, "created_at": utc_now_iso()}],
        "variables": body.get("variables", {}),
    }
    request.store.records("documents").append(document)
    return ApiResponse.ok(
        {**document, "document_id": document["id"], "download_url": f"/api/documents/{document['id']}/download"},
        message="PDF generated", status_code=201,
    )


def _document_stats(request: MockRequest) -> ApiResponse:
    documents = request.store.records("documents")
    return ApiResponse.ok({
        "total_documents": len(documents),
        "total_size": sum(int(d.get("file_size") or 0) for d in documents),
        "by_type": [{"type": t, "count": n} for t, n in Counter(d.get("type") for d in documents).items()],
        "by_category": [{"category": c, "count": n}
                        for c, n in Counter(d.get("category") for d in documents).items()],
        "shared_documents": sum(1 for d in documents if d.get("shares")),
    })


# ── Channels & messages ──────────────────────────────────────────────

def _test_channel(request: MockRequest) -> ApiResponse:
    channel = request.store.find(CHANNELS, request.path_params["entity_id"])
    if not channel.get("enabled"):
        return ApiResponse.ok({"success": False, "message": f"{channel['name']} channel is disabled"})
    return ApiResponse.ok({"success": True, "message": f"{channel['name']} channel test successful"})


def _send_message(request: MockRequest) -> ApiResponse:
    body = request.json
    _require(body, "channel", "recipient", "message")
    channel = request.store.find(CHANNELS, str(body["channel"]))
    status = "sent" if channel.get("enabled") else "failed"
    message = {**body, "id": request.store.next_id(MESSAGES), "status": status, "sent_at": utc_now_iso()}
    request.store.records("messages").append(message)
    stats = channel.setdefault("stats", {"sent": 0, "delivered": 0, "failed": 0})
    stats["sent" if status == "sent" else "failed"] = stats.get("sent" if status == "sent" else "failed", 0) + 1
    return ApiResponse.ok(message, message=f"Message {status}", status_code=201)


def _channel_stats(request: MockRequest) -> ApiResponse:
    messages = request.store.records("messages")
    by_channel = Counter(m.get("channel") for m in messages)
    daily = Counter(str(m.get("sent_at", ""))[:10] for m in messages)
    return ApiResponse.ok({
        "total_messages": len(messages),
        "by_channel": [{"channel": c, "count": n} for c, n in sorted(by_channel.items())],
        "by_status": dict(Counter(m.get("status") for m in messages)),
        "daily_volume": [{"date": d, "count": n} for d, n in sorted(daily.items())],
    })


# ── Notifications ────────────────────────────────────────────────────

def _notification_ids(request: MockRequest) -> set[str]:
    ids = request.json.get("ids")
    if not isinstance(ids, list):
        raise MockValidationError("ids must be a list")
    return {str(i) for i in ids}


def _mark_read(request: MockRequest) -> ApiResponse:
    ids = _notification_ids(request)
    updated = 0
    for notification in request.store.records("notifications"):
        if notification["id"] in ids and notification.get("status") != "read":
            notification["status"] = "read"
            updated += 1
    return ApiResponse.ok({"updated": updated}, message="Notifications marked as read")


def _mark_one_read(request: MockRequest) -> ApiResponse:
    notification = request.store.find(NOTIFICATIONS, request.path_params["entity_id"])
    notification["status"] = "read"
    return ApiResponse.ok({"message": "Notification marked as read"})


def _delete_notifications(request: MockRequest) -> ApiResponse:
    ids = _notification_ids(request)
    records = request.store.records("notifications")
    kept = [n for n in records if n["id"] not in ids]
    deleted = len(records) - len(kept)
    records[:] = kept
    return ApiResponse.ok({"deleted": deleted}, message="Notifications deleted")


def _send_notification(request: MockRequest) -> ApiResponse:
    body = request.json
    _require(body, "channel", "recipients", "message")
    channels = body["channel"] if isinstance(body["channel"], list) else [body["channel"]]
    notification = {
        "id": request.store.next_id(NOTIFICATIONS), "type": body.get("type", "system"),
        "title": body.get("subject", ""), "message": body["message"], "status": "unread",
        "priority": body.get("priority", "medium"), "channel": channels[0], "timestamp": utc_now_iso(),
        "actions": [],
    }
    request.store.records("notifications").append(notification)
    return ApiResponse.ok({"id": notification["id"]}, message="Notification sent", status_code=201)


def _notification_stats(request: MockRequest) -> ApiResponse:
    notifications = request.store.records("notifications")
    messages = request.store.records("messages")
    return ApiResponse.ok({
        "total": len(notifications),
        "unread": sum(1 for n in notifications if n.get("status") == "unread"),
        "sent": sum(1 for m in messages if m.get("status") in ("sent", "delivered")),
        "pending": sum(1 for m in messages if m.get("status") == "pending"),
        "failed": sum(1 for m in messages if m.get("status") == "failed"),
    })


def _update_notification_settings(request: MockRequest) -> ApiResponse:
    current = request.store.singletons["notification_settings"]
    current.update(request.json)
    return ApiResponse.ok(current, message="Settings updated")


# ── Security ─────────────────────────────────────────────────────────

def _create_audit_log(request: MockRequest) -> ApiResponse:
    _require(request.json, "action", "resource")
    log = {"severity": "low", "status": "success", "userName": "system", **request.json,
           "id": request.store.next_id(AUDIT_LOGS), "timestamp": utc_now_iso()}
    request.store.records("audit_logs").append(log)
    return ApiResponse.ok(log, status_code=201)


def _alert_status(request: MockRequest) -> ApiResponse:
    _require(request.json, "status")
    alert = request.store.find(SECURITY_ALERTS, request.path_params["entity_id"])
    alert["status"] = request.json["status"]
    return ApiResponse.ok(alert, message="Alert status updated")


def _compliance_check(request: MockRequest) -> ApiResponse:
    reports = request.store.records("compliance_reports")
    now = utc_now_iso()
    for report in reports:
        report["lastCheck"] = now
        report["status"] = "compliant" if report.get("issues", 0) == 0 or report.get("score", 0) >= 90 \
            else "needs_attention"
    score = round(sum(r.get("score", 0) for r in reports) / len(reports)) if reports else 100
    return ApiResponse.ok({
        "score": score,
        "issuesFound": sum(r.get("issues", 0) for r in reports),
        "checkedAt": now,
        "recommendations": [f"Review {r['name']}" for r in reports if r["status"] != "compliant"],
    })


def _security_stats(request: MockRequest) -> ApiResponse:
    logs = request.store.records("audit_logs")
    alerts = request.store.records("security_alerts")
    reports = request.store.records("compliance_reports")
    logins = [log for log in logs if log.get("action") == "LOGIN"]
    return ApiResponse.ok({
        "totalLogs": len(logs),
        "criticalAlerts": sum(1 for a in alerts if a.get("severity") == "critical" and a.get("status") != "resolved"),
        "activeIncidents": sum(1 for a in alerts if a.get("status") != "resolved"),
        "complianceScore": round(sum(r.get("score", 0) for r in reports) / len(reports)) if reports else 100,
        "lastSecurityScan": max((r.get("lastCheck", "") for r in reports), default=""),
        "loginAttempts": len(logins),
        "failedLogins": sum(1 for log in logins if log.get("status") == "failed"),
        "dataAccess": len(logs) - len(logins),
    })


def _export_security_report(request: MockRequest) -> ApiResponse:
    body = request.json
    report_format = body.get("format", "pdf")
    return ApiResponse.ok({
        "filename": f"security-report-{body.get('type', 'full')}.{report_format}",
        "format": report_format,
        "dateRange": body.get("dateRange", "30d"),
        "generatedAt": utc_now_iso(),
        "content": "Mock security report content",
    })


# ── Finance ──────────────────────────────────────────────────────────

def _finance_summary(store_records: list[dict[str, Any]], orders: list[dict[str, Any]]) -> dict[str, Any]:
    active = [t for t in store_records if t.get("status") == "active"]
    income = _sum([t for t in active if t.get("type") == "income"], "amount")
    expenses = _sum([t for t in active if t.get("type") == "expense"], "amount")
    return {
        "totalIncome": income,
        "totalExpenses": expenses,
        "netProfit": round(income - expenses, 2),
        "gstCollected": _sum([t for t in active if t.get("type") == "income"], "gstAmount"),
        "gstPaid": _sum([t for t in active if t.get("type") == "expense"], "gstAmount"),
        "outstanding": _sum([o for o in orders if o.get("status") != "cancelled"], "balanceAmount"),
        "transactionCount": len(active),
    }


def _finance_report(request: MockRequest) -> ApiResponse:
    report_type = request.path_params["report_type"]
    transactions = request.store.records("transactions")
    orders = request.store.records("orders")
    if report_type == "summary":
        return ApiResponse.ok(_finance_summary(transactions, orders))
    if report_type == "gst":
        summary = _finance_summary(transactions, orders)
        return ApiResponse.ok({"collected": summary["gstCollected"], "paid": summary["gstPaid"],
                               "payable": round(summary["gstCollected"] - summary["gstPaid"], 2)})
    if report_type == "category":
        return ApiResponse.ok({
            category: _sum([t for t in transactions if t.get("category") == category], "amount")
            for category in sorted({str(t.get("category")) for t in transactions})
        })
    raise MockValidationError(f"Unknown report type '{report_type}'")


def _finance_overview(request: MockRequest) -> ApiResponse:
    summary = _finance_summary(request.store.records("transactions"), request.store.records("orders"))
    invoices = request.store.records("invoices")
    return ApiResponse.ok({
        "totalRevenue": summary["totalIncome"],
        "totalExpenses": summary["totalExpenses"],
        "netProfit": summary["netProfit"],
        "outstandingInvoices": _sum([i for i in invoices if i.get("status") != "paid"], "amount"),
        "paidInvoices": _sum([i for i in invoices if i.get("status") == "paid"], "amount"),
    })


def _generate_invoice(request: MockRequest) -> ApiResponse:
    order = request.store.find(ORDERS, request.path_params["order_id"])
    invoice = {
        "id": request.store.next_id(INVOICES), "orderNumber": order["orderNumber"], "clientId": order["clientId"],
        "amount": order.get("netAmount", 0), "status": "paid" if order.get("paymentStatus") == "paid" else "pending",
        "dueDate": None, "createdAt": utc_now_iso(),
    }
    request.store.records("invoices").append(invoice)
    return ApiResponse.ok(invoice, message="Invoice generated", status_code=201)


# ── Analytics & dashboard ────────────────────────────────────────────

def _live_orders(request: MockRequest) -> list[dict[str, Any]]:
    return [o for o in request.store.records("orders") if o.get("status") != "cancelled"]


def _monthly_revenue(orders: list[dict[str, Any]]) -> list[dict[str, Any]]:
    months: dict[str, dict[str, Any]] = {}
    for order in orders:
        period = str(order.get("entryDate", ""))[:7]
        bucket = months.setdefault(period, {"period": period, "revenue": 0.0, "paid": 0.0, "pending": 0.0,
                                            "orders": 0})
        bucket["revenue"] = round(bucket["revenue"] + float(order.get("netAmount") or 0), 2)
        bucket["paid"] = round(bucket["paid"] + float(order.get("paidAmount") or 0), 2)
        bucket["pending"] = round(bucket["pending"] + float(order.get("balanceAmount") or 0), 2)
        bucket["orders"] += 1
    return [months[k] for k in sorted(months)]


def _top_clients(request: MockRequest) -> list[dict[str, Any]]:
    rows = []
    for client in request.store.records("clients"):
        orders = [o for o in _live_orders(request) if str(o.get("clientId")) == str(client["id"])]
        if not orders:
            continue
        rows.append({
            "id": client["id"], "name": client.get("clientName"), "contact": client.get("clientContact"),
            "email": client.get("clientEmail"), "totalOrders": len(orders),
            "totalRevenue": _sum(orders, "netAmount"), "paidAmount": _sum(orders, "paidAmount"),
            "pendingAmount": _sum(orders, "balanceAmount"),
            "lastOrderDate": max(str(o.get("entryDate", "")) for o in orders),
        })
    rows.sort(key=lambda r: r["totalRevenue"], reverse=True)
    return rows[: request.int_param("limit", 5)]


def _overview_metrics(request: MockRequest) -> dict[str, Any]:
    clients = request.store.records("clients")
    orders = request.store.records("orders")
    live = _live_orders(request)
    leads = request.store.records("leads")
    converted = sum(1 for lead in leads if lead.get("status") == "convert")
    return {
        "totalClients": len(clients),
        "activeClients": sum(1 for c in clients if c.get("status") == "active"),
        "activeOrders": sum(1 for o in orders if o.get("status") in ("pending", "processing")),
        "completedOrders": sum(1 for o in orders if o.get("status") == "completed"),
        "pendingPayments": sum(1 for o in live if o.get("paymentStatus") != "paid"),
        "totalRevenue": _sum(live, "netAmount"),
        "avgOrderValue": round(_sum(live, "netAmount") / len(live), 2) if live else 0,
        "conversionRate": round(converted * 100 / len(leads), 1) if leads else 0,
    }


def _analytics_overview(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok(_overview_metrics(request))


def _dashboard_metrics(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok({
        "period": request.param("period", "30d"),
        "metrics": _overview_metrics(request),
        "order_status": [{"status": s, "count": n}
                         for s, n in sorted(Counter(o.get("status") for o in request.store.records("orders")).items())],
    })


def _revenue_analytics(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok({
        "period": request.param("period", "30d"),
        "group_by": request.param("group_by", "month"),
        "series": _monthly_revenue(_live_orders(request)),
        "top_clients": _top_clients(request),
    })


def _client_analytics(request: MockRequest) -> ApiResponse:
    clients = request.store.records("clients")
    by_month = Counter(str(c.get("entryDate", ""))[:7] for c in clients)
    return ApiResponse.ok({
        "metric": request.param("metric", "acquisition"),
        "acquisition": [{"period": p, "new_clients": n} for p, n in sorted(by_month.items())],
        "by_source": dict(Counter(c.get("source") for c in clients)),
        "by_status": dict(Counter(c.get("status") for c in clients)),
    })


def _order_analytics(request: MockRequest) -> ApiResponse:
    group_by = request.param("group_by", "status")
    orders = request.store.records("orders")
    return ApiResponse.ok({
        "group_by": group_by,
        "distribution": [{"key": k, "count": n} for k, n in sorted(Counter(str(o.get(group_by)) for o in orders).items())],
    })


def _performance_metrics(request: MockRequest) -> ApiResponse:
    orders = request.store.records("orders")
    completed = sum(1 for o in orders if o.get("status") == "completed")
    collected = _sum(orders, "paidAmount")
    billed = _sum(_live_orders(request), "netAmount")
    return ApiResponse.ok({
        "metric": request.param("metric", "efficiency"),
        "completion_rate": round(completed * 100 / len(orders), 1) if orders else 0,
        "collection_rate": round(collected * 100 / billed, 1) if billed else 0,
    })


def _predictive_analytics(request: MockRequest) -> ApiResponse:
    series = _monthly_revenue(_live_orders(request))
    revenues = [p["revenue"] for p in series]
    trend = (revenues[-1] - revenues[0]) / (len(revenues) - 1) if len(revenues) > 1 else 0
    last = revenues[-1] if revenues else 0
    return ApiResponse.ok({
        "type": request.param("type", "revenue_forecast"),
        "history": series,
        "forecast": [{"step": i, "predicted_revenue": round(max(last + trend * i, 0), 2)} for i in range(1, 4)],
    })


def _cohort_analysis(request: MockRequest) -> ApiResponse:
    clients = request.store.records("clients")
    orders = request.store.records("orders")
    cohorts: dict[str, dict[str, Any]] = {}
    for client in clients:
        cohort = str(client.get("entryDate", ""))[:7]
        row = cohorts.setdefault(cohort, {"cohort": cohort, "clients": 0, "retained": 0})
        row["clients"] += 1
        if any(str(o.get("clientId")) == str(client["id"]) for o in orders):
            row["retained"] += 1
    return ApiResponse.ok({"metric": request.param("metric", "retention"), "cohorts": [cohorts[k] for k in sorted(cohorts)]})


def _funnel_analysis(request: MockRequest) -> ApiResponse:
    leads = request.store.records("leads")
    stages = ["new", "call_followup", "ready_for_quote", "convert"]
    counts = Counter(lead.get("status") for lead in leads)
    remaining = len(leads)
    funnel = []
    for stage in stages:
        funnel.append({"stage": stage, "count": remaining})
        remaining -= counts.get(stage, 0)
    return ApiResponse.ok({"funnel_type": request.param("funnel_type", "sales"), "stages": funnel})


def _segment_analysis(request: MockRequest) -> ApiResponse:
    segments = {"high": 0, "medium": 0, "low": 0}
    for row in _top_clients(request):
        value = row["totalRevenue"]
        segments["high" if value >= 15000 else "medium" if value >= 5000 else "low"] += 1
    return ApiResponse.ok({"segment_by": request.param("segment_by", "value"),
                           "segments": [{"segment": k, "clients": v} for k, v in segments.items()]})


def _custom_report(request: MockRequest) -> ApiResponse:
    body = request.json
    _require(body, "metrics")
    overview = _overview_metrics(request)
    return ApiResponse.ok({
        "name": body.get("name", "Custom report"),
        "generatedAt": utc_now_iso(),
        "rows": [{"metric": m, "value": overview.get(m)} for m in body["metrics"]],
    })


def _export_report(request: MockRequest) -> ApiResponse:
    body = request.json
    report_format = body.get("format", "csv")
    return ApiResponse.ok({"filename": f"{body.get('report', 'analytics')}.{report_format}",
                           "format": report_format, "generatedAt": utc_now_iso()})


def _dashboard_stats(request: MockRequest) -> ApiResponse:
    clients = request.store.records("clients")
    orders = request.store.records("orders")
    live = _live_orders(request)
    return ApiResponse.ok({
        "period": {"from": request.param("from"), "to": request.param("to")},
        "clients": {"total": len(clients), "new": 0, "growth": 0},
        "orders": {
            "total": len(orders),
            "new": sum(1 for o in orders if o.get("status") == "pending"),
            "pending": sum(1 for o in orders if o.get("status") in ("pending", "processing")),
            "overdue": 0,
            "growth": 0,
        },
        "revenue": {
            "total": _sum(live, "netAmount"),
            "paid": _sum(live, "paidAmount"),
            "pending": _sum(live, "balanceAmount"),
            "growth": 0,
        },
    })


def _recent_activity(request: MockRequest) -> ApiResponse:
    activity: list[dict[str, Any]] = []
    for order in request.store.records("orders"):
        activity.append({"type": "order", "id": order["orderNumber"], "title": f"Order {order['orderNumber']}",
                         "description": order.get("clientName", ""), "date": order.get("entryDate", ""),
                         "user": order.get("entryUser", ""), "status": order.get("status", ""),
                         "amount": order.get("netAmount")})
    for client in request.store.records("clients"):
        activity.append({"type": "client", "id": client["id"], "title": f"New client {client.get('clientName')}",
                         "description": client.get("address", ""), "date": client.get("entryDate", ""),
                         "user": client.get("entryUser", ""), "status": client.get("status", "")})
    for txn in request.store.records("transactions"):
        if txn.get("type") == "income":
            activity.append({"type": "payment", "id": txn["id"], "title": f"Payment {txn.get('billNumber')}",
                             "description": txn.get("orderNumber", ""), "date": txn.get("billDate", ""),
                             "user": txn.get("entryUser", ""), "status": txn.get("status", ""),
                             "amount": txn.get("amount")})
    activity.sort(key=lambda a: str(a["date"]), reverse=True)
    return ApiResponse.ok(activity[: request.int_param("limit", 10)])


def _revenue_chart(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok(_monthly_revenue(_live_orders(request)))


def _dashboard_top_clients(request: MockRequest) -> ApiResponse:
    return ApiResponse.ok(_top_clients(request))


def _list_of(collection: Collection) -> Any:
    def handler(request: MockRequest) -> ApiResponse:
        return list_response(filter_records(request.store.records(collection.name), collection, request), request)

    return handler


def build_router() -> MockRouter:
    """Every demo endpoint. Static sub-paths precede ``{entity_id}`` patterns."""
    router = MockRouter()

    router.add("POST", "/auth/login", _login)
    router.add("POST", "/auth/logout", _logout)
    router.add("GET", "/auth/me", _current_user)
    router.add("POST", "/auth/refresh", _refresh)

    router.add("GET", "/clients/search", _client_search)
    register_collection(router, CLIENTS)

    router.add("POST", "/orders", _create_order)
    router.add("PATCH", "/orders/{entity_id}/status", _order_status)
    router.add("POST", "/orders/{entity_id}/payments", _order_payment)
    register_collection(router, ORDERS)

    router.add("GET", "/leads/stats", _lead_stats)
    router.add("PATCH", "/leads/{entity_id}/status", _lead_patch(("status",), "status"))
    router.add("PATCH", "/leads/{entity_id}/assign", _lead_assign)
    router.add("PATCH", "/leads/{entity_id}/followup", _lead_patch(("followupDate", "followupTime"), "followupDate"))
    router.add("GET", "/leads/{entity_id}/activities", _lead_activities)
    router.add("POST", "/leads/{entity_id}/activities", _add_lead_activity)
    register_collection(router, LEADS)

    router.add("GET", "/employees/stats", _employee_stats)
    router.add("GET", "/employees/departments", _singleton("departments"))
    router.add("GET", "/employees/designations", _singleton("designations"))
    router.add("PATCH", "/employees/{entity_id}/status", _employee_status)
    router.add("PATCH", "/employees/{entity_id}/performance", _employee_performance)
    register_collection(router, EMPLOYEES)

    router.add("GET", "/consultants/stats", _consultant_stats)
    router.add("GET", "/consultants/{entity_id}/performance", _consultant_performance)
    router.add("POST", "/consultants/{entity_id}/assign-project", _assign_project)
    router.add("PUT", "/consultants/{entity_id}/availability", _update_availability)
    register_collection(router, CONSULTANTS)

    router.add("GET", "/documents/stats", _document_stats)
    router.add("POST", "/documents/generate-pdf", _generate_pdf)
    register_collection(router, DOCUMENT_TEMPLATES)
    router.add("POST", "/documents/{entity_id}/share", _share_document)
    register_collection(router, DOCUMENTS)

    router.add("GET", "/communications/stats", _channel_stats)
    router.add("POST", "/communications/channels/{entity_id}/test", _test_channel)
    register_collection(router, CHANNELS)
    router.add("POST", "/communications/messages", _send_message)
    router.add("GET", "/communications/messages", _list_of(MESSAGES))
    register_collection(router, COMMUNICATION_TEMPLATES)

    router.add("GET", "/notifications/stats", _notification_stats)
    router.add("POST", "/notifications/mark-read", _mark_read)
    router.add("POST", "/notifications/delete", _delete_notifications)
    router.add("POST", "/notifications/send", _send_notification)
    router.add("GET", "/notifications/settings", _singleton("notification_settings"))
    router.add("PUT", "/notifications/settings", _update_notification_settings)
    register_collection(router, Collection("channels", "/notifications/channels", "Channel", filter_fields=("type",)))
    router.add("POST", "/notifications/channels/{entity_id}/test", _test_channel)
    register_collection(router, NOTIFICATION_TEMPLATES)
    router.add("PATCH", "/notifications/{entity_id}/read", _mark_one_read)
    register_collection(router, NOTIFICATIONS)

    router.add("POST", "/security/audit-logs", _create_audit_log)
    register_collection(router, AUDIT_LOGS, read_only=True)
    router.add("PATCH", "/security/alerts/{entity_id}/status", _alert_status)
    register_collection(router, SECURITY_ALERTS, read_only=True)
    register_collection(router, COMPLIANCE_REPORTS, read_only=True)
    router.add("POST", "/security/compliance-check", _compliance_check)
    router.add("GET", "/security/stats", _security_stats)
    router.add("GET", "/security/encryption-status", _singleton("encryption_status"))
    router.add("POST", "/security/export", _export_security_report)

    router.add("GET", "/analytics", _analytics_overview)
    router.add("GET", "/analytics/dashboard-metrics", _dashboard_metrics)
    router.add("GET", "/analytics/revenue", _revenue_analytics)
    router.add("GET", "/analytics/clients", _client_analytics)
    router.add("GET", "/analytics/orders", _order_analytics)
    router.add("GET", "/analytics/performance", _performance_metrics)
    router.add("GET", "/analytics/predictive", _predictive_analytics)
    router.add("GET", "/analytics/cohorts", _cohort_analysis)
    router.add("GET", "/analytics/funnel", _funnel_analysis)
    router.add("GET", "/analytics/segments", _segment_analysis)
    router.add("POST", "/analytics/custom-report", _custom_report)
    router.add("POST", "/analytics/export", _export_report)

    router.add("GET", "/finance/overview", _finance_overview)
    router.add("GET", "/finance/reports/{report_type}", _finance_report)
    router.add("POST", "/finance/invoices/generate/{order_id}", _generate_invoice)
    register_collection(router, INVOICES, read_only=True)
    register_collection(router, TRANSACTIONS)

    router.add("GET", "/dashboard/stats", _dashboard_stats)
    router.add("GET", "/dashboard/activity", _recent_activity)
    router.add("GET", "/dashboard/revenue-chart", _revenue_chart)
    router.add("GET", "/dashboard/top-clients", _dashboard_top_clients)

    return router
