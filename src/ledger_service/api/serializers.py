from typing import Any, Dict

from ledger_service.db.models import Account, Transfer


def serialize_account(a: Account) -> Dict[str, Any]:
    # pin is never echoed back
    return {
        "id": a.id,
        "first_name": a.first_name,
        "last_name": a.last_name,
        "email": a.email,
        "phone_number": a.phone_number,
        "balance": float(a.balance) if a.balance is not None else 0.0,
        "created_at": a.created_at.isoformat() if getattr(a, "created_at", None) else None,
        "updated_at": a.updated_at.isoformat() if getattr(a, "updated_at", None) else None,
    }


def serialize_transfer(t: Transfer) -> Dict[str, Any]:
    return {
        "id": t.id,
        "sender": serialize_account(t.sender),
        "receiver": serialize_account(t.receiver),
        "amount": float(t.amount) if t.amount is not None else None,
        "reason": t.reason,
        "date": t.date.isoformat() if t.date else None,
        "status": t.status.value if t.status is not None else None,
        "sender_balance_after": float(t.sender_balance_after) if t.sender_balance_after is not None else None,
        "receiver_balance_after": (
            float(t.receiver_balance_after) if t.receiver_balance_after is not None else None
        ),
    }
