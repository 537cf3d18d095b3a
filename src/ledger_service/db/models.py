import enum

from sqlalchemy import Column, Integer, String, TIMESTAMP, Numeric, Enum, ForeignKey
from sqlalchemy.orm import relationship

from .session import Base


class TransferStatus(str, enum.Enum):
    SUCCESSFUL = "SUCCESSFUL"


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255))
    phone_number = Column(String(20))
    pin = Column(Integer)
    # Mutated only through AccountService.update_account_balance
    balance = Column(Numeric(15, 2), nullable=False, default=0)
    created_at = Column(TIMESTAMP)
    updated_at = Column(TIMESTAMP)


class Transfer(Base):
    __tablename__ = "transfers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sender_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    reason = Column(String)
    date = Column(TIMESTAMP, nullable=False)
    status = Column(Enum(TransferStatus), nullable=False, default=TransferStatus.SUCCESSFUL)
    # Post-transfer snapshot of both balances
    sender_balance_after = Column(Numeric(15, 2))
    receiver_balance_after = Column(Numeric(15, 2))

    sender = relationship("Account", foreign_keys=[sender_id], lazy="selectin")
    receiver = relationship("Account", foreign_keys=[receiver_id], lazy="selectin")
