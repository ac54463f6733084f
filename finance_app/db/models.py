"""
SQLAlchemy ORM models.

Only raw calculator inputs are persisted, keyed by device, so a returning
user sees the values they last entered.
"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON, UniqueConstraint
from sqlalchemy.orm import declarative_base
import uuid
import enum


class InputKey(str, enum.Enum):
    """Calculator inputs that can be remembered across sessions."""

    # SIP Calculator
    sip_monthly_investment = "sip_monthly_investment"
    sip_step_up = "sip_step_up"
    sip_return_rate = "sip_return_rate"
    sip_time_period = "sip_time_period"

    # EMI Calculator
    emi_loan_amount = "emi_loan_amount"
    emi_interest_rate = "emi_interest_rate"
    emi_tenure = "emi_tenure"
    emi_prepayment_enabled = "emi_prepayment_enabled"
    emi_prepayment_amount = "emi_prepayment_amount"
    emi_prepayment_frequency = "emi_prepayment_frequency"

    # Tax Calculator
    tax_income = "tax_income"
    tax_deductions_80c = "tax_deductions_80c"
    tax_deductions_hra = "tax_deductions_hra"

    # Global
    user_has_financial_data = "user_has_financial_data"


Base = declarative_base()


def generate_uuid():
    return str(uuid.uuid4())


class AuditMixin:
    """Mixin for timestamp fields."""

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


class SavedInput(AuditMixin, Base):
    """Last value a device entered for one calculator input."""

    __tablename__ = "saved_inputs"
    __table_args__ = (UniqueConstraint("device_id", "key", name="uq_saved_input"),)

    id = Column(String, primary_key=True, default=generate_uuid)
    device_id = Column(String(64), nullable=False, index=True)
    key = Column(String(64), nullable=False)
    value = Column(JSON, nullable=True)
