"""
Saved calculator inputs API endpoints.

Each device keeps the last value entered for every calculator field, so the
calculators reopen with the user's own numbers.
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Depends, Path
from pydantic import BaseModel
from sqlalchemy.orm import Session

from finance_app.calculations.dashboard import DashboardInputs, summarize_dashboard
from finance_app.db.database import get_db
from finance_app.db.models import InputKey, SavedInput

logger = logging.getLogger(__name__)

router = APIRouter()

DEVICE_ID_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"


class SavedInputUpdate(BaseModel):
    """Value to remember for one input."""

    value: Any


class SavedInputResponse(BaseModel):
    key: InputKey
    value: Any
    updated_at: str


class SavedInputsResponse(BaseModel):
    """All remembered inputs for a device."""

    device_id: str
    inputs: Dict[str, Any]


def _find(db: Session, device_id: str, key: InputKey) -> Optional[SavedInput]:
    return (
        db.query(SavedInput)
        .filter(SavedInput.device_id == device_id, SavedInput.key == key.value)
        .first()
    )


def saved_input_to_response(saved: SavedInput) -> SavedInputResponse:
    return SavedInputResponse(
        key=InputKey(saved.key),
        value=saved.value,
        updated_at=saved.updated_at.isoformat(),
    )


def _saved_values(db: Session, device_id: str) -> Dict[str, Any]:
    rows = db.query(SavedInput).filter(SavedInput.device_id == device_id).all()
    return {row.key: row.value for row in rows}


def dashboard_inputs(saved: Dict[str, Any]) -> DashboardInputs:
    """Build dashboard inputs from saved values, keeping defaults for unsaved ones."""
    defaults = DashboardInputs()

    def number(key: InputKey, default, cast=float):
        value = saved.get(key.value)
        if value is None:
            return default
        try:
            return cast(value)
        except (TypeError, ValueError):
            raise ValueError(f"Saved value for {key.value} is not a number")

    return DashboardInputs(
        sip_monthly=number(InputKey.sip_monthly_investment, defaults.sip_monthly),
        sip_step_up_percent=number(InputKey.sip_step_up, defaults.sip_step_up_percent),
        sip_return_percent=number(InputKey.sip_return_rate, defaults.sip_return_percent),
        sip_years=number(InputKey.sip_time_period, defaults.sip_years, int),
        loan_amount=number(InputKey.emi_loan_amount, defaults.loan_amount),
        emi_rate_percent=number(InputKey.emi_interest_rate, defaults.emi_rate_percent),
        emi_tenure_years=number(InputKey.emi_tenure, defaults.emi_tenure_years, int),
    )


@router.get("/{device_id}", response_model=SavedInputsResponse)
async def list_saved_inputs(
    device_id: str = Path(..., pattern=DEVICE_ID_PATTERN),
    db: Session = Depends(get_db),
):
    """Return every remembered input for a device."""
    return SavedInputsResponse(device_id=device_id, inputs=_saved_values(db, device_id))


# Declared before the per-key routes so "summary" is not parsed as an InputKey
@router.get("/{device_id}/summary")
async def get_dashboard_summary(
    device_id: str = Path(..., pattern=DEVICE_ID_PATTERN),
    db: Session = Depends(get_db),
):
    """Dashboard figures derived from the device's saved SIP and EMI inputs."""
    try:
        summary = summarize_dashboard(dashboard_inputs(_saved_values(db, device_id)))
    except ValueError as e:
        logger.warning(f"Cannot summarize saved inputs for device {device_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return asdict(summary)


@router.get("/{device_id}/{key}", response_model=SavedInputResponse)
async def get_saved_input(
    key: InputKey,
    device_id: str = Path(..., pattern=DEVICE_ID_PATTERN),
    db: Session = Depends(get_db),
):
    """Return one remembered input."""
    saved = _find(db, device_id, key)
    if not saved:
        raise HTTPException(status_code=404, detail="Input not saved")
    return saved_input_to_response(saved)


@router.put("/{device_id}/{key}", response_model=SavedInputResponse)
async def save_input(
    key: InputKey,
    update: SavedInputUpdate,
    device_id: str = Path(..., pattern=DEVICE_ID_PATTERN),
    db: Session = Depends(get_db),
):
    """Create or replace a remembered input."""
    saved = _find(db, device_id, key)
    if saved:
        saved.value = update.value
    else:
        saved = SavedInput(device_id=device_id, key=key.value, value=update.value)
        db.add(saved)

    db.commit()
    db.refresh(saved)

    logger.info(f"Saved input {key.value} for device {device_id}")
    return saved_input_to_response(saved)


@router.delete("/{device_id}/{key}")
async def delete_saved_input(
    key: InputKey,
    device_id: str = Path(..., pattern=DEVICE_ID_PATTERN),
    db: Session = Depends(get_db),
):
    """Forget a remembered input."""
    saved = _find(db, device_id, key)
    if not saved:
        raise HTTPException(status_code=404, detail="Input not saved")

    db.delete(saved)
    db.commit()

    logger.info(f"Deleted input {key.value} for device {device_id}")
    return {"message": "Input deleted successfully"}
