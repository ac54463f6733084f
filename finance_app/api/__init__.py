"""
API routes for the finance calculators.
"""

from fastapi import APIRouter

from finance_app.api import calculations, inputs

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(inputs.router, prefix="/inputs", tags=["inputs"])
