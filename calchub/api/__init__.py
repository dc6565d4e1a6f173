"""
API routes for the calculators.
"""

from fastapi import APIRouter

from calchub.api import fitness, investments, loans, statistics

router = APIRouter()

# Include sub-routers
router.include_router(loans.router, prefix="/calculate", tags=["loans"])
router.include_router(investments.router, prefix="/calculate", tags=["investments"])
router.include_router(statistics.router, prefix="/calculate", tags=["statistics"])
router.include_router(fitness.router, prefix="/calculate", tags=["fitness"])
