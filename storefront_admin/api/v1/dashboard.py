"""Dashboard, pricing and balance pages (static/placeholder content)."""

from fastapi import APIRouter

from storefront_admin.api.deps import CurrentSession
from storefront_admin.schemas.merchant import BalancePage, DashboardPage, PricingPlan
from storefront_admin.services.placeholders import balance_page, dashboard_page, pricing_plans

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardPage, summary="Dashboard")
async def get_dashboard(session: CurrentSession) -> DashboardPage:
    """Setup guide, overview stats and feature announcements."""
    return dashboard_page()


@router.get("/balance", response_model=BalancePage, summary="Balance")
async def get_balance(session: CurrentSession) -> BalancePage:
    """Current balance, transaction history and deposit amounts. Placeholder data, no ledger behind it."""
    return balance_page()


@router.get("/pricing", response_model=list[PricingPlan], summary="Pricing plans")
async def get_pricing() -> list[PricingPlan]:
    return pricing_plans()
