"""Schemas for placeholder merchant pages: dashboard, balance, pricing, app settings."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field


class SelectOption(BaseModel):
    label: str
    value: str
    disabled: bool = False


class AppSettings(BaseModel):
    """Storefront audio player settings. Only enabled voices can be chosen."""

    status: bool = True  # audio player on/off
    layout: Literal["default", "compact", "comfortable"] = "default"
    language: Literal["en", "vi"] = "en"
    voice: Literal["none", "vi_female", "vi_male"] = "none"


class SettingsPage(BaseModel):
    settings: AppSettings
    layout_options: list[SelectOption]
    language_options: list[SelectOption]
    voice_options: list[SelectOption]


class SettingsUpdateResult(BaseModel):
    success: bool
    settings: AppSettings


class Transaction(BaseModel):
    id: str
    date: date
    type: str  # "Deposit" | "Withdrawal"
    amount: int  # signed; withdrawals are negative
    amount_display: str
    status: str
    description: str


class BalancePage(BaseModel):
    current_balance: int
    current_balance_display: str
    currency: str = "VND"
    transactions: list[Transaction]
    deposit_options: list[SelectOption]


class PricingPlan(BaseModel):
    name: str
    price_monthly_usd: int
    description: str
    features: list[str]
    icon_url: str
    cta: str


class SetupStep(BaseModel):
    title: str
    description: str


class OverviewStat(BaseModel):
    label: str
    value: str


class FeatureCard(BaseModel):
    title: str
    description: str
    released_on: date
    cta: str = "Try it now"


class DashboardPage(BaseModel):
    setup_guide: list[SetupStep]
    overview: list[OverviewStat]
    whats_new: list[FeatureCard] = Field(default_factory=list)
