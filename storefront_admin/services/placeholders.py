"""
Placeholder content for pages without a real backing store yet (balance, settings, dashboard, pricing).
Nothing here is persisted; every call returns fresh objects.
"""
from datetime import date

from storefront_admin.schemas.merchant import (
    AppSettings,
    BalancePage,
    DashboardPage,
    FeatureCard,
    OverviewStat,
    PricingPlan,
    SelectOption,
    SettingsPage,
    SetupStep,
    Transaction,
)

DEPOSIT_AMOUNTS_VND = (500_000, 1_000_000, 2_000_000, 5_000_000, 10_000_000)

LAYOUT_OPTIONS = (
    ("Default", "default"),
    ("Compact", "compact"),
    ("Comfortable", "comfortable"),
)
LANGUAGE_OPTIONS = (("English", "en"), ("Vietnamese", "vi"))
# (label, value, disabled)
VOICE_OPTIONS = (
    ("None", "none", False),
    ("Vietnamese Female", "vi_female", False),
    ("Vietnamese Male", "vi_male", False),
    ("Coming soon - English Female", "en_female", True),
    ("Coming soon - English Male", "en_male", True),
)


def format_vnd(amount: int) -> str:
    """vi-VN currency display: dot thousands separator, trailing dong sign (e.g. "1.500.000 ₫")."""
    sign = "-" if amount < 0 else ""
    digits = f"{abs(int(amount)):,}".replace(",", ".")
    return f"{sign}{digits} ₫"


def default_settings() -> AppSettings:
    return AppSettings(status=True, layout="default", language="en", voice="none")


def settings_page() -> SettingsPage:
    return SettingsPage(
        settings=default_settings(),
        layout_options=[SelectOption(label=l, value=v) for l, v in LAYOUT_OPTIONS],
        language_options=[SelectOption(label=l, value=v) for l, v in LANGUAGE_OPTIONS],
        voice_options=[SelectOption(label=l, value=v, disabled=d) for l, v, d in VOICE_OPTIONS],
    )


def _transaction(tid: str, day: date, type_: str, amount: int, description: str) -> Transaction:
    return Transaction(
        id=tid,
        date=day,
        type=type_,
        amount=amount,
        amount_display=format_vnd(amount),
        status="Completed",
        description=description,
    )


def balance_page() -> BalancePage:
    balance = 1_500_000
    return BalancePage(
        current_balance=balance,
        current_balance_display=format_vnd(balance),
        transactions=[
            _transaction("1", date(2024, 3, 28), "Deposit", 500_000, "Bank transfer"),
            _transaction("2", date(2024, 3, 27), "Withdrawal", -200_000, "Service fee"),
            _transaction("3", date(2024, 3, 26), "Deposit", 1_200_000, "Sales revenue"),
        ],
        deposit_options=[
            SelectOption(label=f"{amount:,} VND", value=str(amount)) for amount in DEPOSIT_AMOUNTS_VND
        ],
    )


def pricing_plans() -> list[PricingPlan]:
    return [
        PricingPlan(
            name="Free",
            price_monthly_usd=0,
            description="Basic features for getting started.",
            features=["Up to 100 files", "1GB storage", "Email support"],
            icon_url="https://cdn-icons-png.flaticon.com/512/1828/1828884.png",
            cta="Choose Free",
        ),
        PricingPlan(
            name="Essential",
            price_monthly_usd=19,
            description="Advanced features for growing businesses.",
            features=["Unlimited files", "100GB storage", "Priority email support", "Advanced analytics"],
            icon_url="https://cdn-icons-png.flaticon.com/512/3135/3135715.png",
            cta="Choose Essential",
        ),
    ]


def dashboard_page() -> DashboardPage:
    return DashboardPage(
        setup_guide=[
            SetupStep(
                title="Install the app",
                description="Install our app from the Shopify App Store and approve the necessary permissions",
            ),
            SetupStep(
                title="Configure your settings",
                description="Go to Settings page and customize the app according to your needs",
            ),
            SetupStep(
                title="Test the functionality",
                description="Try out the main features to ensure everything works as expected",
            ),
        ],
        overview=[
            OverviewStat(label="Balance", value="0đ"),
            OverviewStat(label="Files", value="0"),
            OverviewStat(label="Storage", value="0 MB"),
        ],
        whats_new=[
            FeatureCard(
                title="Import reviews from everywhere",
                description=(
                    "Amazon, eBay, AliExpress, Temu, Etsy, and more. Now you can effortlessly get "
                    "high-quality reviews from any website. More social proof. More sales."
                ),
                released_on=date(2025, 4, 3),
            ),
            FeatureCard(
                title="Smarter review widget customization",
                description=(
                    "Click directly on any part of the sample widget to instantly find and edit that "
                    "design element. Faster styling, easier control with zero guesswork."
                ),
                released_on=date(2025, 3, 31),
            ),
            FeatureCard(
                title="Global settings for all reviews",
                description=(
                    "Set it once, sync it everywhere. Control font, size, color, branding style, and more "
                    "across all your widgets. Save time and keep your store consistent."
                ),
                released_on=date(2025, 3, 30),
            ),
        ],
    )
