from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App credentials from the partner dashboard; the secret signs embedded session tokens
    shopify_api_key: str = ""
    shopify_api_secret: str = ""
    # Admin API token used for the GraphQL pass-through (custom app / offline token)
    shopify_admin_access_token: str = ""
    shopify_api_version: str = "2025-01"
    shopify_admin_host: str = "admin.shopify.com"
    session_token_leeway_seconds: int = 10

    list_page_size: int = 10
    http_timeout_seconds: float = 30.0
    rate_limit_default: str = "200/minute"
    cors_origins: str = ""
    app_env: str = "development"  # "production" enables strict checks (API secret, access token)
    debug: bool = False

    @property
    def session_token_audience(self) -> str | None:
        """Expected `aud` claim of session tokens; None disables the audience check (dev only)."""
        return self.shopify_api_key.strip() or None

    def admin_graphql_url(self, shop: str) -> str:
        """Admin GraphQL endpoint for a shop domain (e.g. example.myshopify.com)."""
        return f"https://{shop}/admin/api/{self.shopify_api_version}/graphql.json"

    def validate_production_config(self) -> None:
        """Raise if production config cannot verify sessions or reach the Admin API."""
        if self.app_env != "production":
            return
        if not self.shopify_api_secret.strip():
            raise RuntimeError("SHOPIFY_API_SECRET must be set in production")
        if not self.shopify_api_key.strip():
            raise RuntimeError("SHOPIFY_API_KEY must be set in production")
        if not self.shopify_admin_access_token.strip():
            raise RuntimeError("SHOPIFY_ADMIN_ACCESS_TOKEN must be set in production")
        if self.list_page_size < 1:
            raise RuntimeError("LIST_PAGE_SIZE must be a positive integer")


settings = Settings()
