from decimal import Decimal
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from shopping_cart.core.exceptions.configuration_error import ConfigurationError
from shopping_cart.infrastructure.configuration.properties_settings_source import (
    PropertiesSettingsSource,
)

DEFAULT_PRODUCT_API_URL = "https://equalexperts.github.io/"
DEFAULT_TAX_RATE = Decimal("0.125")


class CartSettings(BaseSettings):
    """
    Settings for a shopping cart session.
    Priority: init kwargs > PRODUCT_* env vars > config.properties > defaults.
    """
    api_url: str = Field(default=DEFAULT_PRODUCT_API_URL, min_length=1, description="Pricing service root URL")
    tax_rate: Decimal = Field(default=DEFAULT_TAX_RATE, ge=0, description="Fractional tax rate, e.g. 0.125")
    api_timeout: float | None = Field(default=None, gt=0, description="Pricing call timeout in seconds; None waits indefinitely")
    lock_stripes: int = Field(default=16, ge=1, description="Number of lock stripes guarding product updates")

    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_",
        frozen=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, PropertiesSettingsSource(settings_cls))


def load_cart_settings(**overrides: Any) -> CartSettings:
    """Build CartSettings, turning any validation or file error into ConfigurationError."""
    try:
        return CartSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid cart settings: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not read cart settings file: {e}") from e
