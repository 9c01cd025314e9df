"""Runtime settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from credential_hasher.domain.hashing_parameters import (
    DEFAULT_ITERATIONS,
    DEFAULT_KEY_LENGTH_BITS,
    DEFAULT_PRF_HASH,
    DEFAULT_SALT_LENGTH,
    HashingParameters,
    PositiveInt,
    PrfHashName,
)


class Settings(BaseSettings):
    """Environment-driven password hashing settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_hash_iterations: PositiveInt = Field(
        default=DEFAULT_ITERATIONS,
        validation_alias="PASSWORD_HASH_ITERATIONS",
    )
    password_hash_key_length_bits: PositiveInt = Field(
        default=DEFAULT_KEY_LENGTH_BITS,
        validation_alias="PASSWORD_HASH_KEY_LENGTH_BITS",
    )
    password_hash_salt_length: PositiveInt = Field(
        default=DEFAULT_SALT_LENGTH,
        validation_alias="PASSWORD_HASH_SALT_LENGTH",
    )
    password_hash_prf: PrfHashName = Field(
        default=DEFAULT_PRF_HASH,
        validation_alias="PASSWORD_HASH_PRF",
    )

    def hashing_parameters(self) -> HashingParameters:
        """Return validated key-derivation parameters for these settings."""

        return HashingParameters(
            iterations=self.password_hash_iterations,
            key_length_bits=self.password_hash_key_length_bits,
            salt_length=self.password_hash_salt_length,
            prf_hash=self.password_hash_prf,
        )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
