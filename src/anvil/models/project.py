"""Documents written into a new Anvil Connect deployment.

The package.json manifest and the per-environment configuration
files. Field order here is the key order in the generated JSON.
"""

from __future__ import annotations

import secrets

from pydantic import BaseModel, Field

# Number of random bytes per secret (hex-encoded to twice as many chars)
SECRET_BYTES = 10

GOOGLE_SCOPES: list[str] = [
    "https://www.googleapis.com/auth/userinfo.profile",
    "https://www.googleapis.com/auth/userinfo.email",
]


def generate_secret() -> str:
    """Return a fresh hex secret from the OS CSPRNG."""
    return secrets.token_hex(SECRET_BYTES)


class PackageManifest(BaseModel):
    """package.json for the deployment project."""

    name: str
    version: str = "0.0.0"
    description: str = "Anvil Connect Deployment"
    private: bool = True
    main: str = "server.js"
    scripts: dict[str, str] = Field(default_factory=lambda: {"start": "node server.js"})
    engines: dict[str, str] = Field(default_factory=lambda: {"node": ">=0.12.0"})
    dependencies: dict[str, str] = Field(
        default_factory=lambda: {"anvil-connect": "0.1.42"}
    )


class GoogleProvider(BaseModel):
    """Placeholder Google OAuth credentials."""

    client_id: str = "ID"
    client_secret: str = "SECRET"
    scope: list[str] = Field(default_factory=lambda: list(GOOGLE_SCOPES))


class RedisConfig(BaseModel):
    """Placeholder Redis connection block (production only)."""

    url: str = "redis://HOST:PORT"
    auth: str = "PASSWORD"


class ProvidersConfig(BaseModel):
    password: bool = True
    google: GoogleProvider = Field(default_factory=GoogleProvider)
    redis: RedisConfig | None = None


class DeploymentConfig(BaseModel):
    """Server configuration for one environment.

    Both secrets come from default factories, so every instance gets
    its own independently generated values.
    """

    port: int
    issuer: str
    client_registration: str = "scoped"
    cookie_secret: str = Field(default_factory=generate_secret)
    session_secret: str = Field(default_factory=generate_secret)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)


def development_config() -> DeploymentConfig:
    """Default config/development.json contents."""
    return DeploymentConfig(port=3000, issuer="http://localhost:3000")


def production_config() -> DeploymentConfig:
    """Default config/production.json contents, including the redis block."""
    return DeploymentConfig(
        port=80,
        issuer="https://HOST",
        providers=ProvidersConfig(redis=RedisConfig()),
    )
