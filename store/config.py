"""Record store configuration."""

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """
    Record store configuration.

    Key names are the physical keys in the blob backend; the rest of the
    code addresses collections through CollectionKey.
    """

    users_key: str = Field(
        default="petconnect_users",
        description="Backend key holding the users array",
        min_length=1,
    )
    pets_key: str = Field(
        default="petconnect_pets",
        description="Backend key holding the pets array",
        min_length=1,
    )
    auth_key: str = Field(
        default="petconnect_auth",
        description="Backend key holding the auth-session object",
        min_length=1,
    )

    # In-memory backend
    quota_bytes: int = Field(
        default=5 * 1024 * 1024,  # 5 MiB, typical browser storage limit
        description="Maximum total size of the in-memory backend",
        ge=1024,
    )

    seed_default_data: bool = Field(
        default=True,
        description="Seed sample pets when a marketplace opens on an empty store",
    )
