# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""
Configuration for the user administration functions.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.firebase_constants import ADMIN_ROLE, ROLE_CLAIM, USERS_COLLECTION


class Settings(BaseSettings):
    """Environment-backed settings, read from ADMIN_USERS_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="ADMIN_USERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Firestore collection holding one profile document per auth uid.
    users_collection: str = Field(default=USERS_COLLECTION)

    # Custom claim carrying the role, and the value allowed to create users.
    role_claim: str = Field(default=ROLE_CLAIM)
    admin_role: str = Field(default=ADMIN_ROLE)

    # Where the password reset page sends the invited user afterwards.
    invite_continue_url: Optional[str] = Field(default=None)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
