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

from dataclasses import dataclass
from typing import Optional


@dataclass
class AdminCreateUserRequest:
    """Request payload sent by an admin to create a new user account."""

    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    is_active: bool = False
    # Ignored when send_invite is set; the invited user picks their own.
    password: Optional[str] = None
    send_invite: bool = False


@dataclass
class AdminCreateUserResult:
    success: bool
    uid: str


@dataclass
class UserProfile:
    """
    Schema for the profile document stored in Firestore, keyed by auth uid.

    The createdAt/updatedAt server timestamps are added at write time.
    """

    email: Optional[str]
    name: Optional[str]
    role: Optional[str]
    is_active: bool
