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
"""Creates user accounts across Firebase Authentication and Firestore."""

from dataclasses import asdict

from firebase_admin import auth, firestore
from firebase_functions import logger
from google.cloud.firestore_v1 import SERVER_TIMESTAMP

from shared.api import AdminCreateUserRequest, AdminCreateUserResult, UserProfile
from shared.config import get_settings
from shared.json_utils import convert_keys


def create_user(request: AdminCreateUserRequest) -> AdminCreateUserResult:
    """
    Creates the auth user, assigns its role claim, saves its profile and,
    if requested, generates an invite (password reset) link.

    Steps run in order and the first failure propagates. Steps that already
    succeeded are not undone, e.g. a failed profile write leaves the auth
    user in place without a profile document.
    """
    settings = get_settings()
    is_active = bool(request.is_active)

    auth_args = {
        "email": request.email,
        "email_verified": False,
        "display_name": request.name,
        "disabled": not is_active,
    }
    if request.password and not request.send_invite:
        auth_args["password"] = request.password

    user_record = auth.create_user(**auth_args)
    uid = user_record.uid
    logger.info(f"Created auth user {uid} for {request.email}")

    auth.set_custom_user_claims(uid, {settings.role_claim: request.role})
    logger.info(f"Set role claim '{request.role}' for {uid}")

    _save_user_profile(
        uid,
        UserProfile(
            email=request.email,
            name=request.name,
            role=request.role,
            is_active=is_active,
        ),
    )

    if request.send_invite:
        link = generate_invite_link(request.email)
        logger.info(f"Password reset link for {request.email}: {link}")

    return AdminCreateUserResult(success=True, uid=uid)


def _save_user_profile(uid: str, profile: UserProfile) -> None:
    """Writes the profile document at {users_collection}/{uid}."""
    settings = get_settings()
    profile_json = convert_keys(asdict(profile), "snake_to_camel")
    profile_json["createdAt"] = SERVER_TIMESTAMP
    profile_json["updatedAt"] = SERVER_TIMESTAMP

    db = firestore.client()
    db.collection(settings.users_collection).document(uid).set(profile_json)
    logger.info(f"Saved profile document for {uid}")


def generate_invite_link(email: str) -> str:
    """Returns a password reset link that serves as the invite for email."""
    settings = get_settings()
    action_code_settings = None
    if settings.invite_continue_url:
        action_code_settings = auth.ActionCodeSettings(
            url=settings.invite_continue_url
        )
    return auth.generate_password_reset_link(
        email, action_code_settings=action_code_settings
    )
