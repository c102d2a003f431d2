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

# Cloud functions for user administration.
#
# This file containing Python cloud functions must be named main.py.
# See https://cloud.google.com/run/docs/write-functions#python for more info.

# Standard library imports
from dataclasses import asdict

# Third-party library imports
from dacite import from_dict, Config
from firebase_admin import initialize_app
from firebase_functions import https_fn, logger, options

# Local application imports
from admin import users
from shared.api import AdminCreateUserRequest
from shared.config import get_settings
from shared.json_utils import convert_keys

initialize_app()


def _check_caller_is_admin(auth_data: https_fn.AuthData | None) -> None:
    """Raises unless the caller is signed in and holds the admin role claim."""
    if not auth_data:
        logger.warn("Rejected admin_create_user call without auth context")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.UNAUTHENTICATED,
            "The user must be logged in.",
        )

    settings = get_settings()
    caller_role = (auth_data.token or {}).get(settings.role_claim)
    if caller_role != settings.admin_role:
        logger.warn(
            f"Rejected admin_create_user call from {auth_data.uid} with role {caller_role}"
        )
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.PERMISSION_DENIED,
            "Only authorized users can create new accounts.",
        )


def handle_admin_create_user(req: https_fn.CallableRequest) -> dict:
    """
    Authorizes the caller, then creates the requested user.

    Args:
        req (https_fn.CallableRequest): The request, containing email, name,
            role, isActive, password and sendInvite.

    Returns:
        A dictionary representation of the AdminCreateUserResult object.
    """
    _check_caller_is_admin(req.auth)

    try:
        data = {} if req.data is None else req.data
        if not isinstance(data, dict):
            raise ValueError("Request data must be an object.")
        request = from_dict(
            data_class=AdminCreateUserRequest,
            data=convert_keys(data, "camel_to_snake"),
            config=Config(check_types=False),
        )
        result = users.create_user(request)
    except Exception as e:
        logger.error(f"Error creating new user: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            str(e) or "Failed to create user.",
        )

    return asdict(result)


@https_fn.on_call(memory=options.MemoryOption.MB_256)
def admin_create_user(req: https_fn.CallableRequest) -> dict:
    """Callable entry point for admins creating new user accounts."""
    return handle_admin_create_user(req)
