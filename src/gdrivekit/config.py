"""Environment-driven configuration for gdrivekit."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from gdrivekit.auth.auth_info import load_json_file
from gdrivekit.auth.manager import DEFAULT_SCOPES
from gdrivekit.errors import InvalidArgumentError, TokenParseError

ENV_ROOT_FOLDER = "GOOGLE_DRIVE_ROOT_FOLDER"
ENV_KEY_FILE = "GOOGLE_DRIVE_KEY_FILE"
ENV_CREDENTIALS = "GOOGLE_CREDENTIALS"
ENV_SCOPES = "GOOGLE_DRIVE_SCOPES"


@dataclass(frozen=True)
class DriveConfig:
    """
    Settings shared by a GoogleDrive instance.

    Attributes:
        root_folder: folder id used when an operation gets no folder.
        scopes: OAuth scopes requested for every credential flow.
        key_file: path to a service-account key file.
        credentials_json: raw service-account JSON (wins over key_file).
    """

    root_folder: Optional[str] = None
    scopes: tuple[str, ...] = DEFAULT_SCOPES
    key_file: Optional[str] = None
    credentials_json: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DriveConfig":
        env = os.environ if environ is None else environ

        scopes_raw = env.get(ENV_SCOPES, "").strip()
        if scopes_raw:
            scopes = tuple(s.strip() for s in scopes_raw.split(",") if s.strip())
        else:
            scopes = DEFAULT_SCOPES

        return cls(
            root_folder=_blank_to_none(env.get(ENV_ROOT_FOLDER)),
            scopes=scopes,
            key_file=_blank_to_none(env.get(ENV_KEY_FILE)),
            credentials_json=_blank_to_none(env.get(ENV_CREDENTIALS)),
        )

    def service_account_info(self) -> dict[str, Any]:
        """
        Return the configured service-account key as a dict.

        Raises:
            InvalidArgumentError: if neither credentials_json nor key_file is set.
            TokenParseError: if credentials_json is not a JSON object.
            NotFoundError: if key_file does not exist.
        """
        if self.credentials_json:
            try:
                info = json.loads(self.credentials_json)
            except json.JSONDecodeError as exc:
                raise TokenParseError(
                    f"{ENV_CREDENTIALS} is not valid JSON",
                    cause=exc,
                ) from exc
            if not isinstance(info, dict):
                raise TokenParseError(f"{ENV_CREDENTIALS} must hold a JSON object")
            return info

        if self.key_file:
            return load_json_file(self.key_file)

        raise InvalidArgumentError(
            "No service account configured",
            details={"hint": f"Set {ENV_CREDENTIALS} or {ENV_KEY_FILE}"},
        )


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()
