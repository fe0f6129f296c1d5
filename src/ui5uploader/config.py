"""Option resolution and configuration models."""

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Package name that needs no transport request
LOCAL_PACKAGE = "$TMP"


def coerce_flag(value: Any) -> bool:
    """Return True only for ``True``, ``"true"`` or ``"1"``.

    Matching is case-sensitive, so ``"TRUE"`` or ``"yes"`` are False.
    """
    return value is True or value == "true" or value == "1"


class UploadOptions(BaseModel):
    """Resolved options of the upload command, one field per CLI flag."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    conn_server: str = ""
    conn_user: str = ""
    conn_password: str = Field(default="", repr=False)
    conn_client: str = ""
    conn_usestrictssl: bool = True
    base: str = ""
    files: str = "**"
    abap_transport: str = ""
    abap_package: str = ""
    abap_bsp: str = ""
    abap_bsp_text: str = ""
    abap_language: str = "EN"
    calcappindex: bool = False

    @field_validator("conn_usestrictssl", "calcappindex", mode="before")
    @classmethod
    def _coerce_flag(cls, v: Any) -> bool:
        return coerce_flag(v)

    def masked(self) -> dict[str, Any]:
        """Dump the options with the password hidden, for logging."""
        data = self.model_dump()
        if data["conn_password"]:
            data["conn_password"] = "****"
        return data


OPTION_NAMES = tuple(UploadOptions.model_fields)


def resolve_options(*layers: Mapping[str, Any] | None) -> UploadOptions:
    """
    Merge option layers over the defaults.

    Layers are applied in order, so later layers win. A value of ``None``
    means "not provided" and never overwrites an earlier value, while an
    explicit empty string or ``False`` does. Unknown keys are ignored.

    Args:
        *layers: Mappings of option name to value (options file, CLI flags...)

    Returns:
        UploadOptions with every field resolved
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        for key in OPTION_NAMES:
            value = layer.get(key)
            if value is not None:
                merged[key] = value

    return UploadOptions(**merged)


def load_options_file(config_path: Path) -> dict[str, Any]:
    """Load upload options from a YAML file."""
    with open(config_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Options file must contain a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - set(OPTION_NAMES))
    if unknown:
        raise ValueError(f"Unknown options in {config_path}: {unknown}. Available: {list(OPTION_NAMES)}")

    return data


class ConnectionConfig(BaseModel):
    """Where to connect to."""

    server: str
    client: str = ""
    use_strict_ssl: bool = True


class AuthConfig(BaseModel):
    """Credentials for the repository service."""

    user: str
    password: str = Field(repr=False)


class PackagingConfig(BaseModel):
    """Target package and BSP container metadata."""

    language: str = "EN"
    transport_no: str = ""
    package: str
    bsp_container: str
    bsp_container_text: str
    calc_app_index: bool = False


class FileStoreConfig(BaseModel):
    """Configuration handed to a file store client."""

    connection: ConnectionConfig
    auth: AuthConfig
    packaging: PackagingConfig
