from pydantic import BaseModel, Field, field_validator

from netremote.config import settings as app_settings
from netremote.services.auth_code import AUTH_CODE_MAX, default_auth_code
from netremote.services.extensions import (
    DEFAULT_MUSIC_EXTENSIONS,
    filter_extensions,
    join_extension_list,
    parse_extension_list,
)

DEFAULT_OUTPUT_FORMAT = "audio/x-vorbis"
MAX_PORT = 65535


def _parse_text_extensions(value):
    if isinstance(value, str):
        return parse_extension_list(value)
    if isinstance(value, (list, tuple)):
        return filter_extensions(value)
    return value


class RemoteSettings(BaseModel):
    enabled: bool = False
    port: int = Field(default_factory=lambda: app_settings.default_server_port, ge=1, le=MAX_PORT)
    only_non_public_ip: bool = True
    use_auth_code: bool = False
    auth_code: int = Field(default_factory=default_auth_code)
    allow_downloads: bool = False
    convert_lossless: bool = False
    output_format_id: str = DEFAULT_OUTPUT_FORMAT
    root_folder: str = ""
    allowed_extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_MUSIC_EXTENSIONS))

    # Filled on load for display, never persisted
    ip_addresses: str = ""
    output_format_index: int | None = None

    @field_validator("allowed_extensions", mode="before")
    @classmethod
    def parse_extension_text(cls, value):
        return _parse_text_extensions(value)

    @property
    def allowed_extensions_text(self) -> str:
        return join_extension_list(self.allowed_extensions)


class RemoteSettingsUpdate(BaseModel):
    enabled: bool | None = None
    port: int | None = Field(default=None, ge=1, le=MAX_PORT)
    only_non_public_ip: bool | None = None
    use_auth_code: bool | None = None
    auth_code: int | None = Field(default=None, ge=0, le=AUTH_CODE_MAX)
    allow_downloads: bool | None = None
    convert_lossless: bool | None = None
    output_format_id: str | None = None
    root_folder: str | None = None
    allowed_extensions: list[str] | None = None

    @field_validator("allowed_extensions", mode="before")
    @classmethod
    def parse_extension_text(cls, value):
        return _parse_text_extensions(value)


class PresetRead(BaseModel):
    index: int
    name: str
    extension: str
    codec_mimetype: str
    type: str
    label: str


class CompanionLink(BaseModel):
    trigger: str
    url: str
