import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Appended to the transcoder options group so the remote keeps its own encoder settings
TRANSCODER_SETTINGS_POSTFIX = "/NetworkRemote"


@dataclass(frozen=True)
class TranscoderPreset:
    name: str
    extension: str
    codec_mimetype: str
    type: str  # passed through to the transcoder untouched

    @property
    def label(self) -> str:
        return f"{self.name} (.{self.extension})"


def all_presets() -> list[TranscoderPreset]:
    """Presets the transcoder can produce, in transcoder order."""
    return [
        TranscoderPreset("FLAC", "flac", "audio/x-flac", "flac"),
        TranscoderPreset("M4A AAC", "mp4", "audio/mpeg, mpegversion=(int)4", "mp4"),
        TranscoderPreset("MP3", "mp3", "audio/mpeg, mpegversion=(int)1, layer=(int)3", "mpeg"),
        TranscoderPreset("Ogg Vorbis", "ogg", "audio/x-vorbis", "ogg_vorbis"),
        TranscoderPreset("Ogg FLAC", "ogg", "audio/x-flac", "ogg_flac"),
        TranscoderPreset("Ogg Speex", "spx", "audio/x-speex", "ogg_speex"),
        TranscoderPreset("Ogg Opus", "opus", "audio/x-opus", "ogg_opus"),
        TranscoderPreset("Windows Media audio", "wma", "audio/x-wma", "asf"),
        TranscoderPreset("Wav", "wav", "audio/x-wav", "wav"),
    ]


class PresetCatalog:
    """Transcoder presets sorted by display name.

    The source is read once; equal names keep their source order.
    """

    def __init__(self, source: Callable[[], Iterable[TranscoderPreset]] = all_presets):
        self._presets = sorted(source(), key=lambda preset: preset.name)
        logger.debug("Loaded %d transcoder presets", len(self._presets))

    def all(self) -> list[TranscoderPreset]:
        return list(self._presets)

    def index_of(self, codec_mimetype: str) -> int | None:
        for i, preset in enumerate(self._presets):
            if preset.codec_mimetype == codec_mimetype:
                return i
        return None

    def get(self, index: int | None) -> TranscoderPreset | None:
        if index is None or not 0 <= index < len(self._presets):
            return None
        return self._presets[index]

    def options_group(self, preset: TranscoderPreset) -> str:
        """Settings group holding the remote's encoder options for ``preset``."""
        return f"Transcoder/{preset.type}{TRANSCODER_SETTINGS_POSTFIX}"

    def __len__(self) -> int:
        return len(self._presets)


preset_catalog = PresetCatalog()
