import os
from dataclasses import dataclass, replace

DEFAULT_URL = "https://cloud-images.ubuntu.com/releases/streams/v1/com.ubuntu.cloud:released:download.json"


@dataclass(frozen=True)
class StreamConfig:
    url: str = DEFAULT_URL
    architecture: str = "amd64"
    image_tag: str = "disk1.img"
    digest_field: str = "sha256"
    timeout: float = 30.0


def load_config(**overrides: object) -> StreamConfig:
    """Build a ``StreamConfig`` from ``SIMPLESTREAM_*`` environment variables.

    Keyword overrides whose value is ``None`` are ignored so CLI options can be
    passed straight through.
    """
    raw_timeout = os.getenv("SIMPLESTREAM_TIMEOUT")
    try:
        timeout = float(raw_timeout) if raw_timeout else StreamConfig.timeout
    except ValueError:
        raise ValueError(f"SIMPLESTREAM_TIMEOUT must be a number, got {raw_timeout!r}") from None

    config = StreamConfig(
        url=os.getenv("SIMPLESTREAM_URL", DEFAULT_URL),
        architecture=os.getenv("SIMPLESTREAM_ARCH", StreamConfig.architecture),
        image_tag=os.getenv("SIMPLESTREAM_IMAGE_TAG", StreamConfig.image_tag),
        timeout=timeout,
    )
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(config, **changes) if changes else config  # type: ignore[arg-type]
