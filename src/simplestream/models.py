from pydantic import BaseModel, ConfigDict


class ReleaseSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    release_title: str
    release: str


class CurrentRelease(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    pubname: str


class ImageDigest(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    pubname: str
    image_tag: str
    sha256: str


class ReleaseNotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str


DigestLookup = ImageDigest | ReleaseNotFound
