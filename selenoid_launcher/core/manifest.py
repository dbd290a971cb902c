"""
Browser manifest (browsers.json) models.

The manifest maps a browser name to its default version and the images backing
each version. JSON files are parsed with json, anything else with PyYAML.
"""

import json
from pathlib import Path
from typing import Dict, Iterator, List

import yaml
from pydantic import BaseModel, RootModel, ValidationError

from .exceptions import ManifestError


class BrowserVersion(BaseModel):
    image: str
    port: int
    path: str


class BrowserEntry(BaseModel):
    default: str
    versions: Dict[str, BrowserVersion]


class BrowserManifest(RootModel[Dict[str, BrowserEntry]]):
    """Parsed browsers.json."""

    def browsers(self) -> List[str]:
        return list(self.root)

    def image_references(self) -> Iterator[str]:
        """Yield every version's image, in manifest order."""
        for entry in self.root.values():
            for version in entry.versions.values():
                yield version.image


def parse_browser_manifest(payload: object, source: str = "<memory>") -> BrowserManifest:
    if not isinstance(payload, dict):
        raise ManifestError(source, "top level must be a mapping of browser names")
    try:
        return BrowserManifest.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ManifestError(source, problems) from exc


def load_browser_manifest(path: str) -> BrowserManifest:
    manifest_path = Path(path)
    try:
        # utf-8-sig tolerates the BOM some Windows editors prepend.
        text = manifest_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        reason = f"file is not UTF-8 encoded ({exc.reason} at byte {exc.start})"
        raise ManifestError(path, reason) from exc
    except OSError as exc:
        raise ManifestError(path, f"unable to read file ({exc.strerror or exc})") from exc

    try:
        if manifest_path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ManifestError(path, f"malformed document ({exc})") from exc

    return parse_browser_manifest(payload, source=path)
