from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError
import yaml

from ..errors import FileError
from ..model.site import SiteParameters

KEYS = ("latitude", "longitude", "timezone")


def parse_key_values(text: str) -> Dict[str, Optional[str]]:
  """`key value` per line; keys lower-cased, later lines win."""
  params = {}
  for line in text.splitlines():
    parts = line.split()
    if not parts or parts[0].startswith("#"):
      continue
    params[parts[0].lower()] = parts[1] if len(parts) > 1 else None
  return params


def _load_yaml(path: Path, text: str) -> dict:
  try:
    raw = yaml.safe_load(text) or {}
  except yaml.YAMLError as e:
    raise FileError(f"{path}: invalid YAML: {e}") from e
  if not isinstance(raw, dict):
    raise FileError(f"{path}: expected a mapping of latitude/longitude/timezone")
  return {str(k).lower(): v for k, v in raw.items()}


def read_parameters(path) -> SiteParameters:
  path = Path(path)
  try:
    text = path.read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    raise FileError(f"cannot open parameter file {path}: {e}") from e

  if path.suffix.lower() in (".yaml", ".yml"):
    raw = _load_yaml(path, text)
  else:
    raw = parse_key_values(text)

  missing = [k for k in KEYS if raw.get(k) is None]
  if missing:
    raise FileError(f"{path}: missing {', '.join(missing)}")
  try:
    return SiteParameters(**{k: raw[k] for k in KEYS})
  except ValidationError as e:
    err = e.errors()[0]
    field = ".".join(str(p) for p in err["loc"])
    raise FileError(f"{path}: {field}: {err['msg']}") from e
