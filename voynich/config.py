"""Analysis configuration.

The ciphertext, the fixed cipher keys and the language list are plain
values on an AnalysisConfig, so a run never depends on module state. A JSON
file may override any field; see load_config().
"""

import json
import re
import string
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import ConfigError

# Voynich manuscript, f93v (voynich.nu transcription)
CIPHERTEXT = "possheody qoteeo qosho cphy opchody opor opchy otchdal or shodaiin"

LANGUAGES = (
    "akkadian", "anglosaxxon", "arabic", "aramaic", "celtic", "chinese", "egyptian",
    "etruscan", "farsi", "french", "german", "greek", "hebrew", "italian", "latin",
    "portuguese", "protoroman", "russian", "sanskrit", "spanish", "sumerian",
)

DICTIONARY_DIR = "./dictionary"
VIGENERE_KEY = "VOYNICH"

# Partial key: only a-d are substituted, every other letter is left as is.
MONOALPHABETIC_KEY = MappingProxyType({'a': 'z', 'b': 'y', 'c': 'x', 'd': 'w'})


def clean_text(text: str) -> str:
    """Drop everything but letters and whitespace, then lowercase and trim."""
    return re.sub(r"[^a-zA-Z\s]", "", text).lower().strip()


@dataclass(frozen=True)
class AnalysisConfig:
    ciphertext: str = CIPHERTEXT
    substitution_key: Mapping[str, str] = field(default_factory=lambda: MONOALPHABETIC_KEY)
    poly_keyword: str = VIGENERE_KEY
    languages: Tuple[str, ...] = LANGUAGES
    dictionary_dir: Path = Path(DICTIONARY_DIR)
    clean: bool = True
    workers: int = 1

    def prepared_text(self) -> str:
        """The ciphertext as the techniques see it."""
        return clean_text(self.ciphertext) if self.clean else self.ciphertext

    def override(self, **changes) -> "AnalysisConfig":
        """Copy with the non-None values of ``changes`` applied."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **_coerce(changes))


def _parse_substitution_key(raw) -> Mapping[str, str]:
    if not isinstance(raw, dict):
        raise ConfigError("substitution_key must be an object of letter -> letter")
    key = {}
    for cipher, plain in raw.items():
        if not (isinstance(cipher, str) and isinstance(plain, str)
                and len(cipher) == 1 and len(plain) == 1
                and cipher in string.ascii_letters and plain in string.ascii_letters):
            raise ConfigError(f"Invalid substitution pair: {cipher!r} -> {plain!r}")
        key[cipher.lower()] = plain.lower()
    return MappingProxyType(key)


def _require(values: dict, name: str, kind, description: str) -> None:
    if name in values and not isinstance(values[name], kind):
        raise ConfigError(f"{name} must be {description}: {values[name]!r}")


def _coerce(values: dict) -> dict:
    out = dict(values)
    _require(out, "ciphertext", str, "a string")
    _require(out, "poly_keyword", str, "a string")
    _require(out, "dictionary_dir", (str, Path), "a path string")
    _require(out, "clean", bool, "true or false")
    _require(out, "languages", (str, list, tuple), "a string or a list of strings")
    if "languages" in out and not isinstance(out["languages"], str):
        if not all(isinstance(lang, str) for lang in out["languages"]):
            raise ConfigError(f"languages must be a list of strings: {out['languages']!r}")
    if "substitution_key" in out:
        out["substitution_key"] = _parse_substitution_key(out["substitution_key"])
    if "languages" in out:
        languages = out["languages"]
        if isinstance(languages, str):
            languages = [lang.strip() for lang in languages.split(",")]
        out["languages"] = tuple(lang for lang in languages if lang)
    if "dictionary_dir" in out:
        out["dictionary_dir"] = Path(out["dictionary_dir"])
    if "workers" in out:
        try:
            out["workers"] = max(1, int(out["workers"]))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"workers must be an integer: {out['workers']!r}") from e
    return out


def load_config(path=None, base: AnalysisConfig = None) -> AnalysisConfig:
    """
    Build a configuration from a JSON file.
    Keys of the JSON object override the matching fields of ``base``
    (the defaults when omitted); unknown keys are rejected.
    """
    base = base or AnalysisConfig()
    if path is None:
        return base
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")

    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
    return replace(base, **_coerce(data))
