"""
Locale profile loading.

Profiles are JSON files named `<code>.json`. The built-in ones ship in
`numeral_speller/data/`; an extra directory can add locales or override a
built-in one with the same code.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import LocaleProfile

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def load_profile(path: str | Path) -> LocaleProfile:
    """Load and validate one locale profile.

    Raises:
        pydantic.ValidationError: if a table has the wrong shape.
    """
    with Path(path).open(encoding="utf-8") as f:
        return LocaleProfile.model_validate(json.load(f))


def load_profiles(extra_dir: str | Path | None = None) -> dict[str, LocaleProfile]:
    """Load every built-in profile, then those in `extra_dir` (if given).

    Returns:
        Profiles keyed by locale code.
    """
    directories = [DATA_DIR]
    if extra_dir is not None:
        directories.append(Path(extra_dir))

    profiles: dict[str, LocaleProfile] = {}
    for directory in directories:
        for path in sorted(directory.glob("*.json")):
            profile = load_profile(path)
            if profile.code in profiles:
                logger.info("Locale '%s' overridden by %s", profile.code, path)
            profiles[profile.code] = profile

    logger.info("Loaded %d locale profile(s): %s", len(profiles), ", ".join(profiles))
    return profiles
