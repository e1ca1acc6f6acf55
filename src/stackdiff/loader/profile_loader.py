# loader/profile_loader.py
import json
import pathlib
from typing import Union

from pydantic import ValidationError

from ..errors import ProfileLoadError
from ..schemas import Profile
from ..utils.logger import get_logger

log = get_logger("ProfileLoader")


def load_profile(path: Union[str, pathlib.Path]) -> Profile:
    """
    Read a JSON profile written by the profiler.

    Raises:
        ProfileLoadError: if the file is unreadable, is not JSON, or does not
            match the Profile schema.
    """
    path = pathlib.Path(path)
    log.debug(f"Loading profile from {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ProfileLoadError(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise ProfileLoadError(str(path), f"invalid JSON ({e})") from e

    try:
        profile = Profile.model_validate(data)
    except ValidationError as e:
        raise ProfileLoadError(str(path), f"{e.error_count()} schema error(s)\n{e}") from e

    node_count = sum(1 for _ in profile.target.walk())
    log.info(f"Loaded profile {path} (label={profile.label!r}, nodes={node_count})")
    return profile
