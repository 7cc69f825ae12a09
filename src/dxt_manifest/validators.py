"""Answer validators.

A validator takes the raw answer and returns ``None`` when it is accepted,
or a short reason that is shown to the respondent before asking again.
"""

import math
import re
from typing import AbstractSet, Callable, Optional, Union
from urllib.parse import urlparse

Validator = Callable[[str], Optional[str]]

SEMVER_PREFIX = re.compile(r"^\d+\.\d+\.\d+")

# integers above this lose precision as JSON numbers
MAX_SAFE_INTEGER = 2 ** 53


def required(reason:str) -> Validator:
    def validate(value:str) -> Optional[str]:
        return None if value.strip() else reason
    return validate


def is_url(value:str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    if not parsed.scheme or not re.match(r"^[A-Za-z][A-Za-z0-9+.\-]*$", parsed.scheme):
        return False
    # "mailto:x@y.z" has no netloc but is still a URL
    return bool(parsed.netloc or parsed.path)


def optional_url(reason:str = "Must be a valid URL (e.g., https://example.com)") -> Validator:
    def validate(value:str) -> Optional[str]:
        if not value.strip():
            return None
        return None if is_url(value) else reason
    return validate


def relative_path(required_reason:Optional[str] = None) -> Validator:
    def validate(value:str) -> Optional[str]:
        if not value.strip():
            return required_reason
        if ".." in value:
            return "Relative paths cannot include '..'"
        return None
    return validate


def parse_number(value:str) -> Union[int, float]:
    number = float(value.strip())
    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value}")
    if number.is_integer() and abs(number) < MAX_SAFE_INTEGER:
        return int(number)
    return number


def optional_number(value:str) -> Optional[str]:
    if not value.strip():
        return None
    try:
        parse_number(value)
    except ValueError:
        return "Must be a valid number"
    return None


def unique(seen:AbstractSet[str], required_reason:str, duplicate_reason:str) -> Validator:
    def validate(value:str) -> Optional[str]:
        if not value.strip():
            return required_reason
        if value in seen:
            return duplicate_reason
        return None
    return validate


def all_of(*validators:Validator) -> Validator:
    def validate(value:str) -> Optional[str]:
        for validator in validators:
            reason = validator(value)
            if reason is not None:
                return reason
        return None
    return validate


def _semver_prefix(value:str) -> Optional[str]:
    if not SEMVER_PREFIX.match(value):
        return "Version must follow semantic versioning (e.g., 1.0.0)"
    return None


semver = all_of(required("Version is required"), _semver_prefix)
