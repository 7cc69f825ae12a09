import json
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from .types import ProjectDescriptor
from .log import logger


def read_project_descriptor(dir_path:str, descriptor_filename:str = "package.json") -> ProjectDescriptor:
    descriptor_path = Path(dir_path) / descriptor_filename
    if not descriptor_path.exists():
        logger.debug(f"No project descriptor found at {descriptor_path}")
        return ProjectDescriptor()
    try:
        with open(descriptor_path, 'r', encoding="utf-8") as f:
            descriptor_data = json.load(f)
        if not isinstance(descriptor_data, dict):
            logger.warning(f"Ignoring project descriptor {descriptor_path}: top-level value is not an object")
            return ProjectDescriptor()
        return ProjectDescriptor(**descriptor_data)
    except (OSError, ValueError, ValidationError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.warning(f"Ignoring unreadable project descriptor {descriptor_path}: {e}")
        return ProjectDescriptor()


def dump_manifest(manifest:Dict[str, Any], indent:int = 2) -> str:
    return json.dumps(manifest, indent=indent, ensure_ascii=False) + "\n"


def write_manifest(manifest_path:str, manifest:Dict[str, Any], indent:int = 2) -> Path:
    path = Path(manifest_path)
    path.write_text(dump_manifest(manifest, indent=indent), encoding="utf-8")
    logger.info(f"Wrote manifest to {path}")
    return path
