"""
Export logic for model descriptors.
"""

import json
import logging
from pathlib import Path
from typing import Mapping

import yaml

from .config.settings import CodegenSettings
from .introspection.types import ModelDescriptor

logger = logging.getLogger(__name__)

FILE_EXTENSIONS = {'json': 'json', 'yaml': 'yaml'}


def serialize_descriptors(descriptors: Mapping[str, ModelDescriptor], format: str = 'json') -> str:
    """Serialize descriptors keyed by model name, keeping model order."""
    export_data = {name: descriptor.to_dict() for name, descriptor in descriptors.items()}
    if format == 'json':
        return json.dumps(export_data, indent=2, ensure_ascii=False)
    elif format == 'yaml':
        return yaml.safe_dump(export_data, default_flow_style=False, sort_keys=False)
    else:
        raise ValueError(f"Unsupported export format: {format}")


def descriptor_file_name(model_names: list[str], settings: CodegenSettings) -> str:
    extension = FILE_EXTENSIONS[settings.format]
    return f"{settings.output_file_prefix}{'_'.join(model_names)}.{extension}"


def write_descriptors(descriptors: Mapping[str, ModelDescriptor], settings: CodegenSettings) -> list[Path]:
    """
    Write descriptors under ``settings.output_path``.

    One combined file is written, or one file per model with
    ``separate_files``. Returns the written paths.
    """
    output_dir = Path(settings.output_path or '.')
    output_dir.mkdir(parents=True, exist_ok=True)

    if settings.separate_files:
        batches = [{name: descriptor} for name, descriptor in descriptors.items()]
    else:
        batches = [dict(descriptors)]

    written: list[Path] = []
    for batch in batches:
        path = output_dir / descriptor_file_name(list(batch), settings)
        path.write_text(serialize_descriptors(batch, settings.format), encoding='utf-8')
        logger.info(f"Wrote {len(batch)} model descriptor(s) to {path}")
        written.append(path)
    return written
