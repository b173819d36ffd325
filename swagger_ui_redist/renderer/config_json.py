from __future__ import annotations

import json
import logging
from typing import Any, Dict

from pydantic_core import PydanticSerializationError

from ..exceptions import ConfigSerializationError
from ..schemas.config import Config

logger = logging.getLogger(__name__)

CONFIG_PLACEHOLDER = "{{config}}"
JSON_INDENT = 2


def config_payload(config: Config) -> Dict[str, Any]:
    """Return the config as the JSON object the viewer reads, keys in emit order."""
    exclude = {"urls"} if not config.urls else None
    return config.model_dump(mode="json", by_alias=True, exclude_none=True, exclude=exclude)


def serialize_config(config: Config) -> str:
    try:
        payload = config_payload(config)
        return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        error = ConfigSerializationError(f"Failed to serialize Swagger UI config: {exc}")
        logger.error(error.with_trace())
        raise error from exc


def format_config(config: Config, template: str) -> str:
    config_json = serialize_config(config)
    # Drop "{\n" and "\n}" so the entries merge into the template's object literal.
    return template.replace(CONFIG_PLACEHOLDER, config_json[2:-2])


__all__ = ["config_payload", "serialize_config", "format_config", "CONFIG_PLACEHOLDER"]
