"""
CLI main application module.

This module contains the docdb-quota entry point, which wraps a captured
service response in a ResourceResponse and reports its quotas.
"""

import json
import logging
import sys
from typing import Any, Dict, List, Optional

from ..constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_QUOTA_HEADER_ERROR,
)
from ..api import DocumentServiceResponse, ResourceResponse
from ..config import Env
from ..config.loader import ConfigLoader
from ..config.schema import ConfigSchema
from ..exceptions import QuotaHeaderError
from ..models import QuotaKind, Resource
from ..utils import setup_logging
from .parser import create_argument_parser

logger = logging.getLogger(__name__)


def load_captured_response(path: str) -> DocumentServiceResponse:
    """
    Read a captured response from a JSON file.

    The file holds an object with ``status_code``, ``headers`` and an
    optional ``body``, which may be a JSON value or a raw string.

    Raises:
        ValueError: If the file does not describe a response or a header
            value is not a string
    """
    with open(path, "r", encoding="utf-8") as f:
        captured: Dict[str, Any] = json.load(f)

    if not isinstance(captured, dict) or "status_code" not in captured:
        raise ValueError(f"{path} does not contain a captured response")
    if not isinstance(captured["status_code"], int):
        raise ValueError(f"{path}: status_code must be an integer")

    headers = captured.get("headers") or {}
    if not isinstance(headers, dict):
        raise ValueError(f"{path}: headers must be a JSON object")
    for name, value in headers.items():
        if not isinstance(value, str):
            raise ValueError(f"{path}: header {name} must be a string, got {type(value).__name__}")

    body = captured.get("body")
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)

    return DocumentServiceResponse(
        status_code=captured["status_code"],
        headers=headers,
        body=body,
    )


def format_quota_table(response: ResourceResponse) -> List[str]:
    """Render the quotas of a response as text lines."""
    lines = [f"{'quota':<24}{'usage':>12}{'limit':>12}{'used':>9}"]
    snapshot = response.get_quota_snapshot()
    for kind in QuotaKind:
        usage = snapshot.get(kind)
        lines.append(
            f"{kind.keyword:<24}{usage.usage:>12}{usage.quota:>12}{usage.usage_percentage():>8.1f}%"
        )
    lines.append(f"request charge: {response.get_request_charge()}")
    lines.append(f"activity id: {response.get_activity_id() or '-'}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        config = ConfigLoader.load(schema=ConfigSchema, cli_args=args)
        env = Env.install(Env.from_schema(config))
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    try:
        captured = load_captured_response(args.response_file)
        response = ResourceResponse(captured, Resource, env=env)
    except (OSError, ValueError) as e:
        # Includes ResourceDeserializationError
        logger.error(f"Failed to read captured response: {e}")
        return EXIT_INPUT_ERROR

    try:
        if args.json:
            output = response.get_quota_snapshot().to_dict()
            output["request_charge"] = response.get_request_charge()
            output["activity_id"] = response.get_activity_id()
            print(json.dumps(output, indent=2))
        else:
            for line in format_quota_table(response):
                print(line)
    except QuotaHeaderError as e:
        logger.error(f"Quota headers rejected: {e}")
        return EXIT_QUOTA_HEADER_ERROR

    return EXIT_SUCCESS


def run():
    """Console script wrapper."""
    sys.exit(main())
