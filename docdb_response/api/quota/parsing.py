#!/usr/bin/env python3
"""
Quota Header Parsing Utilities

This module demultiplexes the compound quota and usage headers of a
service response. Both headers carry the same sequence of quota names,
each followed by its value, for example::

    x-ms-resource-quota: databases=100;collections=5000;users=500
    x-ms-resource-usage: databases=3;collections=12;users=1
"""

import logging
import re
from typing import List, Optional

from ...constants import DEFAULT_QUOTA_DELIMITERS
from ...exceptions import QuotaHeaderError
from ...models.quota import ParsedQuotas, QuotaKind

logger = logging.getLogger(__name__)

# Quota values are plain ASCII decimal integers
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def tokenize_quota_header(header: str, delimiters: str = DEFAULT_QUOTA_DELIMITERS) -> List[str]:
    """
    Split a compound quota header into its name and value tokens.

    Every character in ``delimiters`` separates tokens; runs of delimiters
    and leading or trailing delimiters produce no empty tokens.
    """
    if not header:
        return []
    pattern = "[" + re.escape(delimiters) + "]+"
    return [token for token in re.split(pattern, header) if token]


def parse_quota_headers(
    max_quota_header: Optional[str],
    usage_header: Optional[str],
    delimiters: str = DEFAULT_QUOTA_DELIMITERS,
    strict: bool = False,
) -> ParsedQuotas:
    """
    Parse the maximum quota and current usage headers into quota mappings.

    Args:
        max_quota_header: Value of the maximum resource quota header
        usage_header: Value of the current resource usage header
        delimiters: Characters separating names and values
        strict: Raise on malformed or misaligned headers instead of
            skipping the affected values

    Returns:
        ParsedQuotas; empty when either header is absent or empty

    Raises:
        QuotaHeaderError: In strict mode, if the headers are misaligned or
            a known quota carries a non-integer value
    """
    if not max_quota_header or not usage_header:
        return ParsedQuotas()

    max_tokens = tokenize_quota_header(max_quota_header, delimiters)
    usage_tokens = tokenize_quota_header(usage_header, delimiters)

    if len(max_tokens) != len(usage_tokens):
        _contract_violation(
            f"Quota headers have {len(max_tokens)} and {len(usage_tokens)} tokens",
            max_quota_header, usage_header, strict,
        )

    parsed = ParsedQuotas()
    for i, token in enumerate(max_tokens):
        kind = QuotaKind.from_keyword(token)
        if kind is None:
            # Unknown quota names and the values themselves
            continue

        if i + 1 >= len(max_tokens):
            _contract_violation(f"Quota '{token}' has no value", max_quota_header, usage_header, strict)
            break

        max_value = _parse_quota_value(max_tokens[i + 1], token, max_quota_header, usage_header, strict)
        if max_value is None:
            continue
        parsed.quotas[kind] = max_value

        if i + 1 >= len(usage_tokens):
            continue
        if QuotaKind.from_keyword(usage_tokens[i]) is not kind:
            _contract_violation(
                f"Usage header names '{usage_tokens[i]}' where quota header names '{token}'",
                max_quota_header, usage_header, strict,
            )
            continue

        usage_value = _parse_quota_value(usage_tokens[i + 1], token, max_quota_header, usage_header, strict)
        if usage_value is not None:
            parsed.usages[kind] = usage_value

    logger.debug(f"Parsed {len(parsed.quotas)} quotas and {len(parsed.usages)} usages from response headers")
    return parsed


def _parse_quota_value(value: str, name: str, max_quota_header: str, usage_header: str, strict: bool) -> Optional[int]:
    """Parse the integer following a quota name; None when it is not one."""
    if not _INTEGER.fullmatch(value):
        _contract_violation(f"Invalid integer for quota '{name}': {value}", max_quota_header, usage_header, strict)
        return None
    return int(value)


def _contract_violation(message: str, max_quota_header: str, usage_header: str, strict: bool) -> None:
    if strict:
        raise QuotaHeaderError(message, max_quota_header=max_quota_header, usage_header=usage_header)
    logger.warning(f"{message}; ignoring the affected values")
