"""Data validation utilities."""
from typing import Any, Iterable, List, Dict
import logging

logger = logging.getLogger(__name__)


def missing_columns(
    available: Iterable[str],
    required: Iterable[str],
) -> List[str]:
    """
    Find required column names absent from a header.

    Args:
        available: Column names present in the file
        required: Column names that must be present

    Returns:
        Missing column names, in required order
    """
    present = set(available)
    return [col for col in required if col not in present]


def validate_required_fields(
    data: List[Dict[str, Any]],
    required_fields: set[str],
) -> tuple[bool, List[str]]:
    """
    Validate that all records contain required fields.

    Args:
        data: List of dictionaries to validate
        required_fields: Set of required field names

    Returns:
        Tuple of (is_valid, list_of_invalid_records)
    """
    invalid_records = []

    for idx, record in enumerate(data):
        missing_fields = required_fields - set(record.keys())
        if missing_fields:
            invalid_records.append(
                f'Record {idx}: Missing fields {sorted(missing_fields)}'
            )

    return len(invalid_records) == 0, invalid_records
