"""
Field readers for config.toml tables.

Each reader takes a table, a key, a human-readable label and the findings
list. It returns the decoded value, or a default/None after appending a FAIL
finding. Readers never raise on bad input.
"""

from typing import AbstractSet, List, Optional, Tuple

from ..models.findings import ConfigFinding
from .document import TomlTable, ValueKind, kind_of

IndexedString = Tuple[int, str]


def read_required_string(table: TomlTable, key: str, label: str, findings: List[ConfigFinding]) -> Optional[str]:
    """Read a required non-empty string; returns it trimmed."""
    if key not in table:
        findings.append(ConfigFinding.fail(
            f"{label} is missing",
            fix=f"Set {label} to a non-empty string."
        ))
        return None

    return _non_empty_string(table[key], label, findings)


def read_optional_string(table: TomlTable, key: str, label: str, findings: List[ConfigFinding]) -> Optional[str]:
    """Read an optional non-empty string; None when absent or invalid."""
    if key not in table:
        return None

    return _non_empty_string(table[key], label, findings)


def _non_empty_string(value, label: str, findings: List[ConfigFinding]) -> Optional[str]:
    if kind_of(value) is not ValueKind.STRING:
        findings.append(ConfigFinding.fail(
            f"{label} must be a string",
            fix=f"Set {label} to a non-empty string."
        ))
        return None

    trimmed = value.strip()
    if not trimmed:
        findings.append(ConfigFinding.fail(
            f"{label} is empty",
            fix=f"Set {label} to a non-empty string."
        ))
        return None

    return trimmed


def read_optional_bool(
    table: TomlTable, key: str, default: bool, label: str, findings: List[ConfigFinding]
) -> bool:
    """Read an optional boolean; the default when absent or invalid."""
    if key not in table:
        return default

    value = table[key]
    if kind_of(value) is not ValueKind.BOOL:
        findings.append(ConfigFinding.fail(
            f"{label} must be a boolean",
            fix=f"Set {label} to true or false."
        ))
        return default

    return value


def read_optional_number(table: TomlTable, key: str, label: str, findings: List[ConfigFinding]) -> Optional[float]:
    """Read an optional number. TOML integers are widened (24 and 24.0 both work)."""
    if key not in table:
        return None

    value = table[key]
    kind = kind_of(value)
    if kind is ValueKind.INTEGER or kind is ValueKind.FLOAT:
        return float(value)

    findings.append(ConfigFinding.fail(
        f"{label} must be a number",
        fix=f"Set {label} to a numeric value."
    ))
    return None


def read_optional_integer(table: TomlTable, key: str, label: str, findings: List[ConfigFinding]) -> Optional[int]:
    """Read an optional integer. Floats such as 90.0 are rejected."""
    if key not in table:
        return None

    value = table[key]
    if kind_of(value) is not ValueKind.INTEGER:
        findings.append(ConfigFinding.fail(
            f"{label} must be an integer",
            fix=f"Set {label} to a whole number."
        ))
        return None

    return value


def read_optional_string_array(
    table: TomlTable, key: str, label: str, findings: List[ConfigFinding]
) -> List[IndexedString]:
    """
    Read an optional array of strings.

    Non-string elements each get a FAIL finding naming their index and are
    skipped; the remaining strings are still returned.

    Returns:
        (index in the TOML array, string) pairs, empty when the key is absent
        or not an array
    """
    if key not in table:
        return []

    array = table[key]
    if kind_of(array) is not ValueKind.ARRAY:
        findings.append(ConfigFinding.fail(
            f"{label} must be an array of strings",
            fix=f'Set {label} to an array of strings, e.g. ["https://example.com"].'
        ))
        return []

    result = []
    for index, element in enumerate(array):
        if kind_of(element) is not ValueKind.STRING:
            findings.append(ConfigFinding.fail(
                f"{label}[{index}] must be a string",
                fix=f"Ensure all elements in {label} are strings."
            ))
            continue
        result.append((index, element))

    return result


def trimmed_values(strings: List[IndexedString]) -> List[str]:
    return [value.strip() for _, value in strings]


def validate_urls(urls: List[IndexedString], label: str, findings: List[ConfigFinding]) -> bool:
    """
    Check every URL starts with http:// or https:// (after trimming).

    Findings name the URL by its index in the TOML array.

    Returns:
        True if all URLs are valid; a FAIL finding is added per invalid URL
    """
    all_valid = True
    for index, url in urls:
        trimmed = url.strip()
        if not trimmed.startswith(("http://", "https://")):
            findings.append(ConfigFinding.fail(
                f"{label}[{index}] is not a valid URL",
                detail=f'Got "{trimmed}". URLs must start with http:// or https://.',
                fix="Use a full URL starting with http:// or https://."
            ))
            all_valid = False
    return all_valid


def check_unknown_keys(
    table: TomlTable, known_keys: AbstractSet[str], section: str, findings: List[ConfigFinding]
) -> None:
    """Add a WARN finding for each unrecognized key, in sorted order."""
    known = ", ".join(sorted(known_keys))
    for key in sorted(set(table) - known_keys):
        findings.append(ConfigFinding.warn(
            f"Unrecognized {section} config key: {key}",
            fix=f"Remove '{key}' from config.toml. Known {section} keys are: {known}."
        ))
