"""
Export and Import Countries

from_config accepts either a built entity or its raw field mapping, so a
configuration can mix both.
"""

from typing import NamedTuple, Mapping

from shared.errors import ConfigurationError


class ExportCountry(NamedTuple):
    """A country packages may be sent from."""
    code: str

    @classmethod
    def from_config(cls, value) -> "ExportCountry":
        if isinstance(value, ExportCountry):
            return value
        if isinstance(value, str):
            return cls(value)
        return cls(_required(value, "code", "export country"))


class ImportCountry(NamedTuple):
    """A country packages may be sent to, mapped to a zone or price group."""
    code: str
    zone: str

    @classmethod
    def from_config(cls, value) -> "ImportCountry":
        if isinstance(value, ImportCountry):
            return value
        code = _required(value, "code", "import country")
        zone = value.get("zone", value.get("price_group"))
        if zone is None:
            raise ConfigurationError(f"Import country '{code}' has no zone.")
        return cls(code, str(zone))


def _required(value, key: str, label: str) -> str:
    if not isinstance(value, Mapping) or value.get(key) in (None, ""):
        raise ConfigurationError(f"Each {label} needs a '{key}': got {value!r}.")
    return str(value[key])
