"""Type definitions shared across typed_config."""

from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import TypeAlias


class Primitive(str, Enum):
    """Primitive types a configuration value can be declared as.

    Members compare equal to their string values, so schemas may use either
    ``Primitive.NUMBER`` or ``"number"``.
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class IngestionState(str, Enum):
    """Lifecycle of a configuration context. INGESTED is terminal."""

    NOT_INGESTED = "not_ingested"
    INGESTED = "ingested"


ConfigurationValue: TypeAlias = str | int | float | bool

# Tags are typed loosely so that unsupported tags reach the coercer and are
# reported with the offending key.
ConfigurationSchema: TypeAlias = Mapping[str, Primitive | str]

ResolvedConfiguration: TypeAlias = dict[str, ConfigurationValue]

EnvironmentStore: TypeAlias = MutableMapping[str, str]
