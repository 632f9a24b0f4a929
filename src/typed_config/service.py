"""Configuration ingestion and typed access.

A ConfigurationContext owns the ingestion state and the single
ConfigurationService built from it:

    context = ConfigurationContext()
    context.ingest(".env")
    config = context.get_instance().get_all({"PORT": "number", "DEBUG": "boolean"})

Most applications use the process-wide default context through the
module-level ``ingest`` and ``get_instance`` functions. Tests and embedders
build their own context around a private environment mapping.
"""

import os
import threading
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel

from typed_config.coercion import coerce
from typed_config.errors import (
    ConfigurationAlreadyIngestedError,
    ConfigurationFileError,
    ConfigurationFilePermissionError,
    ConfigurationNotIngestedError,
    MissingConfigurationError,
    MissingConfigurationFileError,
    UnknownConfigurationFileError,
    UnsupportedPrimitiveError,
)
from typed_config.source import error_code, read_env_file
from typed_config.telemetry import (
    CONFIGURATION_RESOLVED,
    INGEST_FAILED,
    INGEST_REJECTED,
    INGEST_STARTED,
    INGESTED,
    INSTANCE_CREATED,
    get_logger,
)
from typed_config.types import (
    ConfigurationSchema,
    ConfigurationValue,
    EnvironmentStore,
    IngestionState,
    Primitive,
    ResolvedConfiguration,
)

log = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Reported by a repeated ingest() without a path; settings are not read then.
DEFAULT_PATH_LABEL = "<default env file>"

# bool is listed explicitly; it must not fall through to int.
_ANNOTATION_PRIMITIVES: dict[Any, Primitive] = {
    str: Primitive.STRING,
    int: Primitive.NUMBER,
    float: Primitive.NUMBER,
    bool: Primitive.BOOLEAN,
}


class ConfigurationService:
    """Typed, read-only view over an ingested environment.

    Obtain instances through ConfigurationContext.get_instance(); the context
    guarantees ingestion happened first and that only one instance exists.
    """

    def __init__(self, environ: EnvironmentStore) -> None:
        self._environ = environ

    def get(self, key: str, primitive: Primitive | str) -> ConfigurationValue:
        """Read a single key and coerce it to the declared primitive.

        Raises:
            MissingConfigurationError: If the key is not set.
            InvalidNumberConfigurationError: If a number cannot be parsed.
            UnsupportedPrimitiveError: If the primitive is unknown.
        """
        raw_value = self._environ.get(key)
        if raw_value is None:
            raise MissingConfigurationError(key)
        return coerce(key, raw_value, primitive)

    def get_all(self, schema: ConfigurationSchema) -> ResolvedConfiguration:
        """Resolve every key in a schema to its declared type.

        Keys are processed in schema order and the first failure aborts the
        call; no partial result is returned.

        Args:
            schema: Mapping of key name to primitive tag.

        Returns:
            New dict with the schema's keys and coerced values.
        """
        resolved: ResolvedConfiguration = {}
        for key, primitive in schema.items():
            resolved[key] = self.get(key, primitive)

        log.debug(CONFIGURATION_RESOLVED, keys=list(resolved))
        return resolved

    def get_model(self, model: type[ModelT]) -> ModelT:
        """Resolve configuration straight into a Pydantic model.

        The schema is derived from the model's fields: ``str`` maps to
        string, ``int`` and ``float`` to number, ``bool`` to boolean. A field's
        alias, when set, names the environment key. Fields with a default may
        be absent from the environment.

        Args:
            model: Pydantic model class to populate.

        Returns:
            Validated model instance.

        Raises:
            MissingConfigurationError: If a required field's key is not set.
            UnsupportedPrimitiveError: If a field annotation has no primitive.
            pydantic.ValidationError: If the model rejects a coerced value,
                e.g. ``"1.5"`` for an ``int`` field.
        """
        values: dict[str, ConfigurationValue] = {}
        for name, field in model.model_fields.items():
            key = field.alias or name
            primitive = _ANNOTATION_PRIMITIVES.get(field.annotation)
            if primitive is None:
                raise UnsupportedPrimitiveError(key, field.annotation)
            if key not in self._environ and not field.is_required():
                continue
            values[key] = self.get(key, primitive)

        log.debug(CONFIGURATION_RESOLVED, model=model.__name__, keys=list(values))
        return model.model_validate(values)


class ConfigurationContext:
    """Ingestion state plus the lazily built ConfigurationService.

    State moves from NOT_INGESTED to INGESTED exactly once; there is no way
    back. A failed ingest leaves both the state and the environment untouched,
    so it can be retried with another path.

    Args:
        environ: Mapping ingested values are written to and read from.
            Defaults to ``os.environ``.
        override: Whether file values replace keys that are already set.
            Defaults to the ``override`` setting.
        encoding: Env file encoding. Defaults to the ``env_file_encoding`` setting.
    """

    def __init__(
        self,
        environ: EnvironmentStore | None = None,
        *,
        override: bool | None = None,
        encoding: str | None = None,
    ) -> None:
        self._environ: EnvironmentStore = os.environ if environ is None else environ
        self._override = override
        self._encoding = encoding
        self._state = IngestionState.NOT_INGESTED
        self._instance: ConfigurationService | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> IngestionState:
        return self._state

    @property
    def is_ingested(self) -> bool:
        return self._state is IngestionState.INGESTED

    @property
    def environ(self) -> EnvironmentStore:
        return self._environ

    def ingest(self, path: str | Path | None = None) -> None:
        """Load an env file into the environment, once.

        Args:
            path: Env file to load. Defaults to the ``env_file`` setting.

        Raises:
            ConfigurationAlreadyIngestedError: If a previous ingest succeeded.
            MissingConfigurationFileError: If nothing exists at the path.
            ConfigurationFilePermissionError: If the file cannot be read.
            UnknownConfigurationFileError: For any other load failure.
        """
        with self._lock:
            if self._state is IngestionState.INGESTED:
                attempted = DEFAULT_PATH_LABEL if path is None else str(path)
                log.warning(INGEST_REJECTED, path=attempted)
                raise ConfigurationAlreadyIngestedError(attempted)

            if path is None:
                from typed_config.config import get_settings  # noqa: PLC0415

                path = get_settings().env_file

            encoding = self._resolve_encoding()
            override = self._resolve_override()

            log.debug(INGEST_STARTED, path=str(path))
            try:
                values = read_env_file(path, encoding=encoding)
                applied = self._apply(values, override)
            except Exception as e:
                error = _classify_file_error(path, e)
                log.warning(
                    INGEST_FAILED,
                    path=str(path),
                    error_type=type(error).__name__,
                    code=error_code(e),
                )
                raise error from e

            self._state = IngestionState.INGESTED
            log.info(INGESTED, path=str(path), keys=len(values), applied=applied)

    def get_instance(self) -> ConfigurationService:
        """Return the ConfigurationService, creating it on first use.

        Raises:
            ConfigurationNotIngestedError: If ingest has not succeeded yet.
        """
        with self._lock:
            if self._state is not IngestionState.INGESTED:
                raise ConfigurationNotIngestedError()
            if self._instance is None:
                self._instance = ConfigurationService(self._environ)
                log.debug(INSTANCE_CREATED)
            return self._instance

    def _apply(self, values: dict[str, str], override: bool) -> int:
        """Write parsed values to the store, all or nothing.

        If the store rejects a write (``os.environ`` refuses NUL bytes, for
        example), every key written so far is restored before re-raising.
        """
        previous: dict[str, str | None] = {}
        try:
            for key, value in values.items():
                if override or key not in self._environ:
                    previous[key] = self._environ.get(key)
                    self._environ[key] = value
        except Exception:
            for key, old_value in previous.items():
                if old_value is None:
                    self._environ.pop(key, None)
                else:
                    self._environ[key] = old_value
            raise
        return len(previous)

    def _resolve_override(self) -> bool:
        if self._override is not None:
            return self._override
        from typed_config.config import get_settings  # noqa: PLC0415

        return get_settings().override

    def _resolve_encoding(self) -> str:
        if self._encoding is not None:
            return self._encoding
        from typed_config.config import get_settings  # noqa: PLC0415

        return get_settings().env_file_encoding


def _classify_file_error(path: str | Path, error: Exception) -> ConfigurationFileError:
    """Map a load failure to the matching ConfigurationFileError by errno."""
    code = error_code(error)
    if code == "ENOENT":
        return MissingConfigurationFileError(path)
    if code == "EACCES":
        return ConfigurationFilePermissionError(path, str(error))
    return UnknownConfigurationFileError(path, str(error))


_default_context: ConfigurationContext | None = None
_default_context_lock = threading.Lock()


def get_default_context() -> ConfigurationContext:
    """Get the process-wide context bound to ``os.environ``."""
    global _default_context
    with _default_context_lock:
        if _default_context is None:
            _default_context = ConfigurationContext()
        return _default_context


def ingest(path: str | Path | None = None) -> None:
    """Ingest an env file into the process-wide context.

    See ConfigurationContext.ingest.
    """
    get_default_context().ingest(path)


def get_instance() -> ConfigurationService:
    """Get the ConfigurationService of the process-wide context.

    See ConfigurationContext.get_instance.
    """
    return get_default_context().get_instance()
