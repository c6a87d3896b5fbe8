# topmark:header:start
#
#   project      : JavaStamp
#   file         : model.py
#   file_relpath : src/javastamp/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: a mutable builder and its frozen runtime snapshot.

Layers are merged with last-wins precedence:

1. built-in defaults (`MutableConfig.from_defaults`),
2. the config file (explicit ``--config`` or the discovered
   ``javastamp.toml`` / ``[tool.javastamp]``),
3. CLI overrides (`MutableConfig.apply_overrides`).

`MutableConfig.freeze` validates the result and resolves the license notice,
producing an immutable `Config` for the pipeline.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from javastamp.config.io import discover_config_file, extract_settings, load_toml_dict
from javastamp.config.logging import get_logger
from javastamp.constants import DEFAULT_ENCODING, DEFAULT_LICENSE_KEY, DEFAULT_VERSION_TAG
from javastamp.errors import ConfigError
from javastamp.licenses import LicenseNotice, get_notice, load_license_file

if TYPE_CHECKING:
    from javastamp.config.io import TomlTable
    from javastamp.config.logging import StampLogger

logger: StampLogger = get_logger(__name__)

_STRING_KEYS: tuple[str, ...] = ("version", "license", "license_file", "license_marker", "encoding")


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        version (str): Value written into every ``@version`` tag.
        notice (LicenseNotice): License block prepended when its marker is absent.
        encoding (str): Text encoding used to read and write the target file.
        apply_changes (bool): Write the result (True) or only compute it (False).
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    version: str
    notice: LicenseNotice
    encoding: str
    apply_changes: bool
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        A custom notice is carried over as-is; built-in notices are referenced by key.
        """
        return MutableConfig(
            version=self.version,
            license_key=self.notice.key,
            encoding=self.encoding,
            apply_changes=self.apply_changes,
            config_files=list(self.config_files),
            custom_notice=self.notice if self.notice.key == "custom" else None,
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while merging layers.

    ``None`` means "not set by this layer" so that `merge_with` can tell an
    explicit value from an absent one.
    """

    version: str | None = None
    license_key: str | None = None
    license_file: Path | None = None
    license_marker: str | None = None
    encoding: str | None = None
    apply_changes: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    custom_notice: LicenseNotice | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this builder and turn it into an immutable `Config`.

        Raises:
            ConfigError: On an invalid version or encoding, an unknown license key,
                or a custom license file that is unreadable or lacks a marker.
        """
        version: str = (self.version or "").strip()
        if not version:
            raise ConfigError("'version' must be a non-empty string")
        if any(ch.isspace() for ch in version):
            raise ConfigError(f"'version' must not contain whitespace: {version!r}")

        encoding: str = self.encoding or DEFAULT_ENCODING
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ConfigError(f"unknown encoding: {encoding!r}") from None
        notice: LicenseNotice = self._resolve_notice(encoding)

        return Config(
            version=version,
            notice=notice,
            encoding=encoding,
            apply_changes=True if self.apply_changes is None else self.apply_changes,
            config_files=tuple(self.config_files),
        )

    def _resolve_notice(self, encoding: str) -> LicenseNotice:
        if self.license_marker and self.license_file is None:
            raise ConfigError("'license_marker' requires 'license_file'")
        if self.license_file is not None:
            if not self.license_marker:
                raise ConfigError("'license_file' requires 'license_marker'")
            try:
                return load_license_file(self.license_file, self.license_marker, encoding=encoding)
            except OSError as e:
                raise ConfigError(
                    f"cannot read license file: {e.strerror or e}", path=self.license_file
                ) from e
            except (UnicodeDecodeError, ValueError) as e:
                raise ConfigError(str(e), path=self.license_file) from e
        if self.custom_notice is not None:
            return self.custom_notice
        try:
            return get_notice(self.license_key or DEFAULT_LICENSE_KEY)
        except KeyError as e:
            raise ConfigError(e.args[0]) from None

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls(
            version=DEFAULT_VERSION_TAG,
            license_key=DEFAULT_LICENSE_KEY,
            encoding=DEFAULT_ENCODING,
            apply_changes=True,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a layer from a parsed settings table.

        ``license_file`` is resolved relative to the directory of ``config_file``.

        Args:
            data (TomlTable): The settings (top level of ``javastamp.toml`` or
                ``[tool.javastamp]``).
            config_file (Path | None): The file the table was read from.

        Returns:
            MutableConfig: A layer containing only the keys present in ``data``.

        Raises:
            ConfigError: On unknown keys or values that are not strings.
        """
        unknown: list[str] = sorted(set(data) - set(_STRING_KEYS))
        if unknown:
            raise ConfigError(f"unknown config key(s): {', '.join(unknown)}", path=config_file)
        values: dict[str, str] = {}
        for key in _STRING_KEYS:
            if key not in data:
                continue
            value: Any = data[key]
            if not isinstance(value, str):
                raise ConfigError(
                    f"'{key}' must be a string, got {type(value).__name__}", path=config_file
                )
            values[key] = value

        license_file: Path | None = None
        if "license_file" in values:
            license_file = Path(values["license_file"]).expanduser()
            if not license_file.is_absolute() and config_file is not None:
                license_file = config_file.parent / license_file

        return cls(
            version=values.get("version"),
            license_key=values.get("license"),
            license_file=license_file,
            license_marker=values.get("license_marker"),
            encoding=values.get("encoding"),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from ``javastamp.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The layer, or None when a ``pyproject.toml``
            has no ``[tool.javastamp]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        settings: TomlTable | None = extract_settings(path, load_toml_dict(path))
        if settings is None:
            return None
        return cls.from_toml_dict(settings, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        no_config: bool = False,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Merge defaults with the explicit or discovered config file.

        Args:
            config_file (Path | None): Explicit config file; disables discovery.
            no_config (bool): Skip discovery (an explicit ``config_file`` is still read).
            cwd (Path | None): Directory used for discovery; defaults to the current one.

        Returns:
            MutableConfig: The merged draft, ready for CLI overrides and `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()

        source: Path | None = config_file
        if source is None and not no_config:
            source = discover_config_file(cwd)

        if source is not None:
            layer: MutableConfig | None = cls.from_toml_file(source)
            if layer is not None:
                draft = draft.merge_with(layer)
            elif config_file is not None:
                raise ConfigError("no [tool.javastamp] table found", path=config_file)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            version=other.version if other.version is not None else self.version,
            license_key=other.license_key if other.license_key is not None else self.license_key,
            license_file=(
                other.license_file if other.license_file is not None else self.license_file
            ),
            license_marker=(
                other.license_marker if other.license_marker is not None else self.license_marker
            ),
            encoding=other.encoding if other.encoding is not None else self.encoding,
            apply_changes=(
                other.apply_changes if other.apply_changes is not None else self.apply_changes
            ),
            config_files=[*self.config_files, *other.config_files],
            custom_notice=(
                other.custom_notice if other.custom_notice is not None else self.custom_notice
            ),
        )

    def apply_overrides(
        self,
        *,
        version: str | None = None,
        license_key: str | None = None,
        license_file: Path | None = None,
        license_marker: str | None = None,
        encoding: str | None = None,
        apply_changes: bool | None = None,
    ) -> MutableConfig:
        """Apply CLI overrides in place; ``None`` leaves a value untouched.

        Selecting a built-in license drops a custom license file (and its marker)
        inherited from a lower layer.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if version is not None:
            self.version = version
        if license_key is not None:
            self.license_key = license_key
            if license_file is None:
                self.license_file = None
                self.license_marker = None
                self.custom_notice = None
        if license_file is not None:
            self.license_file = license_file
        if license_marker is not None:
            self.license_marker = license_marker
        if encoding is not None:
            self.encoding = encoding
        if apply_changes is not None:
            self.apply_changes = apply_changes
        return self
