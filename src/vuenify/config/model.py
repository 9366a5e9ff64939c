# topmark:header:start
#
#   project      : Vuenify
#   file         : model.py
#   file_relpath : src/vuenify/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for Vuenify (resolved and mutable views).

Design:
    * ``MutableConfig`` uses tri-state options (``None`` = *unset*) so several
      sources can be layered without clobbering each other
      (defaults → discovered files → ``--config`` files → CLI flags).
    * ``Config`` is the fully-resolved, immutable runtime view. Every field is
      populated, so the formatting core never branches on ``None`` and never
      reads ambient state.
    * ``resolve_config()`` is the pure merge of user overrides onto the defaults;
      it is called once per invocation and the result is threaded through as a
      parameter.

TOML mapping:

    [format]
    sort_classes = true
    remove_duplicates = true
    class_layout = "inline"          # inline | preserve
    normalize_directives = true
    directive_style = "short"        # short | long
    same_name_mode = "ignore"        # ignore | removeValue | addValue
    order_directives = true
    directive_priority = ["if", "else", "else-if", "for", "on", "model", "bind"]
    order_attributes = true
    attribute_layout = "inline"      # inline | preserve
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Final, TypeVar

from vuenify.config.keys import OPTION_ALIASES, Toml
from vuenify.config.logging import get_logger
from vuenify.core.enum_mixins import KeyedStrEnum
from vuenify.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from vuenify.config.logging import VuenifyLogger

logger: VuenifyLogger = get_logger(__name__)

_KS = TypeVar("_KS", bound=KeyedStrEnum)


class AttributeLayout(KeyedStrEnum):
    """Join separator policy for a rebuilt attribute block."""

    INLINE = ("inline", "Join props with a single space")
    PRESERVE = ("preserve", "Reuse the original multi-line gap between the first two props")


class ClassLayout(KeyedStrEnum):
    """Rebuild policy for class attribute values."""

    INLINE = ("inline", "Single-line class list")
    PRESERVE = ("preserve", "Keep one class per line when the original was multi-line")


class DirectiveStyle(KeyedStrEnum):
    """Target spelling for the normalizable directives."""

    SHORT = ("short", "Shorthand (:foo, @click, #name)")
    LONG = ("long", "Longhand (v-bind:foo, v-on:click, v-slot:name)")


class SameNameMode(KeyedStrEnum):
    """Policy for bindings whose expression equals their argument (``:src="src"``)."""

    IGNORE = ("ignore", "Leave same-name bindings untouched")
    REMOVE_VALUE = ("removeValue", "Collapse to the value-less form (:src)")
    ADD_VALUE = ("addValue", 'Expand value-less bindings (:src="src")')


class Preset(KeyedStrEnum):
    """Named subsets of the formatting passes.

    Each preset forces the *other* passes off; the remaining toggles keep
    whatever the configuration says.
    """

    CLASSES = ("classes", "Sort classes only", ("sort-classes",))
    DIRECTIVES = ("directives", "Normalize directives only", ("normalize-directives",))
    ORDER = ("order", "Order attributes and directives only", ("order-attributes",))


DEFAULT_DIRECTIVE_PRIORITY: Final[tuple[str, ...]] = (
    "if",
    "else",
    "else-if",
    "for",
    "on",
    "model",
    "bind",
)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable, fully-resolved formatting configuration.

    Attributes:
        sort_classes (bool): Alphabetize class tokens (ASCII ordinal).
        remove_duplicates (bool): Drop repeated class tokens, first occurrence wins.
        class_layout (ClassLayout): Single-line vs. original multi-line class rebuild.
        normalize_directives (bool): Enable shorthand/longhand and same-name rewriting.
        directive_style (DirectiveStyle): Target directive spelling.
        same_name_mode (SameNameMode): Same-name binding verbosity policy.
        order_directives (bool): Enable directive priority reordering.
        directive_priority (tuple[str, ...]): Directive names in rank order.
        order_attributes (bool): Enable value-before-boolean attribute reordering.
        attribute_layout (AttributeLayout): Join separator policy for the rebuilt block.
    """

    sort_classes: bool = True
    remove_duplicates: bool = True
    class_layout: ClassLayout = ClassLayout.INLINE
    normalize_directives: bool = True
    directive_style: DirectiveStyle = DirectiveStyle.SHORT
    same_name_mode: SameNameMode = SameNameMode.IGNORE
    order_directives: bool = True
    directive_priority: tuple[str, ...] = DEFAULT_DIRECTIVE_PRIORITY
    order_attributes: bool = True
    attribute_layout: AttributeLayout = AttributeLayout.INLINE

    def thaw(self) -> MutableConfig:
        """Return a mutable builder with every field explicitly set from this config."""
        return MutableConfig(**{f.name: getattr(self, f.name) for f in fields(self)})

    def to_toml_dict(self) -> dict[str, Any]:
        """Serialize to a TOML-friendly dict (``{"format": {...}}``).

        Returns:
            dict[str, Any]: Table with primitive types only.
        """
        return {Toml.SECTION_FORMAT: self.thaw().to_toml_table()}


@dataclass
class MutableConfig:
    """Mutable builder for `Config`, suitable for config loading/merging.

    Every attribute mirrors `Config`; ``None`` means "inherit".
    """

    sort_classes: bool | None = None
    remove_duplicates: bool | None = None
    class_layout: ClassLayout | None = None
    normalize_directives: bool | None = None
    directive_style: DirectiveStyle | None = None
    same_name_mode: SameNameMode | None = None
    order_directives: bool | None = None
    directive_priority: tuple[str, ...] | None = None
    order_attributes: bool | None = None
    attribute_layout: AttributeLayout | None = None

    def is_empty(self) -> bool:
        """Return True when no field is explicitly set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new MutableConfig by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.

        Args:
            other (MutableConfig): The config whose values override current ones.

        Returns:
            MutableConfig: Merged config.
        """
        merged: dict[str, Any] = {}
        for f in fields(self):
            override = getattr(other, f.name)
            merged[f.name] = override if override is not None else getattr(self, f.name)
        return MutableConfig(**merged)

    def resolve(self, base: Config) -> Config:
        """Resolve tri-state fields against a base frozen config.

        Args:
            base (Config): Config that provides values for unset fields.

        Returns:
            Config: A fully-resolved immutable config.
        """
        resolved: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            resolved[f.name] = getattr(base, f.name) if value is None else value
        return Config(**resolved)

    def freeze(self) -> Config:
        """Freeze to a concrete `Config`, filling unset fields from the defaults."""
        return self.resolve(Config())

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder with every field set to its default value."""
        return Config().thaw()

    @classmethod
    def from_toml_table(
        cls,
        tbl: Mapping[str, Any] | None,
        *,
        source: str | None = None,
    ) -> MutableConfig:
        """Create a MutableConfig from a ``[format]`` table mapping.

        Unspecified keys stay ``None`` (inherit at freeze time). Unknown keys are
        logged and ignored.

        Args:
            tbl (Mapping[str, Any] | None): Table with keys from `Toml.ALLOWED_FORMAT_KEYS`.
            source (str | None): Label of the originating file, used in messages.

        Returns:
            MutableConfig: Parsed config.

        Raises:
            ConfigError: If a value has the wrong type or an unknown enum token.
        """
        if not tbl:
            return cls()

        where: str = f" in {source}" if source else ""
        for key in tbl:
            if key not in Toml.ALLOWED_FORMAT_KEYS:
                logger.warning("Ignoring unknown option '%s'%s", key, where)

        def pick_bool(key: str) -> bool | None:
            if key not in tbl:
                return None
            value = tbl[key]
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Option '{key}'{where} must be a boolean, got {value!r}", key=key
                )
            return value

        def pick_enum(key: str, enum_cls: type[_KS]) -> _KS | None:
            if key not in tbl:
                return None
            value = tbl[key]
            member = enum_cls.parse(value) if isinstance(value, str) else None
            if member is None:
                raise ConfigError(
                    f"Option '{key}'{where} must be one of "
                    f"{', '.join(enum_cls.keys())}, got {value!r}",
                    key=key,
                )
            return member

        priority: tuple[str, ...] | None = None
        if Toml.KEY_DIRECTIVE_PRIORITY in tbl:
            priority = parse_directive_priority(
                tbl[Toml.KEY_DIRECTIVE_PRIORITY], key=Toml.KEY_DIRECTIVE_PRIORITY, where=where
            )

        return cls(
            sort_classes=pick_bool(Toml.KEY_SORT_CLASSES),
            remove_duplicates=pick_bool(Toml.KEY_REMOVE_DUPLICATES),
            class_layout=pick_enum(Toml.KEY_CLASS_LAYOUT, ClassLayout),
            normalize_directives=pick_bool(Toml.KEY_NORMALIZE_DIRECTIVES),
            directive_style=pick_enum(Toml.KEY_DIRECTIVE_STYLE, DirectiveStyle),
            same_name_mode=pick_enum(Toml.KEY_SAME_NAME_MODE, SameNameMode),
            order_directives=pick_bool(Toml.KEY_ORDER_DIRECTIVES),
            directive_priority=priority,
            order_attributes=pick_bool(Toml.KEY_ORDER_ATTRIBUTES),
            attribute_layout=pick_enum(Toml.KEY_ATTRIBUTE_LAYOUT, AttributeLayout),
        )

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any]) -> MutableConfig:
        """Create a MutableConfig from a plain mapping of option names.

        Accepts both the TOML spelling (``sort_classes``) and the editor-setting
        spelling (``sortClasses``, ``directiveOrder``). Enum fields accept members
        or tokens.

        Args:
            overrides (Mapping[str, Any]): Option name → value.

        Returns:
            MutableConfig: Parsed config.
        """
        table: dict[str, Any] = {}
        for key, value in overrides.items():
            canonical: str = OPTION_ALIASES.get(key, key)
            if isinstance(value, KeyedStrEnum):
                value = value.value
            table[canonical] = value
        return cls.from_toml_table(table)

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize only explicitly set keys to a TOML-friendly dict.

        Returns:
            dict[str, Any]: Table with primitive types only.
        """
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, KeyedStrEnum):
                out[f.name] = value.value
            elif isinstance(value, tuple):
                out[f.name] = list(value)
            else:
                out[f.name] = value
        return out


def parse_directive_priority(
    raw: Any,
    *,
    key: str = Toml.KEY_DIRECTIVE_PRIORITY,
    where: str = "",
) -> tuple[str, ...]:
    """Normalize a directive priority value into a tuple of names.

    Accepts a list of strings or a single comma-separated string. A leading
    ``v-`` is stripped so ``"v-if"`` and ``"if"`` rank the same.

    Raises:
        ConfigError: If the value is neither a string nor a list of strings.
    """
    items: Iterable[Any]
    if isinstance(raw, str):
        items = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        items = raw
    else:
        raise ConfigError(f"Option '{key}'{where} must be a list of names, got {raw!r}", key=key)

    names: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise ConfigError(
                f"Option '{key}'{where} must contain only strings, got {item!r}", key=key
            )
        name = item.strip()
        if name.startswith("v-"):
            name = name[2:]
        if name:
            names.append(name)
    return tuple(names)


def preset_overrides(preset: Preset) -> MutableConfig:
    """Return the overrides that restrict formatting to one preset's passes.

    Args:
        preset (Preset): The selected preset.

    Returns:
        MutableConfig: Overrides to merge *after* every other source.
    """
    match preset:
        case Preset.CLASSES:
            return MutableConfig(
                normalize_directives=False,
                order_directives=False,
                order_attributes=False,
            )
        case Preset.DIRECTIVES:
            return MutableConfig(
                sort_classes=False,
                order_directives=False,
                order_attributes=False,
            )
        case Preset.ORDER:
            return MutableConfig(
                sort_classes=False,
                normalize_directives=False,
            )


def resolve_config(
    overrides: MutableConfig | Mapping[str, Any] | None = None,
    *,
    base: Config | None = None,
) -> Config:
    """Merge user overrides onto the defaults and return the resolved config.

    This is a pure function: it reads no files and no environment.

    Args:
        overrides (MutableConfig | Mapping[str, Any] | None): Partial overrides.
            Mappings are parsed with `MutableConfig.from_mapping`.
        base (Config | None): Base config; defaults to ``Config()``.

    Returns:
        Config: The fully-resolved configuration.
    """
    if overrides is None:
        layer = MutableConfig()
    elif isinstance(overrides, MutableConfig):
        layer = overrides
    else:
        layer = MutableConfig.from_mapping(overrides)
    return layer.resolve(base or Config())
