"""Single-object operations behind config-get, config-set, and config-delete.

The functions here never prompt. config-set is split into plan_set(),
which decides what would happen and which question to ask, and
apply_set(), which performs the write once the caller has confirmed.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TextIO

import yaml

from confctl.core.config import (
    ConfigError,
    ConfigKeyNotFoundError,
    ConfigNotFoundError,
    MissingValueError,
)
from confctl.utils.nested import get_nested

if TYPE_CHECKING:
    from confctl.core.config import Config, ConfigFactory

logger = logging.getLogger(__name__)

# Literal value meaning "read the value from standard input"
STDIN_SENTINEL = "-"


class ValueFormat(str, Enum):
    """How a raw value passed to config-set is parsed."""

    STRING = "string"
    YAML = "yaml"


class SetAction(Enum):
    """What a config-set invocation will do.

    Attributes:
        BULK_UPDATE: Assign every key of a mapping value to the object.
        CREATE_OBJECT: The object does not exist yet and will be created.
        CREATE_KEY: The key does not exist in the object yet.
        UPDATE_KEY: The key exists and its value will be replaced.
    """

    BULK_UPDATE = "bulk-update"
    CREATE_OBJECT = "create-object"
    CREATE_KEY = "create-key"
    UPDATE_KEY = "update-key"


@dataclass(frozen=True, slots=True)
class SetPlan:
    """A decided, not yet applied, config-set operation.

    Attributes:
        config: Editable handle the value will be written to.
        key: Dotted key being set.
        value: Parsed value.
        action: Which kind of change this is.
        new_key: Whether the key was absent before the change.
    """

    config: Config
    key: str
    value: Any
    action: SetAction
    new_key: bool = False

    @property
    def name(self) -> str:
        """Name of the configuration object being changed."""
        return self.config.name

    def without_bulk(self) -> SetPlan:
        """Return the plan that stores the whole value under the key."""
        if self.action != SetAction.BULK_UPDATE:
            return self
        return SetPlan(
            config=self.config,
            key=self.key,
            value=self.value,
            action=_scalar_action(self.config, self.new_key),
            new_key=self.new_key,
        )

    @property
    def question(self) -> str:
        """Confirmation question to show before applying the plan."""
        if self.action == SetAction.BULK_UPDATE:
            return f"Do you want to update or set multiple keys on {self.name} config?"
        if self.action == SetAction.CREATE_OBJECT:
            return f"{self.name} config does not exist. Do you want to create a new config object?"
        if self.action == SetAction.CREATE_KEY:
            return (
                f"{self.key} key does not exist in {self.name} config. "
                "Do you want to create a new config key?"
            )
        return f"Do you want to update {self.key} key in {self.name} config?"


@dataclass(frozen=True, slots=True)
class SetResult:
    """Outcome of applying a SetPlan.

    Attributes:
        plan: The plan that was applied.
        applied: Whether storage was written.
        simulated: Whether the write was skipped because of simulate mode.
    """

    plan: SetPlan
    applied: bool
    simulated: bool = False


def _scalar_action(config: Config, new_key: bool) -> SetAction:
    if config.is_new():
        return SetAction.CREATE_OBJECT
    if new_key:
        return SetAction.CREATE_KEY
    return SetAction.UPDATE_KEY


def validate_config_name(factory: ConfigFactory, name: str) -> None:
    """Ensure a configuration object exists.

    Raises:
        ConfigNotFoundError: If the object is not in storage.
    """
    if factory.get(name).is_new():
        msg = f"Config {name} does not exist"
        raise ConfigNotFoundError(msg)


def get_config_value(
    factory: ConfigFactory,
    name: str,
    key: str = "",
    include_overridden: bool = False,
) -> Any:
    """Read a key or a whole configuration object.

    Args:
        factory: Factory to resolve the object from.
        name: Configuration object name.
        key: Dotted key. Empty reads the whole object.
        include_overridden: Apply override values to the result.

    Returns:
        The bare object for whole-object reads, otherwise a single-entry
        mapping of "name:key" to the value.
    """
    config = factory.get_editable(name) if include_overridden else factory.get(name)
    value = config.get(key)
    if key:
        return {f"{name}:{key}": value}
    return value


def parse_value(
    raw: str,
    value_format: ValueFormat = ValueFormat.STRING,
    stdin: TextIO | None = None,
) -> Any:
    """Turn a raw command line value into the value to store.

    Args:
        raw: Raw value. The literal "-" reads the value from stdin.
        value_format: STRING keeps the text, YAML parses it.
        stdin: Stream to read from instead of sys.stdin.

    Returns:
        The parsed value.

    Raises:
        ConfigError: If YAML parsing fails.
    """
    data: Any = raw
    if raw == STDIN_SENTINEL:
        data = (stdin or sys.stdin).read()

    if value_format == ValueFormat.YAML:
        try:
            data = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML value: {e}") from e

    return data


def plan_set(
    factory: ConfigFactory,
    name: str,
    key: str,
    value: str | None = None,
    *,
    option_value: str | None = None,
    value_format: ValueFormat = ValueFormat.STRING,
    stdin: TextIO | None = None,
    allow_bulk: bool = True,
) -> SetPlan:
    """Decide what a config-set invocation will do.

    Args:
        factory: Factory to resolve the object from.
        name: Configuration object name.
        key: Dotted key to set.
        value: Positional value.
        option_value: Value from the hidden --value option; wins over value.
        value_format: How to parse the raw value.
        stdin: Stream used when the value is "-".
        allow_bulk: Treat mapping values as a bulk update of the object.

    Returns:
        SetPlan describing the change.

    Raises:
        MissingValueError: If neither value nor option_value is given.
        ConfigError: If the value cannot be parsed.
    """
    raw = option_value or value
    if raw is None:
        raise MissingValueError("No config value specified.")

    config = factory.get_editable(name)
    new_key = get_nested(config.get_raw_data(), key) is None
    data = parse_value(raw, value_format, stdin)

    if isinstance(data, Mapping) and allow_bulk:
        action = SetAction.BULK_UPDATE
    else:
        action = _scalar_action(config, new_key)

    logger.debug("Planned %s for %s:%s", action.value, name, key)
    return SetPlan(config=config, key=key, value=data, action=action, new_key=new_key)


def apply_set(plan: SetPlan, *, simulate: bool = False) -> SetResult:
    """Write a confirmed SetPlan to storage.

    Args:
        plan: The plan to apply.
        simulate: Skip the write and report what would have happened.

    Returns:
        SetResult describing whether storage was written.
    """
    if simulate:
        logger.info("Simulate: would %s %s:%s", plan.action.value, plan.name, plan.key)
        return SetResult(plan=plan, applied=False, simulated=True)

    if plan.action == SetAction.BULK_UPDATE:
        for item_key, item_value in plan.value.items():
            plan.config.set(str(item_key), item_value)
    else:
        plan.config.set(plan.key, plan.value)
    plan.config.save()
    return SetResult(plan=plan, applied=True)


def delete_config(factory: ConfigFactory, name: str, key: str | None = None) -> None:
    """Delete a configuration object or clear one of its keys.

    Args:
        factory: Factory to resolve the object from.
        name: Configuration object name.
        key: Dotted key to clear. None deletes the whole object.

    Raises:
        ConfigKeyNotFoundError: If key is given but not present.
    """
    config = factory.get_editable(name)
    if key:
        if get_nested(config.get_raw_data(), key) is None:
            msg = f"Configuration key {key} not found."
            raise ConfigKeyNotFoundError(msg)
        config.clear(key).save()
    else:
        config.delete()
