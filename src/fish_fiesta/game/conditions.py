"""
Condition engine for level rules.

A level restricts which creatures are acceptable through a set of
conditions, one per ``ConditionType``. Each condition holds one or more
accepted values (uppercase enum member names) and is satisfied when the
creature matches any of them. Unknown values raise
``InvalidConditionValueError`` during evaluation.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Sequence, Type, TypeVar

from ..exceptions import InvalidConditionValueError
from .features import SizeCategory, WaterSubtype, WaterTemperature, WaterType
from .models import WaterCreature

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

ConditionMap = Dict["ConditionType", List[str]]
"""Maps a condition type to its ordered list of accepted values."""


class ConditionType(Enum):
    """Habitat axes a level can restrict.

    The value is the key used in level JSON files.
    """

    WATER_TYPE = "water_type"
    WATER_SUBTYPE = "water_subtype"
    SIZE = "size"
    TEMPERATURE = "temperature"

    @property
    def allow_multiple(self) -> bool:
        """Whether a level may list several accepted values for this type."""
        return self is ConditionType.SIZE

    @property
    def json_key(self) -> str:
        return self.value


def _parse_values(condition_type: ConditionType, enum_cls: Type[E], values: Sequence[str]) -> List[E]:
    parsed: List[E] = []
    for value in values:
        try:
            parsed.append(enum_cls[value.upper()])
        except KeyError:
            raise InvalidConditionValueError(condition_type.name, value) from None
    return parsed


def _water_type_satisfied(creature: WaterCreature, values: Sequence[str]) -> bool:
    accepted = _parse_values(ConditionType.WATER_TYPE, WaterType, values)
    logger.debug(f"Fish water types: {creature.water_types}, level allows: {accepted}")
    return any(water_type in creature.water_types for water_type in accepted)


def _water_subtype_satisfied(creature: WaterCreature, values: Sequence[str]) -> bool:
    accepted = _parse_values(ConditionType.WATER_SUBTYPE, WaterSubtype, values)
    logger.debug(f"Fish water subtypes: {creature.water_subtypes}, level allows: {accepted}")
    return any(subtype in creature.water_subtypes for subtype in accepted)


def _size_satisfied(creature: WaterCreature, values: Sequence[str]) -> bool:
    accepted = _parse_values(ConditionType.SIZE, SizeCategory, values)
    category = creature.size.category
    logger.debug(f"Fish size is: {category}, level allows: {accepted}")
    return category in accepted


def _temperature_satisfied(creature: WaterCreature, values: Sequence[str]) -> bool:
    accepted = _parse_values(ConditionType.TEMPERATURE, WaterTemperature, values)
    logger.debug(f"Fish temperatures: {creature.water_temperatures}, level allows: {accepted}")
    return any(temperature in creature.water_temperatures for temperature in accepted)


_EVALUATORS: Dict[ConditionType, Callable[[WaterCreature, Sequence[str]], bool]] = {
    ConditionType.WATER_TYPE: _water_type_satisfied,
    ConditionType.WATER_SUBTYPE: _water_subtype_satisfied,
    ConditionType.SIZE: _size_satisfied,
    ConditionType.TEMPERATURE: _temperature_satisfied,
}


def evaluate(condition_type: ConditionType, creature: WaterCreature, values: Sequence[str]) -> bool:
    """Check whether a creature satisfies one condition.

    Args:
        condition_type: Which habitat axis to test
        creature: Creature to test
        values: Accepted values; any match satisfies the condition

    Returns:
        True if the creature matches at least one accepted value

    Raises:
        InvalidConditionValueError: If a value is not a member of the
            enum belonging to ``condition_type``
    """
    return _EVALUATORS[condition_type](creature, values)


def parse_conditions(block: Mapping[str, Any]) -> ConditionMap:
    """Parse the raw ``conditions`` block of a level record.

    Missing condition types are left out of the result. A list value for a
    type that does not allow multiple values is a data error; the type is
    skipped, as is any value that is not a string. All values are uppercased.

    Args:
        block: Mapping of lowercase condition names to a string or list of strings

    Returns:
        Ordered mapping of condition type to accepted values
    """
    conditions: ConditionMap = {}

    for condition_type in ConditionType:
        key = condition_type.json_key
        if key not in block:
            logger.warning(f"Condition type {key} not found in conditions block")
            continue

        raw_value = block[key]
        if isinstance(raw_value, list):
            if not condition_type.allow_multiple:
                logger.error(f"Condition {key} should not be an array. Skipping condition")
                continue
            raw_values = raw_value
        else:
            raw_values = [raw_value]

        if not all(isinstance(value, str) for value in raw_values):
            logger.error(f"Condition {key} has a non-string value: {raw_value!r}. Skipping condition")
            continue
        values = [value.upper() for value in raw_values]

        conditions[condition_type] = values
        logger.debug(f"Parsed condition: {condition_type.name} = {values}")

    return conditions
