"""
Journal text for creatures and level conditions.

Builds readable descriptions by combining a creature's base description
with its size, water type, habitat and temperature preferences.
"""

from typing import List, Sequence

from .conditions import ConditionType
from .features import WaterSubtype, WaterTemperature
from .models import CreatureSize, WaterCreature, format_id_to_name


def generate_description(creature: WaterCreature) -> str:
    """Generate the journal description for a creature.

    Args:
        creature: The creature to describe

    Returns:
        The base description followed by generated sentences
    """
    parts: List[str] = [creature.description, " "]
    parts.append(_size_description(creature.size))
    parts.append(_water_type_description(creature))
    parts.append(_temperature_description(creature.water_temperatures))
    return "".join(parts)


def _size_description(size: CreatureSize) -> str:
    if not size.is_valid:
        return ""

    phrase = size.category.formatted_for_desc
    if size.range_start == size.range_end:
        return f"It's around {size.range_start}cm large, making it a {phrase} fish. "
    return (
        f"Its size ranges from {size.range_start} cm to {size.range_end} cm, "
        f"making it a {phrase} fish. "
    )


def _water_type_description(creature: WaterCreature) -> str:
    if not creature.water_types:
        return ""

    text = f"The {creature.name.lower()} can be found in "
    if len(creature.water_types) == 1:
        text += f"{creature.water_types[0].value} water "
    else:
        text += "both fresh and salt water "

    if creature.water_subtypes:
        text += f"and it typically inhabits {_join_habitats(creature.water_subtypes)}. "
    return text


def _join_habitats(subtypes: Sequence[WaterSubtype]) -> str:
    phrases = [subtype.formatted_for_desc for subtype in subtypes]
    if len(phrases) == 1:
        return phrases[0]
    return ", ".join(phrases[:-1]) + " and " + phrases[-1]


def _temperature_description(temperatures: Sequence[WaterTemperature]) -> str:
    if not temperatures:
        return ""

    if len(temperatures) >= len(WaterTemperature):
        return "In addition this fish enjoys any type of water temperature. "
    names = " and ".join(temperature.value for temperature in temperatures[:2])
    return f"In addition this fish prefers {names} water temperatures. "


def format_condition(condition_type: ConditionType, values: Sequence[str]) -> str:
    """Format a level condition for a conditions panel, e.g. ``Water Type: Fresh``."""
    label = format_id_to_name(condition_type.json_key)
    formatted = ", ".join(format_id_to_name(value.lower()) for value in values)
    return f"{label}: {formatted}"
