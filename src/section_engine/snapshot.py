"""
Snapshot helpers shared by the engine components.

Validates caller-supplied trains and sections, builds the section index
used for train -> section lookups, and computes occupancy ratios.
"""

from typing import Any, Iterable, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .config import EngineConfig
from .errors import InvalidInputError
from .models import Section, Train

ModelT = TypeVar("ModelT", bound=BaseModel)

TrainLike = Union[Train, Mapping[str, Any]]
SectionLike = Union[Section, Mapping[str, Any]]


def _coerce_items(
    items: Optional[Iterable[Any]],
    model: Type[ModelT],
    label: str
) -> list[ModelT]:
    """Validate every item as ``model``, wrapping pydantic errors."""
    if items is None:
        return []
    if isinstance(items, (str, bytes, Mapping)):
        raise InvalidInputError(f"{label} must be a list, got {type(items).__name__}")

    result: list[ModelT] = []
    for index, item in enumerate(items):
        if isinstance(item, model):
            # instances may have been mutated since construction
            item = item.model_dump()
        try:
            result.append(model.model_validate(item))
        except ValidationError as e:
            raise InvalidInputError(
                f"Invalid {label[:-1]} at index {index}: {e.error_count()} field error(s)",
                errors=e.errors(include_url=False, include_context=False),
            ) from e
    return result


def coerce_trains(trains: Optional[Iterable[TrainLike]]) -> list[Train]:
    """Validate a train snapshot."""
    return _coerce_items(trains, Train, "trains")


def coerce_sections(sections: Optional[Iterable[SectionLike]]) -> list[Section]:
    """Validate a section snapshot."""
    return _coerce_items(sections, Section, "sections")


def index_sections(sections: Iterable[Section]) -> dict[str, Section]:
    """Map section id to section. The first section with a given id wins."""
    index: dict[str, Section] = {}
    for section in sections:
        index.setdefault(section.id, section)
    return index


def resolve_section(
    train: Train,
    sections_by_id: Mapping[str, Section]
) -> Optional[Section]:
    """Return the train's current section, or None if absent or unresolved."""
    if not train.current_section:
        return None
    return sections_by_id.get(train.current_section)


def effective_capacity(section: Section, config: EngineConfig) -> int:
    """Section capacity, falling back to the configured default when unset or zero."""
    return section.max_capacity or config.default_capacity


def section_congestion(section: Section, config: EngineConfig) -> float:
    """Occupants divided by effective capacity. Can exceed 1.0."""
    return section.occupant_count / effective_capacity(section, config)
