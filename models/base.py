"""Pydantic base class and contract helpers shared by all entities."""

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, create_model
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _optional_annotation(field: FieldInfo) -> Any:
    # Constraints such as Strict live in the field metadata, not the annotation
    if field.metadata:
        return Annotated[(field.annotation, *field.metadata)]
    return field.annotation


def partial_model(model: type[ModelT], name: str | None = None) -> type[ModelT]:
    """Derive a partial-update contract from an insertable contract.

    Every field keeps its declared type and constraints but becomes optional
    with no default, so omitted keys stay unset (see
    ``model_dump(exclude_unset=True)``). A non-nullable field still rejects an
    explicit ``null``.
    """
    fields: dict[str, Any] = {
        field_name: (_optional_annotation(field), None)
        for field_name, field in model.model_fields.items()
    }
    return create_model(
        name or f"{model.__name__.removesuffix('Create')}Update",
        __base__=CamelModel,
        __module__=model.__module__,
        **fields,
    )
