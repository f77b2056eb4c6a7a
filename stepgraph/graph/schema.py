"""Typed attribute declarations for graph elements."""

from pydantic import BaseModel, ConfigDict, Field

AttributeValue = bool | int | float | str


def value_type_name(value: object) -> str | None:
    """Return the tag of an attribute value, or None if it is not one."""
    # bool is checked before int since bool subclasses int
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


class PropertySpec(BaseModel):
    """A named attribute with the default value it is seeded with."""

    model_config = ConfigDict(frozen=True)

    name: str
    default: AttributeValue

    @property
    def value_type(self) -> str:
        """The tag every value of this property must carry."""
        return value_type_name(self.default)  # type: ignore[return-value]

    def accepts(self, value: object) -> bool:
        """Check whether a value matches the declared type."""
        return value_type_name(value) == self.value_type


class ElementSchema(BaseModel):
    """Ordered property declarations for nodes and edges."""

    model_config = ConfigDict(frozen=True)

    node_properties: tuple[PropertySpec, ...] = Field(default_factory=tuple)
    edge_properties: tuple[PropertySpec, ...] = Field(default_factory=tuple)

    def find(self, kind: str, name: str) -> PropertySpec | None:
        """Find the declaration of a property for an element kind."""
        properties = self.node_properties if kind == "node" else self.edge_properties
        for spec in properties:
            if spec.name == name:
                return spec
        return None
